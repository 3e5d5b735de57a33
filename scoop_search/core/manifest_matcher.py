import json
import os
from pathlib import Path, PureWindowsPath
from typing import Any, Final

from .bin_field import bin_candidates, decode_bin_field
from .errors import BucketReadError, ManifestParseError
from .scoop_types import BucketResults, Match

MANIFEST_SUFFIX: Final[str] = ".json"


def _executable_name(path: str) -> str:
    """Returns the basename of a `bin` path. Both `\\` and `/` separate directories."""
    return PureWindowsPath(path).name


def _executable_stem(executable: str) -> str:
    """Strips everything from the last dot, so `.exe` has an empty stem."""
    stem, dot, _ = executable.rpartition(".")
    return stem if dot else executable


def _manifest_version(manifest: dict[str, Any]) -> str:
    version = manifest.get("version")
    return version if isinstance(version, str) else ""


def match_manifest(name: str, manifest: object, term: str) -> Match | None:
    """Applies the match rule to a single parsed manifest.

    The manifest name is checked first. Only when it does not contain the term are
    the declared executables checked, in declaration order, by their basename with
    the extension stripped.

    Args:
        name: Manifest name (file name without `.json`).
        manifest: Parsed JSON document. Anything but an object has no fields.
        term: Lowercase search term.

    Returns:
        A `Match`, or None if neither the name nor any executable matches.

    Raises:
        MalformedBinFieldError: If the `bin` attribute has an unexpected shape.
    """
    fields = manifest if isinstance(manifest, dict) else {}
    version = _manifest_version(fields)

    if term in name.lower():
        return Match(name=name, version=version)

    for candidate in bin_candidates(decode_bin_field(fields.get("bin"))):
        executable = _executable_name(candidate)
        if term in _executable_stem(executable).lower():
            return Match(name=name, version=version, executable=executable)
    return None


def _load_manifest(path: Path) -> object:
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise BucketReadError(path, e.strerror or str(e)) from e

    try:
        # Some manifests are saved with a UTF-8 BOM.
        return json.loads(raw.decode("utf-8-sig"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ManifestParseError(path, str(e)) from e


def _manifest_files(bucket_dir: Path) -> list[Path]:
    """Lists manifest files directly inside a bucket directory, sorted by name."""
    try:
        with os.scandir(bucket_dir) as it:
            names = [
                entry.name
                for entry in it
                if entry.name.endswith(MANIFEST_SUFFIX) and not entry.is_dir()
            ]
    except OSError as e:
        raise BucketReadError(bucket_dir, e.strerror or str(e)) from e
    return [bucket_dir / n for n in sorted(names)]


def matching_manifests(bucket_dir: Path, term: str) -> BucketResults:
    """Finds manifests in one bucket directory matching a search term.

    Args:
        bucket_dir: Directory holding the bucket's `*.json` manifests.
        term: Lowercase, non-empty search term.

    Returns:
        Matches sorted case-insensitively by name. Ties keep file name order.

    Raises:
        ValueError: If `term` is empty or whitespace only.
        BucketReadError: If the directory or a manifest cannot be read.
        ManifestParseError: If a manifest is not valid JSON.
        MalformedBinFieldError: If a manifest has an unexpected `bin` shape.
    """
    if not term.strip():
        raise ValueError("search term must not be blank")

    results: BucketResults = []
    for path in _manifest_files(bucket_dir):
        name = path.name[: -len(MANIFEST_SUFFIX)]
        match = match_manifest(name, _load_manifest(path), term)
        if match is not None:
            results.append(match)

    results.sort(key=lambda m: m.name.lower())
    return results
