from dataclasses import dataclass

from .errors import MalformedBinFieldError


@dataclass(frozen=True, slots=True)
class BinAbsent:
    """The manifest declares no executables."""


@dataclass(frozen=True, slots=True)
class BinSingle:
    """A plain executable path."""

    path: str


@dataclass(frozen=True, slots=True)
class BinShim:
    """An `[path, alias, *flags]` entry. Flags are not kept."""

    path: str
    alias: str | None = None


@dataclass(frozen=True, slots=True)
class BinMany:
    """A list of plain paths and shims, in declaration order."""

    entries: tuple[BinSingle | BinShim, ...]


BinField = BinAbsent | BinSingle | BinMany


def _decode_shim(value: list) -> BinShim:
    """Decodes a nested `bin` list, keeping only the path and optional alias."""
    if not value or not isinstance(value[0], str):
        raise MalformedBinFieldError(value)
    if len(value) == 1:
        return BinShim(path=value[0])
    if not isinstance(value[1], str):
        raise MalformedBinFieldError(value)
    return BinShim(path=value[0], alias=value[1])


def decode_bin_field(value: object) -> BinField:
    """Decodes the raw `bin` manifest value into a tagged variant.

    Args:
        value: Parsed JSON value of the `bin` attribute, or None when absent.

    Returns:
        The decoded field.

    Raises:
        MalformedBinFieldError: If the value is not null, a string, or a list of
            strings and non-empty string lists.
    """
    if value is None:
        return BinAbsent()
    if isinstance(value, str):
        return BinSingle(path=value)
    if not isinstance(value, list):
        raise MalformedBinFieldError(value)

    entries: list[BinSingle | BinShim] = []
    for item in value:
        if isinstance(item, str):
            entries.append(BinSingle(path=item))
        elif isinstance(item, list):
            entries.append(_decode_shim(item))
        else:
            raise MalformedBinFieldError(item)
    return BinMany(entries=tuple(entries))


def bin_candidates(field: BinField) -> list[str]:
    """Flattens a decoded `bin` field into executable paths, aliases included."""
    if isinstance(field, BinAbsent):
        return []
    if isinstance(field, BinSingle):
        return [field.path]

    paths: list[str] = []
    for entry in field.entries:
        paths.append(entry.path)
        if isinstance(entry, BinShim) and entry.alias is not None:
            paths.append(entry.alias)
    return paths
