from pathlib import Path


class ScoopSearchError(Exception):
    """Base class for errors that abort a search run."""


class ScoopNotInstalledError(ScoopSearchError):
    """The buckets root does not exist."""

    def __init__(self, path: Path):
        super().__init__(
            f"Scoop folder does not exist: {path} (is Scoop installed?)"
        )
        self.path = path


class BucketsRootError(ScoopSearchError):
    """The buckets root exists but cannot be listed."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Could not read Scoop buckets folder {path}: {reason}")
        self.path = path


class BucketReadError(ScoopSearchError):
    """A bucket directory or one of its manifests cannot be read."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Could not read {path}: {reason}")
        self.path = path


class ManifestParseError(ScoopSearchError):
    """A manifest file is not valid JSON."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Could not parse manifest {path}: {reason}")
        self.path = path


class MalformedBinFieldError(ScoopSearchError):
    """The `bin` attribute of a manifest has a shape we do not know about."""

    def __init__(self, value: object):
        super().__init__(
            'Cannot parse "bin" attribute in a manifest. This should not happen. '
            "Please open an issue about it with steps to reproduce "
            f"(got {value!r})"
        )
        self.value = value
