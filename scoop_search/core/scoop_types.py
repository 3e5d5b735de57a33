from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Match:
    """Represents a manifest that matched a search query.

    Attributes:
        name: Manifest file name without the `.json` extension.
        version: Declared version string (empty when missing).
        executable: Basename of the matching executable, set only when the match
            came from the `bin` field rather than the manifest name.
    """

    name: str
    version: str = ""
    executable: str | None = None


@dataclass(frozen=True, slots=True)
class SearchReport:
    """Rendered search output and whether anything matched."""

    text: str
    any_match: bool


BucketResults = list[Match]
AggregateResults = dict[str, BucketResults]
