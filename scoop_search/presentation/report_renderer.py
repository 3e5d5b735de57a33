from typing import Final

from scoop_search.core.scoop_types import AggregateResults, Match, SearchReport

NO_MATCHES_MESSAGE: Final[str] = "No matches found."
_INDENT: Final[str] = "    "


def _format_match(match: Match) -> str:
    line = f"{_INDENT}{match.name} ({match.version})"
    if match.executable is not None:
        line += f" --> includes '{match.executable}'"
    return line


def render_results(results: AggregateResults) -> SearchReport:
    """Formats aggregated search results for the terminal.

    Buckets are listed in plain string order and buckets without matches are left
    out. When nothing matched at all, the text is only `NO_MATCHES_MESSAGE`.

    Args:
        results: Matches per bucket name.

    Returns:
        The report text and whether any bucket had a match.
    """
    lines: list[str] = []
    for bucket in sorted(results):
        matches = results[bucket]
        if not matches:
            continue
        lines.append(f"'{bucket}' bucket:")
        lines.extend(_format_match(m) for m in matches)
        lines.append("")

    if not lines:
        return SearchReport(text=NO_MATCHES_MESSAGE, any_match=False)
    return SearchReport(text="\n".join(lines) + "\n", any_match=True)
