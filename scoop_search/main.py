import argparse
import sys
from pathlib import Path

from logly import logger

from scoop_search.application.bucket_scanner import BucketScanner
from scoop_search.core.errors import ScoopSearchError
from scoop_search.infra.powershell import build_posh_hook
from scoop_search.infra.scoop_paths import resolve_buckets_root
from scoop_search.logging import init_logger
from scoop_search.presentation.report_renderer import render_results

EXIT_MATCHES = 0
EXIT_NO_MATCHES = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scoop-search",
        description=(
            "Search locally installed Scoop buckets for apps whose name or "
            "executables contain QUERY."
        ),
    )
    parser.add_argument(
        "query",
        nargs="?",
        help="Case-insensitive substring to look for.",
    )
    parser.add_argument(
        "--hook",
        action="store_true",
        help="Print a PowerShell hook that makes `scoop search` use this tool, then exit.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output to the console.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also append logs to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Runs the command line tool.

    Returns:
        0 if anything matched, 1 if nothing matched, 2 on errors.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.hook:
        print(build_posh_hook())
        return EXIT_MATCHES

    if args.query is None or not args.query.strip():
        parser.error("a non-empty query is required")

    init_logger(
        level="DEBUG" if args.verbose else "WARNING",
        console=args.verbose,
        log_file=args.log_file,
    )

    scanner = BucketScanner(resolve_buckets_root())
    try:
        results = scanner.scan(args.query)
    except ScoopSearchError as e:
        logger.error(str(e))
        print(str(e), file=sys.stderr)
        return EXIT_ERROR

    report = render_results(results)
    sys.stdout.write(report.text)
    if not report.text.endswith("\n"):
        sys.stdout.write("\n")
    return EXIT_MATCHES if report.any_match else EXIT_NO_MATCHES


if __name__ == "__main__":
    sys.exit(main())
