"""Command line entry point: summarise an ansible-playbook JSON report."""

from __future__ import annotations

import argparse
import sys

from .models import AnsibleSummary, SummaryError
from .output import Output

VERSION = "dev"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CHANGES_OR_FAILURES = 2


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ansible-summary",
        description="Summarise the JSON output of ansible-playbook.",
    )
    parser.add_argument("-input", "--input", dest="input", default="", help="input file")
    parser.add_argument("-json", "--json", dest="json", action="store_true",
                        help="output format as JSON")
    parser.add_argument("-version", "--version", dest="version", action="store_true",
                        help="print version")
    return parser


def _status(summary: AnsibleSummary) -> int:
    return EXIT_CHANGES_OR_FAILURES if summary.has_changed_or_failed() else EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = _parser().parse_args(argv)

    if args.version:
        print(VERSION)
        return EXIT_SUCCESS

    if not args.input:
        print("input file is mandatory")
        return EXIT_ERROR

    output = Output()
    try:
        summary = AnsibleSummary.from_file(args.input)
    except SummaryError as err:
        print(err)
        return EXIT_ERROR

    if args.json:
        try:
            output.write_stats_json(summary)
        except OSError as err:
            print(err, file=sys.stderr)
            return EXIT_ERROR
        return _status(summary)

    summary.print_tasks_not_ok()
    print("************************************")
    try:
        output.write_stats_html(summary)
    except OSError as err:
        print(err, file=sys.stderr)
        return EXIT_ERROR
    return _status(summary)


if __name__ == "__main__":
    sys.exit(main())