"""
tldp — command-line tool for tag library descriptors.

Usage:
  tldp <command> [options]

Commands:
  show    Shows the tags and functions of a TLD.
  dates   Shows own and effective dates of every node.
  export  Writes the parsed TLD as JSON.
  check   Checks one or more TLD files, exit 1 on any error.

Environment:
  TLDP_SUMMARY_CLASS       CSS class of description summaries (default: summary)
  TLDP_DEFAULT_CREATED     default dateCreated for the taglib
  TLDP_DEFAULT_PUBLISHED   default datePublished for the taglib
  TLDP_DEFAULT_MODIFIED    default dateModified for the taglib
  TLDP_DEFAULT_REVIEWED    default dateReviewed for the taglib
  TLDP_CONSOLE_WIDTH       console width (default: 200)
"""

from __future__ import annotations

import argparse
from typing import Sequence

from tldp import __version__
from tldp._common import setup_logging
from tldp.commands import check as cmd_check
from tldp.commands import dates as cmd_dates
from tldp.commands import export as cmd_export
from tldp.commands import show as cmd_show


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tldp",
        description="tldp — tag library descriptor parser.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"tldp {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log parsing details.",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        metavar="<command>",
        dest="command",
    )
    subparsers.required = True

    cmd_show.add_parser(subparsers)
    cmd_dates.add_parser(subparsers)
    cmd_export.add_parser(subparsers)
    cmd_check.add_parser(subparsers)

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    args.func(args)


if __name__ == "__main__":
    main()
