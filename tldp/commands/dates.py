"""Command: tldp dates — own and effective dates of every node."""

from __future__ import annotations

import argparse

from rich import box
from rich.markup import escape
from rich.table import Table

from tld_model import Dates, Taglib
from tldp._common import add_common_arguments, console, fmt_dt, load_taglib


def _add_dates_row(table: Table, label: str, dates: Dates | None, style: str | None = None) -> None:
    if dates is None:
        table.add_row(label, "-", "-", "-", "-", style="dim")
        return
    table.add_row(
        label,
        fmt_dt(dates.created),
        fmt_dt(dates.published),
        fmt_dt(dates.modified),
        fmt_dt(dates.reviewed),
        style=style,
    )


def _dates_table(taglib: Taglib, effective_only: bool) -> Table:
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        expand=False,
    )
    table.add_column("NODE",      no_wrap=True, style="cyan")
    table.add_column("CREATED",   no_wrap=True)
    table.add_column("PUBLISHED", no_wrap=True)
    table.add_column("MODIFIED",  no_wrap=True)
    table.add_column("REVIEWED",  no_wrap=True)

    _add_dates_row(table, "taglib", taglib.dates)
    _add_dates_row(table, "tags (effective)", taglib.tags_effective_dates, "bold")
    _add_dates_row(table, "functions (effective)", taglib.functions_effective_dates, "bold")
    _add_dates_row(table, "taglib (effective)", taglib.taglib_effective_dates, "bold green")

    if not effective_only:
        for tag in taglib.tags:
            _add_dates_row(table, f"tag {escape(tag.name or '-')}", tag.dates)
        for function in taglib.functions:
            _add_dates_row(table, f"function {escape(function.name or '-')}", function.dates)
    return table


def run(args: argparse.Namespace) -> None:
    taglib = load_taglib(args.tld_file, args.summary_class)
    console.print()
    console.print(_dates_table(taglib, args.effective_only))


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "dates",
        help="Shows the dates of the taglib, its tags and functions.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Prints created / published / modified / reviewed of every node together
with the effective dates merged across tags and functions.

Examples:
  tldp dates ao.tld
  tldp dates ao.tld --effective-only
        """,
    )
    p.add_argument("tld_file", metavar="FILE.tld", help="Path to the TLD file.")
    p.add_argument(
        "--effective-only",
        action="store_true",
        help="Only show the taglib and the merged effective dates.",
    )
    add_common_arguments(p)
    p.set_defaults(func=run)
