"""Command: tldp show — tags and functions of a TLD as tables."""

from __future__ import annotations

import argparse

from rich import box
from rich.markup import escape
from rich.table import Table

from tld_model import Taglib
from tldp._common import add_common_arguments, console, fmt_dates, load_taglib


def _robots(value: bool | None) -> str:
    return "auto" if value is None else str(value).lower()


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

def _show_header(taglib: Taglib) -> None:
    console.print()
    console.print(f"[bold]{escape(taglib.short_name or '-')}[/bold]  {escape(taglib.uri or '')}")
    console.print(f"  tlib-version: {escape(taglib.tlib_version or '-')}")
    console.print(f"  dates:        {fmt_dates(taglib.dates)}")
    console.print(f"  effective:    {fmt_dates(taglib.taglib_effective_dates)}")


def _show_tags(taglib: Taglib, with_attributes: bool) -> None:
    if not taglib.tags:
        console.print("[yellow]No tags.[/yellow]")
        return

    table = Table(
        title="Tags",
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("NAME",    no_wrap=True, style="bold cyan")
    table.add_column("CLASS",   no_wrap=True)
    table.add_column("BODY",    no_wrap=True, style="dim")
    table.add_column("ATTRS",   justify="right", no_wrap=True)
    table.add_column("ROBOTS",  justify="center", no_wrap=True)
    table.add_column("DATES",   no_wrap=True)
    table.add_column("SUMMARY", no_wrap=False, max_width=50)

    for tag in taglib.tags:
        table.add_row(
            escape(tag.name or "-"),
            escape(tag.tag_class or "-"),
            escape(tag.body_content or "-"),
            str(len(tag.attribute)),
            _robots(tag.allow_robots),
            fmt_dates(tag.dates),
            escape((tag.description_summary or "").strip()[:120]),
        )
        if with_attributes:
            for attribute in tag.attributes:
                flags = "".join((
                    "R" if attribute.required else "",
                    "E" if attribute.rtexprvalue else "",
                    "F" if attribute.fragment else "",
                ))
                table.add_row(
                    "  " + escape(attribute.name or "-"),
                    escape(attribute.type or "-"),
                    flags or "-",
                    "", "", "",
                    escape((attribute.description_summary or "").strip()[:120]),
                )

    console.print()
    console.print(table)


def _show_functions(taglib: Taglib) -> None:
    if not taglib.functions:
        console.print("[yellow]No functions.[/yellow]")
        return

    table = Table(
        title="Functions",
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("NAME",      no_wrap=True, style="bold cyan")
    table.add_column("SIGNATURE", no_wrap=False, max_width=70)
    table.add_column("ROBOTS",    justify="center", no_wrap=True)
    table.add_column("DATES",     no_wrap=True)

    for function in taglib.functions:
        table.add_row(
            escape(function.name or "-"),
            escape(function.function_signature or "-"),
            _robots(function.allow_robots),
            fmt_dates(function.dates),
        )

    console.print()
    console.print(table)


# ---------------------------------------------------------------------------
# Command logic
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    taglib = load_taglib(args.tld_file, args.summary_class)
    _show_header(taglib)
    _show_tags(taglib, args.attributes)
    _show_functions(taglib)
    console.print(f"  [dim]{len(taglib.tag)} tags, {len(taglib.function)} functions[/dim]\n")


# ---------------------------------------------------------------------------
# Parser registration
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "show",
        help="Shows the tags and functions of a TLD.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parses a TLD and prints its tags and functions.

Examples:
  tldp show ao.tld
  tldp show ao.tld --attributes
  tldp show ao.tld --summary-class hidden
        """,
    )
    p.add_argument("tld_file", metavar="FILE.tld", help="Path to the TLD file.")
    p.add_argument(
        "--attributes",
        action="store_true",
        help="Also list the attributes of every tag.",
    )
    add_common_arguments(p)
    p.set_defaults(func=run)
