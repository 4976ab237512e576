"""Command: tldp check — validates the comment metadata of TLD files."""

from __future__ import annotations

import argparse

from rich.markup import escape

from tld_model import TldError
from tldp._common import add_common_arguments, console, try_load_taglib


def run(args: argparse.Namespace) -> None:
    failed = 0
    for tld_file in args.tld_files:
        try:
            taglib = try_load_taglib(tld_file, args.summary_class)
        except (TldError, OSError) as e:
            failed += 1
            console.print(f"[red]FAIL[/red] {escape(tld_file)}: {escape(str(e))}")
            continue
        console.print(
            f"[green]OK[/green]   {escape(tld_file)}  "
            f"[dim]({len(taglib.tag)} tags, {len(taglib.function)} functions)[/dim]"
        )

    if failed:
        console.print(f"\n[red]{failed} of {len(args.tld_files)} file(s) failed.[/red]")
        raise SystemExit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "check",
        help="Checks one or more TLD files, exit 1 on any error.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parses every given TLD and reports OK or the first error of each.

Examples:
  tldp check src/main/resources/META-INF/*.tld
        """,
    )
    p.add_argument(
        "tld_files",
        metavar="FILE.tld",
        nargs="+",
        help="TLD files to check.",
    )
    add_common_arguments(p)
    p.set_defaults(func=run)
