"""Shared pieces of the tldp commands: console, logging, loading a TLD."""

from __future__ import annotations

import argparse
import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from tld_model import Dates, Taglib, TldError
from tld_parser import parse_tld
from tldp._config import console_width, get_settings

console = Console(width=console_width())


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def try_load_taglib(tld_file: str, summary_class: str | None) -> Taglib:
    """Parses ``tld_file``; raises TldError / OSError on failure."""
    settings = get_settings()
    return parse_tld(
        Path(tld_file),
        summary_class or settings.summary_class,
        settings.default_dates,
    )


def load_taglib(tld_file: str, summary_class: str | None) -> Taglib:
    """Parses ``tld_file``; prints the error and exits 1 on failure."""
    path = Path(tld_file)
    if not path.exists():
        console.print(f"[red]File does not exist:[/red] {escape(str(path))}")
        raise SystemExit(1)
    try:
        return try_load_taglib(tld_file, summary_class)
    except TldError as e:
        console.print(f"[red]Invalid TLD:[/red] {escape(str(e))}")
        raise SystemExit(1)
    except OSError as e:
        console.print(f"[red]Read error:[/red] {escape(str(e))}")
        raise SystemExit(1)


def fmt_dt(dt: datetime | None) -> str:
    return dt.isoformat() if dt is not None else "-"


def fmt_dates(dates: Dates | None) -> str:
    """Compact one-line form: c=… p=… m=… r=…"""
    if dates is None:
        return "-"
    if dates.is_unknown:
        return "[dim]unknown[/dim]"
    parts = []
    for label, dt in (
        ("c", dates.created),
        ("p", dates.published),
        ("m", dates.modified),
        ("r", dates.reviewed),
    ):
        if dt is not None:
            parts.append(f"{label}={dt.date().isoformat()}")
    return " ".join(parts)


def add_common_arguments(p: argparse.ArgumentParser) -> None:
    # SUPPRESS keeps a top-level -v from being reset by the subcommand default
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Log parsing details.",
    )
    p.add_argument(
        "--summary-class",
        metavar="CLASS",
        default=None,
        help="CSS class marking description summaries (default: $TLDP_SUMMARY_CLASS or 'summary').",
    )
