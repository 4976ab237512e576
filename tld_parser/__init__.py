"""
tld_parser — reads tag library descriptors into the tld_model classes.

Public API:
  parse_tld(path, summary_class, default_dates)      → Taglib
  build_taglib(document, tld_path, summary_class, …)  → Taglib
  load_document(source)                               → bs4 tree
  get_variable(elem, var_name)                        → str | None
  reconcile_generics(text, comment, child, var)       → str | None
  get_child_with_generics(elem, child, var)           → str | None
  parse_allow_robots(elem)                            → bool | None
  dates_from_comments(elem, default_dates)            → Dates
  get_summary(summary_class, html_snippet)            → str

Typical use:
    from tld_parser import parse_tld

    taglib = parse_tld("src/main/resources/META-INF/ao.tld", "summary")
    for tag in taglib.tags:
        print(tag.name, tag.dates.created)
"""

from .document import load_document
from .html_snippet import get_summary
from .parser import build_taglib, parse_tld
from .xml_helper import (
    dates_from_comments,
    get_child_with_generics,
    get_variable,
    parse_allow_robots,
    parse_timestamp,
    reconcile_generics,
)

__all__ = [
    "load_document",
    "get_summary",
    "build_taglib",
    "parse_tld",
    "dates_from_comments",
    "get_child_with_generics",
    "get_variable",
    "parse_allow_robots",
    "parse_timestamp",
    "reconcile_generics",
]
