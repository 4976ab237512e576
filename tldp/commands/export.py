"""Command: tldp export — the parsed model as JSON."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from rich.markup import escape

from tld_model import Attribute, Dates, Function, Tag, Taglib
from tldp._common import add_common_arguments, console, load_taglib


# ---------------------------------------------------------------------------
# Serialization (back-references are omitted)
# ---------------------------------------------------------------------------

def _dates(dates: Dates | None) -> dict[str, str | None] | None:
    return None if dates is None else dates.to_dict()


def _attribute(attribute: Attribute) -> dict[str, Any]:
    return {
        "name":               attribute.name,
        "descriptions":       attribute.descriptions,
        "descriptionSummary": attribute.description_summary,
        "required":           attribute.required,
        "rtexprvalue":        attribute.rtexprvalue,
        "fragment":           attribute.fragment,
        "type":               attribute.type,
        "deferredMethod": (
            None if attribute.deferred_method is None
            else {"methodSignature": attribute.deferred_method.method_signature}
        ),
        "deferredValue": (
            None if attribute.deferred_value is None
            else {"type": attribute.deferred_value.type}
        ),
    }


def _tag(tag: Tag) -> dict[str, Any]:
    return {
        "name":               tag.name,
        "dates":              _dates(tag.dates),
        "allowRobots":        tag.allow_robots,
        "descriptions":       tag.descriptions,
        "displayNames":       tag.display_names,
        "descriptionSummary": tag.description_summary,
        "tagClass":           tag.tag_class,
        "teiClass":           tag.tei_class,
        "bodyContent":        tag.body_content,
        "attributes":         [_attribute(a) for a in tag.attributes],
        "dynamicAttributes":  tag.dynamic_attributes,
        "example":            tag.example,
    }


def _function(function: Function) -> dict[str, Any]:
    return {
        "name":               function.name,
        "dates":              _dates(function.dates),
        "allowRobots":        function.allow_robots,
        "descriptions":       function.descriptions,
        "displayNames":       function.display_names,
        "descriptionSummary": function.description_summary,
        "functionClass":      function.function_class,
        "functionSignature":  function.function_signature,
        "example":            function.example,
    }


def taglib_to_dict(taglib: Taglib) -> dict[str, Any]:
    """JSON-ready dict of the whole model; timestamps as ISO-8601."""
    return {
        "tldPath":                 taglib.tld_path,
        "dates":                   _dates(taglib.dates),
        "descriptions":            taglib.descriptions,
        "displayNames":            taglib.display_names,
        "tlibVersion":             taglib.tlib_version,
        "shortName":               taglib.short_name,
        "uri":                     taglib.uri,
        "tags":                    [_tag(t) for t in taglib.tags],
        "tagsEffectiveDates":      _dates(taglib.tags_effective_dates),
        "functions":               [_function(f) for f in taglib.functions],
        "functionsEffectiveDates": _dates(taglib.functions_effective_dates),
        "taglibEffectiveDates":    _dates(taglib.taglib_effective_dates),
    }


# ---------------------------------------------------------------------------
# Command logic
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    taglib = load_taglib(args.tld_file, args.summary_class)
    data = json.dumps(taglib_to_dict(taglib), ensure_ascii=False, indent=2)

    if args.out is None:
        sys.stdout.write(data + "\n")
        return

    out_path = Path(args.out)
    out_path.write_text(data + "\n", encoding="utf-8")
    console.print(
        f"[green]JSON:[/green] {escape(str(out_path))}  "
        f"({len(taglib.tag)} tags, {len(taglib.function)} functions)"
    )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "export",
        help="Writes the parsed TLD as JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parses a TLD and writes the model as JSON (stdout by default).

Examples:
  tldp export ao.tld
  tldp export ao.tld --out ao.tld.json
        """,
    )
    p.add_argument("tld_file", metavar="FILE.tld", help="Path to the TLD file.")
    p.add_argument(
        "--out",
        metavar="PATH",
        default=None,
        help="Output file (default: stdout).",
    )
    add_common_arguments(p)
    p.set_defaults(func=run)
