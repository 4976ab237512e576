"""
tld_parser/parser.py — building the Taglib model from a TLD document.

Architecture:
  path → load_document() → bs4 tree (lxml XML builder)
  → build_taglib() → Taglib dates first, then each <tag> / <function>
  → _build_tag() → Tag dates (checked against the taglib), then <attribute>s
  → effective dates folded left-to-right over tags, then functions

Public API:
  parse_tld(path, summary_class, default_dates=None) -> Taglib
  build_taglib(document, tld_path, summary_class, default_dates=None) -> Taglib
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from bs4 import BeautifulSoup, Tag as Element

from tld_model.dates import Dates
from tld_model.errors import DocumentError, ErrorCode, TldError
from tld_model.nodes import (
    Attribute,
    DeferredMethod,
    DeferredValue,
    Function,
    Tag,
    Taglib,
)

from .document import (
    child_element,
    child_elements,
    child_text,
    child_texts,
    load_document,
    parse_boolean,
    root_element,
)
from .html_snippet import get_summary
from .xml_helper import (
    dates_from_comments,
    get_child_with_generics,
    parse_allow_robots,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

@contextmanager
def _at(path: str) -> Iterator[None]:
    """Prefixes any TldError raised inside with the node path."""
    try:
        yield
    except TldError as e:
        raise e.with_prefix(path) from e


def _summary(summary_class: str, descriptions: list[str], path: str) -> str | None:
    """Summary of the first description, None without descriptions."""
    if not descriptions:
        return None
    with _at(f"{path}/description"):
        return get_summary(summary_class, descriptions[0])


def _put_unique(target: dict, kind: str, name: str | None, value: object) -> None:
    if name in target:
        raise DocumentError(ErrorCode.DUPLICATE_NAME, f"Duplicate {kind} name: {name}")
    target[name] = value


# ---------------------------------------------------------------------------
# Attributes
# ---------------------------------------------------------------------------

def _build_attribute(summary_class: str, tag: Tag, elem: Element) -> Attribute:
    tag_path = f"{tag.taglib.tld_path}/{tag.name}"
    with _at(tag_path):
        name = child_text(elem, "name")
    path = f"{tag_path}/{name}"

    with _at(path):
        attribute = Attribute(
            tag=tag,
            name=name,
            descriptions=child_texts(elem, "description"),
            required=parse_boolean(child_text(elem, "required")),
            rtexprvalue=parse_boolean(child_text(elem, "rtexprvalue")),
            fragment=parse_boolean(child_text(elem, "fragment")),
            type=get_child_with_generics(elem, "type", "type"),
        )

        deferred_method_elem = child_element(elem, "deferred-method")
        if deferred_method_elem is not None:
            attribute.deferred_method = DeferredMethod(
                attribute=attribute,
                method_signature=get_child_with_generics(
                    deferred_method_elem, "method-signature", "methodSignature"
                ),
            )

        deferred_value_elem = child_element(elem, "deferred-value")
        if deferred_value_elem is not None:
            attribute.deferred_value = DeferredValue(
                attribute=attribute,
                type=get_child_with_generics(deferred_value_elem, "type", "type"),
            )

    attribute.description_summary = _summary(summary_class, attribute.descriptions, path)
    return attribute


# ---------------------------------------------------------------------------
# Tags and functions
# ---------------------------------------------------------------------------

def _build_tag(summary_class: str, taglib: Taglib, elem: Element) -> Tag:
    with _at(taglib.tld_path):
        name = child_text(elem, "name")
    path = f"{taglib.tld_path}/{name}"

    with _at(path):
        dates = dates_from_comments(elem, taglib.dates)
    dates.check_not_before(path, taglib.tld_path, taglib.dates)

    with _at(path):
        tag = Tag(
            taglib=taglib,
            name=name,
            dates=dates,
            allow_robots=parse_allow_robots(elem),
            descriptions=child_texts(elem, "description"),
            display_names=child_texts(elem, "display-name"),
            tag_class=child_text(elem, "tag-class"),
            tei_class=child_text(elem, "tei-class"),
            body_content=child_text(elem, "body-content"),
        )

    for attribute_elem in child_elements(elem, "attribute"):
        attribute = _build_attribute(summary_class, tag, attribute_elem)
        with _at(path):
            _put_unique(tag.attribute, "attribute", attribute.name, attribute)

    with _at(path):
        tag.dynamic_attributes = parse_boolean(child_text(elem, "dynamic-attributes"))
        if child_elements(elem, "variable"):
            raise DocumentError(
                ErrorCode.UNSUPPORTED_ELEMENT,
                "<variable> elements are not supported",
            )
        tag.example = child_text(elem, "example")
    tag.description_summary = _summary(summary_class, tag.descriptions, path)

    logger.debug("%s: tag with %d attribute(s)", path, len(tag.attribute))
    return tag


def _build_function(summary_class: str, taglib: Taglib, elem: Element) -> Function:
    with _at(taglib.tld_path):
        name = child_text(elem, "name")
    path = f"{taglib.tld_path}/{name}"

    with _at(path):
        dates = dates_from_comments(elem, taglib.dates)
    dates.check_not_before(path, taglib.tld_path, taglib.dates)

    with _at(path):
        function = Function(
            taglib=taglib,
            name=name,
            dates=dates,
            allow_robots=parse_allow_robots(elem),
            descriptions=child_texts(elem, "description"),
            display_names=child_texts(elem, "display-name"),
            function_class=child_text(elem, "function-class"),
            function_signature=get_child_with_generics(elem, "function-signature", "functionSignature"),
            example=child_text(elem, "example"),
        )
    function.description_summary = _summary(summary_class, function.descriptions, path)

    logger.debug("%s: function", path)
    return function


# ---------------------------------------------------------------------------
# Taglib
# ---------------------------------------------------------------------------

def build_taglib(
    document: BeautifulSoup,
    tld_path: str,
    summary_class: str,
    default_dates: Dates | None = None,
) -> Taglib:
    """
    Builds the whole model in one depth-first pass.

    Args:
        document:      bs4 tree of the TLD (see load_document)
        tld_path:      path used as prefix in every error message
        summary_class: CSS class selecting the summary in descriptions
        default_dates: dates used when the root declares none
    """
    with _at(tld_path):
        taglib_elem = root_element(document)
        taglib = Taglib(
            tld_path=tld_path,
            dates=dates_from_comments(taglib_elem, default_dates),
            descriptions=child_texts(taglib_elem, "description"),
            display_names=child_texts(taglib_elem, "display-name"),
            tlib_version=child_text(taglib_elem, "tlib-version"),
            short_name=child_text(taglib_elem, "short-name"),
            uri=child_text(taglib_elem, "uri"),
        )

    tags_effective_dates: Dates | None = None
    for tag_elem in child_elements(taglib_elem, "tag"):
        tag = _build_tag(summary_class, taglib, tag_elem)
        with _at(tld_path):
            _put_unique(taglib.tag, "tag", tag.name, tag)
        tags_effective_dates = Dates.merge(tags_effective_dates, tag.dates)
    taglib.tags_effective_dates = tags_effective_dates

    functions_effective_dates: Dates | None = None
    for function_elem in child_elements(taglib_elem, "function"):
        function = _build_function(summary_class, taglib, function_elem)
        with _at(tld_path):
            _put_unique(taglib.function, "function", function.name, function)
        functions_effective_dates = Dates.merge(functions_effective_dates, function.dates)
    taglib.functions_effective_dates = functions_effective_dates

    taglib.taglib_effective_dates = Dates.merge(
        Dates.merge(taglib.dates, tags_effective_dates),
        functions_effective_dates,
    )

    logger.debug(
        "%s: %d tag(s), %d function(s)",
        tld_path, len(taglib.tag), len(taglib.function),
    )
    return taglib


def parse_tld(
    path: str | Path,
    summary_class: str,
    default_dates: Dates | None = None,
) -> Taglib:
    """Reads and builds the TLD at ``path``; ``str(path)`` becomes tld_path."""
    document = load_document(Path(path))
    return build_taglib(document, str(path), summary_class, default_dates)
