"""
tld_parser/document.py — access to the TLD document tree (bs4 + lxml).

Only direct children are ever visited: comments and elements nested in
descendants belong to those descendants. Element names are compared by
local name, so the default xmlns of a TLD does not matter.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from bs4 import BeautifulSoup, CData, Comment, NavigableString, Tag

from tld_model.errors import DocumentError, ErrorCode

ROOT_TAG = "taglib"


def local_name(elem: Tag) -> str:
    """Element name without its namespace prefix (``t:tag`` -> ``tag``)."""
    return elem.name.rpartition(":")[2]


def load_document(source: str | bytes | Path) -> BeautifulSoup:
    """
    Parses a TLD into a bs4 tree using the lxml XML builder.

    Args:
        source: path to the file, or the XML itself as str / bytes.
    """
    if isinstance(source, Path):
        source = source.read_bytes()
    return BeautifulSoup(source, "xml")


def root_element(document: BeautifulSoup) -> Tag:
    """Returns the <taglib> root element."""
    root = next((c for c in document.children if isinstance(c, Tag)), None)
    if root is None:
        raise DocumentError(ErrorCode.INVALID_DOCUMENT, "document has no root element")
    if local_name(root) != ROOT_TAG:
        raise DocumentError(
            ErrorCode.INVALID_DOCUMENT,
            f"expected root element <{ROOT_TAG}>, got <{root.name}>",
        )
    return root


def direct_child_comments(elem: Tag) -> Iterator[str]:
    """Raw text of each comment directly inside ``elem``, in document order."""
    for child in elem.children:
        if isinstance(child, Comment):
            yield str(child)


def child_elements(elem: Tag, tag_name: str) -> list[Tag]:
    """Direct child elements named ``tag_name``, in document order."""
    return [c for c in elem.children if isinstance(c, Tag) and local_name(c) == tag_name]


def child_element(elem: Tag, tag_name: str) -> Tag | None:
    """The single direct child named ``tag_name``, or None; more than one is an error."""
    found = child_elements(elem, tag_name)
    if not found:
        return None
    if len(found) > 1:
        raise DocumentError(
            ErrorCode.DUPLICATE_CHILD,
            f"<{elem.name}>: more than one child element <{tag_name}> ({len(found)} found)",
        )
    return found[0]


def text_content(elem: Tag) -> str:
    """Concatenated text and CDATA of all descendants; comments and PIs are skipped."""
    return "".join(
        str(s) for s in elem.descendants
        if type(s) is NavigableString or isinstance(s, CData)
    )


def child_text(elem: Tag, tag_name: str) -> str | None:
    """Text content of the single direct child ``tag_name``, or None when absent."""
    child = child_element(elem, tag_name)
    return None if child is None else text_content(child)


def child_texts(elem: Tag, tag_name: str) -> list[str]:
    """Text content of every direct child ``tag_name``."""
    return [text_content(c) for c in child_elements(elem, tag_name)]


def parse_boolean(value: str | None) -> bool:
    """Only a case-insensitive "true" is True; anything else, None included, is False."""
    return value is not None and value.lower() == "true"
