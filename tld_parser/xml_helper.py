"""
tld_parser/xml_helper.py — variables declared in special XML comments.

A variable-comment is a direct child comment of an element whose whole
trimmed text is a single assignment:

    <!-- dateCreated = "2016-08-21T12:00:00-05:00" -->
    <!-- type = 'java.util.Map<String,Object>' -->

Public API:
  get_variable(elem, var_name)                          -> str | None
  reconcile_generics(text, comment, child_tag, var)     -> str | None
  get_child_with_generics(elem, child_tag, var_name)    -> str | None
  parse_allow_robots(elem)                              -> bool | None
  parse_timestamp(value, var_name)                      -> datetime
  dates_from_comments(elem, default_dates)              -> Dates
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from bs4 import Tag

from tld_model.dates import (
    DATE_CREATED,
    DATE_MODIFIED,
    DATE_PUBLISHED,
    DATE_REVIEWED,
    Dates,
)
from tld_model.errors import ErrorCode, ExtractionError, ReconcileError

from .document import child_text, direct_child_comments

logger = logging.getLogger(__name__)

# Whitespace allowed around the declaration and the '=' sign
_WS = " \t\n\x0b\f\r"

_QUOTES = "\"'"

ALLOW_ROBOTS = "allowRobots"


# ---------------------------------------------------------------------------
# Declaration grammar
# ---------------------------------------------------------------------------

def _skip_ws(s: str, pos: int) -> int:
    while pos < len(s) and s[pos] in _WS:
        pos += 1
    return pos


def _match_declaration(comment: str, var_name: str) -> tuple[str | None, str | None] | None:
    """
    Matches ``var_name <ws>? = <ws>? "value"`` (or 'value') against the whole
    trimmed comment.

    Returns:
        (double_quoted, single_quoted) with exactly one set, or None when the
        comment is not a declaration of ``var_name``.
    """
    s = comment.strip(_WS)
    if not s.startswith(var_name):
        return None
    pos = _skip_ws(s, len(var_name))
    if pos >= len(s) or s[pos] != "=":
        return None
    pos = _skip_ws(s, pos + 1)
    if pos >= len(s) or s[pos] not in _QUOTES:
        return None
    quote = s[pos]
    end = s.find(quote, pos + 1)
    # Closing quote must be the last character
    if end != len(s) - 1:
        return None
    value = s[pos + 1:end]
    return (value, None) if quote == '"' else (None, value)


def get_variable(elem: Tag, var_name: str) -> str | None:
    """
    Looks for a direct child comment that declares ``var_name``.
    The variable may be declared at most once per element.

    Raises:
        ExtractionError: AMBIGUOUS_QUOTING or MULTIPLE_DECLARATIONS.
    """
    match: str | None = None
    for comment in direct_child_comments(elem):
        groups = _match_declaration(comment, var_name)
        if groups is None:
            continue
        double_quoted, single_quoted = groups
        if double_quoted is not None:
            # Unreachable with _match_declaration, which sets one slot only;
            # kept so a two-group matcher still reports AMBIGUOUS_QUOTING.
            if single_quoted is not None:
                raise ExtractionError(
                    ErrorCode.AMBIGUOUS_QUOTING,
                    f"{var_name}: Found both in double quotes (\") and single quotes ('): {comment.strip()}",
                )
            value = double_quoted
        else:
            value = single_quoted
        if match is not None:
            raise ExtractionError(
                ErrorCode.MULTIPLE_DECLARATIONS,
                f"{var_name}: More than one value found: \"{match}\" and \"{value}\"",
            )
        match = value
    return match


# ---------------------------------------------------------------------------
# Generics
# ---------------------------------------------------------------------------

def reconcile_generics(
    text: str | None,
    comment: str | None,
    child_tag_name: str,
    var_name: str,
) -> str | None:
    """
    Combines a plain child value with its generics-annotated variable-comment.

    The comment must equal ``text`` once every ``<…>`` segment (nested
    segments included) is removed from it. When both are present the comment
    wins, since it carries the generics.

    Raises:
        ReconcileError: ORPHAN_ANNOTATION, BARE_GENERICS_NOT_ALLOWED,
                        UNTERMINATED_GENERIC_SEGMENT or MISMATCH.
    """
    if text is None:
        if comment is not None:
            raise ReconcileError(
                ErrorCode.ORPHAN_ANNOTATION,
                f"variable-comment ({var_name}) without child element ({child_tag_name})",
            )
        return None

    bare = ReconcileError(
        ErrorCode.BARE_GENERICS_NOT_ALLOWED,
        f"Generics not allowed directly in child element ({child_tag_name}): \"{text}\"",
    )
    if comment is None:
        if "<" in text or ">" in text:
            raise bare
        return text

    text_len = len(text)
    comment_len = len(comment)
    text_pos = 0
    comment_pos = 0
    while text_pos < text_len or comment_pos < comment_len:
        text_ch: str | None = None
        if text_pos < text_len:
            text_ch = text[text_pos]
            text_pos += 1
        if text_ch == "<" or text_ch == ">":
            raise bare

        comment_ch: str | None = None
        if comment_pos < comment_len:
            comment_ch = comment[comment_pos]
            comment_pos += 1
        # Skip generics segments, including back-to-back ones (Foo<A><B>).
        # Comparing the second "<" literally would reject such a comment
        # although stripping all segments yields the plain text.
        while comment_ch == "<":
            depth = 1
            while depth > 0:
                if comment_pos >= comment_len:
                    raise ReconcileError(
                        ErrorCode.UNTERMINATED_GENERIC_SEGMENT,
                        f"Incomplete generic segment in variable-comment ({var_name}): \"{comment}\"",
                    )
                ch = comment[comment_pos]
                comment_pos += 1
                if ch == ">":
                    depth -= 1
                elif ch == "<":
                    depth += 1
            comment_ch = None
            if comment_pos < comment_len:
                comment_ch = comment[comment_pos]
                comment_pos += 1

        if text_ch != comment_ch:
            raise ReconcileError(
                ErrorCode.MISMATCH,
                f"child element ({child_tag_name}) and variable-comment ({var_name}) mismatch: "
                f"\"{text}\" -> \"{comment}\"",
            )
    return comment


def get_child_with_generics(elem: Tag, child_tag_name: str, var_name: str) -> str | None:
    """
    Value of the child element ``child_tag_name``, replaced by the
    variable-comment ``var_name`` when that provides the generics.
    """
    return reconcile_generics(
        child_text(elem, child_tag_name),
        get_variable(elem, var_name),
        child_tag_name,
        var_name,
    )


# ---------------------------------------------------------------------------
# allowRobots
# ---------------------------------------------------------------------------

def parse_allow_robots(elem: Tag) -> bool | None:
    """
    allowRobots from a variable-comment: "auto" or empty → None,
    "true" / "false" (any case) → bool.
    """
    value = get_variable(elem, ALLOW_ROBOTS)
    if value is None:
        return None
    value = value.strip()
    lowered = value.lower()
    if not value or lowered == "auto":
        return None
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ExtractionError(
        ErrorCode.INVALID_ALLOW_ROBOTS,
        f"Unexpected value for {ALLOW_ROBOTS}, expect one of \"auto\", \"true\", or \"false\": {value}",
    )


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

def parse_timestamp(value: str, var_name: str) -> datetime:
    """ISO-8601 timestamp; a value without an offset is taken as UTC."""
    try:
        dt = datetime.fromisoformat(value.strip())
    except ValueError as e:
        raise ExtractionError(
            ErrorCode.INVALID_DATE,
            f"{var_name}: invalid timestamp \"{value}\"",
        ) from e
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _parse_date_comment(elem: Tag, var_name: str) -> datetime | None:
    value = get_variable(elem, var_name)
    return None if value is None else parse_timestamp(value, var_name)


def dates_from_comments(elem: Tag, default_dates: Dates | None = None) -> Dates:
    """
    Dates declared in the direct child comments of ``elem``.

    When none of the four date variables is declared, ``default_dates`` is
    returned as-is. Otherwise only the local values are used: a node that
    declares any date does not inherit the others.
    """
    created   = _parse_date_comment(elem, DATE_CREATED)
    published = _parse_date_comment(elem, DATE_PUBLISHED)
    modified  = _parse_date_comment(elem, DATE_MODIFIED)
    reviewed  = _parse_date_comment(elem, DATE_REVIEWED)
    if (
        default_dates is not None
        and created   is None
        and published is None
        and modified  is None
        and reviewed  is None
    ):
        logger.debug("<%s>: no date comments, using default dates", elem.name)
        return default_dates
    return Dates.value_of(created, published, modified, reviewed)
