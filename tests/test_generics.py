"""Tests for reconciling child element values with generics variable-comments."""

from __future__ import annotations

import pytest

from tld_model import ErrorCode, ReconcileError
from tld_parser.xml_helper import get_child_with_generics, reconcile_generics


def _reconcile(text: str | None, comment: str | None) -> str | None:
    return reconcile_generics(text, comment, "type", "type")


def test_both_absent() -> None:
    assert _reconcile(None, None) is None


def test_plain_only() -> None:
    assert _reconcile("java.lang.String", None) == "java.lang.String"


def test_orphan_annotation() -> None:
    with pytest.raises(ReconcileError) as exc_info:
        _reconcile(None, "java.util.List<String>")
    assert exc_info.value.code == ErrorCode.ORPHAN_ANNOTATION


@pytest.mark.parametrize("text", ["java.util.List<String>", "a > b"])
def test_bare_generics_without_comment(text: str) -> None:
    with pytest.raises(ReconcileError) as exc_info:
        _reconcile(text, None)
    assert exc_info.value.code == ErrorCode.BARE_GENERICS_NOT_ALLOWED


def test_bare_generics_with_comment() -> None:
    with pytest.raises(ReconcileError) as exc_info:
        _reconcile("java.util.List<String>", "java.util.List<String>")
    assert exc_info.value.code == ErrorCode.BARE_GENERICS_NOT_ALLOWED


@pytest.mark.parametrize(
    ("text", "comment"),
    [
        ("java.util.List", "java.util.List<String>"),
        ("java.util.Map", "java.util.Map<String,Object>"),
        ("java.util.Set", "java.util.Set<java.util.Map<String,Integer>>"),
        (
            "java.util.List split(java.lang.String)",
            "java.util.List<String> split(java.lang.String)",
        ),
        (
            "void apply(java.util.Map, java.util.List)",
            "void apply(java.util.Map<String,T>, java.util.List<? extends T>)",
        ),
        ("Foo", "Foo<A><B>"),
        ("Pair first()", "Pair<A><B<C>> first()"),
        ("", "<T>"),
        ("java.lang.String", "java.lang.String"),
    ],
)
def test_annotated_form_wins(text: str, comment: str) -> None:
    assert _reconcile(text, comment) == comment


@pytest.mark.parametrize(
    ("text", "comment"),
    [
        ("java.util.List", "java.util.Lisp<String>"),
        ("java.util.List", "java.util.List<String>X"),
        ("java.util.List", "java.util.Lis<String>"),
        ("java.util.List", "java.util.List>"),
        ("java.util.List x", "java.util.List<String>"),
    ],
)
def test_mismatch(text: str, comment: str) -> None:
    with pytest.raises(ReconcileError) as exc_info:
        _reconcile(text, comment)
    assert exc_info.value.code == ErrorCode.MISMATCH
    assert text in exc_info.value.message
    assert comment in exc_info.value.message


@pytest.mark.parametrize(
    ("text", "comment"),
    [
        ("java.util.List", "java.util.List<String"),
        ("java.util.Map", "java.util.Map<K,List<V>"),
    ],
)
def test_unterminated_segment(text: str, comment: str) -> None:
    with pytest.raises(ReconcileError) as exc_info:
        _reconcile(text, comment)
    assert exc_info.value.code == ErrorCode.UNTERMINATED_GENERIC_SEGMENT


# ---------------------------------------------------------------------------
# get_child_with_generics on elements
# ---------------------------------------------------------------------------

def test_child_with_generics(make_element) -> None:
    elem = make_element(
        "<attribute><!-- type = 'java.util.List<String>' -->"
        "<name>items</name><type>java.util.List</type></attribute>"
    )
    assert get_child_with_generics(elem, "type", "type") == "java.util.List<String>"


def test_child_without_comment(make_element) -> None:
    elem = make_element("<attribute><type>java.lang.Object</type></attribute>")
    assert get_child_with_generics(elem, "type", "type") == "java.lang.Object"


def test_comment_without_child(make_element) -> None:
    elem = make_element('<attribute><!-- type="java.util.List<String>" --></attribute>')
    with pytest.raises(ReconcileError) as exc_info:
        get_child_with_generics(elem, "type", "type")
    assert exc_info.value.code == ErrorCode.ORPHAN_ANNOTATION
    assert "(type)" in exc_info.value.message
