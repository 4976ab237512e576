"""tld_parser/html_snippet.py — summaries of HTML description snippets."""

from __future__ import annotations

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

from tld_model.errors import DocumentError, ErrorCode


def _has_class(summary_class: str):
    def match(tag: Tag) -> bool:
        classes = tag.get("class")
        if classes is None:
            return False
        if isinstance(classes, list):
            classes = " ".join(classes)
        return classes == summary_class
    return match


def get_summary(summary_class: str, html_snippet: str) -> str:
    """
    Concatenates every element with class="<summary_class>" of the snippet,
    in document order. Without such elements the whole snippet is returned.

    The snippet is re-parsed on every call.
    """
    try:
        soup = BeautifulSoup(f"<html>{html_snippet}</html>", "html.parser")
    except ParserRejectedMarkup as e:
        raise DocumentError(ErrorCode.SUMMARY_FAILED, f"unparsable description: {e}") from e
    root: Tag = soup.find("html")  # type: ignore[assignment]
    summary_nodes = root.find_all(_has_class(summary_class))
    if not summary_nodes:
        return html_snippet
    return "".join(str(node) for node in summary_nodes)
