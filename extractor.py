"""Locate the abstract block inside a fetched HTML page."""

from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.element import (
    CData,
    NavigableString,
    RubyParenthesisString,
    RubyTextString,
    Script,
    Stylesheet,
    TemplateString,
)
from soupsieve import SelectorSyntaxError

from errors import ErrorKind, GistError

# Any element carrying the class, so the usual <div class="abstract"> matches
# as well as <section class="abstract"> and friends.
ABSTRACT_SELECTOR = ".abstract"

# Every text node kind except comments and doctype/declarations. get_text()
# matches node types exactly and drops <script>/<style> text by default.
_TEXT_TYPES = (
    NavigableString,
    CData,
    Script,
    Stylesheet,
    TemplateString,
    RubyTextString,
    RubyParenthesisString,
)


def extract_abstract(html: str, selector: str = ABSTRACT_SELECTOR) -> str:
    """Return the raw text of the first element matching ``selector``.

    Every descendant text node is joined with a single space, in document
    order, including <script> and <style> contents. Comments are skipped.
    The result is not normalized.
    """
    soup = BeautifulSoup(html, "html.parser")

    try:
        element = soup.select_one(selector)
    except SelectorSyntaxError as exc:
        raise GistError(
            ErrorKind.SELECTOR_PARSE_FAILURE,
            cause=exc,
            detail=f"invalid selector {selector!r}: {exc}",
        ) from exc

    if element is None:
        raise GistError(ErrorKind.ABSTRACT_NOT_FOUND)

    return element.get_text(" ", types=_TEXT_TYPES)
