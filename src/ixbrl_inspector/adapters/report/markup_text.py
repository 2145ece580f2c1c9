# src/ixbrl_inspector/adapters/report/markup_text.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Plain-text rendering of escaped fact markup.

Purpose:
    Flatten the HTML content of escaped (``escape="true"``) facts to a single
    line of text. The report exposes this to facts as ``flatten_markup``.

Layer:
    adapters/report

Notes:
    - Markup lxml cannot parse is whitespace-collapsed and returned as is.
"""

from __future__ import annotations

import re
from typing import Final

from lxml import etree
from lxml import html as lxml_html

__all__ = ["flatten_html", "BLOCK_LEVEL_TAGS"]

BLOCK_LEVEL_TAGS: Final[tuple[str, ...]] = (
    "p",
    "td",
    "th",
    "h1",
    "h2",
    "h3",
    "h4",
    "ol",
    "ul",
    "pre",
    "blockquote",
    "dl",
    "div",
)

_WHITESPACE_RUN = re.compile(r"[\u00a0\s]+")


def _collapse(text: str) -> str:
    return _WHITESPACE_RUN.sub(" ", text).strip()


def flatten_html(markup: str) -> str:
    """Flatten escaped HTML to plain text.

    Block-level elements are padded with a space on both sides so that
    adjacent paragraphs and cells stay separated, then whitespace runs
    (including non-breaking spaces) collapse to a single space.

    Args:
        markup: HTML fragment.

    Returns:
        Single-line text content.
    """
    if not markup or not markup.strip():
        return ""
    try:
        container = lxml_html.fragment_fromstring(markup, create_parent="div")
    except (etree.ParserError, etree.XMLSyntaxError):
        return _collapse(markup)

    for element in container.iter(*BLOCK_LEVEL_TAGS):
        element.text = " " + (element.text or "")
        if len(element):
            last = element[-1]
            last.tail = (last.tail or "") + " "
        else:
            element.text += " "

    return _collapse(container.text_content())
