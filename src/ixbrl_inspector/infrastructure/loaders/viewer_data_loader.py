# src/ixbrl_inspector/infrastructure/loaders/viewer_data_loader.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Viewer document loader.

Purpose:
    Read a viewer document from disk and return the embedded viewer data
    together with the presentation flags of every inline fact element.

    Accepted inputs:
        * ``*.json``: a bare viewer-data payload (no presentation flags).
        * anything else: an inline XBRL (X)HTML document carrying one or more
          ``<script type="application/x.ixbrl-viewer+json">`` elements. The
          last one wins, matching viewer behaviour.

Layer:
    infrastructure/loaders

Notes:
    - Documents are parsed as XML first (inline XBRL is XHTML); documents
      that are not well-formed fall back to lxml's HTML parser, which keeps
      ``prefix:name`` tags as lower-cased literal names.
    - Tag matching is therefore done on lower-cased local names.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final

from lxml import etree
from lxml import html as lxml_html

from ixbrl_inspector.domain.entities.ix_node import IXNode
from ixbrl_inspector.domain.exceptions.report import ViewerDataError, ViewerDataNotFound

__all__ = ["ViewerDocument", "load_viewer_document", "parse_viewer_document", "VIEWER_DATA_MIME"]

logger = logging.getLogger(__name__)

VIEWER_DATA_MIME: Final[str] = "application/x.ixbrl-viewer+json"

_FACT_TAGS: Final[frozenset[str]] = frozenset({"nonfraction", "nonnumeric"})
_HIDDEN_TAG: Final[str] = "hidden"
_TRUE_VALUES: Final[frozenset[str]] = frozenset({"true", "1"})


@dataclass(frozen=True)
class ViewerDocument:
    """Viewer data plus per-element presentation flags.

    Attributes:
        data: Decoded viewer-data payload.
        ix_nodes: Presentation flags keyed by element id.
        source: Where the document was read from.
    """

    data: Mapping[str, Any]
    ix_nodes: Mapping[str, IXNode] = field(default_factory=dict)
    source: str = ""


def _local_name(element: etree._Element) -> str:
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    if "}" in tag:
        tag = tag.rsplit("}", 1)[1]
    elif ":" in tag:
        tag = tag.rsplit(":", 1)[1]
    return tag.lower()


def _parse_tree(content: bytes) -> etree._Element:
    try:
        parser = etree.XMLParser(huge_tree=True, resolve_entities=False)
        return etree.fromstring(content, parser)
    except etree.XMLSyntaxError:
        logger.debug("loader.xml_parse_failed", extra={"extra": {"fallback": "html"}})
    try:
        return lxml_html.document_fromstring(content)
    except (etree.ParserError, ValueError) as exc:
        raise ViewerDataError(
            "Document could not be parsed as XHTML or HTML.",
            details={"error": str(exc)},
        ) from exc


def _decode_payload(text: str, *, source: str) -> Mapping[str, Any]:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ViewerDataError(
            "Viewer data is not valid JSON.",
            details={"source": source, "line": exc.lineno, "column": exc.colno},
        ) from exc
    if not isinstance(payload, dict):
        raise ViewerDataError(
            "Viewer data must be a JSON object.",
            details={"source": source, "type": type(payload).__name__},
        )
    return payload


def _is_display_none(element: etree._Element) -> bool:
    style = (element.get("style") or "").replace(" ", "").lower()
    return "display:none" in style


def _ix_node_flags(element: etree._Element) -> IXNode:
    is_hidden = False
    html_hidden = _is_display_none(element)
    for ancestor in element.iterancestors():
        if _local_name(ancestor) == _HIDDEN_TAG:
            is_hidden = True
        elif _is_display_none(ancestor):
            html_hidden = True
    return IXNode(
        is_hidden=is_hidden,
        html_hidden=html_hidden,
        escaped=(element.get("escape") or "").strip().lower() in _TRUE_VALUES,
    )


def extract_ix_nodes(elements: Iterable[etree._Element]) -> dict[str, IXNode]:
    """Derive presentation flags for every inline fact element with an id."""
    nodes: dict[str, IXNode] = {}
    for element in elements:
        if _local_name(element) not in _FACT_TAGS:
            continue
        element_id = element.get("id")
        if element_id:
            nodes[element_id] = _ix_node_flags(element)
    return nodes


def parse_viewer_document(content: bytes, *, source: str = "<memory>") -> ViewerDocument:
    """Parse an inline XBRL viewer document.

    Args:
        content: Raw document bytes.
        source: Label used in errors and logs.

    Returns:
        The decoded :class:`ViewerDocument`.

    Raises:
        ViewerDataNotFound: If the document carries no viewer-data script.
        ViewerDataError: If the document or the embedded JSON is malformed.
    """
    root = _parse_tree(content)
    elements = list(root.iter())

    scripts = [
        e
        for e in elements
        if _local_name(e) == "script" and (e.get("type") or "").strip() == VIEWER_DATA_MIME
    ]
    if not scripts:
        raise ViewerDataNotFound(
            "Document does not contain embedded viewer data.",
            details={"source": source, "mime": VIEWER_DATA_MIME},
        )

    data = _decode_payload(scripts[-1].text or "", source=source)
    ix_nodes = extract_ix_nodes(elements)
    logger.info(
        "loader.viewer_document.parsed",
        extra={
            "extra": {
                "source": source,
                "scripts": len(scripts),
                "ix_nodes": len(ix_nodes),
            }
        },
    )
    return ViewerDocument(data=data, ix_nodes=ix_nodes, source=source)


def load_viewer_document(path: str | Path) -> ViewerDocument:
    """Load a viewer document (JSON payload or inline XBRL document) from disk.

    Args:
        path: File path.

    Returns:
        The decoded :class:`ViewerDocument`.

    Raises:
        OSError: If the file cannot be read.
        ViewerDataNotFound: If an HTML document carries no viewer data.
        ViewerDataError: If the content is malformed.
    """
    path = Path(path)
    content = path.read_bytes()
    if path.suffix.lower() == ".json":
        try:
            text = content.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ViewerDataError(
                "Viewer data is not valid UTF-8.",
                details={"source": str(path), "position": exc.start},
            ) from exc
        data = _decode_payload(text, source=str(path))
        logger.info("loader.viewer_json.parsed", extra={"extra": {"source": str(path)}})
        return ViewerDocument(data=data, source=str(path))
    return parse_viewer_document(content, source=str(path))
