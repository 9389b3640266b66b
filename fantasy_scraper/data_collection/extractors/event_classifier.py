"""Icon based classification of match event markers.

The events column renders every event as an icon: cards are plain coloured
boxes, everything else is an inline SVG whose path fills / shapes identify
the event. Signatures live in ``common.constants`` so new icons only need a
new table entry.
"""
from __future__ import annotations

from typing import Iterable

from fantasy_scraper.common.constants import (
    CARD_EVENT_MARKERS,
    SVG_EVENT_SIGNATURES,
    EventSignature,
    EventType,
)
from fantasy_scraper.common.dom import Node


def _collect_path_attributes(paths: Iterable[Node]) -> tuple[set[str], set[str]]:
    fills: set[str] = set()
    shapes: set[str] = set()
    for path in paths:
        fill = path.attribute("fill")
        d = path.attribute("d")
        if fill:
            fills.add(fill)
        if d:
            shapes.add(d)
    return fills, shapes


def _matches(signature: EventSignature, fills: set[str], shapes: set[str]) -> bool:
    return bool(signature.fills & fills) or bool(signature.shapes & shapes)


def detect_event_type(node: Node) -> EventType:
    """Classify one event marker node; unknown icons become ``EventType.OTHER``."""
    for selector, kind in CARD_EVENT_MARKERS:
        if node.has(selector):
            return kind

    svg = node.find("svg")
    if svg is None:
        return EventType.OTHER
    paths = svg.find_all("path")
    if not paths:
        return EventType.OTHER

    fills, shapes = _collect_path_attributes(paths)
    for signature in SVG_EVENT_SIGNATURES:
        if _matches(signature, fills, shapes):
            return signature.kind
    return EventType.OTHER


__all__ = ["detect_event_type"]
