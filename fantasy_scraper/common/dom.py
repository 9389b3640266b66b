"""Thin queryable-tree wrapper over BeautifulSoup tags.

Extractors only talk to :class:`Node`, so the label/selector anchored
traversal does not depend on bs4 specifics. Every accessor is total: a
missing element yields an empty :class:`NodeList`, ``""`` or ``None``
instead of raising.
"""
from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence, Union

from bs4 import BeautifulSoup, Comment, Tag

from .parsing import soup_from_html


class Node:
    """A single element (or the document root) of a loaded markup tree."""

    __slots__ = ("_tag",)

    def __init__(self, tag: Tag):
        self._tag = tag

    def __repr__(self) -> str:
        return f"Node(<{self.name}>)"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Node) and other._tag is self._tag

    def __hash__(self) -> int:
        return id(self._tag)

    @property
    def name(self) -> str:
        return self._tag.name or ""

    # ---------------------------- Queries ----------------------------
    def find_all(self, selector: str) -> "NodeList":
        return NodeList(Node(t) for t in self._tag.select(selector))

    def find(self, selector: str) -> Optional["Node"]:
        tag = self._tag.select_one(selector)
        return Node(tag) if tag is not None else None

    def has(self, selector: str) -> bool:
        return self._tag.select_one(selector) is not None

    def matches(self, selector: str) -> bool:
        if isinstance(self._tag, BeautifulSoup):
            return False
        return self._tag.css.match(selector)

    # ---------------------------- Content ----------------------------
    def text(self, *, skip: Sequence[str] = ()) -> str:
        """Stripped text content; text under descendants named in *skip* is ignored."""
        if not skip:
            return self._tag.get_text().strip()
        parts: list[str] = []
        for s in self._tag.find_all(string=True):
            if isinstance(s, Comment):
                continue
            parent = s.parent
            hidden = False
            while parent is not None and parent is not self._tag:
                if parent.name in skip:
                    hidden = True
                    break
                parent = parent.parent
            if not hidden:
                parts.append(str(s))
        return "".join(parts).strip()

    def attribute(self, name: str) -> Optional[str]:
        value = self._tag.get(name)
        if isinstance(value, list):  # multi-valued attributes such as class
            return " ".join(value)
        return value

    # ---------------------------- Navigation ----------------------------
    def parent(self) -> Optional["Node"]:
        p = self._tag.parent
        if p is None or isinstance(p, BeautifulSoup):
            return None
        return Node(p)

    def closest(self, predicate: Union[str, Callable[["Node"], bool]]) -> Optional["Node"]:
        """Nearest ancestor-or-self matching a CSS selector or a predicate."""
        match = predicate if callable(predicate) else (lambda n: n.matches(predicate))
        current: Optional[Node] = self
        while current is not None:
            if match(current):
                return current
            current = current.parent()
        return None

    def next_sibling(self, name: Optional[str] = None) -> Optional["Node"]:
        sib = self._tag.find_next_sibling(name) if name else self._tag.find_next_sibling()
        return Node(sib) if sib is not None else None


class NodeList(list):
    """Document-ordered list of nodes with first/last/text helpers."""

    def __init__(self, nodes: Iterable[Node] = ()):
        super().__init__(nodes)

    def first(self) -> Optional[Node]:
        return self[0] if self else None

    def last(self) -> Optional[Node]:
        return self[-1] if self else None

    def first_text(self) -> str:
        return self[0].text() if self else ""

    def nth_text(self, index: int) -> str:
        return self[index].text() if 0 <= index < len(self) else ""


def load_document(html: str) -> Node:
    """Parse *html* and return the document root node."""
    return Node(soup_from_html(html or ""))


__all__ = ["Node", "NodeList", "load_document"]
