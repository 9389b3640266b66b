"""Generic term mapping utilities.

This module provides a `TermMapper` class which centralises synonym -> canonical
value mappings instead of ad-hoc dictionaries spread over the extractors.

Design goals:
 - Normalise input (case-fold, strip accents, collapse whitespace, remove punctuation)
 - Provide fast O(1) lookup via pre-built dictionary of normalised synonyms
 - Allow runtime extension (register / bulk update) without breaking existing mappings

The player page renders the position as a two-letter Spanish code (``MC``,
``DL``, ``DF``, ``PO``). `map_position_code()` resolves it to a
`PlayerPosition`; anything unmapped becomes ``PlayerPosition.UNKNOWN``.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Optional

from .constants import POSITION_CODES, PlayerPosition

_WHITESPACE_RE = re.compile(r"\s+")
_PUNCT_RE = re.compile(r"[\.,;:_/\\()+\-\[\]{}]+")


def _strip_accents(value: str) -> str:
    """Return *value* with accents removed (NFKD decomposition -> drop marks)."""
    normalized = unicodedata.normalize("NFKD", value)
    return "".join(ch for ch in normalized if not unicodedata.combining(ch))


def _base_normalize(value: str, fold_accents: bool = True) -> str:
    """Apply text normalisation pipeline used for dictionary keys.

    Steps:
      1. Lowercase
      2. Trim
      3. Remove accents (unless *fold_accents* is False)
      4. Replace punctuation with space
      5. Collapse multiple whitespace to single space
    """
    v = value.lower().strip()
    if fold_accents:
        v = _strip_accents(v)
    v = _PUNCT_RE.sub(" ", v)
    v = _WHITESPACE_RE.sub(" ", v).strip()
    return v


@dataclass
class TermMapper:
    """Generic normalising synonym mapper.

    Attributes
    -----------
    mappings: Dict[str, str]
        Dict of normalised synonym -> canonical value.
    label: str
        Optional label indicating the domain (e.g. "positions") for easier debugging.
    fold_accents: bool
        Whether accented input matches its unaccented synonym.
    """

    mappings: Dict[str, str] = field(default_factory=dict)
    label: str = ""
    fold_accents: bool = True

    # ---------------------------- Construction helpers ----------------------------
    @classmethod
    def from_groups(
        cls,
        groups: Mapping[str, Iterable[str]],
        label: str = "",
        *,
        include_canonical: bool = True,
        fold_accents: bool = True,
    ) -> "TermMapper":
        """Create a TermMapper from a mapping of canonical -> iterable of synonyms.

        Example
        -------
        groups = {
            "goalkeeper": ["PO"],
        }
        mapper = TermMapper.from_groups(groups, label="positions", include_canonical=False)
        """
        inst = cls(label=label, fold_accents=fold_accents)
        inst.register_groups(groups, include_canonical=include_canonical)
        return inst

    # ---------------------------- Registration API ----------------------------
    def register(self, canonical: str, *synonyms: str, include_canonical: bool = True) -> None:
        """Register synonyms for a canonical value.

        Existing synonyms are overwritten (idempotent). Unless *include_canonical*
        is False the canonical itself is registered as well.
        """
        all_terms = list(synonyms) + ([canonical] if include_canonical else [])
        for term in all_terms:
            norm = _base_normalize(term, self.fold_accents)
            if not norm:
                continue
            self.mappings[norm] = canonical

    def register_groups(
        self, groups: Mapping[str, Iterable[str]], *, include_canonical: bool = True
    ) -> None:
        for canonical, syns in groups.items():
            self.register(canonical, *list(syns), include_canonical=include_canonical)

    # ---------------------------- Lookup ----------------------------
    def lookup(self, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        norm = _base_normalize(value, self.fold_accents)
        return self.mappings.get(norm)

    # ---------------------------- Default position mapper ----------------------------
    _DEFAULT_POSITION_INSTANCE: Optional["TermMapper"] = None  # type: ignore

    @classmethod
    def default_position_mapper(cls) -> "TermMapper":
        """Return the position-code mapper built from ``POSITION_CODES``.

        Only the site codes are registered, matched without accent folding;
        the canonical names themselves (``"midfielder"`` ...) are not accepted.
        """
        if cls._DEFAULT_POSITION_INSTANCE is None:
            groups: dict[str, list[str]] = {}
            for code, position in POSITION_CODES.items():
                groups.setdefault(position.value, []).append(code)
            cls._DEFAULT_POSITION_INSTANCE = cls.from_groups(
                groups, label="positions(codes)", include_canonical=False, fold_accents=False
            )
        return cls._DEFAULT_POSITION_INSTANCE


def map_position_code(raw: Optional[str]) -> PlayerPosition:
    """Map a raw position code (e.g. ``" mc "``) to a PlayerPosition."""
    canonical = TermMapper.default_position_mapper().lookup((raw or "").strip().upper())
    if not canonical:
        return PlayerPosition.UNKNOWN
    return PlayerPosition(canonical)


__all__ = ["TermMapper", "map_position_code"]
