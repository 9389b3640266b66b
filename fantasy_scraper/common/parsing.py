"""Locale-aware text -> number/string helpers.

Input follows the Spanish/European convention: ``.`` separates thousands,
``,`` is the decimal separator and euro amounts carry a ``€`` suffix.
Each helper keeps its own sentinel for unparsable input (0 for the integer
and currency helpers, NaN for ratios and scores).
"""
import math
import re
import unicodedata
from typing import Iterable

from bs4 import BeautifulSoup

from fantasy_scraper.domain.errors import InvalidInput

_NUMBER_RE = re.compile(r"(\d+(?:[.,]\d+)?)")
_FLOAT_PREFIX_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)")
_NON_SLUG_RE = re.compile(r"[^a-z0-9-]+")
_MULTI_HYPHEN_RE = re.compile(r"-{2,}")
_NAME_SPLIT_RE = re.compile(r"[\s\-_]+")
_DAYS_RE = re.compile(r"^(-?\d+(?:[.,]\d+)?)\s*(d|d[ií]as?)?$", re.IGNORECASE)


def parse_int_safe(s: str | None) -> int:
    cleaned = re.sub(r"[^\d-]", "", s or "")
    # int() rejects stray minus signs in the middle, mirror a lenient prefix parse
    m = re.match(r"-?\d+", cleaned)
    return int(m.group(0)) if m else 0


def parse_float_safe(s: str | None) -> float:
    cleaned = re.sub(r"[^0-9.,-]", "", s or "").replace(",", ".", 1)
    m = _FLOAT_PREFIX_RE.match(cleaned)
    if not m:
        return 0.0
    try:
        return float(m.group(0))
    except ValueError:
        return 0.0


def _extract_number(s: str | None) -> float:
    """First integer/decimal-looking number in *s*, European separators normalised."""
    if s is None:
        return math.nan
    trimmed = str(s).strip()
    if not trimmed:
        return math.nan
    m = _NUMBER_RE.search(trimmed)
    if not m:
        return math.nan
    normalized = m.group(1).replace(".", "").replace(",", ".", 1)
    try:
        return float(normalized)
    except ValueError:
        return math.nan


def parse_percentage_to_decimal(s: str | None) -> float:
    """Convert a percentage label to a ratio in [0, 1].

    Example: ``"50,5%"`` -> ``0.505``. Returns NaN when no number is present.
    """
    numeric = _extract_number(s)
    if math.isnan(numeric):
        return math.nan
    return min(1.0, max(0.0, numeric / 100))


def parse_score(s: str | None) -> float:
    return _extract_number(s)


def parse_euro_to_integer(s: str | None) -> int:
    """Parse amounts such as ``"18.890.000€"`` or ``"-160.000€"`` into signed euros."""
    trimmed = (s or "").strip()
    if not trimmed:
        return 0
    digits = re.sub(r"\D", "", trimmed)
    if not digits:
        return 0
    value = int(digits)
    return -value if trimmed.startswith("-") else value


def parse_days(s: str) -> int:
    """Parse a day duration: ``"3"``, ``"3d"``, ``"1 día"``, ``"2 dias"``.

    Raises InvalidInput for any other shape and for negative or fractional counts.
    """
    raw = s if isinstance(s, str) else str(s)
    m = _DAYS_RE.match(raw.strip())
    if not m:
        raise InvalidInput(raw)
    number = m.group(1)
    if number.startswith("-"):
        raise InvalidInput(raw, "day count must not be negative")
    if not number.isdigit():
        raise InvalidInput(raw, "day count must be an integer")
    return int(number)


def to_ascii_slug(s: str) -> str:
    """Lowercase ASCII slug: ``"Pedri González"`` -> ``"pedri-gonzalez"``."""
    normalized = unicodedata.normalize("NFKD", (s or "").strip().lower())
    ascii_only = "".join(ch for ch in normalized if not unicodedata.combining(ch))
    slug = _NON_SLUG_RE.sub("-", ascii_only)
    slug = _MULTI_HYPHEN_RE.sub("-", slug)
    return slug.strip("-")


def unique_non_empty(items: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for item in items:
        v = (item or "").strip()
        if not v or v in seen:
            continue
        seen.add(v)
        out.append(v)
    return out


def build_id_candidates_from_full_name(full_name: str) -> list[str]:
    """Candidate slugs for a player name, most specific first.

    Order: first-last, first, last, initial-last. First token is the name,
    last token the surname; duplicates and empties are dropped.
    """
    parts = [p for p in _NAME_SPLIT_RE.split((full_name or "").strip()) if p]
    if not parts:
        return []
    first = parts[0]
    last = parts[-1] if len(parts) > 1 else ""
    initial = first[0]

    candidates = [
        f"{first} {last}" if last else first,
        first,
        last,
        f"{initial} {last}" if last else initial,
    ]
    return unique_non_empty(to_ascii_slug(c) for c in candidates)


def soup_from_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


__all__ = [
    "parse_int_safe",
    "parse_float_safe",
    "parse_percentage_to_decimal",
    "parse_score",
    "parse_euro_to_integer",
    "parse_days",
    "to_ascii_slug",
    "unique_non_empty",
    "build_id_candidates_from_full_name",
    "soup_from_html",
]
