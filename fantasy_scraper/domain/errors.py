"""Error hierarchy for the fantasy scraper.

Only explicit malformed input (see ``parse_days``) and the collaborators
outside the extraction core (page gateway, snapshot use case) raise. Missing
nodes and unparsable numbers inside the extractors resolve to sentinels.
"""
from __future__ import annotations

from typing import Optional


class FantasyScraperError(Exception):
    """Base class for all errors raised by this package."""

    def __init__(self, message: str, *, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class InvalidInput(FantasyScraperError, ValueError):
    """Raised when an explicit input string matches none of the accepted shapes."""

    def __init__(self, raw: str, reason: str = "unrecognised format"):
        super().__init__(f"Invalid input {raw!r}: {reason}")
        self.raw = raw
        self.reason = reason


class PageFetchError(FantasyScraperError):
    def __init__(
        self,
        message: str,
        *,
        url: str,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, cause=cause)
        self.url = url
        self.status_code = status_code


class ScrapingError(FantasyScraperError):
    def __init__(
        self,
        message: str,
        *,
        player_slug: Optional[str] = None,
        step: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, cause=cause)
        self.player_slug = player_slug
        self.step = step


__all__ = [
    "FantasyScraperError",
    "InvalidInput",
    "PageFetchError",
    "ScrapingError",
]
