"""
Player snapshot use case.

Fetches the info and market pages of a player concurrently, runs the three
extractors and combines their output into one PlayerSnapshot. Page kinds
that were not requested are replaced by the documented default records.
"""

from __future__ import annotations

import asyncio
from typing import Iterable, Optional

from fantasy_scraper.common.constants import PageKind
from fantasy_scraper.common.logging_utils import get_logger
from fantasy_scraper.common.parsing import build_id_candidates_from_full_name, to_ascii_slug
from fantasy_scraper.core.config import settings
from fantasy_scraper.domain.errors import PageFetchError, ScrapingError
from fantasy_scraper.domain.models import (
    MarketDetails,
    PlayerDetails,
    PlayerSnapshot,
    SnapshotOptions,
)

from .extractors.fantasy_events import parse_fantasy_events_from_html
from .extractors.market_details import parse_market_details_from_html
from .extractors.player_details import parse_player_details_from_html
from .page_gateway import PageGateway

logger = get_logger(__name__)


def _raise_first_error(results: list) -> list:
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return results


def assemble_snapshot(
    slug: str, info_html: Optional[str] = None, market_html: Optional[str] = None
) -> PlayerSnapshot:
    """Build a snapshot from already downloaded pages (None = page skipped)."""
    fantasy_events = []
    player_details = PlayerDetails.empty()
    market_details = MarketDetails.empty()

    if info_html:
        fantasy_events = parse_fantasy_events_from_html(info_html)
        player_details = parse_player_details_from_html(info_html)
    if market_html:
        market_details = parse_market_details_from_html(market_html)

    return PlayerSnapshot(
        slug=slug,
        fantasy_events=fantasy_events,
        player_details=player_details,
        market_details=market_details,
    )


class FetchPlayerSnapshotUseCase:
    def __init__(self, gateway: PageGateway):
        self.gateway = gateway

    async def _load(self, kind: PageKind, slug: str, wanted: bool) -> Optional[str]:
        if not wanted:
            return None
        try:
            return await self.gateway.load_page(kind, slug)
        except PageFetchError as e:
            raise ScrapingError(
                f"Could not load {kind.value} page for '{slug}'",
                player_slug=slug,
                step=kind.value,
                cause=e,
            ) from e

    async def execute(self, slug: str, options: Optional[SnapshotOptions] = None) -> PlayerSnapshot:
        options = options or SnapshotOptions()
        tasks = [
            asyncio.create_task(self._load(PageKind.PLAYER_INFO, slug, options.include_info)),
            asyncio.create_task(self._load(PageKind.MARKET, slug, options.include_market)),
        ]
        # Both loads settle before a failure is reported
        info_html, market_html = _raise_first_error(
            await asyncio.gather(*tasks, return_exceptions=True)
        )
        snapshot = assemble_snapshot(slug, info_html, market_html)
        logger.info(
            "Snapshot for %s: %d matches, info=%s, market=%s",
            slug,
            len(snapshot.fantasy_events),
            options.include_info,
            options.include_market,
        )
        return snapshot


async def fetch_player_snapshots(
    gateway: PageGateway,
    slugs: Iterable[str],
    options: Optional[SnapshotOptions] = None,
    *,
    max_concurrency: Optional[int] = None,
) -> list[PlayerSnapshot]:
    """Fetch several players concurrently; results keep the order of *slugs*."""
    use_case = FetchPlayerSnapshotUseCase(gateway)
    semaphore = asyncio.Semaphore(max(1, max_concurrency or settings.max_concurrent_players))

    async def _one(slug: str) -> PlayerSnapshot:
        async with semaphore:
            return await use_case.execute(slug, options)

    tasks = [asyncio.create_task(_one(s)) for s in slugs]
    return _raise_first_error(await asyncio.gather(*tasks, return_exceptions=True))


def resolve_slug_candidates(name_or_slug: str) -> list[str]:
    """Slugs to try for a free-form player name; an existing slug is tried first."""
    direct = to_ascii_slug(name_or_slug)
    candidates = build_id_candidates_from_full_name(name_or_slug)
    if direct and direct not in candidates:
        candidates.insert(0, direct)
    return candidates


__all__ = [
    "assemble_snapshot",
    "FetchPlayerSnapshotUseCase",
    "fetch_player_snapshots",
    "resolve_slug_candidates",
]
