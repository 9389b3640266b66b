"""
Page gateway for the Analítica Fantasy player pages.

Maps a page kind + player slug to a URL and downloads the raw HTML. It
contains no parsing logic; retries and timeouts live here and nowhere else.
"""

from __future__ import annotations

import asyncio
import random
from typing import Optional, Protocol, Union

import aiohttp

from fantasy_scraper.common.constants import PageKind, normalize_page_kind
from fantasy_scraper.common.logging_utils import get_logger
from fantasy_scraper.core.config import Settings, settings as default_settings
from fantasy_scraper.domain.errors import PageFetchError

# Statuses worth another attempt
RETRYABLE_STATUSES = frozenset({429, 500, 502, 503, 504})


class PageGateway(Protocol):
    async def load_page(self, kind: Union[PageKind, str], slug: str) -> str:
        ...


def build_headers(cfg: Settings) -> dict[str, str]:
    return {
        "User-Agent": cfg.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": cfg.accept_language,
        "Connection": "keep-alive",
        "Upgrade-Insecure-Requests": "1",
    }


class AnaliticaPageGateway:
    """Downloads player info and market pages over a shared aiohttp session.

    Use as an async context manager::

        async with AnaliticaPageGateway() as gateway:
            html = await gateway.load_page(PageKind.MARKET, "pedri")
    """

    def __init__(self, cfg: Optional[Settings] = None, session: Optional[aiohttp.ClientSession] = None):
        self.config = cfg or default_settings
        self.session = session
        self._owns_session = session is None
        self.logger = get_logger(f"{__name__}.{type(self).__name__}")

    async def __aenter__(self) -> "AnaliticaPageGateway":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.cleanup()

    async def initialize(self) -> None:
        if self.session is None:
            connector = aiohttp.TCPConnector(limit=10)
            self.session = aiohttp.ClientSession(
                headers=build_headers(self.config),
                connector=connector,
                timeout=aiohttp.ClientTimeout(total=self.config.request_timeout),
            )
            self._owns_session = True

    async def cleanup(self) -> None:
        if self.session is not None and self._owns_session:
            await self.session.close()
            self.session = None

    def build_url(self, kind: Union[PageKind, str], slug: str) -> str:
        page_kind = normalize_page_kind(kind)
        slug = slug.strip().strip("/")
        if page_kind is PageKind.PLAYER_INFO:
            return f"{self.config.base_url.rstrip('/')}/{slug}"
        return f"{self.config.market_base_url.rstrip('/')}/{slug}"

    async def _random_delay(self) -> None:
        low, high = self.config.retry_delay_range
        await asyncio.sleep(random.uniform(low, high))

    async def load_page(self, kind: Union[PageKind, str], slug: str) -> str:
        url = self.build_url(kind, slug)
        if self.session is None:
            await self.initialize()

        attempts = max(1, self.config.max_retries)
        last_status: Optional[int] = None
        for attempt in range(1, attempts + 1):
            try:
                async with self.session.get(url, proxy=self.config.proxy_url) as response:
                    last_status = response.status
                    if response.status in RETRYABLE_STATUSES:
                        raise aiohttp.ClientResponseError(
                            response.request_info,
                            response.history,
                            status=response.status,
                            message=f"HTTP {response.status}",
                        )
                    response.raise_for_status()
                    html = await response.text()
                    self.logger.debug("Loaded %s (%d chars)", url, len(html))
                    return html
            except aiohttp.ClientResponseError as e:
                last_status = e.status
                if e.status not in RETRYABLE_STATUSES or attempt >= attempts:
                    raise PageFetchError(
                        f"GET {url} failed with HTTP {e.status}", url=url, status_code=e.status, cause=e
                    ) from e
                self.logger.warning(f"Attempt {attempt} failed for {url}: HTTP {e.status}")
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                if attempt >= attempts:
                    raise PageFetchError(
                        f"GET {url} failed: {e!r}", url=url, status_code=last_status, cause=e
                    ) from e
                self.logger.warning(f"Attempt {attempt} failed for {url}: {e!r}")
            await self._random_delay()
        raise RuntimeError("unreachable")


__all__ = ["PageGateway", "AnaliticaPageGateway", "build_headers", "RETRYABLE_STATUSES"]
