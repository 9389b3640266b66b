"""Market summary extraction from a player's market page.

Two independent passes over the same document:

* all-time summary cards ("Precio máximo", "Mayor subida", "Puja ideal", ...),
  each identified by the text of its first paragraph;
* the "last market values" section: current value plus the signed change
  over the trailing 1/2/3/5/10/14/29 days.

Both rely on visible Spanish texts rather than on generated CSS classes.
"""
from __future__ import annotations

from typing import Optional

from fantasy_scraper.common.constants import (
    BLOCK_CONTAINER,
    MARKET_BID_LABELS,
    MARKET_CURRENT_VALUE_PREFIX,
    MARKET_INTERVAL_LABELS,
    MARKET_PRICE_LABELS,
    MARKET_SECTION_TITLE,
    MARKET_SECTION_TITLE_SELECTOR,
)
from fantasy_scraper.common.dom import Node, load_document
from fantasy_scraper.common.logging_utils import get_logger
from fantasy_scraper.common.parsing import parse_euro_to_integer
from fantasy_scraper.domain.models import (
    AllTimeFantasyMarket,
    LastFantasyMarketValues,
    MarketDelta,
    MarketDetails,
    PriceWithDate,
)

logger = get_logger(__name__)


# =============================================================================
# All-time summary cards
# =============================================================================


def _price_with_date(card: Node) -> Optional[PriceWithDate]:
    """Card layout: <p>label</p><p>value</p><p>date</p>."""
    paragraphs = card.find_all("p")
    if len(paragraphs) < 3:
        return None
    value_text = paragraphs.nth_text(1)
    if not value_text:
        return None
    return PriceWithDate(value=parse_euro_to_integer(value_text), date=paragraphs.nth_text(2))


def parse_all_time_fantasy_market(root: Node) -> AllTimeFantasyMarket:
    found: dict[str, object] = {}
    for card in root.find_all(BLOCK_CONTAINER):
        paragraphs = card.find_all("p")
        label = paragraphs.first_text()
        if label in MARKET_PRICE_LABELS:
            price = _price_with_date(card)
            if price is not None:
                found[MARKET_PRICE_LABELS[label]] = price
        elif label in MARKET_BID_LABELS:
            value_text = paragraphs.nth_text(1)
            if value_text:
                found[MARKET_BID_LABELS[label]] = parse_euro_to_integer(value_text)
    return AllTimeFantasyMarket(**found)


# =============================================================================
# Last market values
# =============================================================================


def _market_values_section(root: Node) -> Optional[Node]:
    for title in root.find_all(MARKET_SECTION_TITLE_SELECTOR):
        if title.text() == MARKET_SECTION_TITLE:
            return title.closest(BLOCK_CONTAINER)
    return None


def _current_value(section: Node) -> int:
    for row in section.find_all("div"):
        paragraphs = row.find_all("p")
        if paragraphs.first_text().startswith(MARKET_CURRENT_VALUE_PREFIX):
            return parse_euro_to_integer(paragraphs.last().text())
    return 0


def _amounts_by_label(section: Node) -> dict[str, int]:
    """Map each <h4> label to the euro amount in the paragraph that follows it."""
    amounts: dict[str, int] = {}
    for heading in section.find_all("h4"):
        value_node = heading.next_sibling("p")
        raw = value_node.text() if value_node is not None else ""
        if not raw or raw == "-":
            continue
        amounts[heading.text()] = parse_euro_to_integer(raw)
    return amounts


def parse_last_fantasy_market_values(root: Node) -> LastFantasyMarketValues:
    section = _market_values_section(root)
    if section is None:
        logger.debug("Market values section %r not found", MARKET_SECTION_TITLE)
        current_value, amounts = 0, {}
    else:
        current_value = _current_value(section)
        amounts = _amounts_by_label(section)

    deltas = {
        field: MarketDelta.from_amount(amounts.get(label, 0), current_value)
        for field, label in MARKET_INTERVAL_LABELS.items()
    }
    return LastFantasyMarketValues(current_value=current_value, **deltas)


def parse_market_details(root: Node) -> MarketDetails:
    return MarketDetails(
        all_time_fantasy_market=parse_all_time_fantasy_market(root),
        last_fantasy_market_values=parse_last_fantasy_market_values(root),
    )


def parse_market_details_from_html(html: str) -> MarketDetails:
    """Parse the market page HTML; no HTTP involved."""
    return parse_market_details(load_document(html))


__all__ = [
    "parse_all_time_fantasy_market",
    "parse_last_fantasy_market_values",
    "parse_market_details",
    "parse_market_details_from_html",
]
