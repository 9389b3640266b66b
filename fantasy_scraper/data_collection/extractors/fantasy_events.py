"""Parser for the fantasy events table on a player's info page.

Each table row describes one match: matchday, score, event icons, whether
the player started, minutes played, LaLiga points and bonus points. Rows
without a matchday or without exactly two team blocks are dropped; every
other column falls back to 0 / False / [] when missing.
"""
from __future__ import annotations

from typing import Optional

from pydantic import ValidationError

from fantasy_scraper.common.constants import (
    FANTASY_EVENT_BONUS_SCORE,
    FANTASY_EVENT_LALIGA_SCORE,
    FANTASY_EVENT_MATCHDAY,
    FANTASY_EVENT_MINUTES_PLAYED,
    FANTASY_EVENT_NODES,
    FANTASY_EVENT_ROWS,
    FANTASY_EVENT_SCORE,
    FANTASY_EVENT_TITULARITY,
    FANTASY_EVENT_TITULARITY_FLAG,
    UNKNOWN_TEAM,
)
from fantasy_scraper.common.dom import Node, load_document
from fantasy_scraper.common.logging_utils import get_logger
from fantasy_scraper.common.parsing import parse_float_safe, parse_int_safe
from fantasy_scraper.domain.models import (
    MatchEvent,
    MatchEventRow,
    MatchScoreDetails,
    TeamBlock,
)

from .event_classifier import detect_event_type

logger = get_logger(__name__)


# =============================================================================
# Table / rows
# =============================================================================


def parse_fantasy_table(root: Node, row_selector: str = FANTASY_EVENT_ROWS) -> list[MatchEventRow]:
    """Parse every row matched by *row_selector*, keeping only valid ones (document order)."""
    rows: list[MatchEventRow] = []
    for index, row_node in enumerate(root.find_all(row_selector)):
        row = parse_row(row_node)
        if row is None:
            logger.debug("Skipping fantasy events row %d: missing matchday or score", index)
            continue
        rows.append(row)
    return rows


def parse_row(row: Node) -> Optional[MatchEventRow]:
    matchday = extract_matchday(row)
    if matchday <= 0:
        return None

    score = extract_score_details(row)
    if score is None:
        return None

    try:
        return MatchEventRow(
            matchday=matchday,
            score=score,
            events=extract_events(row),
            titularity=extract_titularity(row),
            minutes_played=extract_minutes_played(row),
            la_liga_score=extract_laliga_score(row),
            bonus_score=extract_bonus_score(row),
        )
    except ValidationError as e:
        logger.debug("Discarding fantasy events row for matchday %s: %s", matchday, e)
        return None


# =============================================================================
# Columns
# =============================================================================


def extract_matchday(row: Node) -> int:
    """Matchday from labels such as ``"J15"``; 0 when absent."""
    return parse_int_safe(row.find_all(FANTASY_EVENT_MATCHDAY).first_text())


def _team_block(block: Node) -> TeamBlock:
    img = block.find("img")
    alt = (img.attribute("alt") or "").strip() if img is not None else ""
    goals = parse_int_safe(block.find_all("p").first_text())
    return TeamBlock(team_name=alt or UNKNOWN_TEAM, goals=max(0, goals))


def extract_score_details(row: Node) -> Optional[MatchScoreDetails]:
    """Home/away names and goals; None unless exactly two team blocks exist."""
    blocks: list[Node] = []
    for cell in row.find_all(FANTASY_EVENT_SCORE):
        parent = cell.parent()
        if parent is not None and parent not in blocks:
            blocks.append(parent)
    if len(blocks) != 2:
        return None
    return MatchScoreDetails.from_team_blocks([_team_block(b) for b in blocks])


def extract_titularity(row: Node) -> bool:
    # Starters get a green checked square inside the titularity icon
    svg = row.find(FANTASY_EVENT_TITULARITY)
    if svg is None:
        return False
    return svg.has(FANTASY_EVENT_TITULARITY_FLAG)


def extract_minutes_played(row: Node) -> int:
    return max(0, parse_int_safe(row.find_all(FANTASY_EVENT_MINUTES_PLAYED).first_text()))


def extract_laliga_score(row: Node) -> int:
    return parse_int_safe(row.find_all(FANTASY_EVENT_LALIGA_SCORE).first_text())


def extract_bonus_score(row: Node) -> float:
    return parse_float_safe(row.find_all(FANTASY_EVENT_BONUS_SCORE).first_text())


# =============================================================================
# Events
# =============================================================================


def extract_events(row: Node) -> list[MatchEvent]:
    events: list[MatchEvent] = []
    for marker in row.find_all(FANTASY_EVENT_NODES):
        minute_text = marker.find_all("p").first_text()
        minute = max(0, parse_int_safe(minute_text)) if minute_text else None
        events.append(MatchEvent(type=detect_event_type(marker), minute=minute))
    return events


def parse_fantasy_events_from_html(html: str) -> list[MatchEventRow]:
    return parse_fantasy_table(load_document(html))


__all__ = [
    "parse_fantasy_table",
    "parse_row",
    "extract_matchday",
    "extract_score_details",
    "extract_titularity",
    "extract_minutes_played",
    "extract_laliga_score",
    "extract_bonus_score",
    "extract_events",
    "parse_fantasy_events_from_html",
]
