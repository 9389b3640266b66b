from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PageKind(str, Enum):
    PLAYER_INFO = "playerInfo"
    MARKET = "market"


ALL_PAGE_KINDS: set[str] = {k.value for k in PageKind}

ALIASES: dict[str, str] = {
    # common short-hands
    "info": PageKind.PLAYER_INFO.value,
    "player": PageKind.PLAYER_INFO.value,
    "player_info": PageKind.PLAYER_INFO.value,
    "mercado": PageKind.MARKET.value,
}


def normalize_page_kind(value: str | PageKind) -> PageKind:
    """
    Normalize a page kind identifier to the enum member.
    Raises ValueError for unknown kinds.
    """
    if isinstance(value, PageKind):
        return value
    v = (value or "").strip()
    v = ALIASES.get(v.lower(), v)
    for kind in PageKind:
        if v.lower() == kind.value.lower():
            return kind
    allowed = ", ".join(sorted(ALL_PAGE_KINDS))
    raise ValueError(f"Unsupported page kind '{value}'. Allowed: {allowed}")


class EventType(str, Enum):
    GOAL = "goal"
    ASSIST = "assist"
    YELLOW_CARD = "yellow_card"
    RED_CARD = "red_card"
    SUB_IN = "sub_in"
    SUB_OUT = "sub_out"
    GREEN_ARROW = "green_arrow"
    OTHER = "other"


class PlayerPosition(str, Enum):
    MIDFIELDER = "midfielder"
    FORWARD = "forward"
    BACK = "back"
    GOALKEEPER = "goalkeeper"
    UNKNOWN = "unknown"


# =============================================================================
# Fantasy events table (player info page)
# =============================================================================

FANTASY_EVENT_ROWS = ".MuiBox-root.css-2p80or"
FANTASY_EVENT_MATCHDAY = ".css-1i4ugup p"
FANTASY_EVENT_SCORE = ".css-12zt0v .css-wpwytb p"
FANTASY_EVENT_TITULARITY = ".css-1is2l86 svg"
FANTASY_EVENT_TITULARITY_FLAG = 'path[fill="#00D26A"]'
FANTASY_EVENT_MINUTES_PLAYED = ".css-cxbjoz"
FANTASY_EVENT_LALIGA_SCORE = ".css-13oaq36 .fixture-score-container__color p"
FANTASY_EVENT_BONUS_SCORE = ".css-66zn4o .fixture-score-container__color p"
FANTASY_EVENT_NODES = ".css-11xjwpp .css-6xe17a"

UNKNOWN_TEAM = "Unknown Team"

# Cards are plain boxes, no SVG
FANTASY_EVENT_YELLOW_CARD = ".css-1qkqqso"
FANTASY_EVENT_RED_CARD = ".css-1dijepo"


@dataclass(frozen=True)
class EventSignature:
    """SVG fills and path shapes that identify one event kind."""

    kind: EventType
    fills: frozenset[str] = frozenset()
    shapes: frozenset[str] = frozenset()


SUB_IN_FILL = "#059669"
SUB_OUT_FILL = "#e11d48"
SUB_IN_SHAPE = "M15 20H9v-8H4.16L12 4.16L19.84 12H15v8Z"
SUB_OUT_SHAPE = "M9 4h6v8h4.84L12 19.84L4.16 12H9V4Z"
GOAL_FILL = "#31373D"
ASSIST_FILL = "#BE1931"

# Checked in order, first match wins
SVG_EVENT_SIGNATURES: tuple[EventSignature, ...] = (
    EventSignature(EventType.SUB_IN, frozenset({SUB_IN_FILL}), frozenset({SUB_IN_SHAPE})),
    EventSignature(EventType.SUB_OUT, frozenset({SUB_OUT_FILL}), frozenset({SUB_OUT_SHAPE})),
    EventSignature(EventType.GOAL, frozenset({GOAL_FILL})),
    EventSignature(EventType.ASSIST, frozenset({ASSIST_FILL})),
)

CARD_EVENT_MARKERS: tuple[tuple[str, EventType], ...] = (
    (FANTASY_EVENT_YELLOW_CARD, EventType.YELLOW_CARD),
    (FANTASY_EVENT_RED_CARD, EventType.RED_CARD),
)


# =============================================================================
# Player details (player info page)
# =============================================================================

POSITION_CODES: dict[str, PlayerPosition] = {
    "MC": PlayerPosition.MIDFIELDER,
    "DL": PlayerPosition.FORWARD,
    "DF": PlayerPosition.BACK,
    "PO": PlayerPosition.GOALKEEPER,
}

AVAILABILITY_FILL_COLOR = "#32BEA6"

BLOCK_CONTAINER = "div.MuiBox-root"

PLAYER_DETAILS_SELECTORS: dict[str, str] = {
    "name": "p.MuiTypography-root.MuiTypography-body1.css-2rah4n",
    "team": "p.MuiTypography-root.MuiTypography-body1.css-1f1jjtq",
    "position": "[class*='css-ev0stz']",
    "availability_container": "div.MuiBox-root.css-j2at52",
    # Stats panel (titular, seguridad, puntuaciones ...)
    "stat_label": "p.MuiTypography-root.MuiTypography-body1.css-17c0u7v",
    "stat_span": "span.MuiTypography-root.MuiTypography-span.css-54ro1u",
    "percentage_value": "p.MuiTypography-root.MuiTypography-body1.css-iplaw2",
    "expected_score_value": "p.MuiTypography-root.MuiTypography-body1.css-18s8kw9",
}

PLAYER_DETAILS_LABELS: dict[str, str] = {
    "titular": "Titular",
    "trust": "Seguridad",
    "expected_starter": "Puntuación esperada titular",
    "expected_substitute": "Puntuación esperada suplente",
}


# =============================================================================
# Market details (market page)
# =============================================================================

MARKET_PRICE_LABELS: dict[str, str] = {
    "Precio máximo": "max_price",
    "Precio mínimo": "min_price",
    "Mayor subida": "highest_raise",
    "Mayor bajada": "highest_drop",
}

MARKET_BID_LABELS: dict[str, str] = {
    "Puja ideal": "best_bid",
    "Puja Máxima": "max_bid",
}

MARKET_SECTION_TITLE_SELECTOR = "p.MuiTypography-root"
MARKET_SECTION_TITLE = "Subida y bajada de los últimos valores de mercados"
MARKET_CURRENT_VALUE_PREFIX = "Valor actual"

MARKET_INTERVAL_LABELS: dict[str, str] = {
    "last_day": "Último",
    "last_2_days": "Últimos 2",
    "last_3_days": "Últimos 3",
    "last_5_days": "Últimos 5",
    "last_10_days": "Últimos 10",
    "last_14_days": "Últimos 14",
    "last_29_days": "Últimos 29",
}
