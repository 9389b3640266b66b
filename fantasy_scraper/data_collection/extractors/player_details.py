"""Player attribute extraction from a player's info page.

Stats are located by their visible Spanish label ("Titular", "Seguridad",
"Puntuación esperada titular", ...) rather than by position, because the
generated CSS class names are shared between all panel entries. Each value
is independent: a missing label only turns that one stat into NaN.
"""
from __future__ import annotations

import math
from typing import Callable, Optional

from fantasy_scraper.common.constants import (
    AVAILABILITY_FILL_COLOR,
    BLOCK_CONTAINER,
    PLAYER_DETAILS_LABELS,
    PLAYER_DETAILS_SELECTORS,
)
from fantasy_scraper.common.dom import Node, load_document
from fantasy_scraper.common.logging_utils import get_logger
from fantasy_scraper.common.parsing import parse_percentage_to_decimal, parse_score
from fantasy_scraper.common.term_mapper import map_position_code
from fantasy_scraper.domain.models import PlayerDetails

logger = get_logger(__name__)


def _first_text(root: Node, selector: str) -> str:
    return root.find_all(selector).first_text()


def _is_available(root: Node) -> bool:
    """True when the availability icon is painted in the "available" colour."""
    container = root.find(PLAYER_DETAILS_SELECTORS["availability_container"])
    if container is None:
        return False
    marker = container.find("path")
    fill = marker.attribute("fill") if marker is not None else None
    if not fill:
        return False
    return fill.strip().upper() == AVAILABILITY_FILL_COLOR.upper()


def _stat_container(root: Node, label_text: str) -> Optional[Node]:
    """Block that holds the stat whose label contains *label_text*."""
    for label in root.find_all(PLAYER_DETAILS_SELECTORS["stat_label"]):
        if label_text in label.text():
            return label.closest(BLOCK_CONTAINER)
    return None


def _percentage_raw(container: Node) -> str:
    value = container.find(PLAYER_DETAILS_SELECTORS["percentage_value"])
    # The percentage <p> may embed a <style> tag with injected CSS text
    raw = value.text(skip=("style",)) if value is not None else ""
    if not raw:
        raw = _first_text(container, PLAYER_DETAILS_SELECTORS["stat_span"])
    return raw


def _expected_score_raw(container: Node) -> str:
    return _first_text(container, PLAYER_DETAILS_SELECTORS["expected_score_value"])


def _labelled_stat(
    root: Node,
    label_key: str,
    read_raw: Callable[[Node], str],
    parse: Callable[[str], float],
) -> float:
    container = _stat_container(root, PLAYER_DETAILS_LABELS[label_key])
    if container is None:
        logger.debug("Stat label %r not found", PLAYER_DETAILS_LABELS[label_key])
        return math.nan
    return parse(read_raw(container))


def parse_player_details(root: Node) -> PlayerDetails:
    name = _first_text(root, PLAYER_DETAILS_SELECTORS["name"])
    team = _first_text(root, PLAYER_DETAILS_SELECTORS["team"])
    if not name or not team:
        logger.warning("Player details: name or team missing (name=%r, team=%r)", name, team)

    return PlayerDetails(
        name=name,
        team=team,
        position=map_position_code(_first_text(root, PLAYER_DETAILS_SELECTORS["position"])),
        is_available=_is_available(root),
        titularity_chance=_labelled_stat(
            root, "titular", _percentage_raw, parse_percentage_to_decimal
        ),
        trustability=_labelled_stat(root, "trust", _percentage_raw, parse_percentage_to_decimal),
        expected_score_as_starter=_labelled_stat(
            root, "expected_starter", _expected_score_raw, parse_score
        ),
        expected_score_as_substitute=_labelled_stat(
            root, "expected_substitute", _expected_score_raw, parse_score
        ),
    )


def parse_player_details_from_html(html: str) -> PlayerDetails:
    return parse_player_details(load_document(html))


__all__ = ["parse_player_details", "parse_player_details_from_html"]
