import logging
import math

import pytest

from fantasy_scraper.common.constants import PlayerPosition
from fantasy_scraper.data_collection.extractors.player_details import (
    parse_player_details_from_html,
)


def test_parse_full_player_details(player_details_html, page):
    details = parse_player_details_from_html(page(player_details_html))

    assert details.name == "Pedri"
    assert details.team == "FC Barcelona"
    assert details.position == PlayerPosition.MIDFIELDER
    # Fill colour compared case-insensitively
    assert details.is_available is True
    assert details.titularity_chance == pytest.approx(0.85)
    # Empty percentage paragraph falls back to the span
    assert details.trustability == pytest.approx(0.725)
    assert details.expected_score_as_starter == pytest.approx(6.4)
    assert details.expected_score_as_substitute == pytest.approx(2.1)


def test_missing_labels_give_nan_independently(page):
    html = page(
        """
        <p class="MuiTypography-root MuiTypography-body1 css-2rah4n">Lamine Yamal</p>
        <p class="MuiTypography-root MuiTypography-body1 css-1f1jjtq">FC Barcelona</p>
        <div class="MuiBox-root">
            <p class="MuiTypography-root MuiTypography-body1 css-17c0u7v">Puntuación esperada titular</p>
            <p class="MuiTypography-root MuiTypography-body1 css-18s8kw9">8,2</p>
        </div>
        """
    )
    details = parse_player_details_from_html(html)
    assert details.name == "Lamine Yamal"
    assert details.expected_score_as_starter == pytest.approx(8.2)
    assert math.isnan(details.titularity_chance)
    assert math.isnan(details.trustability)
    assert math.isnan(details.expected_score_as_substitute)
    assert details.position == PlayerPosition.UNKNOWN
    assert details.is_available is False


@pytest.mark.parametrize(
    "code,expected",
    [
        ("MC", PlayerPosition.MIDFIELDER),
        ("DL", PlayerPosition.FORWARD),
        ("DF", PlayerPosition.BACK),
        ("PO", PlayerPosition.GOALKEEPER),
        ("XX", PlayerPosition.UNKNOWN),
        ("", PlayerPosition.UNKNOWN),
    ],
)
def test_position_codes(page, code, expected):
    html = page(f'<span class="css-ev0stz">{code}</span>')
    assert parse_player_details_from_html(html).position == expected


@pytest.mark.parametrize("fill,available", [("#32BEA6", True), ("#32bea6", True), ("#E11D48", False), (None, False)])
def test_availability_colour(page, fill, available):
    fill_attr = f' fill="{fill}"' if fill else ""
    html = page(f'<div class="MuiBox-root css-j2at52"><svg><path{fill_attr} d="M0 0"/></svg></div>')
    assert parse_player_details_from_html(html).is_available is available


def test_label_without_value_is_nan(page):
    html = page(
        """
        <div class="MuiBox-root">
            <p class="MuiTypography-root MuiTypography-body1 css-17c0u7v">Titular</p>
        </div>
        """
    )
    assert math.isnan(parse_player_details_from_html(html).titularity_chance)


def test_missing_name_logs_warning(page, caplog):
    with caplog.at_level(logging.WARNING):
        details = parse_player_details_from_html(page("<div></div>"))
    assert details.name == ""
    assert details.team == ""
    assert any("name or team missing" in r.getMessage() for r in caplog.records)


def test_name_and_team_are_trimmed_not_collapsed(page):
    html = page(
        """
        <p class="MuiTypography-root MuiTypography-body1 css-2rah4n">
          Pedri  González </p>
        <p class="MuiTypography-root MuiTypography-body1 css-1f1jjtq"> Real
        Betis </p>
        """
    )
    details = parse_player_details_from_html(html)
    assert details.name == "Pedri  González"
    assert details.team == "Real\n        Betis"
