import math

import pytest

from fantasy_scraper.common.parsing import (
    build_id_candidates_from_full_name,
    parse_days,
    parse_euro_to_integer,
    parse_float_safe,
    parse_int_safe,
    parse_percentage_to_decimal,
    parse_score,
    to_ascii_slug,
    unique_non_empty,
)
from fantasy_scraper.domain.errors import InvalidInput


def test_parse_int_safe():
    assert parse_int_safe("J15") == 15
    assert parse_int_safe("90'") == 90
    assert parse_int_safe(" -3 pts") == -3
    assert parse_int_safe("") == 0
    assert parse_int_safe(None) == 0
    assert parse_int_safe("abc") == 0


def test_parse_float_safe():
    assert parse_float_safe("1,5") == 1.5
    assert parse_float_safe("-2,25") == -2.25
    assert parse_float_safe("3") == 3.0
    assert parse_float_safe("") == 0.0
    assert parse_float_safe("n/a") == 0.0
    assert parse_float_safe(None) == 0.0


def test_parse_percentage_to_decimal():
    assert parse_percentage_to_decimal("50,5%") == pytest.approx(0.505)
    assert parse_percentage_to_decimal("85%") == pytest.approx(0.85)
    assert parse_percentage_to_decimal("0%") == 0.0
    # Clamped into [0, 1]
    assert parse_percentage_to_decimal("150%") == 1.0
    assert math.isnan(parse_percentage_to_decimal("no data"))
    assert math.isnan(parse_percentage_to_decimal(""))
    assert math.isnan(parse_percentage_to_decimal(None))


@pytest.mark.parametrize("raw", ["0%", "12%", "33,3%", "99,9%", "100%", "250%"])
def test_parse_percentage_stays_in_unit_interval(raw):
    value = parse_percentage_to_decimal(raw)
    assert 0.0 <= value <= 1.0


def test_parse_score():
    assert parse_score("6,4") == pytest.approx(6.4)
    assert parse_score("2,1 pts") == pytest.approx(2.1)
    assert parse_score("7") == 7.0
    assert math.isnan(parse_score("-"))
    assert math.isnan(parse_score(None))


def test_parse_euro_to_integer():
    assert parse_euro_to_integer("18.890.000€") == 18_890_000
    assert parse_euro_to_integer("-160.000€") == -160_000
    assert parse_euro_to_integer(" 250.000 € ") == 250_000
    assert parse_euro_to_integer("") == 0
    assert parse_euro_to_integer("-") == 0
    assert parse_euro_to_integer(None) == 0


@pytest.mark.parametrize(
    "raw,expected",
    [("3", 3), ("3d", 3), ("3 d", 3), ("1 día", 1), ("2 días", 2), ("2 dias", 2), (" 14 DÍAS ", 14), ("0", 0)],
)
def test_parse_days_accepted_shapes(raw, expected):
    assert parse_days(raw) == expected


@pytest.mark.parametrize("raw", ["", "two days", "tres", "3 semanas", "d3", "-2", "1,5 días", "2.5"])
def test_parse_days_rejects_other_shapes(raw):
    with pytest.raises(InvalidInput) as exc:
        parse_days(raw)
    assert exc.value.raw == raw


def test_parse_days_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        parse_days("mañana")


def test_to_ascii_slug():
    assert to_ascii_slug("Pedri González") == "pedri-gonzalez"
    assert to_ascii_slug("  Nico Williams ") == "nico-williams"
    assert to_ascii_slug("Óscar -- Mingueza!") == "oscar-mingueza"
    assert to_ascii_slug("") == ""


def test_unique_non_empty_keeps_first_occurrence():
    assert unique_non_empty(["a", "", "b", "a", "  ", "c"]) == ["a", "b", "c"]


def test_build_id_candidates_from_full_name():
    assert build_id_candidates_from_full_name("Pedri González") == [
        "pedri-gonzalez",
        "pedri",
        "gonzalez",
        "p-gonzalez",
    ]


def test_build_id_candidates_uses_first_and_last_token():
    assert build_id_candidates_from_full_name("Vinícius José Júnior") == [
        "vinicius-junior",
        "vinicius",
        "junior",
        "v-junior",
    ]


def test_build_id_candidates_single_name_and_empty():
    assert build_id_candidates_from_full_name("Isco") == ["isco", "i"]
    assert build_id_candidates_from_full_name("   ") == []


def test_build_id_candidates_are_unique_slugs():
    for name in ["Ana Ana", "Jon-Jon", "Lamine Yamal", "Álex Baena"]:
        candidates = build_id_candidates_from_full_name(name)
        assert len(candidates) == len(set(candidates))
        assert all(c == to_ascii_slug(c) and c for c in candidates)
