"""
Domain models for parsed fantasy data using Pydantic.

All records are immutable value objects. Attributes are snake_case in
Python and serialize to the camelCase keys consumers expect
(``model_dump(by_alias=True)``). NaN sentinels are written as JSON ``NaN``
constants so a JSON round trip keeps them.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_serializer
from pydantic.alias_generators import to_camel

from fantasy_scraper.common.constants import UNKNOWN_TEAM, EventType, PlayerPosition

_NAN_KEY = ("nan",)


def _is_nan(value: object) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _same_value(a: object, b: object) -> bool:
    return (_is_nan(a) and _is_nan(b)) or a == b


def _hash_key(value: object) -> object:
    return _NAN_KEY if _is_nan(value) else value


class FantasyModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        ser_json_inf_nan="constants",
    )

    # NaN sentinels compare equal so parsed records survive a JSON round trip
    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return all(
            _same_value(a, b) for a, b in zip(self.__dict__.values(), other.__dict__.values())
        )

    def __hash__(self) -> int:
        return hash((type(self), *(_hash_key(v) for v in self.__dict__.values())))

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)

    def to_json(self, **kwargs) -> str:
        return self.model_dump_json(by_alias=True, **kwargs)


class _OmitAbsentFields(FantasyModel):
    """Optional fields that were never found are left out of the serialized form."""

    @model_serializer(mode="wrap")
    def _drop_absent(self, handler):
        data = handler(self)
        return {k: v for k, v in data.items() if v is not None}


# --- Fantasy events ---

class MatchEvent(FantasyModel):
    type: EventType
    minute: Optional[int] = Field(default=None, ge=0)


class TeamBlock(FantasyModel):
    team_name: str = UNKNOWN_TEAM
    goals: int = Field(default=0, ge=0)


class MatchScoreDetails(FantasyModel):
    home_team: str = UNKNOWN_TEAM
    away_team: str = UNKNOWN_TEAM
    home_goals: int = Field(default=0, ge=0)
    away_goals: int = Field(default=0, ge=0)

    @computed_field  # type: ignore[misc]
    @property
    def display(self) -> str:
        return f"{self.home_team} ({self.home_goals}) - {self.away_team} ({self.away_goals})"

    @classmethod
    def from_team_blocks(cls, blocks: Sequence[TeamBlock]) -> Optional["MatchScoreDetails"]:
        """Home + away details, or None unless exactly two blocks were found."""
        if len(blocks) != 2:
            return None
        home, away = blocks
        return cls(
            home_team=home.team_name,
            away_team=away.team_name,
            home_goals=home.goals,
            away_goals=away.goals,
        )


class MatchEventRow(FantasyModel):
    matchday: int = Field(gt=0)
    score: MatchScoreDetails
    events: list[MatchEvent] = Field(default_factory=list)
    titularity: bool = False
    minutes_played: int = Field(default=0, ge=0)
    la_liga_score: int = 0
    bonus_score: float = 0.0


# --- Player details ---

class PlayerDetails(FantasyModel):
    name: str = ""
    team: str = ""
    position: PlayerPosition = PlayerPosition.UNKNOWN
    is_available: bool = False
    titularity_chance: float = math.nan  # 0..1
    trustability: float = math.nan  # 0..1
    expected_score_as_starter: float = math.nan
    expected_score_as_substitute: float = math.nan

    @classmethod
    def empty(cls) -> "PlayerDetails":
        return cls()


# --- Market details ---

class PriceWithDate(FantasyModel):
    value: int = 0  # euros
    date: str = ""


class AllTimeFantasyMarket(_OmitAbsentFields):
    max_price: Optional[PriceWithDate] = None
    min_price: Optional[PriceWithDate] = None
    highest_raise: Optional[PriceWithDate] = None
    highest_drop: Optional[PriceWithDate] = None
    best_bid: Optional[int] = None
    max_bid: Optional[int] = None


class MarketDelta(_OmitAbsentFields):
    amount: int = 0  # euros, signed
    percent: Optional[float] = None  # relative to the previous value

    @classmethod
    def from_amount(cls, amount: int, current_value: int) -> "MarketDelta":
        """previous = current - amount; percent = amount / previous * 100."""
        previous_value = current_value - amount
        if previous_value == 0:
            return cls(amount=amount)
        return cls(amount=amount, percent=amount / previous_value * 100)


class LastFantasyMarketValues(FantasyModel):
    current_value: int = 0
    last_day: MarketDelta = Field(default_factory=MarketDelta)
    last_2_days: MarketDelta = Field(default_factory=MarketDelta)
    last_3_days: MarketDelta = Field(default_factory=MarketDelta)
    last_5_days: MarketDelta = Field(default_factory=MarketDelta)
    last_10_days: MarketDelta = Field(default_factory=MarketDelta)
    last_14_days: MarketDelta = Field(default_factory=MarketDelta)
    last_29_days: MarketDelta = Field(default_factory=MarketDelta)

    @property
    def deltas(self) -> dict[str, MarketDelta]:
        return {
            name: getattr(self, name)
            for name in type(self).model_fields
            if name != "current_value"
        }


class MarketDetails(FantasyModel):
    all_time_fantasy_market: AllTimeFantasyMarket = Field(default_factory=AllTimeFantasyMarket)
    last_fantasy_market_values: LastFantasyMarketValues = Field(
        default_factory=LastFantasyMarketValues
    )

    @classmethod
    def empty(cls) -> "MarketDetails":
        """Zero-valued record used when the market page was not requested."""
        zero_price = PriceWithDate(value=0, date="")
        zero_delta = MarketDelta(amount=0, percent=0.0)
        return cls(
            all_time_fantasy_market=AllTimeFantasyMarket(
                max_price=zero_price,
                min_price=zero_price,
                highest_raise=zero_price,
                highest_drop=zero_price,
                best_bid=0,
                max_bid=0,
            ),
            last_fantasy_market_values=LastFantasyMarketValues(
                current_value=0,
                last_day=zero_delta,
                last_2_days=zero_delta,
                last_3_days=zero_delta,
                last_5_days=zero_delta,
                last_10_days=zero_delta,
                last_14_days=zero_delta,
                last_29_days=zero_delta,
            ),
        )


# --- Snapshot ---

class SnapshotOptions(FantasyModel):
    include_info: bool = True
    include_market: bool = True


class PlayerSnapshot(FantasyModel):
    slug: str
    fantasy_events: list[MatchEventRow] = Field(default_factory=list)
    player_details: PlayerDetails = Field(default_factory=PlayerDetails.empty)
    market_details: MarketDetails = Field(default_factory=MarketDetails.empty)


__all__ = [
    "FantasyModel",
    "MatchEvent",
    "TeamBlock",
    "MatchScoreDetails",
    "MatchEventRow",
    "PlayerDetails",
    "PriceWithDate",
    "AllTimeFantasyMarket",
    "MarketDelta",
    "LastFantasyMarketValues",
    "MarketDetails",
    "SnapshotOptions",
    "PlayerSnapshot",
]
