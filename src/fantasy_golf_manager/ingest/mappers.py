"""Row mappers from the league API's camelCase records to domain objects.

Required fields raise ``KeyError`` when absent; the snapshot loader turns that
into a ``SnapshotError`` naming the section and row.
"""

import math
from datetime import date
from typing import Any

from fantasy_golf_manager.domain.season import Golfer, Team, Tier, Tour, TourCard, Tournament


def _to_optional_int(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    return int(value)


def _to_optional_float(value: Any) -> float | None:
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    return float(value)


def _to_optional_str(value: Any) -> str | None:
    if value is None:
        return None
    s = str(value)
    if s == "":
        return None
    return s


def _to_date(value: Any) -> date:
    # Accepts plain dates and ISO timestamps ("2025-04-10T00:00:00.000Z").
    return date.fromisoformat(str(value)[:10])


def _floats(value: Any) -> tuple[float, ...]:
    return tuple(float(v) for v in value or ())


def tour_row_to_tour(row: dict[str, Any]) -> Tour:
    return Tour(
        id=str(row["id"]),
        name=row["name"],
        short_form=row.get("shortForm") or "",
        playoff_spots=tuple(int(s) for s in row.get("playoffSpots") or ()),
    )


def tier_row_to_tier(row: dict[str, Any]) -> Tier:
    return Tier(
        id=str(row["id"]),
        name=row["name"],
        payouts=_floats(row.get("payouts")),
        points=_floats(row.get("points")),
    )


def tournament_row_to_tournament(row: dict[str, Any]) -> Tournament:
    return Tournament(
        id=str(row["id"]),
        name=row["name"],
        tier_id=str(row["tierId"]),
        start_date=_to_date(row["startDate"]),
        end_date=_to_date(row["endDate"]),
        current_round=_to_optional_int(row.get("currentRound")),
        live=bool(row.get("livePlay", False)),
    )


def tour_card_row_to_tour_card(row: dict[str, Any]) -> TourCard:
    return TourCard(
        id=str(row["id"]),
        member_id=str(row["memberId"]),
        tour_id=str(row["tourId"]),
        display_name=row.get("displayName") or "",
        points=_to_optional_float(row.get("points")) or 0,
        earnings=_to_optional_float(row.get("earnings")) or 0,
        position=_to_optional_str(row.get("position")),
        playoff=_to_optional_int(row.get("playoff")) or 0,
        win=_to_optional_int(row.get("win")) or 0,
        top_ten=_to_optional_int(row.get("topTen")) or 0,
        made_cut=_to_optional_int(row.get("madeCut")) or 0,
        appearances=_to_optional_int(row.get("appearances")) or 0,
    )


def team_row_to_team(row: dict[str, Any]) -> Team:
    return Team(
        id=str(row["id"]),
        tournament_id=str(row["tournamentId"]),
        tour_card_id=str(row["tourCardId"]),
        golfer_ids=tuple(int(g) for g in row.get("golferIds") or ()),
        position=_to_optional_str(row.get("position")),
        past_position=_to_optional_str(row.get("pastPosition")),
        score=_to_optional_float(row.get("score")),
        today=_to_optional_float(row.get("today")),
        thru=_to_optional_int(row.get("thru")),
        round=_to_optional_int(row.get("round")),
        points=_to_optional_float(row.get("points")),
        earnings=_to_optional_float(row.get("earnings")),
    )


def golfer_row_to_golfer(row: dict[str, Any]) -> Golfer:
    return Golfer(
        id=int(row["id"]),
        api_id=int(row["apiId"]),
        tournament_id=str(row["tournamentId"]),
        player_name=row["playerName"],
        position=_to_optional_str(row.get("position")),
        score=_to_optional_float(row.get("score")),
        today=_to_optional_float(row.get("today")),
        thru=_to_optional_int(row.get("thru")),
        round=_to_optional_int(row.get("round")),
        group=_to_optional_int(row.get("group")),
        round_one=_to_optional_int(row.get("roundOne")),
        round_two=_to_optional_int(row.get("roundTwo")),
        round_three=_to_optional_int(row.get("roundThree")),
        round_four=_to_optional_int(row.get("roundFour")),
        pos_change=_to_optional_int(row.get("posChange")),
        country=_to_optional_str(row.get("country")),
    )
