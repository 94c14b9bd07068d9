"""Movement in the season standings since the last completed tournament.

A card's past points are its current points less whatever it earned in the
most recent completed tournament (zero if it did not play). Past positions are
competition ranks on past points, both within the card's tour and across all
tours. Counting is done with binary search over sorted point lists, so the
whole pass is O(n log n).
"""

import math
from collections import defaultdict
from collections.abc import Mapping, Sequence

from fantasy_golf_manager.domain.season import Team, TourCard
from fantasy_golf_manager.domain.standings import RankedTourCard
from fantasy_golf_manager.ranking.positions import count_greater, parse_position


def points_earned_by_card(teams: Sequence[Team]) -> dict[str, float]:
    """Points each tour card earned across the given teams (one tournament's worth)."""
    earned: dict[str, float] = defaultdict(float)
    for team in teams:
        earned[team.tour_card_id] += team.points or 0
    return dict(earned)


def compute_position_changes(
    tour_cards: Sequence[TourCard],
    prior_period_points: Mapping[str, float],
) -> list[RankedTourCard]:
    past_points = [tc.points - prior_period_points.get(tc.id, 0) for tc in tour_cards]

    past_by_tour: dict[str, list[float]] = defaultdict(list)
    for tc, past in zip(tour_cards, past_points, strict=True):
        past_by_tour[tc.tour_id].append(past)
    for values in past_by_tour.values():
        values.sort()
    all_past = sorted(past_points)
    all_current = sorted(tc.points for tc in tour_cards)

    ranked: list[RankedTourCard] = []
    for tc, past in zip(tour_cards, past_points, strict=True):
        past_position = count_greater(past_by_tour[tc.tour_id], past) + 1
        past_position_overall = count_greater(all_past, past) + 1
        current_position_overall = count_greater(all_current, tc.points) + 1
        current = parse_position(tc.position)
        ranked.append(
            RankedTourCard(
                tour_card=tc,
                computed_position=int(current) if math.isfinite(current) else None,
                past_points=past,
                past_position=past_position,
                past_position_overall=past_position_overall,
                current_position_overall=current_position_overall,
                position_change=_finite_or_zero(past_position - current),
                position_change_overall=past_position_overall - current_position_overall,
            )
        )
    return ranked


def _finite_or_zero(value: float) -> int:
    return int(value) if math.isfinite(value) else 0
