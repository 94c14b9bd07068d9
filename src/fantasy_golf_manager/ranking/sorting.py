"""Leaderboard ordering for teams and golfers.

Every collection is ordered by one key, ascending::

    (is_out, normalized score, holes completed, group, status token)

Active competitors always come first. Within each half the normalized score
decides, which also orders the out half CUT < WD < DQ. Holes completed breaks
score ties, then the golfer's pick group, then the raw token.
"""

from collections.abc import Iterable, Sequence
from typing import Protocol

from fantasy_golf_manager.domain.season import Golfer, Team, TourCard
from fantasy_golf_manager.ranking.scoring import calculate_score_for_sorting, is_player_cut

NO_GROUP = 999


class Competitor(Protocol):
    @property
    def position(self) -> str | None: ...

    @property
    def score(self) -> float | None: ...

    @property
    def thru(self) -> int | None: ...


def competitor_sort_key(competitor: Competitor) -> tuple[bool, float, int, int, str]:
    group = getattr(competitor, "group", None)
    return (
        is_player_cut(competitor.position),
        calculate_score_for_sorting(competitor.position, competitor.score),
        competitor.thru or 0,
        NO_GROUP if group is None else group,
        competitor.position or "",
    )


def sort_competitors[C: Competitor](competitors: Iterable[C]) -> list[C]:
    return sorted(competitors, key=competitor_sort_key)


def sort_teams(teams: Iterable[Team]) -> list[Team]:
    return sort_competitors(teams)


def sort_golfers(golfers: Iterable[Golfer]) -> list[Golfer]:
    return sort_competitors(golfers)


def sort_tour_cards_by_points(tour_cards: Iterable[TourCard]) -> list[TourCard]:
    return sorted(tour_cards, key=lambda tc: tc.points, reverse=True)


def sorted_team_golfers(team: Team, golfers: Sequence[Golfer]) -> list[Golfer]:
    """A team's golfers ordered by today, thru, score and group (missing values last)."""
    picked = set(team.golfer_ids)

    def key(g: Golfer) -> tuple[tuple[bool, float], ...]:
        return tuple((v is None, v or 0) for v in (g.today, g.thru, g.score, g.group))

    return sorted((g for g in golfers if g.api_id in picked), key=key)
