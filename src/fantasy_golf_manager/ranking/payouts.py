import math
from collections import Counter
from collections.abc import Sequence

from fantasy_golf_manager.domain.season import Team, Tier, TourCard
from fantasy_golf_manager.domain.standings import TeamPrize
from fantasy_golf_manager.ranking.positions import TIE_MARKER, competition_ranks, parse_position
from fantasy_golf_manager.ranking.scoring import is_player_cut

DISPLAY_FALLBACK = "-"


def tied_average(values: Sequence[float], rank: int, tie_count: int = 1) -> float | None:
    """Average of the table slots a group of tied finishers occupies.

    ``rank`` is 1-based. Slots beyond the end of the table count as zero.
    Returns ``None`` when the first slot itself is outside the table.
    """
    if rank < 1 or rank > len(values):
        return None
    ties = max(tie_count, 1)
    start = rank - 1
    return sum(values[start : start + ties]) / ties


def lookup(
    values: Sequence[float],
    rank: int,
    tie_count: int = 1,
    *,
    fallback: str = DISPLAY_FALLBACK,
) -> float | str:
    """Table value for a finishing rank, averaged over ties and rounded to one decimal."""
    average = tied_average(values, rank, tie_count)
    if average is None:
        return fallback
    if tie_count <= 1:
        return values[rank - 1]
    return round(average, 1)


def lookup_payout(tier: Tier, rank: int, tie_count: int = 1, *, fallback: str = DISPLAY_FALLBACK) -> float | str:
    return lookup(tier.payouts, rank, tie_count, fallback=fallback)


def lookup_points(tier: Tier, rank: int, tie_count: int = 1, *, fallback: str = DISPLAY_FALLBACK) -> float | str:
    return lookup(tier.points, rank, tie_count, fallback=fallback)


def settle_tournament(teams: Sequence[Team], tier: Tier) -> list[TeamPrize]:
    """Points and earnings for each team once a tournament is complete.

    Teams sharing a displayed position split the slots they cover. Cut teams
    and teams without a numeric position earn nothing.
    """
    shared = Counter(t.position for t in teams)
    prizes: list[TeamPrize] = []
    for team in teams:
        rank = parse_position(team.position)
        if is_player_cut(team.position) or not math.isfinite(rank):
            prizes.append(TeamPrize(team=team, points=0, earnings=0))
            continue
        tied = team.position is not None and team.position.startswith(TIE_MARKER)
        ties = shared[team.position] if tied else 1
        points = tied_average(tier.points, int(rank), ties) or 0
        earnings = tied_average(tier.payouts, int(rank), ties) or 0
        prizes.append(TeamPrize(team=team, points=round(points), earnings=round(earnings, 2)))
    return prizes


def playoff_starting_strokes(tour_cards: Sequence[TourCard], playoff_tier: Tier) -> dict[str, float]:
    """Starting strokes per tour card for the opening playoff event.

    Cards are ranked by season points within their playoff division; the
    playoff tier's ``points`` table holds strokes by rank. Cards outside the
    playoffs start level.
    """
    strokes: dict[str, float] = {tc.id: 0.0 for tc in tour_cards}
    for level in sorted({tc.playoff for tc in tour_cards if tc.playoff > 0}):
        division = [tc for tc in tour_cards if tc.playoff == level]
        ranks = competition_ranks([tc.points for tc in division], higher_is_better=True)
        for tc, (rank, ties) in zip(division, ranks, strict=True):
            average = tied_average(playoff_tier.points, rank, ties)
            strokes[tc.id] = round(average, 1) if average is not None else 0.0
    return strokes
