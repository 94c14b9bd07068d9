import logging
from collections import defaultdict
from collections.abc import Sequence
from dataclasses import replace
from datetime import date

from fantasy_golf_manager.cache.memo import memoize_by_identity
from fantasy_golf_manager.config import LeagueConfig
from fantasy_golf_manager.domain.errors import NotFoundError
from fantasy_golf_manager.domain.result import Err, Ok, Result
from fantasy_golf_manager.domain.season import SeasonSnapshot, Team, Tour, TourCard, Tournament
from fantasy_golf_manager.domain.standings import RankedTourCard, StandingsGroups, TourCardStats
from fantasy_golf_manager.ranking.position_change import compute_position_changes, points_earned_by_card
from fantasy_golf_manager.ranking.positions import competition_ranks, format_position, parse_position
from fantasy_golf_manager.ranking.scoring import Status
from fantasy_golf_manager.ranking.tiers import band_for, group_tour_standings, tour_cutoffs

logger = logging.getLogger(__name__)


def aggregate_tour_card_stats(
    tour_cards: Sequence[TourCard],
    teams: Sequence[Team],
    *,
    min_completed_round: int = 4,
) -> list[TourCardStats]:
    """Season totals per tour card from its completed tournaments.

    A team counts once it has played past ``min_completed_round``. Standings
    positions are competition ranks on points within each tour.
    """
    completed: dict[str, list[Team]] = defaultdict(list)
    for team in teams:
        if (team.round or 0) > min_completed_round:
            completed[team.tour_card_id].append(team)

    totals: list[tuple[TourCard, dict[str, float]]] = []
    for tc in tour_cards:
        played = completed.get(tc.id, [])
        places = [parse_position(t.position) for t in played]
        totals.append(
            (
                tc,
                {
                    "win": sum(1 for p in places if p == 1),
                    "top_ten": sum(1 for p in places if p <= 10),
                    "made_cut": sum(1 for t in played if t.position != Status.CUT),
                    "appearances": len(played),
                    "earnings": sum(round(t.earnings or 0, 2) for t in played),
                    "points": sum(round(t.points or 0) for t in played),
                },
            )
        )

    by_tour: dict[str, list[int]] = defaultdict(list)
    for idx, (tc, _) in enumerate(totals):
        by_tour[tc.tour_id].append(idx)

    positions: dict[int, str] = {}
    for indices in by_tour.values():
        ranks = competition_ranks([totals[i][1]["points"] for i in indices], higher_is_better=True)
        for i, (rank, ties) in zip(indices, ranks, strict=True):
            positions[i] = format_position(rank, ties)

    return [
        TourCardStats(
            tour_card_id=tc.id,
            tour_id=tc.tour_id,
            win=int(stats["win"]),
            top_ten=int(stats["top_ten"]),
            made_cut=int(stats["made_cut"]),
            appearances=int(stats["appearances"]),
            earnings=round(stats["earnings"], 2),
            points=stats["points"],
            position=positions[idx],
        )
        for idx, (tc, stats) in enumerate(totals)
    ]


def apply_tour_card_stats(tour_cards: Sequence[TourCard], stats: Sequence[TourCardStats]) -> list[TourCard]:
    by_id = {s.tour_card_id: s for s in stats}
    updated: list[TourCard] = []
    for tc in tour_cards:
        s = by_id.get(tc.id)
        if s is None:
            updated.append(tc)
            continue
        updated.append(
            replace(
                tc,
                win=s.win,
                top_ten=s.top_ten,
                made_cut=s.made_cut,
                appearances=s.appearances,
                earnings=s.earnings,
                points=s.points,
                position=s.position,
            )
        )
    return updated


@memoize_by_identity(maxsize=8)
def rank_season(
    tour_cards: Sequence[TourCard],
    teams: Sequence[Team],
    last_tournament: Tournament | None,
    config: LeagueConfig,
    tours: Sequence[Tour] = (),
) -> list[RankedTourCard]:
    """Tour cards with position changes since ``last_tournament`` and their playoff band."""
    prior = [] if last_tournament is None else [t for t in teams if t.tournament_id == last_tournament.id]
    ranked = compute_position_changes(tour_cards, points_earned_by_card(prior))
    logger.debug("Ranked %d tour cards against %d prior-period teams", len(ranked), len(prior))
    by_id = {t.id: t for t in tours}
    banded: list[RankedTourCard] = []
    for r in ranked:
        gold, silver = tour_cutoffs(
            by_id.get(r.tour_card.tour_id),
            gold_cutoff=config.gold_cutoff,
            silver_cutoff=config.silver_cutoff,
        )
        banded.append(replace(r, tier_band=band_for(r.position, gold_cutoff=gold, silver_cutoff=silver)))
    return banded


def _standings_order(card: RankedTourCard) -> tuple[float, float, str]:
    return (-card.points, parse_position(card.position), card.tour_card.display_name)


class StandingsService:
    def __init__(self, snapshot: SeasonSnapshot, config: LeagueConfig | None = None) -> None:
        self._snapshot = snapshot
        self._config = config or LeagueConfig()

    @property
    def snapshot(self) -> SeasonSnapshot:
        return self._snapshot

    def season_stats(self) -> list[TourCardStats]:
        return aggregate_tour_card_stats(
            self._snapshot.tour_cards,
            self._snapshot.teams,
            min_completed_round=self._config.min_completed_round,
        )

    def recompute(self) -> "StandingsService":
        """A service over the same snapshot with tour-card totals rebuilt from teams."""
        cards = apply_tour_card_stats(self._snapshot.tour_cards, self.season_stats())
        logger.info("Recomputed season totals for %d tour cards", len(cards))
        return StandingsService(replace(self._snapshot, tour_cards=cards), self._config)

    def ranked(self, as_of: date) -> list[RankedTourCard]:
        last = self._snapshot.last_completed_tournament(as_of)
        ranked = rank_season(
            self._snapshot.tour_cards, self._snapshot.teams, last, self._config, self._snapshot.tours
        )
        return sorted(ranked, key=_standings_order)

    def tour_standings(self, tour_id: str, as_of: date) -> Result[list[RankedTourCard], NotFoundError]:
        if self._snapshot.tour(tour_id) is None:
            return Err(NotFoundError(message=f"no tour with id '{tour_id}'", entity="tour", key=tour_id))
        return Ok([r for r in self.ranked(as_of) if r.tour_card.tour_id == tour_id])

    def grouped_standings(self, tour_id: str, as_of: date) -> Result[StandingsGroups, NotFoundError]:
        match self.tour_standings(tour_id, as_of):
            case Ok(cards):
                return Ok(
                    group_tour_standings(
                        cards,
                        gold_cutoff=self._config.gold_cutoff,
                        silver_cutoff=self._config.silver_cutoff,
                        tours=self._snapshot.tours,
                    )
                )
            case Err() as err:
                return err
