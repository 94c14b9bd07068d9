import logging

from fantasy_golf_manager.domain.errors import NotFoundError
from fantasy_golf_manager.domain.result import Err, Ok, Result
from fantasy_golf_manager.domain.season import Golfer, SeasonSnapshot, Team, Tournament
from fantasy_golf_manager.domain.standings import TeamPrize
from fantasy_golf_manager.ranking.payouts import settle_tournament
from fantasy_golf_manager.ranking.positions import assign_tournament_positions
from fantasy_golf_manager.ranking.sorting import sort_golfers, sort_teams
from fantasy_golf_manager.ranking.tiers import PLAYOFF_LEVELS, filter_by_playoff_level, filter_by_tour, split_by_tour

logger = logging.getLogger(__name__)


class LeaderboardService:
    def __init__(self, snapshot: SeasonSnapshot) -> None:
        self._snapshot = snapshot

    def _tournament(self, tournament_id: str) -> Result[Tournament, NotFoundError]:
        tournament = self._snapshot.tournament(tournament_id)
        if tournament is None:
            message = f"no tournament with id '{tournament_id}'"
            return Err(NotFoundError(message=message, entity="tournament", key=tournament_id))
        return Ok(tournament)

    def team_leaderboard(
        self,
        tournament_id: str,
        *,
        tour_id: str | None = None,
        bracket: str | None = None,
    ) -> Result[list[Team], NotFoundError]:
        """Ordered teams for a tournament, optionally narrowed to one tour or playoff bracket."""
        found = self._tournament(tournament_id)
        if isinstance(found, Err):
            return found

        teams = sort_teams(self._snapshot.teams_for_tournament(tournament_id))
        if bracket is not None:
            level = PLAYOFF_LEVELS.get(bracket.lower())
            if level is None:
                return Err(NotFoundError(message=f"unknown playoff bracket '{bracket}'", entity="bracket", key=bracket))
            teams = filter_by_playoff_level(teams, self._snapshot.tour_cards, level)
        elif tour_id is not None:
            if self._snapshot.tour(tour_id) is None:
                return Err(NotFoundError(message=f"no tour with id '{tour_id}'", entity="tour", key=tour_id))
            teams = filter_by_tour(teams, self._snapshot.tour_cards, tour_id)
        logger.debug("Leaderboard for %s: %d teams", found.value.name, len(teams))
        return Ok(teams)

    def golfer_leaderboard(self, tournament_id: str) -> Result[list[Golfer], NotFoundError]:
        found = self._tournament(tournament_id)
        if isinstance(found, Err):
            return found
        return Ok(sort_golfers(self._snapshot.golfers_for_tournament(tournament_id)))

    def settle(self, tournament_id: str) -> Result[list[TeamPrize], NotFoundError]:
        """Final positions, points and earnings for a completed tournament."""
        found = self._tournament(tournament_id)
        if isinstance(found, Err):
            return found
        tournament = found.value
        tier = self._snapshot.tier_for(tournament)
        if tier is None:
            return Err(
                NotFoundError(message=f"no tier with id '{tournament.tier_id}'", entity="tier", key=tournament.tier_id)
            )

        # Each tour is ranked and paid as its own field.
        by_tour = split_by_tour(self._snapshot.teams_for_tournament(tournament_id), self._snapshot.tour_cards)
        prizes: list[TeamPrize] = []
        for teams in by_tour.values():
            prizes.extend(settle_tournament(sort_teams(assign_tournament_positions(teams)), tier))
        logger.info("Settled %s: %d teams on the %s tier", tournament.name, len(prizes), tier.name)
        return Ok(prizes)
