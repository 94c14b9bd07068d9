import logging
from dataclasses import replace
from datetime import date

from fantasy_golf_manager.config import LeagueConfig
from fantasy_golf_manager.domain.season import SeasonSnapshot, Tier
from fantasy_golf_manager.domain.standings import PlayoffGroups
from fantasy_golf_manager.ranking.payouts import playoff_starting_strokes
from fantasy_golf_manager.ranking.tiers import group_playoff_standings
from fantasy_golf_manager.services.standings import StandingsService

logger = logging.getLogger(__name__)


class PlayoffService:
    def __init__(self, snapshot: SeasonSnapshot, config: LeagueConfig | None = None) -> None:
        self._snapshot = snapshot
        self._config = config or LeagueConfig()
        self._standings = StandingsService(snapshot, self._config)

    def playoff_tier(self) -> Tier | None:
        return next((t for t in self._snapshot.tiers if "playoff" in t.name.lower()), None)

    def starting_strokes(self) -> dict[str, float]:
        tier = self.playoff_tier()
        if tier is None:
            logger.warning("No playoff tier in season %d; all cards start level", self._snapshot.season)
            return {tc.id: 0.0 for tc in self._snapshot.tour_cards}
        return playoff_starting_strokes(self._snapshot.tour_cards, tier)

    def groups(self, as_of: date) -> PlayoffGroups:
        strokes = self.starting_strokes()
        ranked = [
            replace(r, starting_strokes=strokes.get(r.tour_card.id, 0.0)) for r in self._standings.ranked(as_of)
        ]
        return group_playoff_standings(
            ranked,
            gold_cutoff=self._config.gold_cutoff,
            silver_cutoff=self._config.silver_cutoff,
            tours=self._snapshot.tours,
        )
