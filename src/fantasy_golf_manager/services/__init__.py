"""Season-level services that feed the ranking engine from a snapshot."""

from fantasy_golf_manager.services.leaderboard import LeaderboardService
from fantasy_golf_manager.services.playoffs import PlayoffService
from fantasy_golf_manager.services.standings import StandingsService

__all__ = [
    "LeaderboardService",
    "PlayoffService",
    "StandingsService",
]
