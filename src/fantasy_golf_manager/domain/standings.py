from dataclasses import dataclass, field
from enum import StrEnum

from fantasy_golf_manager.domain.season import Team, TourCard


class TierBand(StrEnum):
    GOLD = "gold"
    SILVER = "silver"
    REMAINDER = "remainder"


@dataclass(frozen=True)
class RankedTourCard:
    tour_card: TourCard
    computed_position: int | None
    past_points: float
    past_position: int
    past_position_overall: int
    current_position_overall: int
    position_change: int = 0
    position_change_overall: int = 0
    tier_band: TierBand | None = None
    starting_strokes: float | None = None

    @property
    def position(self) -> str | None:
        return self.tour_card.position

    @property
    def points(self) -> float:
        return self.tour_card.points


@dataclass(frozen=True)
class StandingsGroups:
    gold: list[RankedTourCard] = field(default_factory=list)
    silver: list[RankedTourCard] = field(default_factory=list)
    remainder: list[RankedTourCard] = field(default_factory=list)


@dataclass(frozen=True)
class PlayoffGroups:
    gold_teams: list[RankedTourCard] = field(default_factory=list)
    silver_teams: list[RankedTourCard] = field(default_factory=list)
    bumped_teams: list[RankedTourCard] = field(default_factory=list)


@dataclass(frozen=True)
class TourCardStats:
    tour_card_id: str
    tour_id: str
    win: int
    top_ten: int
    made_cut: int
    appearances: int
    earnings: float
    points: float
    position: str


@dataclass(frozen=True)
class TeamPrize:
    team: Team
    points: float
    earnings: float
