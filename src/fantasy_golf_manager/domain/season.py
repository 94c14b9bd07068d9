from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class Tour:
    id: str
    name: str
    short_form: str = ""
    playoff_spots: tuple[int, ...] = ()  # gold spots, then silver spots


@dataclass(frozen=True)
class Tier:
    id: str
    name: str
    payouts: tuple[float, ...] = ()
    points: tuple[float, ...] = ()


@dataclass(frozen=True)
class Tournament:
    id: str
    name: str
    tier_id: str
    start_date: date
    end_date: date
    current_round: int | None = None
    live: bool = False


@dataclass(frozen=True)
class TourCard:
    id: str
    member_id: str
    tour_id: str
    display_name: str
    points: float = 0
    earnings: float = 0
    position: str | None = None
    playoff: int = 0  # 0 = none, 1 = gold, 2 = silver
    win: int = 0
    top_ten: int = 0
    made_cut: int = 0
    appearances: int = 0


@dataclass(frozen=True)
class Team:
    id: str
    tournament_id: str
    tour_card_id: str
    golfer_ids: tuple[int, ...] = ()
    position: str | None = None
    past_position: str | None = None
    score: float | None = None
    today: float | None = None
    thru: int | None = None
    round: int | None = None
    points: float | None = None
    earnings: float | None = None


@dataclass(frozen=True)
class Golfer:
    id: int
    api_id: int
    tournament_id: str
    player_name: str
    position: str | None = None
    score: float | None = None
    today: float | None = None
    thru: int | None = None
    round: int | None = None
    group: int | None = None
    round_one: int | None = None
    round_two: int | None = None
    round_three: int | None = None
    round_four: int | None = None
    pos_change: int | None = None
    country: str | None = None

    @property
    def rounds(self) -> tuple[int | None, ...]:
        return (self.round_one, self.round_two, self.round_three, self.round_four)


@dataclass(frozen=True)
class SeasonSnapshot:
    season: int
    tours: list[Tour] = field(default_factory=list)
    tiers: list[Tier] = field(default_factory=list)
    tournaments: list[Tournament] = field(default_factory=list)
    tour_cards: list[TourCard] = field(default_factory=list)
    teams: list[Team] = field(default_factory=list)
    golfers: list[Golfer] = field(default_factory=list)

    def tour(self, tour_id: str) -> Tour | None:
        return next((t for t in self.tours if t.id == tour_id), None)

    def tournament(self, tournament_id: str) -> Tournament | None:
        return next((t for t in self.tournaments if t.id == tournament_id), None)

    def tour_card(self, tour_card_id: str) -> TourCard | None:
        return next((tc for tc in self.tour_cards if tc.id == tour_card_id), None)

    def tier(self, tier_id: str) -> Tier | None:
        return next((t for t in self.tiers if t.id == tier_id), None)

    def tier_by_name(self, name: str) -> Tier | None:
        lowered = name.lower()
        return next((t for t in self.tiers if t.name.lower() == lowered), None)

    def tier_for(self, tournament: Tournament) -> Tier | None:
        return self.tier(tournament.tier_id)

    def is_playoff(self, tournament: Tournament) -> bool:
        tier = self.tier_for(tournament)
        return tier is not None and "playoff" in tier.name.lower()

    def teams_for_tournament(self, tournament_id: str) -> list[Team]:
        return [t for t in self.teams if t.tournament_id == tournament_id]

    def golfers_for_tournament(self, tournament_id: str) -> list[Golfer]:
        return [g for g in self.golfers if g.tournament_id == tournament_id]

    def last_completed_tournament(self, as_of: date) -> Tournament | None:
        """Most recently finished tournament strictly before ``as_of``."""
        finished = [t for t in self.tournaments if t.end_date < as_of]
        if not finished:
            return None
        return max(finished, key=lambda t: t.end_date)
