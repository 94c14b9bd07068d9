from collections.abc import Sequence

from fantasy_golf_manager.domain.season import Team, Tour, TourCard
from fantasy_golf_manager.domain.standings import PlayoffGroups, RankedTourCard, StandingsGroups, TierBand
from fantasy_golf_manager.ranking.positions import parse_position

GOLD_CUTOFF = 15
SILVER_CUTOFF = 35

PLAYOFF_LEVELS: dict[str, int] = {"gold": 1, "silver": 2}


def tour_cutoffs(
    tour: Tour | None,
    *,
    gold_cutoff: int = GOLD_CUTOFF,
    silver_cutoff: int = SILVER_CUTOFF,
) -> tuple[int, int]:
    """Last gold and last silver position for a tour.

    A tour's ``playoff_spots`` holds the number of gold spots, then the number
    of silver spots. Missing entries fall back to the league-wide cutoffs.
    """
    spots = tour.playoff_spots if tour is not None else ()
    if not spots:
        return gold_cutoff, silver_cutoff
    gold = spots[0]
    silver_spots = spots[1] if len(spots) > 1 else silver_cutoff - gold_cutoff
    return gold, gold + silver_spots


def _cutoffs_by_tour(tours: Sequence[Tour], gold_cutoff: int, silver_cutoff: int) -> dict[str, tuple[int, int]]:
    return {t.id: tour_cutoffs(t, gold_cutoff=gold_cutoff, silver_cutoff=silver_cutoff) for t in tours}


def band_for(
    position: str | int | float | None,
    *,
    gold_cutoff: int = GOLD_CUTOFF,
    silver_cutoff: int = SILVER_CUTOFF,
) -> TierBand:
    pos = parse_position(position)
    if pos <= gold_cutoff:
        return TierBand.GOLD
    if pos <= silver_cutoff:
        return TierBand.SILVER
    return TierBand.REMAINDER


def group_tour_standings(
    cards: Sequence[RankedTourCard],
    *,
    gold_cutoff: int = GOLD_CUTOFF,
    silver_cutoff: int = SILVER_CUTOFF,
    tours: Sequence[Tour] = (),
) -> StandingsGroups:
    """Partition standings into gold, silver and remainder bands using each card's tour cutoffs."""
    cutoffs = _cutoffs_by_tour(tours, gold_cutoff, silver_cutoff)
    groups = StandingsGroups()
    for card in cards:
        gold, silver = cutoffs.get(card.tour_card.tour_id, (gold_cutoff, silver_cutoff))
        band = band_for(card.position, gold_cutoff=gold, silver_cutoff=silver)
        if band is TierBand.GOLD:
            groups.gold.append(card)
        elif band is TierBand.SILVER:
            groups.silver.append(card)
        else:
            groups.remainder.append(card)
    return groups


def group_playoff_standings(
    cards: Sequence[RankedTourCard],
    *,
    gold_cutoff: int = GOLD_CUTOFF,
    silver_cutoff: int = SILVER_CUTOFF,
    tours: Sequence[Tour] = (),
) -> PlayoffGroups:
    """Gold and silver qualifiers, plus cards that dropped out of a playoff spot this period."""
    cutoffs = _cutoffs_by_tour(tours, gold_cutoff, silver_cutoff)
    groups = PlayoffGroups()
    for card in cards:
        gold, silver = cutoffs.get(card.tour_card.tour_id, (gold_cutoff, silver_cutoff))
        pos = parse_position(card.position)
        if pos <= gold:
            groups.gold_teams.append(card)
        elif pos <= silver:
            groups.silver_teams.append(card)
        elif pos + card.position_change <= silver:
            groups.bumped_teams.append(card)
    return groups


def filter_by_playoff_level(teams: Sequence[Team], tour_cards: Sequence[TourCard], level: int) -> list[Team]:
    """Teams whose tour card is seeded into the given playoff bracket."""
    seeded = {tc.id for tc in tour_cards if tc.playoff == level}
    return [t for t in teams if t.tour_card_id in seeded]


def filter_by_tour(teams: Sequence[Team], tour_cards: Sequence[TourCard], tour_id: str) -> list[Team]:
    members = {tc.id for tc in tour_cards if tc.tour_id == tour_id}
    return [t for t in teams if t.tour_card_id in members]


def split_by_tour(teams: Sequence[Team], tour_cards: Sequence[TourCard]) -> dict[str, list[Team]]:
    """Teams keyed by their tour card's tour, in first-seen order. Unknown cards fall under ``""``."""
    tour_of = {tc.id: tc.tour_id for tc in tour_cards}
    by_tour: dict[str, list[Team]] = {}
    for team in teams:
        by_tour.setdefault(tour_of.get(team.tour_card_id, ""), []).append(team)
    return by_tour
