import pytest

from fantasy_golf_manager.domain.season import Tour, TourCard
from fantasy_golf_manager.domain.standings import RankedTourCard, TierBand
from fantasy_golf_manager.ranking.positions import parse_position
from fantasy_golf_manager.ranking.tiers import (
    band_for,
    filter_by_playoff_level,
    filter_by_tour,
    group_playoff_standings,
    group_tour_standings,
    split_by_tour,
    tour_cutoffs,
)
from tests.fakes.season import make_card, make_team


def _ranked(card: TourCard, change: int = 0) -> RankedTourCard:
    return RankedTourCard(
        tour_card=card,
        computed_position=None,
        past_points=card.points,
        past_position=1,
        past_position_overall=1,
        current_position_overall=1,
        position_change=change,
    )


def _field(positions: list[str | None]) -> list[RankedTourCard]:
    return [_ranked(make_card(f"c{i}", position=p)) for i, p in enumerate(positions)]


class TestBandFor:
    @pytest.mark.parametrize(
        ("position", "band"),
        [
            ("1", TierBand.GOLD),
            ("T15", TierBand.GOLD),
            ("16", TierBand.SILVER),
            ("T35", TierBand.SILVER),
            ("36", TierBand.REMAINDER),
            (None, TierBand.REMAINDER),
            ("CUT", TierBand.REMAINDER),
        ],
    )
    def test_default_cutoffs(self, position: str | None, band: TierBand) -> None:
        assert band_for(position) is band

    def test_custom_cutoffs(self) -> None:
        assert band_for("5", gold_cutoff=4, silver_cutoff=8) is TierBand.SILVER


class TestGroupTourStandings:
    def test_strict_partition(self) -> None:
        cards = _field(["1", "T15", "16", "35", "36", "T40", None, "CUT"])
        groups = group_tour_standings(cards)
        combined = groups.gold + groups.silver + groups.remainder
        assert sorted(c.tour_card.id for c in combined) == sorted(c.tour_card.id for c in cards)
        assert len(combined) == len(cards)

    def test_band_membership(self) -> None:
        groups = group_tour_standings(_field(["1", "T15", "16", "35", "36", None]))
        assert all(parse_position(c.position) <= 15 for c in groups.gold)
        assert [c.position for c in groups.gold] == ["1", "T15"]
        assert [c.position for c in groups.silver] == ["16", "35"]
        assert [c.position for c in groups.remainder] == ["36", None]

    def test_empty(self) -> None:
        groups = group_tour_standings([])
        assert groups.gold == [] and groups.silver == [] and groups.remainder == []


class TestGroupPlayoffStandings:
    def test_bumped_teams_fell_out_of_playoff_spot(self) -> None:
        cards = [
            _ranked(make_card("gold", position="3")),
            _ranked(make_card("silver", position="20")),
            _ranked(make_card("bumped", position="37"), change=-3),
            _ranked(make_card("never", position="50"), change=-2),
        ]
        groups = group_playoff_standings(cards)
        assert [c.tour_card.id for c in groups.gold_teams] == ["gold"]
        assert [c.tour_card.id for c in groups.silver_teams] == ["silver"]
        assert [c.tour_card.id for c in groups.bumped_teams] == ["bumped"]


class TestPlayoffFilters:
    def test_filter_by_playoff_level(self) -> None:
        cards = [make_card("a", playoff=1), make_card("b", playoff=2), make_card("c")]
        teams = [make_team("ta", "a"), make_team("tb", "b"), make_team("tc", "c")]
        assert [t.id for t in filter_by_playoff_level(teams, cards, 1)] == ["ta"]
        assert [t.id for t in filter_by_playoff_level(teams, cards, 2)] == ["tb"]

    def test_filter_by_tour(self) -> None:
        cards = [make_card("a", "ccg"), make_card("b", "dbyd")]
        teams = [make_team("ta", "a"), make_team("tb", "b")]
        assert [t.id for t in filter_by_tour(teams, cards, "dbyd")] == ["tb"]


class TestTourCutoffs:
    def test_league_defaults_without_spots(self) -> None:
        assert tour_cutoffs(Tour(id="ccg", name="CCG")) == (15, 35)
        assert tour_cutoffs(None, gold_cutoff=10, silver_cutoff=20) == (10, 20)

    def test_gold_then_silver_spots(self) -> None:
        assert tour_cutoffs(Tour(id="ccg", name="CCG", playoff_spots=(10, 8))) == (10, 18)

    def test_gold_spots_only_keeps_default_silver_width(self) -> None:
        assert tour_cutoffs(Tour(id="ccg", name="CCG", playoff_spots=(5,))) == (5, 25)


class TestPerTourCutoffs:
    TOURS = (
        Tour(id="ccg", name="CCG", playoff_spots=(2, 2)),
        Tour(id="dbyd", name="DbyD", playoff_spots=(1, 1)),
    )

    def test_standings_bands_follow_each_tour(self) -> None:
        cards = [
            _ranked(make_card("c2", "ccg", position="2")),
            _ranked(make_card("c4", "ccg", position="4")),
            _ranked(make_card("d2", "dbyd", position="2")),
            _ranked(make_card("d3", "dbyd", position="3")),
        ]
        groups = group_tour_standings(cards, tours=self.TOURS)
        assert [c.tour_card.id for c in groups.gold] == ["c2"]
        assert [c.tour_card.id for c in groups.silver] == ["c4", "d2"]
        assert [c.tour_card.id for c in groups.remainder] == ["d3"]

    def test_playoff_groups_follow_each_tour(self) -> None:
        cards = [
            _ranked(make_card("c3", "ccg", position="3")),
            _ranked(make_card("d1", "dbyd", position="1")),
            _ranked(make_card("d3", "dbyd", position="3"), change=-1),
            _ranked(make_card("e5", "elsewhere", position="5")),
        ]
        groups = group_playoff_standings(cards, tours=self.TOURS)
        assert [c.tour_card.id for c in groups.gold_teams] == ["d1", "e5"]
        assert [c.tour_card.id for c in groups.silver_teams] == ["c3"]
        assert [c.tour_card.id for c in groups.bumped_teams] == ["d3"]


class TestSplitByTour:
    def test_groups_in_first_seen_order(self) -> None:
        cards = [make_card("a", "ccg"), make_card("b", "dbyd"), make_card("c", "ccg")]
        teams = [make_team("tb", "b"), make_team("ta", "a"), make_team("tc", "c"), make_team("tx", "unknown")]
        by_tour = split_by_tour(teams, cards)
        assert list(by_tour) == ["dbyd", "ccg", ""]
        assert [t.id for t in by_tour["ccg"]] == ["ta", "tc"]
        assert [t.id for t in by_tour[""]] == ["tx"]
