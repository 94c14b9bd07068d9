from datetime import date
from typing import Any

from fantasy_golf_manager.domain.season import Golfer, SeasonSnapshot, Team, Tier, Tour, TourCard, Tournament

MAJOR = Tier(
    id="tier-major",
    name="Major",
    payouts=(1000.0, 600.0, 400.0, 250.0, 150.0),
    points=(500.0, 300.0, 200.0, 100.0, 50.0),
)
PLAYOFF = Tier(
    id="tier-playoff",
    name="Playoff",
    payouts=(0.0, 0.0, 0.0, 0.0),
    points=(-10.0, -8.0, -6.0, -5.0),
)
CCG = Tour(id="ccg", name="Coffee Club Golf", short_form="CCG")
DBYD = Tour(id="dbyd", name="Down by Dawn", short_form="DbyD")


def make_card(card_id: str, tour_id: str = "ccg", points: float = 0, **kwargs: Any) -> TourCard:
    defaults: dict[str, Any] = {"member_id": f"m-{card_id}", "display_name": card_id.upper()}
    defaults.update(kwargs)
    return TourCard(id=card_id, tour_id=tour_id, points=points, **defaults)


def make_team(
    team_id: str,
    tour_card_id: str,
    tournament_id: str = "t1",
    *,
    position: str | None = None,
    score: float | None = None,
    **kwargs: Any,
) -> Team:
    return Team(
        id=team_id,
        tournament_id=tournament_id,
        tour_card_id=tour_card_id,
        position=position,
        score=score,
        **kwargs,
    )


def make_golfer(
    api_id: int,
    name: str,
    *,
    position: str | None = None,
    score: float | None = None,
    **kwargs: Any,
) -> Golfer:
    defaults: dict[str, Any] = {"tournament_id": "t1"}
    defaults.update(kwargs)
    return Golfer(id=api_id, api_id=api_id, player_name=name, position=position, score=score, **defaults)


def make_tournament(tournament_id: str, end: date, tier: Tier = MAJOR, name: str | None = None) -> Tournament:
    return Tournament(
        id=tournament_id,
        name=name or tournament_id.title(),
        tier_id=tier.id,
        start_date=date.fromordinal(end.toordinal() - 3),
        end_date=end,
    )


def sample_snapshot() -> SeasonSnapshot:
    """Two tours, two completed tournaments, one playoff event still to come."""
    cards = [
        make_card("a", "ccg", points=800, position="1", earnings=1600, playoff=1),
        make_card("b", "ccg", points=600, position="T2", earnings=650, playoff=1),
        make_card("c", "ccg", points=600, position="T2", earnings=400, playoff=2),
        make_card("d", "ccg", points=150, position="4", earnings=0),
        make_card("e", "dbyd", points=700, position="1", earnings=1000, playoff=1),
        make_card("f", "dbyd", points=200, position="2", earnings=250, playoff=2),
    ]
    tournaments = [
        make_tournament("t1", date(2025, 4, 13), name="The Masters"),
        make_tournament("t2", date(2025, 5, 18), name="PGA Championship"),
        make_tournament("t3", date(2025, 8, 24), tier=PLAYOFF, name="Playoff Event 1"),
    ]
    teams = [
        make_team("t1-a", "a", "t1", position="1", score=-12, round=5, points=500, earnings=1000),
        make_team("t1-b", "b", "t1", position="T2", score=-8, round=5, points=250, earnings=500),
        make_team("t1-c", "c", "t1", position="T2", score=-8, round=5, points=250, earnings=500),
        make_team("t1-d", "d", "t1", position="CUT", score=6, round=3, points=0, earnings=0),
        make_team("t2-a", "a", "t2", position="T1", score=-6, round=5, points=300, earnings=600),
        make_team("t2-b", "b", "t2", position="T1", score=-6, round=5, points=350, earnings=150),
        make_team("t2-c", "c", "t2", position="3", score=-2, round=5, points=350, earnings=-100),
        make_team("t2-d", "d", "t2", position="4", score=1, round=5, points=150, earnings=0),
        make_team("t2-e", "e", "t2", position="1", score=-9, round=5, points=700, earnings=1000),
    ]
    golfers = [
        make_golfer(1, "Scottie Scheffler", position="1", score=-11, thru=18, group=1),
        make_golfer(2, "Rory McIlroy", position="T2", score=-8, thru=18, group=1),
        make_golfer(3, "Jon Rahm", position="CUT", score=4, thru=18, group=2),
        make_golfer(4, "Brooks Koepka", position="WD", score=None, group=3),
        make_golfer(5, "Ludvig Aberg", position="T2", score=-8, thru=16, group=2),
    ]
    return SeasonSnapshot(
        season=2025,
        tours=[CCG, DBYD],
        tiers=[MAJOR, PLAYOFF],
        tournaments=tournaments,
        tour_cards=cards,
        teams=teams,
        golfers=golfers,
    )


def sample_document() -> dict[str, Any]:
    """``sample_snapshot`` as the league API exports it (camelCase JSON)."""
    snapshot = sample_snapshot()
    return {
        "season": snapshot.season,
        "tours": [
            {"id": t.id, "name": t.name, "shortForm": t.short_form, "playoffSpots": list(t.playoff_spots)}
            for t in snapshot.tours
        ],
        "tiers": [
            {"id": t.id, "name": t.name, "payouts": list(t.payouts), "points": list(t.points)} for t in snapshot.tiers
        ],
        "tournaments": [
            {
                "id": t.id,
                "name": t.name,
                "tierId": t.tier_id,
                "startDate": t.start_date.isoformat(),
                "endDate": f"{t.end_date.isoformat()}T00:00:00.000Z",
                "currentRound": None,
                "livePlay": False,
            }
            for t in snapshot.tournaments
        ],
        "tourCards": [
            {
                "id": tc.id,
                "memberId": tc.member_id,
                "tourId": tc.tour_id,
                "displayName": tc.display_name,
                "points": tc.points,
                "earnings": tc.earnings,
                "position": tc.position,
                "playoff": tc.playoff,
            }
            for tc in snapshot.tour_cards
        ],
        "teams": [
            {
                "id": t.id,
                "tournamentId": t.tournament_id,
                "tourCardId": t.tour_card_id,
                "golferIds": list(t.golfer_ids),
                "position": t.position,
                "score": t.score,
                "round": t.round,
                "points": t.points,
                "earnings": t.earnings,
            }
            for t in snapshot.teams
        ],
        "golfers": [
            {
                "id": g.id,
                "apiId": g.api_id,
                "tournamentId": g.tournament_id,
                "playerName": g.player_name,
                "position": g.position,
                "score": g.score,
                "thru": g.thru,
                "group": g.group,
            }
            for g in snapshot.golfers
        ],
    }
