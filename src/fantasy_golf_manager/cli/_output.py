from collections.abc import Mapping

from rich.console import Console
from rich.table import Table

from fantasy_golf_manager.domain.season import Golfer, Team, Tier
from fantasy_golf_manager.domain.standings import PlayoffGroups, RankedTourCard, StandingsGroups, TeamPrize
from fantasy_golf_manager.ranking.formatting import format_money, format_rounds, format_score, ordinal
from fantasy_golf_manager.ranking.payouts import DISPLAY_FALLBACK, lookup_payout, lookup_points
from fantasy_golf_manager.ranking.scoring import is_player_cut

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def _change(value: int, fallback: str) -> str:
    if value > 0:
        return f"[green]▲{value}[/green]"
    if value < 0:
        return f"[red]▼{-value}[/red]"
    return fallback


def _standings_table(
    title: str,
    cards: list[RankedTourCard],
    *,
    show_strokes: bool = False,
    fallback: str = DISPLAY_FALLBACK,
) -> Table:
    table = Table(title=title, show_edge=False, pad_edge=False)
    table.add_column("Pos", justify="right")
    table.add_column("Member")
    table.add_column("Points", justify="right")
    table.add_column("Earnings", justify="right")
    table.add_column("Chg", justify="right")
    if show_strokes:
        table.add_column("Start", justify="right")
    for card in cards:
        row = [
            card.position or fallback,
            card.tour_card.display_name,
            f"{card.points:,.0f}",
            format_money(card.tour_card.earnings),
            _change(card.position_change, fallback),
        ]
        if show_strokes:
            row.append(format_score(card.starting_strokes))
        table.add_row(*row)
    return table


def print_standings(tour_name: str, groups: StandingsGroups, *, fallback: str = DISPLAY_FALLBACK) -> None:
    """Print a tour's standings split into playoff bands."""
    if not (groups.gold or groups.silver or groups.remainder):
        console.print("No standings found.")
        return
    console.print(f"[bold]{tour_name}[/bold] standings")
    for title, cards in (("Gold", groups.gold), ("Silver", groups.silver), ("Remainder", groups.remainder)):
        if cards:
            console.print(_standings_table(title, cards, fallback=fallback))


def print_playoff_groups(groups: PlayoffGroups, *, fallback: str = DISPLAY_FALLBACK) -> None:
    if not (groups.gold_teams or groups.silver_teams):
        console.print("No playoff qualifiers found.")
        return
    console.print(_standings_table("Gold Playoffs", groups.gold_teams, show_strokes=True, fallback=fallback))
    console.print(_standings_table("Silver Playoffs", groups.silver_teams, show_strokes=True, fallback=fallback))
    if groups.bumped_teams:
        console.print(_standings_table("Bumped", groups.bumped_teams, fallback=fallback))


def print_team_leaderboard(teams: list[Team], names: Mapping[str, str]) -> None:
    if not teams:
        console.print("No teams found.")
        return
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Pos", justify="right")
    table.add_column("Team")
    table.add_column("Score", justify="right")
    table.add_column("Today", justify="right")
    table.add_column("Thru", justify="right")
    for team in teams:
        style = "dim" if is_player_cut(team.position) else None
        table.add_row(
            team.position or DISPLAY_FALLBACK,
            names.get(team.tour_card_id, team.tour_card_id),
            format_score(team.score),
            format_score(team.today),
            str(team.thru) if team.thru is not None else DISPLAY_FALLBACK,
            style=style,
        )
    console.print(table)


def print_golfer_leaderboard(golfers: list[Golfer]) -> None:
    if not golfers:
        console.print("No golfers found.")
        return
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Pos", justify="right")
    table.add_column("Golfer")
    table.add_column("Score", justify="right")
    table.add_column("Thru", justify="right")
    table.add_column("Rounds")
    table.add_column("Grp", justify="right")
    for golfer in golfers:
        style = "dim" if is_player_cut(golfer.position) else None
        table.add_row(
            golfer.position or DISPLAY_FALLBACK,
            golfer.player_name,
            format_score(golfer.score),
            str(golfer.thru) if golfer.thru is not None else DISPLAY_FALLBACK,
            format_rounds(golfer.rounds),
            str(golfer.group) if golfer.group is not None else DISPLAY_FALLBACK,
            style=style,
        )
    console.print(table)


def print_settlement(prizes: list[TeamPrize], names: Mapping[str, str]) -> None:
    """Print final positions with the points and earnings each team receives."""
    if not prizes:
        console.print("No teams to settle.")
        return
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Pos", justify="right")
    table.add_column("Team")
    table.add_column("Score", justify="right")
    table.add_column("Points", justify="right")
    table.add_column("Earnings", justify="right")
    for prize in prizes:
        team = prize.team
        table.add_row(
            team.position or DISPLAY_FALLBACK,
            names.get(team.tour_card_id, team.tour_card_id),
            format_score(team.score),
            f"{prize.points:,.0f}",
            format_money(prize.earnings),
        )
    console.print(table)


def print_tier_table(tier: Tier, *, fallback: str = DISPLAY_FALLBACK) -> None:
    slots = max(len(tier.payouts), len(tier.points))
    if slots == 0:
        console.print(f"Tier '{tier.name}' has no payout table.")
        return
    table = Table(title=f"{tier.name} tier", show_edge=False, pad_edge=False)
    table.add_column("Finish", justify="right")
    table.add_column("Payout", justify="right")
    table.add_column("Points", justify="right")
    for rank in range(1, slots + 1):
        payout = lookup_payout(tier, rank, fallback=fallback)
        points = lookup_points(tier, rank, fallback=fallback)
        table.add_row(
            ordinal(rank),
            payout if isinstance(payout, str) else format_money(payout),
            points if isinstance(points, str) else f"{points:g}",
        )
    console.print(table)
