from datetime import date
from pathlib import Path
from typing import Annotated

import typer

from fantasy_golf_manager.cli._logging import configure_logging
from fantasy_golf_manager.cli._output import (
    print_error,
    print_golfer_leaderboard,
    print_playoff_groups,
    print_settlement,
    print_standings,
    print_team_leaderboard,
    print_tier_table,
)
from fantasy_golf_manager.config import LeagueConfig, LeagueConfigError, load_config
from fantasy_golf_manager.domain.result import Err, Ok
from fantasy_golf_manager.domain.season import SeasonSnapshot
from fantasy_golf_manager.ingest.snapshot_source import load_snapshot
from fantasy_golf_manager.services.leaderboard import LeaderboardService
from fantasy_golf_manager.services.playoffs import PlayoffService
from fantasy_golf_manager.services.standings import StandingsService

app = typer.Typer(name="fgm", help="Fantasy Golf Manager: standings and leaderboards")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Only log warnings and errors")] = False,
) -> None:
    """Fantasy Golf Manager: standings and leaderboards."""
    configure_logging(verbose=verbose, quiet=quiet)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_SnapshotArg = Annotated[Path, typer.Argument(help="Season snapshot JSON exported from the league API")]
_AsOfOpt = Annotated[str | None, typer.Option("--as-of", help="Date (YYYY-MM-DD) for the last completed event")]
_ConfigDirOpt = Annotated[Path, typer.Option("--config-dir", help="Directory holding fgm.toml")]
_TournamentOpt = Annotated[str, typer.Option("--tournament", help="Tournament id")]


def _load(path: Path) -> SeasonSnapshot:
    match load_snapshot(path):
        case Ok(snapshot):
            return snapshot
        case Err(e):
            print_error(f"{e.message} ({e.source_detail})")
            raise typer.Exit(code=1)


def _config(config_dir: Path) -> LeagueConfig:
    try:
        return load_config(config_dir)
    except LeagueConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def _as_of(value: str | None) -> date:
    if value is None:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        print_error(f"invalid --as-of date '{value}', expected YYYY-MM-DD")
        raise typer.Exit(code=1) from e


def _member_names(snapshot: SeasonSnapshot) -> dict[str, str]:
    return {tc.id: tc.display_name for tc in snapshot.tour_cards}


@app.command()
def standings(
    snapshot_path: _SnapshotArg,
    tour: Annotated[str, typer.Option("--tour", help="Tour id")],
    as_of: _AsOfOpt = None,
    recompute: Annotated[bool, typer.Option("--recompute", help="Rebuild season totals from team results")] = False,
    config_dir: _ConfigDirOpt = Path("."),
) -> None:
    """Show a tour's season standings in gold, silver and remainder bands."""
    config = _config(config_dir)
    snapshot = _load(snapshot_path)
    service = StandingsService(snapshot, config)
    if recompute:
        service = service.recompute()
    match service.grouped_standings(tour, _as_of(as_of)):
        case Ok(groups):
            tour_record = snapshot.tour(tour)
            print_standings(tour_record.name if tour_record else tour, groups, fallback=config.fallback)
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


@app.command()
def playoffs(
    snapshot_path: _SnapshotArg,
    as_of: _AsOfOpt = None,
    config_dir: _ConfigDirOpt = Path("."),
) -> None:
    """Show playoff qualifiers with their starting strokes."""
    config = _config(config_dir)
    snapshot = _load(snapshot_path)
    print_playoff_groups(PlayoffService(snapshot, config).groups(_as_of(as_of)), fallback=config.fallback)


@app.command()
def leaderboard(
    snapshot_path: _SnapshotArg,
    tournament: _TournamentOpt,
    tour: Annotated[str | None, typer.Option("--tour", help="Only teams on this tour")] = None,
    bracket: Annotated[str | None, typer.Option("--bracket", help="Playoff bracket: gold or silver")] = None,
) -> None:
    """Show the team leaderboard for a tournament."""
    if tour is not None and bracket is not None:
        print_error("--tour and --bracket are mutually exclusive")
        raise typer.Exit(code=1)
    snapshot = _load(snapshot_path)
    match LeaderboardService(snapshot).team_leaderboard(tournament, tour_id=tour, bracket=bracket):
        case Ok(teams):
            print_team_leaderboard(teams, _member_names(snapshot))
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


@app.command()
def golfers(
    snapshot_path: _SnapshotArg,
    tournament: _TournamentOpt,
) -> None:
    """Show the golfer leaderboard for a tournament."""
    snapshot = _load(snapshot_path)
    match LeaderboardService(snapshot).golfer_leaderboard(tournament):
        case Ok(result):
            print_golfer_leaderboard(result)
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


@app.command()
def settle(
    snapshot_path: _SnapshotArg,
    tournament: _TournamentOpt,
) -> None:
    """Compute final positions, points and earnings for a completed tournament."""
    snapshot = _load(snapshot_path)
    match LeaderboardService(snapshot).settle(tournament):
        case Ok(prizes):
            print_settlement(prizes, _member_names(snapshot))
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


@app.command()
def payouts(
    snapshot_path: _SnapshotArg,
    tier: Annotated[str, typer.Option("--tier", help="Tier name, e.g. Major")],
    config_dir: _ConfigDirOpt = Path("."),
) -> None:
    """Show a tier's payout and points table."""
    config = _config(config_dir)
    snapshot = _load(snapshot_path)
    record = snapshot.tier_by_name(tier)
    if record is None:
        print_error(f"no tier named '{tier}'")
        raise typer.Exit(code=1)
    print_tier_table(record, fallback=config.fallback)
