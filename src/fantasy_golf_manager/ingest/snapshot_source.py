import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from fantasy_golf_manager.domain.errors import SnapshotError
from fantasy_golf_manager.domain.result import Err, Ok, Result, collect
from fantasy_golf_manager.domain.season import SeasonSnapshot
from fantasy_golf_manager.ingest.mappers import (
    golfer_row_to_golfer,
    team_row_to_team,
    tier_row_to_tier,
    tour_card_row_to_tour_card,
    tour_row_to_tour,
    tournament_row_to_tournament,
)

logger = logging.getLogger(__name__)

_SECTIONS: dict[str, Callable[[dict[str, Any]], Any]] = {
    "tours": tour_row_to_tour,
    "tiers": tier_row_to_tier,
    "tournaments": tournament_row_to_tournament,
    "tourCards": tour_card_row_to_tour_card,
    "teams": team_row_to_team,
    "golfers": golfer_row_to_golfer,
}


class JsonSnapshotSource:
    """A season snapshot exported from the league API as one JSON document."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def source_type(self) -> str:
        return "json"

    @property
    def source_detail(self) -> str:
        return str(self._path)

    def fetch(self) -> Result[dict[str, Any], SnapshotError]:
        logger.debug("Reading snapshot %s", self._path)
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return Err(SnapshotError(message="snapshot file not found", source_detail=self.source_detail))
        except json.JSONDecodeError as e:
            return Err(SnapshotError(message=f"invalid JSON: {e}", source_detail=self.source_detail))
        if not isinstance(data, dict):
            return Err(SnapshotError(message="snapshot must be a JSON object", source_detail=self.source_detail))
        return Ok(data)


def _map_section(
    name: str, rows: list[dict[str, Any]], mapper: Callable[[dict[str, Any]], Any], detail: str
) -> Result[list[Any], SnapshotError]:
    def map_row(index: int, row: dict[str, Any]) -> Result[Any, SnapshotError]:
        try:
            return Ok(mapper(row))
        except KeyError as e:
            return Err(SnapshotError(message=f"{name}[{index}]: missing field {e}", source_detail=detail))
        except (TypeError, ValueError) as e:
            return Err(SnapshotError(message=f"{name}[{index}]: {e}", source_detail=detail))

    return collect(map_row(i, row) for i, row in enumerate(rows))


def parse_snapshot(data: dict[str, Any], source_detail: str = "<memory>") -> Result[SeasonSnapshot, SnapshotError]:
    season = data.get("season")
    if not isinstance(season, int):
        return Err(SnapshotError(message=f"season must be an integer, got {season!r}", source_detail=source_detail))

    sections: dict[str, list[Any]] = {}
    for name, mapper in _SECTIONS.items():
        rows = data.get(name) or []
        if not isinstance(rows, list):
            return Err(SnapshotError(message=f"{name} must be a list", source_detail=source_detail))
        match _map_section(name, rows, mapper, source_detail):
            case Ok(values):
                sections[name] = values
                logger.debug("Mapped %d %s", len(values), name)
            case Err() as err:
                return err

    return Ok(
        SeasonSnapshot(
            season=season,
            tours=sections["tours"],
            tiers=sections["tiers"],
            tournaments=sections["tournaments"],
            tour_cards=sections["tourCards"],
            teams=sections["teams"],
            golfers=sections["golfers"],
        )
    )


def load_snapshot(path: str | Path) -> Result[SeasonSnapshot, SnapshotError]:
    source = JsonSnapshotSource(path)
    fetched = source.fetch()
    if isinstance(fetched, Err):
        return fetched
    result = parse_snapshot(fetched.value, source.source_detail)
    if isinstance(result, Ok):
        snapshot = result.value
        logger.info(
            "Loaded season %d: %d tour cards, %d teams, %d golfers",
            snapshot.season,
            len(snapshot.tour_cards),
            len(snapshot.teams),
            len(snapshot.golfers),
        )
    return result
