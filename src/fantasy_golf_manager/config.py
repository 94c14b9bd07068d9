import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fantasy_golf_manager.ranking.payouts import DISPLAY_FALLBACK
from fantasy_golf_manager.ranking.tiers import GOLD_CUTOFF, SILVER_CUTOFF

_CONFIG_FILENAME = "fgm.toml"


class LeagueConfigError(Exception):
    """Raised when league configuration is invalid."""


@dataclass(frozen=True)
class LeagueConfig:
    gold_cutoff: int = GOLD_CUTOFF
    silver_cutoff: int = SILVER_CUTOFF
    min_completed_round: int = 4
    fallback: str = DISPLAY_FALLBACK


# -- Validation --------------------------------------------------------------


def validate_config(config: LeagueConfig) -> None:
    if config.gold_cutoff <= 0:
        raise LeagueConfigError(f"standings.gold_cutoff must be > 0, got {config.gold_cutoff}")
    if config.silver_cutoff <= config.gold_cutoff:
        raise LeagueConfigError(
            f"standings.silver_cutoff must be > gold_cutoff ({config.gold_cutoff}), got {config.silver_cutoff}"
        )
    if config.min_completed_round < 0:
        raise LeagueConfigError(f"standings.min_completed_round must be >= 0, got {config.min_completed_round}")


# -- Parsing -----------------------------------------------------------------


def _typed_field[T](raw: dict[str, Any], field: str, expected: type[T], default: T, context: str) -> T:
    value = raw.get(field, default)
    if not isinstance(value, expected) or (isinstance(value, bool) and expected is not bool):
        raise LeagueConfigError(f"{context}.{field}: expected {expected.__name__}, got {value!r}")
    return value


def parse_config(raw: dict[str, Any]) -> LeagueConfig:
    standings = raw.get("standings", {})
    display = raw.get("display", {})
    config = LeagueConfig(
        gold_cutoff=_typed_field(standings, "gold_cutoff", int, GOLD_CUTOFF, "standings"),
        silver_cutoff=_typed_field(standings, "silver_cutoff", int, SILVER_CUTOFF, "standings"),
        min_completed_round=_typed_field(standings, "min_completed_round", int, 4, "standings"),
        fallback=_typed_field(display, "fallback", str, DISPLAY_FALLBACK, "display"),
    )
    validate_config(config)
    return config


# -- TOML loading ------------------------------------------------------------


def load_config(config_dir: Path) -> LeagueConfig:
    toml_path = config_dir / _CONFIG_FILENAME
    if not toml_path.exists():
        return LeagueConfig()

    with toml_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise LeagueConfigError(f"{_CONFIG_FILENAME}: {e}") from e

    return parse_config(data)
