import math
import re
from bisect import bisect_left, bisect_right
from collections import Counter
from collections.abc import Sequence
from dataclasses import replace

from fantasy_golf_manager.domain.season import Team
from fantasy_golf_manager.ranking.scoring import MISSING_SCORE, Status, status_of

TIE_MARKER = "T"
UNPLACED = math.inf

_DIGITS = re.compile(r"\d+")


def parse_position(position: str | int | float | None) -> int | float:
    """Parse a displayed position ("T5", 12, "CUT") into a comparable number.

    Numbers pass through. Strings yield their first run of digits. Anything
    without digits, including ``None``, is ``UNPLACED`` so it sorts after
    every real position.
    """
    if isinstance(position, bool):
        return UNPLACED
    if isinstance(position, (int, float)):
        return position
    if isinstance(position, str):
        match = _DIGITS.search(position)
        if match:
            return int(match.group())
    return UNPLACED


def format_position(rank: int, tie_count: int = 1) -> str:
    return f"{TIE_MARKER}{rank}" if tie_count > 1 else str(rank)


def competition_ranks(values: Sequence[float], *, higher_is_better: bool) -> list[tuple[int, int]]:
    """Return ``(rank, tie_count)`` for each value, in input order.

    Equal values share a rank; the next distinct value is ranked one past the
    number of strictly better values.
    """
    ordered = sorted(values)
    counts = Counter(values)
    ranks: list[tuple[int, int]] = []
    for value in values:
        if higher_is_better:
            better = len(ordered) - bisect_right(ordered, value)
        else:
            better = bisect_left(ordered, value)
        ranks.append((better + 1, counts[value]))
    return ranks


def count_greater(ordered: Sequence[float], value: float) -> int:
    """Number of entries in the ascending sequence strictly greater than ``value``."""
    return len(ordered) - bisect_right(ordered, value)


def assign_tournament_positions(teams: Sequence[Team]) -> list[Team]:
    """Recompute ``position`` and ``past_position`` for a tournament's teams.

    Teams that were not cut and have a score are ranked (lower score is
    better). The past position ranks the score before today's round. Other
    teams are returned unchanged.
    """
    active = [i for i, t in enumerate(teams) if status_of(t.position) is not Status.CUT and t.score is not None]
    current = competition_ranks([_score(teams[i]) for i in active], higher_is_better=False)
    past = competition_ranks([_score(teams[i]) - (teams[i].today or 0) for i in active], higher_is_better=False)

    result = list(teams)
    for idx, (rank, ties), (past_rank, past_ties) in zip(active, current, past, strict=True):
        result[idx] = replace(
            teams[idx],
            position=format_position(rank, ties),
            past_position=format_position(past_rank, past_ties),
        )
    return result


def _score(team: Team) -> float:
    return MISSING_SCORE if team.score is None else team.score
