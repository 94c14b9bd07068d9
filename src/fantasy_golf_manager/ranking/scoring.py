"""Score normalization for leaderboard ordering.

Competitors who are out of the event (cut, withdrawn, disqualified) carry a
status token in their ``position`` field. Their raw score is offset by a large
penalty so any sort on the normalized value places them below every active
competitor, ordered CUT < WD < DQ.
"""

from enum import StrEnum


class Status(StrEnum):
    CUT = "CUT"
    WITHDRAWN = "WD"
    DISQUALIFIED = "DQ"


SCORE_PENALTIES: dict[Status, int] = {
    Status.DISQUALIFIED: 999,
    Status.WITHDRAWN: 888,
    Status.CUT: 444,
}

MISSING_SCORE = 999


def status_of(position: str | int | float | None) -> Status | None:
    """Return the terminal status encoded in a position value, if any."""
    if not isinstance(position, str):
        return None
    try:
        return Status(position.strip().upper())
    except ValueError:
        return None


def is_player_cut(position: str | int | float | None) -> bool:
    return status_of(position) is not None


def calculate_score_for_sorting(position: str | int | float | None, score: float | None) -> float:
    """Map a status token and raw score onto one comparable number."""
    raw = MISSING_SCORE if score is None else score
    status = status_of(position)
    if status is None:
        return raw
    return SCORE_PENALTIES[status] + raw
