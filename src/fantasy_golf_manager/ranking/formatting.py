from collections.abc import Sequence

from fantasy_golf_manager.ranking.payouts import DISPLAY_FALLBACK


def ordinal(rank: int) -> str:
    """1 -> '1st', 12 -> '12th', 23 -> '23rd'."""
    if 10 <= rank % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(rank % 10, "th")
    return f"{rank}{suffix}"


def format_money(amount: float | None) -> str:
    if amount is None:
        return DISPLAY_FALLBACK
    sign = "-" if amount < 0 else ""
    value = abs(amount)
    if value == int(value):
        return f"{sign}${int(value):,}"
    return f"{sign}${value:,.2f}"


def format_percentage(value: float | None) -> str:
    if not value:
        return DISPLAY_FALLBACK
    return f"{round(value * 1000) / 10}%"


def format_score(score: float | None, par: int | None = None) -> str:
    """Raw score relative to par; a missing score shows as even."""
    if score is None:
        return "E"
    to_par = score - par if par else score
    if to_par == 0:
        return "E"
    text = f"{to_par:g}"
    return f"+{text}" if to_par > 0 else text


def format_rounds(rounds: Sequence[int | None]) -> str:
    return " / ".join(str(r) for r in rounds if r)
