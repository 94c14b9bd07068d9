"""Recompute-only-when-inputs-change memoization.

Season data arrives as freshly built lists; callers ask for the same derived
standings many times per refresh. ``memoize_by_identity`` caches results keyed
on the identity of each argument, so a new list always triggers a recompute and
the same list never does.

Usage:
    @memoize_by_identity(maxsize=4)
    def standings_for(cards: list[TourCard], earned: dict[str, float]) -> list[RankedTourCard]:
        ...
"""

from __future__ import annotations

import functools
import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheInfo:
    hits: int
    misses: int
    currsize: int
    maxsize: int


def memoize_by_identity[R](maxsize: int = 8) -> Callable[[Callable[..., R]], Callable[..., R]]:
    if maxsize < 1:
        raise ValueError(f"maxsize must be >= 1, got {maxsize}")

    def decorator(fn: Callable[..., R]) -> Callable[..., R]:
        # Entries keep the arguments alive so their ids cannot be reused.
        entries: OrderedDict[tuple[Any, ...], tuple[tuple[Any, ...], R]] = OrderedDict()
        stats = {"hits": 0, "misses": 0}

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> R:
            items = tuple(sorted(kwargs.items()))
            key = (tuple(id(a) for a in args), tuple((k, id(v)) for k, v in items))
            entry = entries.get(key)
            if entry is not None:
                stats["hits"] += 1
                entries.move_to_end(key)
                logger.debug("Memo hit for %s", fn.__qualname__)
                return entry[1]

            stats["misses"] += 1
            result = fn(*args, **kwargs)
            entries[key] = ((args, items), result)
            if len(entries) > maxsize:
                entries.popitem(last=False)
            return result

        def cache_info() -> CacheInfo:
            return CacheInfo(hits=stats["hits"], misses=stats["misses"], currsize=len(entries), maxsize=maxsize)

        def cache_clear() -> None:
            entries.clear()
            stats["hits"] = stats["misses"] = 0

        wrapper.cache_info = cache_info  # type: ignore[attr-defined]
        wrapper.cache_clear = cache_clear  # type: ignore[attr-defined]
        return wrapper

    return decorator
