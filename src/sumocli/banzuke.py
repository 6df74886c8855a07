"""Canonical banzuke ordering."""

from functools import cmp_to_key
from typing import Callable, Iterable, TypeVar

from sumocli.models import BanzukeSlot, NamedRank, NumberedRank

T = TypeVar("T")

DIVISION_ORDER = {
    "Makuuchi": 0,
    "Juryo": 1,
    "Makushita": 2,
    "Sandanme": 3,
    "Jonidan": 4,
    "Jonokuchi": 5,
}
SANYAKU_ORDER = {
    "Yokozuna": 0,
    "Ozeki": 1,
    "Sekiwake": 2,
    "Komusubi": 3,
}
SIDE_ORDER = {"East": 0, "West": 1}


def _rank_order(slot: BanzukeSlot) -> int:
    rank = slot.rank
    if isinstance(rank, NamedRank):
        return SANYAKU_ORDER[rank.name]
    if isinstance(rank, NumberedRank):
        if slot.division == "Makuuchi":
            # Maegashira rank below the four san'yaku titles
            return len(SANYAKU_ORDER) + (rank.number - 1)
        return rank.number - 1
    raise TypeError(f"Unsupported rank type: {type(rank).__name__}")


def banzuke_sort_key(slot: BanzukeSlot) -> tuple[int, int, int]:
    """(division, rank within division, side); lower sorts first."""
    return (DIVISION_ORDER[slot.division], _rank_order(slot), SIDE_ORDER[slot.side])


def compare_banzuke(a: BanzukeSlot, b: BanzukeSlot) -> int:
    """Three-way comparison: -1 if a ranks higher, 1 if lower, 0 if equal."""
    ka = banzuke_sort_key(a)
    kb = banzuke_sort_key(b)
    return (ka > kb) - (ka < kb)


def sort_banzuke(
    items: Iterable[T],
    slot_of: Callable[[T], BanzukeSlot | None] | None = None,
) -> list[T]:
    """Sort items into banzuke order. Items without a slot go last."""
    if slot_of is None:
        return sorted(items, key=cmp_to_key(compare_banzuke))  # type: ignore[arg-type]

    def key(item: T) -> tuple[int, tuple[int, int, int]]:
        slot = slot_of(item)
        if slot is None:
            return (1, (0, 0, 0))
        return (0, banzuke_sort_key(slot))

    return sorted(items, key=key)
