"""Greedy algorithms: activity selection and the fractional knapsack."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


def activity_selection(starts: Sequence[int], ends: Sequence[int]) -> int:
    """Return the largest number of activities that can run one after another.

    An activity may start only strictly after the previous one has finished.
    """
    if len(starts) != len(ends):
        raise ValueError("starts and ends must have the same length")
    count = 0
    finish = -1
    for end, start in sorted(zip(ends, starts)):
        if start > finish:
            finish = end
            count += 1
    return count


@dataclass(frozen=True)
class Item:
    """An item that can be put into the knapsack."""

    index: int
    profit: float
    weight: float


@dataclass(frozen=True)
class Selection:
    """An item together with the fraction of it that was taken."""

    item: Item
    fraction: float

    @property
    def profit(self) -> float:
        return self.item.profit * self.fraction

    @property
    def weight(self) -> float:
        return self.item.weight * self.fraction


def fractional_knapsack(items: Iterable[Item], capacity: float) -> list[Selection]:
    """Fill the knapsack greedily by profit, highest first, splitting the last item.

    Items of equal profit keep their given order. The selections are
    returned ordered by item index.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    items = list(items)
    if any(item.weight < 0 for item in items):
        raise ValueError("item weights must not be negative")

    remaining = capacity
    chosen: list[Selection] = []
    for item in sorted(items, key=lambda it: -it.profit):
        if item.weight <= remaining:
            chosen.append(Selection(item, 1.0))
            remaining -= item.weight
        elif remaining > 0:
            chosen.append(Selection(item, remaining / item.weight))
            remaining = 0
        else:
            break
    return sorted(chosen, key=lambda s: s.item.index)


def total_profit(selections: Iterable[Selection]) -> float:
    """Return the profit of all selections, counting fractions of items."""
    return sum(s.profit for s in selections)