"""Replacement of values by their ranks."""

from __future__ import annotations

from collections.abc import Iterable


def normalize(values: Iterable[int]) -> list[int]:
    """Return each value's position in the ascending order of all values.

    Equal values share the lowest position they occupy.
    """
    items = list(values)
    ranks: dict[int, int] = {}
    for position, value in enumerate(sorted(items)):
        ranks.setdefault(value, position)
    return [ranks[value] for value in items]