"""Tile representation, domino set generation and shuffling."""

from __future__ import annotations

from collections.abc import MutableSequence
from dataclasses import dataclass
from functools import lru_cache
from typing import TypeVar

import numpy as np

MAX_PIP = 6

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class Tile:
    """A domino tile with two pip values, each 0-6.

    The physical piece is an unordered pair; the stored order is the
    tile's orientation, which only matters once it lies on the chain.
    Equality is orientation-sensitive, use ``canonical()`` to compare
    physical pieces.

    Attributes:
        a: The first (left-facing) pip value.
        b: The second (right-facing) pip value.

    Raises:
        ValueError: If either value is outside [0, 6].
    """

    a: int
    b: int

    def __post_init__(self) -> None:
        if not (0 <= self.a <= MAX_PIP and 0 <= self.b <= MAX_PIP):
            raise ValueError(f"Invalid tile: ({self.a}, {self.b})")

    def is_double(self) -> bool:
        """Return True if the tile is a double (both ends equal)."""
        return self.a == self.b

    def values(self) -> tuple[int, int]:
        """Return the two pip values in orientation order."""
        return (self.a, self.b)

    def contains_value(self, v: int | None) -> bool:
        """Return True if either end of the tile shows ``v``."""
        return self.a == v or self.b == v

    def flipped(self) -> Tile:
        """Return the same piece with its pips swapped."""
        return Tile(self.b, self.a)

    def canonical(self) -> Tile:
        """Return the orientation with the lower pip first."""
        return self if self.a <= self.b else self.flipped()

    def pip_count(self) -> int:
        """Return the total pip count (sum of both ends)."""
        return self.a + self.b

    def __str__(self) -> str:
        return f"[{self.a}|{self.b}]"

    def __repr__(self) -> str:
        return f"Tile({self.a}, {self.b})"


def tiles_in_order() -> list[Tile]:
    """Return the 28 double-six tiles in generation order.

    Tiles are produced as ``(i, j)`` for ``i`` in 0..6 and ``j`` in i..6,
    so every piece appears once in canonical orientation.
    """
    return [Tile(a, b) for a in range(MAX_PIP + 1) for b in range(a, MAX_PIP + 1)]


def generate_full_set() -> frozenset[Tile]:
    """Generate the complete double-six domino set (28 tiles).

    Returns:
        A frozenset containing all 28 tiles where ``0 <= a <= b <= 6``.
    """
    return frozenset(tiles_in_order())


@lru_cache(maxsize=7)
def suits(value: int) -> frozenset[Tile]:
    """Return all tiles in the full set that contain the given pip value.

    A "suit" is the set of all tiles bearing a particular value. Each suit
    contains exactly 7 tiles in a double-six set.

    Args:
        value: The pip value to filter on (0-6).

    Returns:
        A frozenset of canonical tiles containing ``value``.

    Raises:
        ValueError: If ``value`` is not in the range [0, 6].
    """
    if not (0 <= value <= MAX_PIP):
        raise ValueError(f"Invalid suit value: {value}. Must be 0-6.")
    return frozenset(tile for tile in generate_full_set() if tile.contains_value(value))


def fisher_yates_shuffle(items: MutableSequence[T], rng: np.random.Generator) -> None:
    """Shuffle ``items`` in place with the Fisher-Yates algorithm.

    For each index ``i`` from the last down to 1, swap with a uniformly
    chosen index in ``[0, i]``.

    Args:
        items: The sequence to permute.
        rng: Random source; each swap target comes from ``rng.integers``.
    """
    for i in range(len(items) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        items[i], items[j] = items[j], items[i]


def shuffled_set(rng: np.random.Generator) -> list[Tile]:
    """Return a freshly shuffled double-six set."""
    tiles = tiles_in_order()
    fisher_yates_shuffle(tiles, rng)
    return tiles
