"""The board: a line of placed tiles with two open ends."""

from __future__ import annotations

from enum import Enum

from domino_duel.core.errors import InvalidPlacementError, MissingArgumentError
from domino_duel.core.tiles import Tile


class ChainEnd(Enum):
    """The two extremities of the chain."""

    LEFT = "left"
    RIGHT = "right"


class Chain:
    """An ordered line of tiles where neighbouring pips touch.

    The open ends are updated in lockstep with the tile list. For a
    non-empty chain ``left_end == tiles[0].a`` and
    ``right_end == tiles[-1].b``; for an empty chain both are ``None``.
    """

    def __init__(self) -> None:
        self._tiles: list[Tile] = []
        self._left_end: int | None = None
        self._right_end: int | None = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def tiles(self) -> tuple[Tile, ...]:
        """Read-only view of the placed tiles, left to right."""
        return tuple(self._tiles)

    @property
    def left_end(self) -> int | None:
        return self._left_end

    @property
    def right_end(self) -> int | None:
        return self._right_end

    @property
    def open_ends(self) -> tuple[int, int] | None:
        """Return ``(left_end, right_end)``, or None before the first play."""
        if self._left_end is None or self._right_end is None:
            return None
        return (self._left_end, self._right_end)

    def is_empty(self) -> bool:
        return not self._tiles

    def __len__(self) -> int:
        return len(self._tiles)

    def can_place(self, tile: Tile | None) -> bool:
        """Return True if ``tile`` could legally be placed.

        Any tile may open an empty chain. Otherwise one of the tile's pips
        must equal an open end. ``None`` is never placeable.
        """
        if tile is None:
            return False
        if self.is_empty():
            return True
        return tile.contains_value(self._left_end) or tile.contains_value(
            self._right_end
        )

    def is_connected(self) -> bool:
        """Check the junction invariant across the whole chain."""
        if self.is_empty():
            return self._left_end is None and self._right_end is None
        if self._left_end != self._tiles[0].a or self._right_end != self._tiles[-1].b:
            return False
        return all(
            left.b == right.a for left, right in zip(self._tiles, self._tiles[1:])
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def place(self, tile: Tile | None) -> ChainEnd:
        """Place ``tile`` at the first matching end.

        The opening tile keeps its orientation. After that the ends are
        tried in a fixed order: the left end first (tile as-is, then
        flipped), then the right end (as-is, then flipped). A double that
        fits both ends therefore always goes on the left.

        Args:
            tile: The tile to place.

        Returns:
            The end the tile was attached to (LEFT for the opening tile).

        Raises:
            MissingArgumentError: If ``tile`` is None.
            InvalidPlacementError: If neither pip matches an open end.
        """
        if tile is None:
            raise MissingArgumentError("A tile is required to place a piece.")

        if self.is_empty():
            self._tiles.append(tile)
            self._left_end, self._right_end = tile.values()
            return ChainEnd.LEFT

        if tile.b == self._left_end:
            self._tiles.insert(0, tile)
            self._left_end = tile.a
            return ChainEnd.LEFT
        if tile.a == self._left_end:
            flipped = tile.flipped()
            self._tiles.insert(0, flipped)
            self._left_end = flipped.a
            return ChainEnd.LEFT

        if tile.a == self._right_end:
            self._tiles.append(tile)
            self._right_end = tile.b
            return ChainEnd.RIGHT
        if tile.b == self._right_end:
            flipped = tile.flipped()
            self._tiles.append(flipped)
            self._right_end = flipped.b
            return ChainEnd.RIGHT

        raise InvalidPlacementError(tile, self._left_end, self._right_end)

    def clear(self) -> None:
        self._tiles.clear()
        self._left_end = None
        self._right_end = None

    def __str__(self) -> str:
        return " ".join(str(t) for t in self._tiles)
