"""Exceptions raised by the domino engine and game session."""

from __future__ import annotations

from domino_duel.core.tiles import Tile


class DominoError(Exception):
    """Base class for all domino game errors."""


class InvalidPlacementError(DominoError, ValueError):
    """A tile matches neither open end of the chain.

    Recoverable: the caller may offer a different tile or draw.

    Attributes:
        tile: The rejected tile.
        left_end: The chain's left open end at the time of the attempt.
        right_end: The chain's right open end at the time of the attempt.
    """

    def __init__(self, tile: Tile, left_end: int | None, right_end: int | None) -> None:
        self.tile = tile
        self.left_end = left_end
        self.right_end = right_end
        super().__init__(
            f"Tile {tile} cannot be placed on the board "
            f"(open ends {left_end}|{right_end})."
        )


class MissingArgumentError(DominoError, ValueError):
    """A required argument was absent, or the board is not initialized."""


class NotYourTurnError(DominoError):
    """A player tried to move out of turn."""


class GameOverError(DominoError):
    """A move was attempted after the game ended."""
