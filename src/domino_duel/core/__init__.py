"""Core domain types for Domino Duel."""

from domino_duel.core.chain import Chain, ChainEnd
from domino_duel.core.engine import GameEngine
from domino_duel.core.errors import (
    DominoError,
    GameOverError,
    InvalidPlacementError,
    MissingArgumentError,
    NotYourTurnError,
)
from domino_duel.core.players import Player, PlayerKind
from domino_duel.core.session import GameSession, GameStatus, TurnAction, TurnResult
from domino_duel.core.tiles import (
    Tile,
    fisher_yates_shuffle,
    generate_full_set,
    shuffled_set,
    suits,
    tiles_in_order,
)

__all__ = [
    "Chain",
    "ChainEnd",
    "DominoError",
    "GameEngine",
    "GameOverError",
    "GameSession",
    "GameStatus",
    "InvalidPlacementError",
    "MissingArgumentError",
    "NotYourTurnError",
    "Player",
    "PlayerKind",
    "Tile",
    "TurnAction",
    "TurnResult",
    "fisher_yates_shuffle",
    "generate_full_set",
    "shuffled_set",
    "suits",
    "tiles_in_order",
]
