"""Turn resolution for a human against the automated opponent.

``GameSession`` drives a ``GameEngine`` one move at a time: it enforces
whose turn it is, moves tiles between hands and the board, and decides
when the game is over. The engine itself only knows the rules of a
single placement.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from domino_duel.config import GameConfig
from domino_duel.core.chain import ChainEnd
from domino_duel.core.engine import HUMAN_ID, OPPONENT_ID, GameEngine
from domino_duel.core.errors import (
    GameOverError,
    InvalidPlacementError,
    NotYourTurnError,
)
from domino_duel.core.players import Player
from domino_duel.core.tiles import Tile
from domino_duel.logging_config import get_logger

logger = get_logger(__name__)


class GameStatus(Enum):
    """Where a session stands."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WON = "won"  # a player emptied their hand
    BLOCKED = "blocked"  # pile empty, nobody can play


class TurnAction(Enum):
    PLAY = "play"
    DRAW = "draw"


@dataclass(frozen=True)
class TurnResult:
    """What happened on one turn.

    Attributes:
        player: Who moved.
        action: PLAY or DRAW.
        tile: The tile played or drawn; None for a draw from an empty pile.
        end: The chain end a played tile went to; None for draws.
    """

    player: Player
    action: TurnAction
    tile: Tile | None
    end: ChainEnd | None = None


class GameSession:
    """One human against the automated opponent, turn by turn.

    Args:
        engine: The engine to drive; a new one is built from ``config``
            when omitted.
        config: Settings used when building the engine.
    """

    def __init__(
        self,
        engine: GameEngine | None = None,
        config: GameConfig | None = None,
    ) -> None:
        self.engine = engine or GameEngine(config)
        self.status = GameStatus.NOT_STARTED
        self.winner: Player | None = None
        self.history: list[TurnResult] = []

    def start(self, human_name: str, hand_size: int | None = None) -> None:
        self.engine.start_new_game(human_name, hand_size)
        self.status = GameStatus.IN_PROGRESS
        self.winner = None
        self.history = []

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def human(self) -> Player:
        player = self.engine.human
        assert player is not None, "Session has not been started"
        return player

    @property
    def opponent(self) -> Player:
        player = self.engine.opponent
        assert player is not None, "Session has not been started"
        return player

    @property
    def is_over(self) -> bool:
        return self.status in (GameStatus.WON, GameStatus.BLOCKED)

    def scores(self) -> dict[int, int]:
        """Current hand score keyed by player id."""
        return {p.player_id: self.engine.get_score(p) for p in self.engine.players}

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def play_human(self, index: int) -> TurnResult:
        """Play the tile at ``index`` in the human's hand.

        A rejected tile leaves the hand and the turn unchanged so the
        player can choose again.

        Raises:
            GameOverError: If the game has ended or not started.
            NotYourTurnError: If it is the opponent's turn.
            IndexError: If ``index`` is outside the hand.
            InvalidPlacementError: If the tile fits neither open end.
        """
        human = self._check_turn(HUMAN_ID)
        hand = self.engine.hand(human)
        if not 0 <= index < len(hand):
            raise IndexError(f"No tile at index {index}; hand holds {len(hand)}.")
        tile = hand[index]
        if not self.engine.can_place(tile):
            raise InvalidPlacementError(tile, self.engine.left_end, self.engine.right_end)
        return self._play(human, index, tile)

    def draw_human(self) -> TurnResult:
        """The human draws one tile, then the turn passes.

        Raises:
            GameOverError: If the game has ended or not started.
            NotYourTurnError: If it is the opponent's turn.
        """
        return self._draw(self._check_turn(HUMAN_ID))

    def play_opponent(self) -> TurnResult:
        """Make the automated opponent's move.

        The opponent plays the first tile in hand order that fits; with
        nothing playable it draws one tile instead.

        Raises:
            GameOverError: If the game has ended or not started.
            NotYourTurnError: If it is the human's turn.
        """
        opponent = self._check_turn(OPPONENT_ID)
        playable = self.engine.playable_tiles(opponent)
        if playable:
            index, tile = playable[0]
            return self._play(opponent, index, tile)
        return self._draw(opponent)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_turn(self, seat: int) -> Player:
        """Return the player in ``seat`` if they may move now."""
        if self.status is not GameStatus.IN_PROGRESS:
            raise GameOverError(f"No game in progress (status: {self.status.value}).")
        player = self.engine.players[seat]
        if self.engine.current_player != player:
            raise NotYourTurnError(f"It is not {player.name}'s turn.")
        return player

    def _play(self, player: Player, index: int, tile: Tile) -> TurnResult:
        end = self.engine.place_piece(tile)
        self.engine.remove_piece_from_player(player, index)
        result = TurnResult(player=player, action=TurnAction.PLAY, tile=tile, end=end)
        self._finish_turn(result)
        return result

    def _draw(self, player: Player) -> TurnResult:
        tile = self.engine.draw()
        if tile is not None:
            self.engine.add_piece_to_player(player, tile)
        logger.debug(
            "%s drew %s", player.name, tile if tile is not None else "nothing"
        )
        result = TurnResult(player=player, action=TurnAction.DRAW, tile=tile)
        self._finish_turn(result)
        return result

    def _finish_turn(self, result: TurnResult) -> None:
        self.history.append(result)
        player = result.player

        if not self.engine.has_pieces(player):
            self.status = GameStatus.WON
            self.winner = player
            logger.info("%s wins by emptying their hand", player.name)
            return

        if self.engine.is_blocked():
            self.status = GameStatus.BLOCKED
            self.winner = self._lowest_score()
            logger.info(
                "Game blocked, scores %s, winner %s",
                ", ".join(
                    f"{p.name}={self.engine.get_score(p)}" for p in self.engine.players
                ),
                self.winner.name if self.winner else "none (tie)",
            )
            return

        self.engine.advance_turn()

    def _lowest_score(self) -> Player | None:
        """Return the player with the fewest pips, or None on a tie."""
        scored = sorted(
            self.engine.players, key=lambda p: self.engine.get_score(p)
        )
        if self.engine.get_score(scored[0]) == self.engine.get_score(scored[1]):
            return None
        return scored[0]
