"""Rules engine for a two-player double-six domino game.

``GameEngine`` owns one game's mutable state: the draw pile, both hands,
the chain on the board and the turn pointer. It validates and applies
placements but leaves turn resolution and end-of-game decisions to its
caller (see ``domino_duel.core.session``).
"""

from __future__ import annotations

import numpy as np

from domino_duel.config import HAND_SIZE_CHOICES, GameConfig
from domino_duel.core.chain import Chain, ChainEnd
from domino_duel.core.errors import MissingArgumentError
from domino_duel.core.players import Player, PlayerKind
from domino_duel.core.tiles import Tile, shuffled_set
from domino_duel.logging_config import get_logger

logger = get_logger(__name__)

PlayerRef = Player | int

HUMAN_ID = 0
OPPONENT_ID = 1


class GameEngine:
    """Mutable state and rules for one game at a time.

    Players may be referred to either by their ``Player`` value or by
    their integer id. Every view handed out (chain, pile, hands) is a
    tuple; only the engine mutates the underlying lists.

    Args:
        config: Game settings; defaults to ``GameConfig()``.
        rng_seed: Seed for the shuffle. Overrides ``config.rng_seed``.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        rng_seed: int | None = None,
    ) -> None:
        self.config = config or GameConfig()
        seed = rng_seed if rng_seed is not None else self.config.rng_seed
        self._rng = np.random.default_rng(seed)

        self._draw_pile: list[Tile] = []
        self._chain = Chain()
        self._players: list[Player] = []
        self._hands: dict[int, list[Tile]] = {}
        self._current_player_index = 0
        self._is_first_move = True
        self._started = False

    # ------------------------------------------------------------------
    # Game setup
    # ------------------------------------------------------------------

    def initialize_tile_set(self) -> tuple[Tile, ...]:
        """Build the 28-tile set, shuffle it and make it the draw pile.

        Returns:
            The new draw pile, front first.
        """
        self._draw_pile = shuffled_set(self._rng)
        return tuple(self._draw_pile)

    def start_new_game(self, human_name: str | None, hand_size: int | None = None) -> None:
        """Reset all state and deal a fresh game.

        Registers the human (id 0) and the automated opponent (id 1), in
        that order, then deals ``hand_size`` tiles to each.

        Args:
            human_name: Display name for the human player.
            hand_size: Tiles per hand; defaults to ``config.hand_size``.

        Raises:
            MissingArgumentError: If ``human_name`` is None or blank.
            ValueError: If ``hand_size`` is not one of the allowed choices.
        """
        if human_name is None or not human_name.strip():
            raise MissingArgumentError("A player name is required to start a game.")
        if hand_size is None:
            hand_size = self.config.hand_size
        if hand_size not in HAND_SIZE_CHOICES:
            raise ValueError(
                f"Hand size must be one of {HAND_SIZE_CHOICES}, got {hand_size}."
            )

        self._hands.clear()
        self._players.clear()
        self._chain.clear()
        self._is_first_move = True
        self._current_player_index = 0

        self.initialize_tile_set()
        self._register(Player(HUMAN_ID, human_name.strip(), PlayerKind.HUMAN))
        self._register(
            Player(OPPONENT_ID, self.config.opponent_name, PlayerKind.AUTOMATED)
        )
        self._started = True
        dealt = self.deal_hands(hand_size)
        logger.info(
            "New game: %s vs %s, %d tiles dealt, %d left in pile",
            self._players[0].name,
            self._players[1].name,
            dealt,
            len(self._draw_pile),
        )

    def _register(self, player: Player) -> None:
        self._players.append(player)
        self._hands[player.player_id] = []

    def deal_hands(self, hand_size: int) -> int:
        """Deal ``hand_size`` rounds, one tile per player per round.

        Players receive tiles in registration order. Dealing stops quietly
        when the pile runs out.

        Returns:
            The number of tiles dealt.
        """
        dealt = 0
        for _ in range(hand_size):
            for player in self._players:
                tile = self.draw()
                if tile is None:
                    return dealt
                self._hands[player.player_id].append(tile)
                dealt += 1
        return dealt

    # ------------------------------------------------------------------
    # Draw pile
    # ------------------------------------------------------------------

    def draw(self) -> Tile | None:
        """Remove and return the front tile, or None if the pile is empty."""
        if not self._draw_pile:
            logger.debug("Draw requested from an empty pile")
            return None
        return self._draw_pile.pop(0)

    @property
    def draw_pile(self) -> tuple[Tile, ...]:
        return tuple(self._draw_pile)

    @property
    def draw_pile_size(self) -> int:
        return len(self._draw_pile)

    # ------------------------------------------------------------------
    # Board
    # ------------------------------------------------------------------

    def can_place(self, tile: Tile | None) -> bool:
        """Return True if ``tile`` matches an open end or the board is empty."""
        return self._chain.can_place(tile)

    def place_piece(self, tile: Tile | None) -> ChainEnd:
        """Place ``tile`` on the chain.

        The tile is not taken from any hand; callers remove it separately
        with ``remove_piece_from_player``.

        Returns:
            The end the tile was attached to.

        Raises:
            MissingArgumentError: If ``tile`` is None or no game has been
                started.
            InvalidPlacementError: If the tile matches neither open end.
        """
        if tile is None:
            raise MissingArgumentError("A tile is required to place a piece.")
        if not self._started:
            raise MissingArgumentError("Board not initialized; start a game first.")

        end = self._chain.place(tile)
        self._is_first_move = False
        logger.debug(
            "Placed %s on the %s end, open ends now %s|%s",
            tile,
            end.value,
            self._chain.left_end,
            self._chain.right_end,
        )
        return end

    def is_empty(self) -> bool:
        return self._chain.is_empty()

    @property
    def chain(self) -> tuple[Tile, ...]:
        return self._chain.tiles

    @property
    def left_end(self) -> int | None:
        return self._chain.left_end

    @property
    def right_end(self) -> int | None:
        return self._chain.right_end

    @property
    def open_ends(self) -> tuple[int, int] | None:
        return self._chain.open_ends

    @property
    def is_first_move(self) -> bool:
        return self._is_first_move

    @property
    def is_started(self) -> bool:
        return self._started

    # ------------------------------------------------------------------
    # Players and hands
    # ------------------------------------------------------------------

    @property
    def players(self) -> tuple[Player, ...]:
        return tuple(self._players)

    @property
    def human(self) -> Player | None:
        return self._players[HUMAN_ID] if self._players else None

    @property
    def opponent(self) -> Player | None:
        return self._players[OPPONENT_ID] if len(self._players) > OPPONENT_ID else None

    def _player_id(self, player: PlayerRef | None) -> int | None:
        """Map a player reference to a registered id, or None."""
        if isinstance(player, Player):
            pid = player.player_id
            if pid in self._hands and self._players[pid] == player:
                return pid
            return None
        if (
            isinstance(player, int)
            and not isinstance(player, bool)
            and player in self._hands
        ):
            return player
        return None

    def hand(self, player: PlayerRef) -> tuple[Tile, ...]:
        """Read-only view of a player's hand; empty if unregistered."""
        pid = self._player_id(player)
        if pid is None:
            return ()
        return tuple(self._hands[pid])

    def has_pieces(self, player: PlayerRef) -> bool:
        pid = self._player_id(player)
        return pid is not None and len(self._hands[pid]) > 0

    def get_score(self, player: PlayerRef) -> int:
        """Sum of pips over the player's hand; 0 for an unregistered player."""
        return sum(tile.pip_count() for tile in self.hand(player))

    def add_piece_to_player(self, player: PlayerRef, tile: Tile | None) -> None:
        """Append ``tile`` to the player's hand.

        Unregistered players are ignored.

        Raises:
            MissingArgumentError: If ``tile`` is None.
        """
        if tile is None:
            raise MissingArgumentError("A tile is required to add to a hand.")
        pid = self._player_id(player)
        if pid is None:
            return
        self._hands[pid].append(tile)

    def remove_piece_from_player(self, player: PlayerRef, index: int) -> Tile | None:
        """Remove and return the tile at ``index`` in the player's hand.

        Out-of-range indices (negative ones included) and unregistered
        players leave every hand unchanged and return None.
        """
        pid = self._player_id(player)
        if pid is None:
            return None
        hand = self._hands[pid]
        if 0 <= index < len(hand):
            return hand.pop(index)
        return None

    def playable_tiles(self, player: PlayerRef) -> list[tuple[int, Tile]]:
        """Return ``(index, tile)`` pairs from the hand that can be placed."""
        return [(i, t) for i, t in enumerate(self.hand(player)) if self.can_place(t)]

    def can_any_player_place(self) -> bool:
        return any(self.playable_tiles(p.player_id) for p in self._players)

    def is_blocked(self) -> bool:
        """True when the pile is empty and no hand holds a placeable tile."""
        return self._started and not self._draw_pile and not self.can_any_player_place()

    # ------------------------------------------------------------------
    # Turn pointer
    # ------------------------------------------------------------------

    @property
    def current_player_index(self) -> int:
        return self._current_player_index

    @property
    def current_player(self) -> Player | None:
        if not self._players:
            return None
        return self._players[self._current_player_index]

    def advance_turn(self) -> Player:
        """Pass the turn to the next registered player and return them.

        Raises:
            MissingArgumentError: If no game has been started.
        """
        if not self._players:
            raise MissingArgumentError("No players registered; start a game first.")
        self._current_player_index = (self._current_player_index + 1) % len(
            self._players
        )
        return self._players[self._current_player_index]
