"""End-to-end tests: full games through the engine and the session."""

from __future__ import annotations

from collections import Counter

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from domino_duel.core.engine import GameEngine
from domino_duel.core.errors import InvalidPlacementError
from domino_duel.core.session import GameSession, GameStatus, TurnAction
from domino_duel.core.tiles import Tile, tiles_in_order

# ---------------------------------------------------------------------------
# The worked example
# ---------------------------------------------------------------------------


class TestWorkedExample:
    """Alice against the computer with seven tiles each."""

    def test_deal(self) -> None:
        engine = GameEngine(rng_seed=2026)
        engine.start_new_game("Alice", 7)
        assert len(engine.hand(engine.human)) == 7
        assert len(engine.hand(engine.opponent)) == 7
        assert engine.draw_pile_size == 14

    def test_placements(self) -> None:
        engine = GameEngine(rng_seed=2026)
        engine.start_new_game("Alice", 7)

        engine.place_piece(Tile(3, 5))
        assert (engine.left_end, engine.right_end) == (3, 5)

        engine.place_piece(Tile(5, 2))
        assert engine.right_end == 2
        assert engine.chain == (Tile(3, 5), Tile(5, 2))

        engine.place_piece(Tile(3, 0))
        assert engine.left_end == 0
        assert engine.chain == (Tile(0, 3), Tile(3, 5), Tile(5, 2))

        with pytest.raises(InvalidPlacementError):
            engine.place_piece(Tile(1, 4))
        assert engine.chain == (Tile(0, 3), Tile(3, 5), Tile(5, 2))


# ---------------------------------------------------------------------------
# Simulated games
# ---------------------------------------------------------------------------


def _play_out(session: GameSession, max_turns: int = 500) -> None:
    """Play a game where the human uses the same policy as the opponent."""
    engine = session.engine
    for _ in range(max_turns):
        if session.is_over:
            return
        if engine.current_player == session.human:
            playable = engine.playable_tiles(session.human)
            if playable:
                session.play_human(playable[0][0])
            else:
                session.draw_human()
        else:
            session.play_opponent()
    raise AssertionError("Game did not finish")


class TestSimulatedGames:
    """Whole games played to the end."""

    @given(seed=st.integers(0, 10_000), hand_size=st.sampled_from([5, 6, 7]))
    @settings(max_examples=40, deadline=None)
    def test_game_terminates_and_conserves_tiles(self, seed: int, hand_size: int) -> None:
        session = GameSession(GameEngine(rng_seed=seed))
        session.start("Alice", hand_size)
        _play_out(session)
        engine = session.engine

        assert session.status in (GameStatus.WON, GameStatus.BLOCKED)
        if session.status is GameStatus.WON:
            assert session.winner is not None
            assert not engine.has_pieces(session.winner)
        else:
            assert engine.draw_pile_size == 0
            assert not engine.can_any_player_place()

        tiles = list(engine.draw_pile) + list(engine.chain)
        for player in engine.players:
            tiles.extend(engine.hand(player))
        assert Counter(t.canonical() for t in tiles) == Counter(tiles_in_order())

        chain = engine.chain
        assert all(x.b == y.a for x, y in zip(chain, chain[1:]))
        assert engine.left_end == chain[0].a
        assert engine.right_end == chain[-1].b

    def test_plays_and_draws_alternate_players(self) -> None:
        session = GameSession(GameEngine(rng_seed=17))
        session.start("Alice")
        _play_out(session)
        players = [r.player for r in session.history]
        assert players[0] == session.human
        assert all(a != b for a, b in zip(players, players[1:]))
        plays = [r for r in session.history if r.action is TurnAction.PLAY]
        assert len(plays) == len(session.engine.chain)
