"""Player identities for a two-seat domino table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PlayerKind(Enum):
    """Who is behind a seat."""

    HUMAN = "human"
    AUTOMATED = "automated"


@dataclass(frozen=True)
class Player:
    """A registered player.

    Hands are keyed by ``player_id``; the name is display-only and two
    players may share one.

    Attributes:
        player_id: Stable seat number, also the registration order.
        name: Display name.
        kind: Human or automated opponent.
    """

    player_id: int
    name: str
    kind: PlayerKind

    def __str__(self) -> str:
        return self.name
