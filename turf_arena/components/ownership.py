from dataclasses import dataclass

from .player import Player


@dataclass(frozen=True)
class Ownership:
    """Marks a tile as belonging to a player (occupation markers, home tiles)."""

    owner: Player
