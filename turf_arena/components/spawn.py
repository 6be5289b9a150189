from dataclasses import dataclass
from typing import Optional

from turf_arena.types import PlayerID


@dataclass(frozen=True)
class Spawn:
    """Spawn marker, optionally reserved for a single player."""

    restricted_to: Optional[PlayerID] = None

    def allows(self, player_id: Optional[PlayerID]) -> bool:
        return (
            self.restricted_to is None
            or player_id is None
            or self.restricted_to == player_id
        )
