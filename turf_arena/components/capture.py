from dataclasses import dataclass
from typing import Optional

from .player import Player


@dataclass(frozen=True)
class Capture:
    """Ownership state of a turf tile.

    Attributes:
        recaptures:
            Number of captures after which an owned turf freezes. A capture is
            accepted while the turf is unowned or ``count <= recaptures``.
        owner:
            Player that last captured the tile, taken from the authoritative
            players mapping at capture time.
        count:
            Accepted captures so far.
    """

    recaptures: int
    owner: Optional[Player] = None
    count: int = 0

    @property
    def can_capture(self) -> bool:
        return self.owner is None or self.count <= self.recaptures
