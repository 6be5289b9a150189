"""turf_arena.components
=======================

Aggregate import surface for the value types tiles are built from.

``Position``, ``Player`` and ``Rendering`` are shared across the engine. The
remaining dataclasses are per-variant state slots attached to a
:class:`turf_arena.tile.Tile`; they carry no behavior beyond small helper
properties and are replaced (never mutated) when a tile's state changes.
Behavior lives in :mod:`turf_arena.systems`.
"""

from .capture import Capture
from .flash import Flash, monotonic_ms
from .gate import Gate
from .lock import Lock
from .ownership import Ownership
from .player import Player
from .position import Position
from .rendering import Rendering
from .spawn import Spawn
from .supply import Supply
from .teleport import Teleport
from .toggle import Toggle

__all__ = [
    "Capture",
    "Flash",
    "Gate",
    "Lock",
    "Ownership",
    "Player",
    "Position",
    "Rendering",
    "Spawn",
    "Supply",
    "Teleport",
    "Toggle",
    "monotonic_ms",
]
