"""Rendering descriptor produced by every tile."""

from dataclasses import dataclass
from typing import Optional

from turf_arena.types import RenderKind


@dataclass(frozen=True)
class Rendering:
    """Tagged value handed to the display layer.

    Attributes:
        kind: ``COLOR`` or ``IMAGE``.
        value: Color string when ``kind`` is ``COLOR``.
        asset_key: Asset identifier when ``kind`` is ``IMAGE``.
    """

    kind: RenderKind
    value: Optional[str] = None
    asset_key: Optional[str] = None

    @classmethod
    def color(cls, value: str) -> "Rendering":
        return cls(kind=RenderKind.COLOR, value=value)

    @classmethod
    def image(cls, asset_key: str) -> "Rendering":
        return cls(kind=RenderKind.IMAGE, asset_key=asset_key)
