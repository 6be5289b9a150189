"""Color shading helpers used by turf rendering.

Colors are accepted in any form ``PIL.ImageColor`` understands (CSS names,
``#rgb``, ``#rrggbb``) and returned as lowercase ``#rrggbb`` strings.
"""

import colorsys
from functools import lru_cache
from typing import Tuple

from PIL import ImageColor

RGB = Tuple[int, int, int]

BRIGHTEN_STEP = 0.18


@lru_cache(maxsize=512)
def to_rgb(color: str) -> RGB:
    """Parse ``color`` into an (r, g, b) tuple of 0-255 ints."""
    r, g, b = ImageColor.getrgb(color)[:3]
    return r, g, b


def to_hex(rgb: RGB) -> str:
    r, g, b = (max(0, min(255, int(round(c)))) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def brighten(color: str, amount: float = 1.0) -> str:
    """Raise HLS lightness by ``BRIGHTEN_STEP * amount`` (clamped to white)."""
    r, g, b = to_rgb(color)
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    l = min(1.0, l + BRIGHTEN_STEP * amount)
    r2, g2, b2 = colorsys.hls_to_rgb(h, l, s)
    return to_hex((r2 * 255, g2 * 255, b2 * 255))


def mix(color: str, other: str, ratio: float = 0.25) -> str:
    """Blend ``color`` toward ``other`` by ``ratio`` in linear RGB.

    ``ratio=0`` returns ``color`` and ``ratio=1`` returns ``other``.
    """
    a = to_rgb(color)
    b = to_rgb(other)
    mixed = tuple(
        ((1 - ratio) * ca**2 + ratio * cb**2) ** 0.5 for ca, cb in zip(a, b)
    )
    return to_hex((mixed[0], mixed[1], mixed[2]))
