"""Paint an arena's rendering descriptors onto a PIL image.

Color descriptors become solid cells. Image descriptors are resolved through
an optional ``image_lookup`` callback (asset loading is left to the caller);
without one, or when the lookup returns None, the cell gets a placeholder
fill.
"""

from typing import Callable, Dict, Optional, Tuple

from PIL import Image

from turf_arena.arena import Arena
from turf_arena.components import Rendering
from turf_arena.types import RenderKind
from turf_arena.utils.color import to_rgb

DEFAULT_CELL_SIZE = 32
PLACEHOLDER_COLOR = (255, 0, 255, 255)
GRID_COLOR = (128, 128, 128, 255)

ImageLookupFn = Callable[[str, int], Optional[Image.Image]]


def _fill(rendering: Rendering) -> Tuple[int, int, int, int]:
    if rendering.kind is RenderKind.COLOR and rendering.value is not None:
        r, g, b = to_rgb(rendering.value)
        return r, g, b, 255
    return PLACEHOLDER_COLOR


def render_arena(
    arena: Arena,
    cell_size: int = DEFAULT_CELL_SIZE,
    preview: bool = False,
    image_lookup: Optional[ImageLookupFn] = None,
    cache: Optional[Dict[Tuple[str, int], Optional[Image.Image]]] = None,
) -> Image.Image:
    """Render every tile of ``arena`` as a ``cell_size`` square.

    Args:
        arena (Arena): Arena to draw.
        cell_size (int): Edge length of a cell in pixels.
        preview (bool): Use planning-mode descriptors (hides ownership).
        image_lookup (ImageLookupFn | None): Resolves image asset keys.
        cache (dict | None): Memo of looked-up images keyed by (asset, size).

    Returns:
        Image.Image: RGBA image of ``width * cell_size`` by ``height * cell_size``.
    """
    if cache is None:
        cache = {}
    img = Image.new(
        "RGBA", (arena.width * cell_size, arena.height * cell_size), GRID_COLOR
    )
    for tile in arena:
        rendering = tile.preview_render(arena) if preview else tile.render(arena)
        x0, y0 = tile.position.x * cell_size, tile.position.y * cell_size

        texture: Optional[Image.Image] = None
        if rendering.kind is RenderKind.IMAGE and rendering.asset_key is not None:
            key = (rendering.asset_key, cell_size)
            if key not in cache:
                cache[key] = (
                    image_lookup(rendering.asset_key, cell_size)
                    if image_lookup is not None
                    else None
                )
            texture = cache[key]

        if texture is not None:
            texture = texture.convert("RGBA").resize((cell_size, cell_size))
            img.alpha_composite(texture, (x0, y0))
        else:
            img.paste(_fill(rendering), (x0, y0, x0 + cell_size, y0 + cell_size))
    return img


class SwatchRenderer:
    """Reusable arena painter that keeps its image lookups cached."""

    cell_size: int
    image_lookup: Optional[ImageLookupFn]

    def __init__(
        self,
        cell_size: int = DEFAULT_CELL_SIZE,
        image_lookup: Optional[ImageLookupFn] = None,
    ):
        self.cell_size = cell_size
        self.image_lookup = image_lookup
        self._cache: Dict[Tuple[str, int], Optional[Image.Image]] = {}

    def render(self, arena: Arena, preview: bool = False) -> Image.Image:
        return render_arena(
            arena,
            cell_size=self.cell_size,
            preview=preview,
            image_lookup=self.image_lookup,
            cache=self._cache,
        )
