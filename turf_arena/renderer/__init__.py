from .swatch import SwatchRenderer, render_arena

__all__ = ["SwatchRenderer", "render_arena"]
