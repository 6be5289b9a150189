"""Palette and default parameters for tile construction and rendering.

``DEFAULT_CONFIG`` is what the factories and render system use unless a
caller passes its own :class:`TileConfig`.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TileConfig:
    """Engine-wide tile defaults.

    Attributes:
        space_color: Base color of plain tiles.
        wall_color: Color of solid walls.
        power_source_color: Fill of power sources.
        teleporter_color: Fill of teleporters.
        locked_wall_color: Fill of locked walls.
        directional_wall_color: Fill of one-way gates.
        toggleable_wall_color: Fill of toggleable walls.
        item_box_color: Fill of item boxes.
        turf_color: Fill of an uncaptured turf.
        power_tint: Color power turfs are mixed toward.
        power_tint_amount: Mix ratio toward ``power_tint``.
        indicator_off_color: Fill of an unlit indicator.
        indicator_on_asset: Asset key of a lit indicator.
        blocked_preview_color: Uniform preview color of tiles hiding ownership.
        flash_period_ms: Default blink phase of flashing indicators.
        default_direction: Entry direction assumed when a collision check has none.
    """

    space_color: str = "white"
    wall_color: str = "black"
    power_source_color: str = "red"
    teleporter_color: str = "purple"
    locked_wall_color: str = "slategray"
    directional_wall_color: str = "#ffee00"
    toggleable_wall_color: str = "pink"
    item_box_color: str = "#dd66ff"
    turf_color: str = "#ffffff"
    power_tint: str = "yellow"
    power_tint_amount: float = 0.25
    indicator_off_color: str = "#4b3621"
    indicator_on_asset: str = "indicator_on"
    blocked_preview_color: str = "red"
    flash_period_ms: int = 1000
    default_direction: int = 2


DEFAULT_CONFIG = TileConfig()
