"""Tile behavior systems.

Each module owns one protocol and a dispatch table keyed by
:class:`turf_arena.types.TileKind`. Kinds absent from a table fall back to the
module's default rule, so new variants only register where they differ:

* :mod:`.collision` - ``collides`` (movement blocking plus side effects)
* :mod:`.power` - ``is_energized`` / ``neighbor_energized``
* :mod:`.render` - ``render`` / ``preview_render``
* :mod:`.reaction` - ``after_turn``
* :mod:`.transform` - ``change_to`` / ``change_back``
* :mod:`.action` - ``do_facing_action``
* :mod:`.describe` - human readable labels
"""
