from dataclasses import dataclass


@dataclass(frozen=True)
class Supply:
    """Item box state; an active box hands out one key and goes inert."""

    active: bool = True
