from dataclasses import dataclass


@dataclass(frozen=True)
class Teleport:
    """Teleporter group membership.

    Attributes:
        group:
            Teleporters sharing a group are exit candidates for one another.
    """

    group: int
