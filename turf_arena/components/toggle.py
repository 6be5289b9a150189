from dataclasses import dataclass


@dataclass(frozen=True)
class Toggle:
    """Open/closed flag of a toggleable wall. Walls start closed."""

    closed: bool = True
