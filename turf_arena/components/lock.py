from dataclasses import dataclass


@dataclass(frozen=True)
class Lock:
    """Key requirement of a locked wall.

    Attributes:
        keys_needed: Minimum keys a player must hold to pass.
        take_away_keys: If True, passing consumes ``keys_needed`` keys.
    """

    keys_needed: int = 1
    take_away_keys: bool = False
