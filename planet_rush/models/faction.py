"""Faction ownership tags."""

from enum import Enum


class Faction(str, Enum):
    """Mutually exclusive ownership tag carried by planets and ship groups."""

    PLAYER = "player"
    ENEMY = "enemy"
    NEUTRAL = "neutral"
