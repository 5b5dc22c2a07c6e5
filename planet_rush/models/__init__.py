"""Data models for Planet Rush."""

from .boost import BoostState, ComboTracker
from .faction import Faction
from .game import GameState
from .planet import Planet
from .ship_group import ShipGroup

__all__ = [
    "BoostState",
    "ComboTracker",
    "Faction",
    "GameState",
    "Planet",
    "ShipGroup",
]
