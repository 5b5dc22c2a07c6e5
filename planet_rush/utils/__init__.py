"""Utility functions and constants for Planet Rush."""

from .constants import (
    ARENA_HEIGHT,
    ARENA_WIDTH,
    ARRIVAL_THRESHOLD,
    DEFAULT_SEND_RATIO,
    MAX_TICK_SECONDS,
    PLANET_COUNT,
    RNG_SEED_DEFAULT,
    SEND_ALL_RATIO,
    SHIP_SPEED,
)
from .distance import euclidean_distance, squared_distance
from .rng import GameRNG

__all__ = [
    "ARENA_HEIGHT",
    "ARENA_WIDTH",
    "ARRIVAL_THRESHOLD",
    "DEFAULT_SEND_RATIO",
    "MAX_TICK_SECONDS",
    "PLANET_COUNT",
    "RNG_SEED_DEFAULT",
    "SEND_ALL_RATIO",
    "SHIP_SPEED",
    "euclidean_distance",
    "squared_distance",
    "GameRNG",
]
