"""Shared fixtures for Planet Rush tests."""

import pytest

from planet_rush.config import get_profile
from planet_rush.models import Faction, GameState, Planet
from planet_rush.utils import GameRNG


class FakeClock:
    """Manually advanced wall clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_planet(x, y, owner, units, radius=20.0, production_rate=0.0):
    """Planet with production disabled unless a rate is given."""
    return Planet(
        x=x, y=y, radius=radius, owner=owner, units=units, production_rate=production_rate
    )


def make_state(planets, profile="extended", seed=42, **overrides):
    """GameState over hand-placed planets with a passive opponent by default."""
    overrides.setdefault("opponent_action_chance", 0.0)
    config = get_profile(profile).model_copy(update=overrides)
    return GameState(config=config, rng=GameRNG(seed), planets=planets)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def duel_state():
    """Player planet A (100 units) and enemy planet B (30 units), 300 apart."""
    return make_state(
        [
            make_planet(100, 100, Faction.PLAYER, 100),
            make_planet(400, 100, Faction.ENEMY, 30),
        ]
    )
