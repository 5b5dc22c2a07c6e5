"""Tests for arrival resolution: combat and reinforcement."""

import pytest

from conftest import make_planet
from planet_rush.engine.combat import resolve_arrival, resolve_combat
from planet_rush.models import Faction, ShipGroup


def _group_at(planet, owner, units, target=0):
    """Ship group launched from just left of the planet."""
    return ShipGroup.launch(
        group_id="g-000",
        owner=owner,
        units=units,
        source_x=planet.x - 100,
        source_y=planet.y,
        target=target,
        target_planet=planet,
        speed=100.0,
    )


def test_resolve_combat_attacker_wins():
    """Test combat where attacker has more units."""
    result = resolve_combat(Faction.PLAYER, 50, Faction.ENEMY, 30)

    assert result.winner == "attacker"
    assert result.owner == Faction.PLAYER
    assert result.units == 20


def test_resolve_combat_defender_holds():
    """Test combat where defender has more units."""
    result = resolve_combat(Faction.ENEMY, 10, Faction.PLAYER, 25)

    assert result.winner == "defender"
    assert result.owner == Faction.PLAYER
    assert result.units == 15


def test_resolve_combat_tie_goes_to_defender():
    """Test that an exact tie leaves the defender in place with zero units."""
    result = resolve_combat(Faction.PLAYER, 30, Faction.ENEMY, 30)

    assert result.winner == "defender"
    assert result.owner == Faction.ENEMY
    assert result.units == 0


def test_resolve_combat_win_by_one():
    """Test attacker winning by a single unit."""
    result = resolve_combat(Faction.PLAYER, 31, Faction.NEUTRAL, 30)

    assert result.winner == "attacker"
    assert result.owner == Faction.PLAYER
    assert result.units == 1


def test_resolve_combat_keeps_fractional_remainder():
    """Test survivors carry fractional defender units over."""
    result = resolve_combat(Faction.PLAYER, 20, Faction.ENEMY, 12.75)

    assert result.owner == Faction.PLAYER
    assert result.units == pytest.approx(7.25)


def test_resolve_combat_reinforcement():
    """Test same-faction arrival adds units and keeps owner."""
    result = resolve_combat(Faction.ENEMY, 12, Faction.ENEMY, 8.5)

    assert result.winner is None
    assert result.owner == Faction.ENEMY
    assert result.units == pytest.approx(20.5)


@pytest.mark.parametrize(
    "defender_units, expected_owner, expected_units",
    [
        (29, Faction.PLAYER, 1),
        (30, Faction.NEUTRAL, 0),
        (31, Faction.NEUTRAL, 1),
    ],
)
def test_resolve_combat_boundary(defender_units, expected_owner, expected_units):
    """Test outcomes around the tie boundary."""
    result = resolve_combat(Faction.PLAYER, 30, Faction.NEUTRAL, defender_units)

    assert result.owner == expected_owner
    assert result.units == expected_units
    assert result.units >= 0


def test_resolve_arrival_conquest_event():
    """Test arrival at an enemy planet records the conquest."""
    planet = make_planet(400, 100, Faction.ENEMY, 30)
    group = _group_at(planet, Faction.PLAYER, 50, target=1)

    event = resolve_arrival(group, planet)

    assert planet.owner == Faction.PLAYER
    assert planet.units == 20
    assert event.conquest
    assert event.planet_index == 1
    assert event.control_before == Faction.ENEMY
    assert event.control_after == Faction.PLAYER
    assert event.defender_units == 30
    assert event.units_after == 20


def test_resolve_arrival_reinforcement_never_changes_owner():
    """Test friendly arrival strictly increases units and keeps the owner."""
    planet = make_planet(400, 100, Faction.PLAYER, 5)
    group = _group_at(planet, Faction.PLAYER, 7)

    event = resolve_arrival(group, planet)

    assert planet.owner == Faction.PLAYER
    assert planet.units == 12
    assert event.reinforcement
    assert not event.conquest


def test_resolve_arrival_only_once():
    """Test a group cannot resolve twice."""
    planet = make_planet(400, 100, Faction.NEUTRAL, 10)
    group = _group_at(planet, Faction.ENEMY, 4)

    resolve_arrival(group, planet)
    assert planet.units == 6

    with pytest.raises(RuntimeError, match="already been resolved"):
        resolve_arrival(group, planet)
    assert planet.units == 6
