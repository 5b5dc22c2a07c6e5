"""Tests for dispatch and ship group transit."""

import pytest

from conftest import make_planet, make_state
from planet_rush.engine.movement import dispatch_ships, process_ship_movement
from planet_rush.models import Faction


def test_dispatch_conserves_units(duel_state):
    """Test source loses exactly the floored amount that was sent."""
    source = duel_state.planets[0]
    source.units = 37.6

    group = dispatch_ships(duel_state, 0, 1, 0.5)

    assert group.units == 18  # floor(18.8)
    assert source.units == pytest.approx(37.6 - 18)
    assert duel_state.ship_groups == [group]


def test_dispatch_send_all_ratio():
    """Test ratio 0.9 from a 10-unit source sends 9 and leaves 1."""
    state = make_state(
        [make_planet(0, 0, Faction.PLAYER, 10), make_planet(200, 0, Faction.NEUTRAL, 5)]
    )

    group = dispatch_ships(state, 0, 1, 0.9)

    assert group.units == 9
    assert state.planets[0].units == 1


def test_dispatch_zero_ships_ignored():
    """Test a dispatch that floors to zero changes nothing."""
    state = make_state(
        [make_planet(0, 0, Faction.PLAYER, 1.5), make_planet(200, 0, Faction.NEUTRAL, 5)]
    )

    assert dispatch_ships(state, 0, 1, 0.5) is None
    assert state.planets[0].units == 1.5
    assert state.ship_groups == []


def test_dispatch_below_one_unit_ignored():
    state = make_state(
        [make_planet(0, 0, Faction.PLAYER, 0.99), make_planet(200, 0, Faction.NEUTRAL, 5)]
    )

    assert dispatch_ships(state, 0, 1, 1.0) is None
    assert state.planets[0].units == 0.99


def test_dispatch_zero_distance_ignored():
    """Test coincident source and target never produce a group."""
    state = make_state(
        [make_planet(50, 50, Faction.PLAYER, 40), make_planet(50, 50, Faction.ENEMY, 5)]
    )

    assert dispatch_ships(state, 0, 1, 0.5) is None
    assert state.planets[0].units == 40
    assert state.ship_groups == []


def test_dispatch_from_neutral_ignored():
    state = make_state(
        [make_planet(0, 0, Faction.NEUTRAL, 40), make_planet(200, 0, Faction.ENEMY, 5)]
    )

    assert dispatch_ships(state, 0, 1, 0.5) is None


def test_group_faction_fixed_at_dispatch(duel_state):
    """Test recapturing the source does not change a group in flight."""
    group = dispatch_ships(duel_state, 0, 1, 0.5)
    duel_state.planets[0].owner = Faction.ENEMY

    assert group.owner == Faction.PLAYER


def test_arrival_scenario(duel_state):
    """Test A (100) sends 50 to B (30) at distance 300: B falls at t=3s with 20 units."""
    dispatch_ships(duel_state, 0, 1, 0.5)
    assert duel_state.planets[0].units == 50

    for _ in range(5):
        duel_state, arrivals = process_ship_movement(duel_state, 0.5)
        assert arrivals == []
        assert len(duel_state.ship_groups) == 1

    duel_state, arrivals = process_ship_movement(duel_state, 0.5)  # t = 3.0s

    assert len(arrivals) == 1
    assert arrivals[0].conquest
    assert duel_state.planets[1].owner == Faction.PLAYER
    assert duel_state.planets[1].units == 20
    assert duel_state.planets[0].units == 50
    assert duel_state.ship_groups == []


def test_arrivals_resolve_in_list_order():
    """Test same-tick arrivals apply sequentially: conquest then reinforcement."""
    state = make_state(
        [
            make_planet(0, 0, Faction.PLAYER, 40),
            make_planet(300, 0, Faction.ENEMY, 10),
            make_planet(600, 0, Faction.PLAYER, 60),
        ]
    )
    dispatch_ships(state, 0, 1, 0.5)  # 20 player units from the left
    dispatch_ships(state, 2, 1, 0.5)  # 30 player units from the right

    state, arrivals = process_ship_movement(state, 3.0)

    assert [event.winner for event in arrivals] == ["attacker", None]
    assert state.planets[1].owner == Faction.PLAYER
    assert state.planets[1].units == 40  # (20 - 10) + 30


def test_hostile_arrivals_order_dependent():
    """Test an enemy group landing after a player conquest fights the new owner."""
    state = make_state(
        [
            make_planet(0, 0, Faction.PLAYER, 40),
            make_planet(300, 0, Faction.NEUTRAL, 10),
            make_planet(600, 0, Faction.ENEMY, 30),
        ]
    )
    dispatch_ships(state, 0, 1, 0.5)  # 20 player units
    dispatch_ships(state, 2, 1, 0.5)  # 15 enemy units

    state, arrivals = process_ship_movement(state, 3.0)

    # Player takes it with 10, then the enemy's 15 overwhelm the 10
    assert [event.control_after for event in arrivals] == [Faction.PLAYER, Faction.ENEMY]
    assert state.planets[1].owner == Faction.ENEMY
    assert state.planets[1].units == 5


def test_resolved_groups_removed(duel_state):
    """Test each group resolves exactly once and then leaves the active set."""
    dispatch_ships(duel_state, 0, 1, 0.5)

    duel_state, first = process_ship_movement(duel_state, 3.0)
    duel_state, second = process_ship_movement(duel_state, 3.0)

    assert len(first) == 1
    assert second == []
    assert duel_state.ship_groups == []
