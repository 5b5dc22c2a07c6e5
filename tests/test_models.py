"""Tests for data models."""

import math

import pytest

from conftest import make_planet
from planet_rush.models import BoostState, ComboTracker, Faction, GameState, Planet, ShipGroup
from planet_rush.config import get_profile
from planet_rush.utils import GameRNG


class TestPlanet:
    """Test Planet model."""

    def test_planet_creation(self):
        """Test creating a valid planet."""
        planet = Planet(x=100, y=200, radius=30, owner=Faction.PLAYER, units=100, production_rate=2)

        assert planet.x == 100
        assert planet.y == 200
        assert planet.owner == Faction.PLAYER
        assert planet.display_units == 100

    def test_display_units_floors(self):
        planet = make_planet(0, 0, Faction.ENEMY, 12.99)
        assert planet.display_units == 12

    def test_invalid_radius(self):
        """Test that a non-positive radius raises ValueError."""
        with pytest.raises(ValueError, match="Invalid radius"):
            Planet(x=0, y=0, radius=0, owner=Faction.NEUTRAL, units=10)

    def test_invalid_units(self):
        """Test that negative units raise ValueError."""
        with pytest.raises(ValueError, match="Invalid units"):
            Planet(x=0, y=0, radius=20, owner=Faction.NEUTRAL, units=-1)

    def test_invalid_owner(self):
        """Test that a plain string owner is rejected."""
        with pytest.raises(ValueError, match="Invalid owner"):
            Planet(x=0, y=0, radius=20, owner="p1", units=1)

    def test_contains_point(self):
        """Test hit-testing is edge inclusive."""
        planet = make_planet(100, 100, Faction.NEUTRAL, 10, radius=20)

        assert planet.contains_point(100, 100)
        assert planet.contains_point(120, 100)  # On the edge
        assert planet.contains_point(112, 116)  # 12^2 + 16^2 = 400
        assert not planet.contains_point(121, 100)
        assert not planet.contains_point(115, 115)

    def test_produce_ships(self):
        """Test production formula for owned planets."""
        planet = make_planet(0, 0, Faction.ENEMY, 10, production_rate=2.0)

        planet.produce_ships(dt=1.0, base_rate=0.5)
        assert planet.units == pytest.approx(11.0)

        planet.produce_ships(dt=2.0, base_rate=0.5, owner_multiplier=1.5, boost_multiplier=3)
        assert planet.units == pytest.approx(11.0 + 0.5 * 2 * 2 * 1.5 * 3)

    def test_neutral_never_produces(self):
        """Test neutral planets ignore production."""
        planet = make_planet(0, 0, Faction.NEUTRAL, 10, production_rate=2.0)

        planet.produce_ships(dt=10.0, base_rate=0.5, owner_multiplier=2, boost_multiplier=3)

        assert planet.units == 10


class TestShipGroup:
    """Test ShipGroup model."""

    def test_launch_velocity(self):
        """Test velocity is the unit direction scaled to ship speed."""
        target = make_planet(300, 400, Faction.ENEMY, 10)
        group = ShipGroup.launch("player-000", Faction.PLAYER, 5, 0, 0, 1, target, speed=100)

        assert group.vx == pytest.approx(60)
        assert group.vy == pytest.approx(80)
        assert math.hypot(group.vx, group.vy) == pytest.approx(100)
        assert group.heading == pytest.approx(math.atan2(80, 60))

    def test_launch_zero_distance_rejected(self):
        """Test dispatching onto the launch point is rejected."""
        target = make_planet(50, 50, Faction.ENEMY, 10)

        with pytest.raises(ValueError, match="own position"):
            ShipGroup.launch("player-000", Faction.PLAYER, 5, 50, 50, 0, target, speed=100)

    def test_advance_and_arrive(self):
        """Test the group moves at constant speed and reports arrival."""
        target = make_planet(300, 0, Faction.ENEMY, 10)
        group = ShipGroup.launch("enemy-000", Faction.ENEMY, 5, 0, 0, 0, target, speed=100)

        assert not group.advance(1.0, arrival_threshold=5)
        assert group.x == pytest.approx(100)
        assert not group.advance(1.0, arrival_threshold=5)
        assert group.advance(1.0, arrival_threshold=5)
        assert group.units == 5  # No loss in transit

    def test_advance_past_target_counts_as_arrival(self):
        """Test a long step that jumps over the target still arrives."""
        target = make_planet(60, 0, Faction.ENEMY, 10)
        group = ShipGroup.launch("player-000", Faction.PLAYER, 5, 0, 0, 0, target, speed=100)

        assert group.advance(0.9, arrival_threshold=5)  # Lands 30 beyond

    def test_invalid_owner(self):
        """Test neutral ship groups are rejected."""
        with pytest.raises(ValueError, match="Invalid owner"):
            ShipGroup(
                id="x", owner=Faction.NEUTRAL, units=1, x=0, y=0, target=0,
                target_x=1, target_y=0, vx=1, vy=0,
            )

    def test_invalid_units(self):
        """Test empty ship groups are rejected."""
        with pytest.raises(ValueError, match="Invalid units"):
            ShipGroup(
                id="x", owner=Faction.PLAYER, units=0, x=0, y=0, target=0,
                target_x=1, target_y=0, vx=1, vy=0,
            )

    def test_non_finite_velocity(self):
        with pytest.raises(ValueError, match="Invalid velocity"):
            ShipGroup(
                id="x", owner=Faction.PLAYER, units=3, x=0, y=0, target=0,
                target_x=0, target_y=0, vx=math.nan, vy=0,
            )


class TestBoostState:
    """Test BoostState timers."""

    def test_activate_and_expire(self):
        boost = BoostState()

        assert boost.activate(duration=5, cooldown=30)
        assert boost.active
        assert boost.multiplier(3) == 3

        boost.update(4)
        assert boost.active
        assert boost.time_left == pytest.approx(1)

        boost.update(2)
        assert not boost.active
        assert boost.time_left == 0
        assert boost.cooldown == pytest.approx(24)
        assert boost.multiplier(3) == 1

    def test_activate_on_cooldown_is_rejected(self):
        boost = BoostState(cooldown=10)

        assert not boost.activate(duration=5, cooldown=30)
        assert not boost.active
        assert boost.cooldown == 10

    def test_cooldown_never_negative(self):
        boost = BoostState(cooldown=0.5)
        boost.update(2)
        assert boost.cooldown == 0
        assert boost.ready

    def test_invalid_state(self):
        """Test an active boost needs time left."""
        with pytest.raises(ValueError):
            BoostState(active=True, time_left=0)
        with pytest.raises(ValueError):
            BoostState(cooldown=-1)


class TestComboTracker:
    """Test ComboTracker streak handling."""

    def test_record_and_decay(self):
        combo = ComboTracker()

        combo.record_conquest(now=10.0)
        combo.record_conquest(now=12.0)
        assert combo.count == 2
        assert combo.best == 2

        combo.decay(now=16.0, window=5.0)  # 4s since last conquest
        assert combo.count == 2

        combo.decay(now=17.5, window=5.0)
        assert combo.count == 0
        assert combo.best == 2
        assert combo.conquered == 2

    def test_decay_without_conquest(self):
        combo = ComboTracker()
        combo.decay(now=0.0, window=5.0)
        assert combo.count == 0


class TestGameState:
    """Test GameState container."""

    def test_group_ids_per_faction(self):
        state = GameState(config=get_profile("extended"), rng=GameRNG(1))

        assert state.next_group_id(Faction.PLAYER) == "player-000"
        assert state.next_group_id(Faction.PLAYER) == "player-001"
        assert state.next_group_id(Faction.ENEMY) == "enemy-000"

    def test_send_ratio_follows_mode(self):
        state = GameState(config=get_profile("extended"), rng=GameRNG(1))

        assert state.send_ratio == 0.5
        state.send_all_mode = True
        assert state.send_ratio == 0.9

    def test_won_requires_ended(self):
        with pytest.raises(ValueError, match="cannot be won"):
            GameState(config=get_profile("extended"), rng=GameRNG(1), won=True)

    def test_invalid_selection(self):
        with pytest.raises(ValueError, match="Invalid selection"):
            GameState(config=get_profile("extended"), rng=GameRNG(1), selected=0)
