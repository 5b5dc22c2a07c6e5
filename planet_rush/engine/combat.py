"""Arrival resolution: combat and reinforcement.

This module handles what happens when a ship group reaches its target:
1. Friendly target: units merge into the garrison (reinforcement)
2. Hostile or neutral target: comparison combat
   - attacker strictly larger: planet changes hands, survivors = difference
   - otherwise (tie included): defender holds, garrison loses attacker units
"""

from dataclasses import dataclass

from ..models.faction import Faction
from ..models.planet import Planet
from ..models.ship_group import ShipGroup


@dataclass
class CombatResult:
    """Outcome of one arrival, before it is applied to the planet.

    Attributes:
        owner: Planet owner after resolution
        units: Planet unit count after resolution
        winner: "attacker", "defender", or None for reinforcement
    """

    owner: Faction
    units: float
    winner: str | None


@dataclass
class ArrivalEvent:
    """Record of a ship group arriving at its target.

    Attributes:
        group_id: ID of the arriving group
        planet_index: Index of the target planet
        attacker: Faction of the arriving group
        attacker_units: Units carried by the group
        defender_units: Planet units before resolution
        control_before: Planet owner before resolution
        control_after: Planet owner after resolution
        units_after: Planet units after resolution
        winner: "attacker", "defender", or None (reinforcement)
    """

    group_id: str
    planet_index: int
    attacker: Faction
    attacker_units: float
    defender_units: float
    control_before: Faction
    control_after: Faction
    units_after: float
    winner: str | None

    @property
    def conquest(self) -> bool:
        """True if the planet changed hands."""
        return self.control_before != self.control_after

    @property
    def reinforcement(self) -> bool:
        return self.winner is None


def resolve_combat(
    attacker: Faction,
    attacker_units: float,
    defender: Faction,
    defender_units: float,
) -> CombatResult:
    """Resolve an arrival of ``attacker_units`` at a planet.

    Combat rules:
    - same faction: reinforcement, units add up, owner unchanged
    - attacker_units > defender_units: attacker takes the planet with the difference
    - attacker_units <= defender_units: defender holds with the difference
      (an exact tie leaves the defender at zero units)

    Args:
        attacker: Faction of the arriving group
        attacker_units: Units carried by the group
        defender: Current planet owner
        defender_units: Current planet units

    Returns:
        CombatResult with the planet's new owner and units
    """
    if attacker == defender:
        return CombatResult(owner=defender, units=defender_units + attacker_units, winner=None)

    if attacker_units > defender_units:
        return CombatResult(
            owner=attacker,
            units=attacker_units - defender_units,
            winner="attacker",
        )

    return CombatResult(
        owner=defender,
        units=defender_units - attacker_units,
        winner="defender",
    )


def resolve_arrival(group: ShipGroup, planet: Planet) -> ArrivalEvent:
    """Apply an arrived group's effect to its target planet.

    A group resolves exactly once over its lifetime; the caller discards it
    afterwards.

    Args:
        group: Arrived ship group
        planet: The group's target planet

    Returns:
        ArrivalEvent describing the outcome

    Raises:
        RuntimeError: If the group has already been resolved
    """
    if group.resolved:
        raise RuntimeError(f"Ship group {group.id} has already been resolved")

    control_before = planet.owner
    defender_units = planet.units

    result = resolve_combat(group.owner, group.units, planet.owner, planet.units)
    planet.owner = result.owner
    planet.units = result.units
    group.resolved = True

    return ArrivalEvent(
        group_id=group.id,
        planet_index=group.target,
        attacker=group.owner,
        attacker_units=group.units,
        defender_units=defender_units,
        control_before=control_before,
        control_after=planet.owner,
        units_after=planet.units,
        winner=result.winner,
    )
