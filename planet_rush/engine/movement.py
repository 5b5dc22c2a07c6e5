"""Phase 2: Ship group transit and arrivals.

This module handles:
1. Launching ship groups from a source planet (shared by player and opponent)
2. Advancing every group along its fixed velocity
3. Resolving arrivals in list order, then dropping the resolved groups

Note: Units are deducted from the source planet at launch, so a group's
units never take part in combat at its origin.
"""

import logging
import math

from ..models.faction import Faction
from ..models.game import GameState
from ..models.ship_group import ShipGroup
from .combat import ArrivalEvent, resolve_arrival

logger = logging.getLogger(__name__)


def dispatch_ships(
    state: GameState,
    source_index: int,
    target_index: int,
    send_ratio: float,
) -> ShipGroup | None:
    """Send a share of a planet's units toward another planet.

    ``floor(source.units * send_ratio)`` units leave the source; any
    fractional remainder stays behind. The group flies under the source
    planet's current owner.

    Args:
        state: Current simulation state
        source_index: Index of the dispatching planet
        target_index: Index of the target planet
        send_ratio: Share of the source garrison to send, in (0, 1]

    Returns:
        The launched ShipGroup, or None if nothing was sent
        (under one unit, zero computed ships, or source and target coincide)
    """
    source = state.planets[source_index]
    target = state.planets[target_index]

    if source.owner is Faction.NEUTRAL or source.units < 1:
        return None

    ships = math.floor(source.units * send_ratio)
    if ships <= 0:
        return None

    try:
        group = ShipGroup.launch(
            group_id=state.next_group_id(source.owner),
            owner=source.owner,
            units=ships,
            source_x=source.x,
            source_y=source.y,
            target=target_index,
            target_planet=target,
            speed=state.config.ship_speed,
        )
    except ValueError as e:
        logger.debug(f"Dispatch {source_index} -> {target_index} ignored: {e}")
        return None

    source.units -= ships
    state.ship_groups.append(group)

    logger.debug(
        f"{group.owner.value} dispatched {ships} units "
        f"from planet {source_index} to planet {target_index} ({group.id})"
    )
    return group


def process_ship_movement(state: GameState, dt: float) -> tuple[GameState, list[ArrivalEvent]]:
    """Execute the transit phase.

    Groups advance and resolve in list order, so several groups reaching the
    same planet on one tick apply one after another.

    Args:
        state: Current simulation state
        dt: Elapsed simulation time in seconds

    Returns:
        Tuple of (updated state, list of arrival events in resolution order)
    """
    in_flight: list[ShipGroup] = []
    arrivals: list[ArrivalEvent] = []
    threshold = state.config.arrival_threshold

    for group in state.ship_groups:
        if group.advance(dt, threshold):
            arrivals.append(resolve_arrival(group, state.planets[group.target]))
        else:
            in_flight.append(group)

    state.ship_groups = in_flight
    return state, arrivals
