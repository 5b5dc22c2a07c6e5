"""Planet placement with rejection sampling.

Algorithm:
1. For each planet slot, sample a centre inside the margin-bounded arena and
   a radius within the configured range.
2. Reject the candidate if it sits closer to any placed planet than the sum
   of both radii plus the spacing buffer; retry up to the attempt limit.
3. A slot that exhausts its attempts is skipped, so a crowded arena may end
   up with fewer planets than configured.
4. The first planets go to the player (one or two depending on profile),
   the next one to the enemy, all others start neutral with a random garrison.
"""

import logging

from ..config import SimulationConfig
from ..models.faction import Faction
from ..models.planet import Planet
from ..utils import GameRNG, euclidean_distance

logger = logging.getLogger(__name__)


def generate_planets(config: SimulationConfig, rng: GameRNG) -> list[Planet]:
    """Place planets for a new match.

    Args:
        config: Simulation configuration (arena, radius range, starting forces)
        rng: Seeded RNG; the same seed reproduces the same layout

    Returns:
        Planets in generation order (player planets first, then the enemy)
    """
    planets: list[Planet] = []

    for slot in range(config.planet_count):
        candidate = _sample_position(config, rng, planets)
        if candidate is None:
            continue

        x, y, radius = candidate
        owner = _owner_for_slot(config, slot)
        planets.append(
            Planet(
                x=x,
                y=y,
                radius=radius,
                owner=owner,
                units=_initial_units(config, rng, owner),
                production_rate=radius / config.production_radius_divisor,
            )
        )

    if len(planets) < config.planet_count:
        logger.warning(
            f"Placed {len(planets)} of {config.planet_count} planets "
            f"after {config.max_placement_attempts} attempts per slot"
        )

    return planets


def _sample_position(
    config: SimulationConfig,
    rng: GameRNG,
    placed: list[Planet],
) -> tuple[float, float, float] | None:
    """Find a non-overlapping centre and radius for one slot.

    Args:
        config: Simulation configuration
        rng: Random number generator
        placed: Planets already on the map

    Returns:
        Tuple of (x, y, radius), or None if every attempt was rejected
    """
    margin = config.placement_margin

    for _ in range(config.max_placement_attempts):
        x = rng.uniform(margin, config.arena_width - margin)
        y = rng.uniform(margin, config.arena_height - margin)
        radius = rng.uniform(config.min_planet_radius, config.max_planet_radius)

        too_close = any(
            euclidean_distance(p.x, p.y, x, y) < p.radius + radius + config.planet_spacing_buffer
            for p in placed
        )
        if not too_close:
            return x, y, radius

    return None


def _owner_for_slot(config: SimulationConfig, slot: int) -> Faction:
    # Slots count generation order, so a skipped slot shifts nobody's ownership
    if slot < config.player_start_planets:
        return Faction.PLAYER
    if slot == config.player_start_planets:
        return Faction.ENEMY
    return Faction.NEUTRAL


def _initial_units(config: SimulationConfig, rng: GameRNG, owner: Faction) -> float:
    if owner is Faction.PLAYER:
        return config.player_initial_units
    if owner is Faction.ENEMY:
        return config.enemy_initial_units
    return float(rng.randint(config.neutral_min_units, config.neutral_max_units))
