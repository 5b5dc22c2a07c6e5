"""Phase 1: Ship production.

Every owned planet grows its garrison by
``base_rate * production_rate * dt * owner_multiplier * boost_multiplier``.
The player faction gets the configured production multiplier and, while the
boost skill is active, the boost multiplier on top. The enemy always
produces at multiplier 1. Neutral planets never produce.
"""

from ..models.faction import Faction
from ..models.game import GameState


def process_production(state: GameState, dt: float) -> GameState:
    """Execute the production phase.

    Args:
        state: Current simulation state
        dt: Elapsed simulation time in seconds

    Returns:
        Updated state with production added
    """
    config = state.config
    player_boost = state.boost.multiplier(config.boost_multiplier)

    for planet in state.planets:
        if planet.owner is Faction.PLAYER:
            planet.produce_ships(
                dt,
                config.base_production_rate,
                config.player_production_multiplier,
                player_boost,
            )
        else:
            planet.produce_ships(dt, config.base_production_rate)

    return state
