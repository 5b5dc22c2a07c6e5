"""Phase 3: Scripted opponent policy.

The opponent keeps no memory between ticks; every decision is derived from
the current planets. On each tick it acts with a small fixed probability:

1. Pick a random enemy planet holding more than the minimum source units
2. Gather targets from the first non-empty faction in the preference order
3. Score each target as (source units - target units) / distance, keeping
   only targets the source outnumbers by the safety margin
4. Dispatch a fixed share of the source garrison at the best target
"""

import logging
from dataclasses import dataclass

from ..config import SimulationConfig, TargetPreference
from ..models.faction import Faction
from ..models.game import GameState
from ..models.ship_group import ShipGroup
from ..utils import GameRNG, euclidean_distance
from .movement import dispatch_ships

logger = logging.getLogger(__name__)

TARGET_ORDER = {
    TargetPreference.NEUTRAL_FIRST: (Faction.NEUTRAL, Faction.PLAYER),
    TargetPreference.PLAYER_FIRST: (Faction.PLAYER, Faction.NEUTRAL),
}


@dataclass
class OpponentDecision:
    """A dispatch the opponent has chosen to make.

    Attributes:
        source: Index of the enemy planet sending units
        target: Index of the planet being attacked
        score: Attack score of the chosen target
    """

    source: int
    target: int
    score: float


class OpponentPolicy:
    """Stochastic scripted opponent.

    Tuning comes from the simulation config: action chance, minimum source
    units, safety margin, send fraction and target preference.
    """

    def __init__(self, config: SimulationConfig):
        self.action_chance = config.opponent_action_chance
        self.min_source_units = config.opponent_min_source_units
        self.safety_margin = config.opponent_safety_margin
        self.send_fraction = config.opponent_send_fraction
        self.preference = config.opponent_target_preference

    def act(self, state: GameState) -> ShipGroup | None:
        """Run the policy for one tick.

        Args:
            state: Current simulation state

        Returns:
            The launched ShipGroup, or None if the opponent did nothing
        """
        if not state.rng.chance(self.action_chance):
            return None

        decision = self.decide(state, state.rng)
        if decision is None:
            return None

        logger.debug(
            f"Opponent attacks planet {decision.target} from planet {decision.source} "
            f"(score {decision.score:.3f})"
        )
        return dispatch_ships(state, decision.source, decision.target, self.send_fraction)

    def decide(self, state: GameState, rng: GameRNG) -> OpponentDecision | None:
        """Choose a source and target, without the per-tick action roll.

        Args:
            state: Current simulation state
            rng: Random source for picking the source planet

        Returns:
            OpponentDecision, or None if no source qualifies or no target passes the gate
        """
        sources = [
            i
            for i, planet in enumerate(state.planets)
            if planet.owner is Faction.ENEMY and planet.units > self.min_source_units
        ]
        if not sources:
            return None

        source_index = rng.choice(sources)
        source = state.planets[source_index]

        best_target: int | None = None
        best_score = float("-inf")

        for target_index in self.candidate_targets(state):
            target = state.planets[target_index]
            if source.units <= target.units * self.safety_margin:
                continue

            distance = euclidean_distance(source.x, source.y, target.x, target.y)
            if distance == 0:
                continue

            score = (source.units - target.units) / distance
            if score > best_score:
                best_score = score
                best_target = target_index

        if best_target is None:
            return None

        return OpponentDecision(source=source_index, target=best_target, score=best_score)

    def candidate_targets(self, state: GameState) -> list[int]:
        """Indices of planets of the first preferred faction that has any."""
        for faction in TARGET_ORDER[self.preference]:
            targets = [i for i, p in enumerate(state.planets) if p.owner is faction]
            if targets:
                return targets
        return []
