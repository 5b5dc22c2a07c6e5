"""Main simulation orchestrator.

This module advances a match one frame at a time, running the phases in
a fixed order:
0. Timers (boost countdown, combo decay)
1. Production
2. Transit and arrivals
3. Opponent policy
4. Victory assessment

It also exposes the commands the presentation layer fires on input events
(select/dispatch, send-all toggle, boost, restart) and read-only summaries
for the HUD.

Architecture:
Each phase lives in its own module and operates on a ``GameState``. The
``Simulation`` owns that state and composes the phases, so any phase can be
tested on its own against a hand-built state.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from ..config import DEFAULT_PROFILE, SimulationConfig, get_profile
from ..models.faction import Faction
from ..models.game import GameState
from ..models.ship_group import ShipGroup
from ..utils import GameRNG
from .combat import ArrivalEvent
from .movement import dispatch_ships, process_ship_movement
from .opponent import OpponentPolicy
from .placement import generate_planets
from .production import process_production
from .victory import check_victory, victory_rating

logger = logging.getLogger(__name__)


@dataclass
class TickResult:
    """Events produced by one tick.

    Attributes:
        elapsed: Simulation time actually applied (0 for dropped frames)
        arrivals: Arrival events in resolution order
        opponent_dispatch: Group launched by the opponent this tick, if any
        ended: Whether the match is over after this tick
        won: Whether the player won (meaningful only when ended)
    """

    elapsed: float
    arrivals: list[ArrivalEvent] = field(default_factory=list)
    opponent_dispatch: ShipGroup | None = None
    ended: bool = False
    won: bool = False

    @property
    def conquests(self) -> list[ArrivalEvent]:
        return [event for event in self.arrivals if event.conquest]


@dataclass
class FactionSummary:
    """HUD totals for one faction."""

    planets: int
    units: int  # Sum of floored planet units


@dataclass
class MatchStats:
    """End-of-match statistics.

    Attributes:
        play_time: Wall-clock seconds since the match started (frozen at the end)
        conquered_planets: Planets the player has taken from other factions
        combo: Current conquest streak
        best_combo: Longest streak of the match
        rating: Victory rating, or None while the match is running
    """

    play_time: float
    conquered_planets: int
    combo: int
    best_combo: int
    rating: str | None


class Simulation:
    """One real-time conquest match.

    The simulation never schedules itself: an external frame loop calls
    ``tick`` with the elapsed time of each frame. Randomness comes from the
    injected ``GameRNG`` and wall time (used only for combo decay and play
    time) from the injected ``clock``.
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        rng: GameRNG | None = None,
        clock: Callable[[], float] = time.monotonic,
        state: GameState | None = None,
    ):
        """Create a match and place its planets.

        Args:
            config: Tuning profile (defaults to the extended profile)
            rng: Seeded RNG for placement and opponent decisions
            clock: Wall-clock source in seconds
            state: Pre-built state to drive instead of placing planets
                (its config and RNG take precedence)
        """
        if state is not None:
            config = state.config
            rng = state.rng
        self.config = config if config is not None else get_profile(DEFAULT_PROFILE)
        self.rng = rng if rng is not None else GameRNG()
        self.clock = clock
        self.policy = OpponentPolicy(self.config)
        self.state = state if state is not None else self._new_state()

        logger.info(
            f"New match: profile={self.config.name}, seed={self.rng.seed}, "
            f"planets={len(self.state.planets)}"
        )

    def _new_state(self) -> GameState:
        return GameState(
            config=self.config,
            rng=self.rng,
            planets=generate_planets(self.config, self.rng),
            started_at=self.clock(),
        )

    # =========================================================================
    # FRAME LOOP
    # =========================================================================

    def accepts_delta(self, elapsed: float) -> bool:
        """Whether a frame delta is small enough to apply."""
        return 0 <= elapsed < self.config.max_tick_seconds

    def tick(self, elapsed: float) -> TickResult:
        """Advance the match by one frame.

        Deltas that are negative or not below ``max_tick_seconds`` are
        dropped and the tick runs as a zero-length frame. Once the match has
        ended, ticks change nothing until ``restart``.

        Args:
            elapsed: Seconds since the previous frame

        Returns:
            TickResult with this tick's events
        """
        state = self.state
        if state.ended:
            return TickResult(elapsed=0.0, ended=True, won=state.won)

        if not self.accepts_delta(elapsed):
            logger.debug(f"Dropped frame delta {elapsed:.3f}s")
            elapsed = 0.0

        self._update_timers(elapsed)
        process_production(state, elapsed)
        state, arrivals = process_ship_movement(state, elapsed)
        self._record_conquests(arrivals)
        opponent_group = self.policy.act(state)

        if check_victory(state):
            state.ended_at = self.clock()
            logger.info(
                f"Match over: {'victory' if state.won else 'defeat'} "
                f"after {state.sim_time + elapsed:.1f}s simulated"
            )

        state.sim_time += elapsed
        return TickResult(
            elapsed=elapsed,
            arrivals=arrivals,
            opponent_dispatch=opponent_group,
            ended=state.ended,
            won=state.won,
        )

    def _update_timers(self, elapsed: float) -> None:
        state = self.state
        if self.config.boost_enabled:
            state.boost.update(elapsed)
        state.combo.decay(self.clock(), self.config.combo_window)

    def _record_conquests(self, arrivals: list[ArrivalEvent]) -> None:
        state = self.state
        for event in arrivals:
            if event.conquest and event.control_after is Faction.PLAYER:
                state.combo.record_conquest(self.clock())
                logger.info(
                    f"Player conquered planet {event.planet_index} "
                    f"(combo {state.combo.count})"
                )
            elif event.conquest:
                logger.info(f"Enemy conquered planet {event.planet_index}")

        # A selection must always point at a player planet
        if state.selected is not None and state.planets[state.selected].owner is not Faction.PLAYER:
            state.selected = None

    # =========================================================================
    # COMMANDS
    # Fired by the presentation layer on discrete input events
    # =========================================================================

    def dispatch(
        self, source_index: int, target_index: int, send_ratio: float | None = None
    ) -> ShipGroup | None:
        """Send player units from one planet to another.

        Ignored unless the source is a player planet with at least one unit,
        the match is running, and the computed ship count is positive.

        Args:
            source_index: Index of the player's source planet
            target_index: Index of the target planet
            send_ratio: Share to send; defaults to the current send mode's ratio

        Returns:
            The launched ShipGroup, or None if the command was ignored
        """
        state = self.state
        if state.ended or source_index == target_index:
            return None
        if state.planets[source_index].owner is not Faction.PLAYER:
            return None

        ratio = send_ratio if send_ratio is not None else state.send_ratio
        return dispatch_ships(state, source_index, target_index, ratio)

    def planet_at(self, px: float, py: float) -> int | None:
        """Index of the first planet containing the point, if any."""
        for i, planet in enumerate(self.state.planets):
            if planet.contains_point(px, py):
                return i
        return None

    def select_or_dispatch(self, px: float, py: float) -> ShipGroup | None:
        """Handle a pointer click at (px, py).

        - Empty space clears the selection.
        - With a selection, clicking another planet dispatches to it (using
          the current send mode) and clears the selection.
        - Otherwise clicking a player planet selects it.

        Args:
            px: Pointer X in arena coordinates
            py: Pointer Y in arena coordinates

        Returns:
            The launched ShipGroup if the click dispatched, else None
        """
        state = self.state
        if state.ended:
            return None

        clicked = self.planet_at(px, py)
        if clicked is None:
            state.selected = None
            return None

        if state.selected is not None and state.selected != clicked:
            group = self.dispatch(state.selected, clicked)
            state.selected = None
            return group

        if state.planets[clicked].owner is Faction.PLAYER:
            state.selected = clicked
        return None

    def toggle_send_all_mode(self) -> bool:
        """Flip between the default and send-all ratios; returns the new mode."""
        self.state.send_all_mode = not self.state.send_all_mode
        return self.state.send_all_mode

    def activate_boost(self) -> bool:
        """Start the production boost.

        Returns:
            True if the boost started; False if disabled, on cooldown, or the match is over
        """
        if not self.config.boost_enabled or self.state.ended:
            return False
        started = self.state.boost.activate(self.config.boost_duration, self.config.boost_cooldown)
        if started:
            logger.debug("Boost activated")
        return started

    def restart(self) -> bool:
        """Start a new match once the current one has ended.

        Returns:
            True if a new match was set up, False if the match is still running
        """
        if not self.state.ended:
            return False
        self.state = self._new_state()
        logger.info(f"Match restarted with {len(self.state.planets)} planets")
        return True

    # =========================================================================
    # READ-ONLY VIEWS
    # =========================================================================

    @property
    def planets(self):
        return self.state.planets

    @property
    def ship_groups(self):
        return self.state.ship_groups

    def faction_summary(self) -> dict[Faction, FactionSummary]:
        """Planet count and floored unit total per faction."""
        summary = {faction: FactionSummary(planets=0, units=0) for faction in Faction}
        for planet in self.state.planets:
            entry = summary[planet.owner]
            entry.planets += 1
            entry.units += planet.display_units
        return summary

    def progress(self) -> float:
        """Share of all planets currently held by the player."""
        total = len(self.state.planets)
        if total == 0:
            return 0.0
        return len(self.state.planets_owned_by(Faction.PLAYER)) / total

    def stats(self) -> MatchStats:
        state = self.state
        end = state.ended_at if state.ended_at is not None else self.clock()
        play_time = end - state.started_at
        return MatchStats(
            play_time=play_time,
            conquered_planets=state.combo.conquered,
            combo=state.combo.count,
            best_combo=state.combo.best,
            rating=victory_rating(state.won, play_time, state.combo.count) if state.ended else None,
        )
