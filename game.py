#!/usr/bin/env python3
"""Planet Rush - headless match runner.

Runs a match without a renderer, driving the simulation with a fixed frame
delta. The player side is either idle or flown by a simple autopilot, which
makes this handy for balancing the opponent profiles.
"""

import argparse
import logging
import math
import sys

from planet_rush.config import PROFILES, DEFAULT_PROFILE, get_profile
from planet_rush.engine.simulation import Simulation
from planet_rush.models.faction import Faction
from planet_rush.utils import GameRNG, RNG_SEED_DEFAULT, euclidean_distance


class Autopilot:
    """Scripted stand-in for the human player.

    Every ``interval`` simulated seconds it sends half of its strongest
    planet's units at the non-player planet with the best
    (advantage / distance) score it outnumbers.
    """

    def __init__(self, interval: float = 2.0, margin: float = 1.2):
        self.interval = interval
        self.margin = margin
        self.cooldown = 0.0

    def act(self, sim: Simulation, elapsed: float) -> None:
        self.cooldown -= elapsed
        if self.cooldown > 0:
            return
        self.cooldown = self.interval

        sim.activate_boost()

        planets = sim.planets
        own = [i for i, p in enumerate(planets) if p.owner is Faction.PLAYER]
        if not own:
            return
        source_index = max(own, key=lambda i: planets[i].units)
        source = planets[source_index]

        best_target = None
        best_score = -math.inf
        for i, target in enumerate(planets):
            if target.owner is Faction.PLAYER:
                continue
            if source.units * sim.config.default_send_ratio <= target.units * self.margin:
                continue
            score = (source.units - target.units) / euclidean_distance(
                source.x, source.y, target.x, target.y
            )
            if score > best_score:
                best_score = score
                best_target = i

        if best_target is not None:
            sim.dispatch(source_index, best_target)


class MatchRunner:
    """Drives one headless match to completion or a time limit."""

    def __init__(self, sim: Simulation, autopilot: Autopilot | None, frame_rate: float):
        self.sim = sim
        self.autopilot = autopilot
        self.dt = 1.0 / frame_rate

    def run(self, max_seconds: float) -> Simulation:
        """Main frame loop."""
        frames = int(max_seconds / self.dt)
        for _ in range(frames):
            if self.autopilot is not None:
                self.autopilot.act(self.sim, self.dt)
            result = self.sim.tick(self.dt)
            if result.ended:
                break
        return self.sim


def print_summary(sim: Simulation) -> None:
    state = sim.state
    stats = sim.stats()
    summary = sim.faction_summary()

    print("\n" + "=" * 60)
    print(f"Planet Rush - profile '{sim.config.name}', seed {sim.rng.seed}")
    print("=" * 60)
    if state.ended:
        print(f"Result: {'VICTORY' if state.won else 'DEFEAT'} ({stats.rating})")
    else:
        print("Result: time limit reached")
    print(f"Simulated time: {state.sim_time:.1f}s")
    for faction in Faction:
        entry = summary[faction]
        print(f"  {faction.value:<8} planets={entry.planets:<3} units={entry.units}")
    print(f"Planets conquered: {stats.conquered_planets}, best combo: {stats.best_combo}")


def main():
    parser = argparse.ArgumentParser(description="Run a headless Planet Rush match")
    parser.add_argument("--seed", type=int, default=RNG_SEED_DEFAULT, help="RNG seed")
    parser.add_argument(
        "--profile",
        choices=sorted(PROFILES),
        default=DEFAULT_PROFILE,
        help="Tuning profile",
    )
    parser.add_argument(
        "--duration", type=float, default=600.0, help="Maximum simulated seconds"
    )
    parser.add_argument("--fps", type=float, default=60.0, help="Frames per simulated second")
    parser.add_argument(
        "--autopilot", action="store_true", help="Let a scripted player fly the player side"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    sim = Simulation(config=get_profile(args.profile), rng=GameRNG(args.seed))
    runner = MatchRunner(sim, Autopilot() if args.autopilot else None, args.fps)

    try:
        runner.run(args.duration)
    except KeyboardInterrupt:
        print("\n\nMatch interrupted by user. Exiting...")
        sys.exit(0)

    print_summary(sim)


if __name__ == "__main__":
    main()
