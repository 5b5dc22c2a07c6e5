"""Seedable RNG wrapper for deterministic simulation."""

import random


class GameRNG:
    """Wrapper around Python's random.Random for deterministic behavior.

    All randomness in the simulation (planet placement, neutral garrisons,
    opponent decisions) goes through this class so that the same seed
    reproduces the same match.
    """

    def __init__(self, seed: int | None = None):
        """Initialize RNG with given seed.

        Args:
            seed: Integer seed for deterministic randomness (None seeds from OS entropy)
        """
        self.seed = seed
        self.rng = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return random integer in range [a, b], inclusive.

        Args:
            a: Lower bound (inclusive)
            b: Upper bound (inclusive)

        Returns:
            Random integer between a and b
        """
        return self.rng.randint(a, b)

    def uniform(self, a: float, b: float) -> float:
        """Return random float in range [a, b].

        Args:
            a: Lower bound
            b: Upper bound

        Returns:
            Random float between a and b
        """
        return self.rng.uniform(a, b)

    def choice(self, seq):
        """Choose random element from non-empty sequence.

        Args:
            seq: Sequence to choose from

        Returns:
            Random element from sequence
        """
        return self.rng.choice(seq)

    def random(self) -> float:
        """Return random float in [0.0, 1.0).

        Returns:
            Random float between 0.0 and 1.0
        """
        return self.rng.random()

    def chance(self, probability: float) -> bool:
        """Bernoulli draw: True with the given probability."""
        return self.rng.random() < probability
