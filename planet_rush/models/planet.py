"""Planet data model."""

from dataclasses import dataclass, field

from ..utils.distance import squared_distance
from .faction import Faction


@dataclass
class Planet:
    """A production site on the arena.

    Planets are the strategic locations of the match. Owned planets grow
    their unit count over time at a rate derived from their radius; neutral
    planets hold a fixed garrison until someone takes them. Planets are never
    removed during a session, only their owner and unit count change.
    """

    x: float
    y: float
    radius: float
    owner: Faction
    units: float  # Fractional internally, displayed floored
    production_rate: float = field(default=0.0)

    def __post_init__(self):
        """Validate planet data after initialization."""
        if self.radius <= 0:
            raise ValueError(f"Invalid radius: {self.radius} (must be > 0)")
        if not isinstance(self.owner, Faction):
            raise ValueError(f"Invalid owner: {self.owner!r} (must be a Faction)")
        if self.units < 0:
            raise ValueError(f"Invalid units: {self.units} (must be >= 0)")
        if self.production_rate < 0:
            raise ValueError(
                f"Invalid production_rate: {self.production_rate} (must be >= 0)"
            )

    @property
    def display_units(self) -> int:
        """Unit count as shown to the player."""
        return int(self.units)

    def produce_ships(
        self,
        dt: float,
        base_rate: float,
        owner_multiplier: float = 1.0,
        boost_multiplier: float = 1.0,
    ) -> None:
        """Grow the garrison for ``dt`` seconds.

        Neutral planets never produce; calling this on one is a no-op.

        Args:
            dt: Elapsed simulation time in seconds
            base_rate: Global production rate (units per second per rate point)
            owner_multiplier: Faction bonus (player multiplier or 1 for the enemy)
            boost_multiplier: Temporary boost multiplier (1 when inactive)
        """
        if self.owner is Faction.NEUTRAL:
            return
        self.units += base_rate * self.production_rate * dt * owner_multiplier * boost_multiplier

    def contains_point(self, px: float, py: float) -> bool:
        """Hit-test a point against the planet disc (edge inclusive)."""
        return squared_distance(self.x, self.y, px, py) <= self.radius * self.radius
