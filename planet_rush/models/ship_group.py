"""Ship group data model for units in transit."""

import math
from dataclasses import dataclass

from .faction import Faction
from .planet import Planet


@dataclass
class ShipGroup:
    """Units travelling in a straight line toward a target planet.

    Ship groups are created when a faction dispatches units from one of its
    planets. The target is held as an index into the owning simulation's
    planet list, so a group never keeps a planet alive on its own. Velocity
    is fixed at launch and no units are lost in transit.
    """

    id: str  # Unique identifier (e.g., "player-003")
    owner: Faction
    units: int
    x: float
    y: float
    target: int  # Index into Simulation.planets
    target_x: float
    target_y: float
    vx: float
    vy: float
    resolved: bool = False

    def __post_init__(self):
        """Validate ship group data after initialization."""
        if self.owner not in (Faction.PLAYER, Faction.ENEMY):
            raise ValueError(f"Invalid owner: {self.owner!r} (must be PLAYER or ENEMY)")
        if self.units <= 0:
            raise ValueError(f"Invalid units: {self.units} (must be > 0)")
        if self.target < 0:
            raise ValueError(f"Invalid target index: {self.target} (must be >= 0)")
        if not (math.isfinite(self.vx) and math.isfinite(self.vy)):
            raise ValueError(f"Invalid velocity: ({self.vx}, {self.vy})")

    @classmethod
    def launch(
        cls,
        group_id: str,
        owner: Faction,
        units: int,
        source_x: float,
        source_y: float,
        target: int,
        target_planet: Planet,
        speed: float,
    ) -> "ShipGroup":
        """Create a group at the source position heading for the target.

        Args:
            group_id: Identifier for the new group
            owner: Dispatching faction (fixed for the group's lifetime)
            units: Units carried
            source_x: Launch X coordinate
            source_y: Launch Y coordinate
            target: Index of the target planet
            target_planet: The target planet (read for its position)
            speed: Ship speed in distance units per second

        Returns:
            New ShipGroup with velocity already computed

        Raises:
            ValueError: If source and target coincide (no direction to fly)
        """
        dx = target_planet.x - source_x
        dy = target_planet.y - source_y
        distance = math.hypot(dx, dy)
        if distance == 0:
            raise ValueError("Cannot dispatch ships to their own position")

        return cls(
            id=group_id,
            owner=owner,
            units=units,
            x=source_x,
            y=source_y,
            target=target,
            target_x=target_planet.x,
            target_y=target_planet.y,
            vx=dx / distance * speed,
            vy=dy / distance * speed,
        )

    @property
    def heading(self) -> float:
        """Direction of travel in radians (for renderers)."""
        return math.atan2(self.vy, self.vx)

    def distance_to_target(self) -> float:
        return math.hypot(self.target_x - self.x, self.target_y - self.y)

    def advance(self, dt: float, arrival_threshold: float) -> bool:
        """Move the group forward and report arrival.

        Args:
            dt: Elapsed simulation time in seconds
            arrival_threshold: Distance to target centre that counts as arrived

        Returns:
            True once the group is within the threshold of its target or has
            flown past it
        """
        self.x += self.vx * dt
        self.y += self.vy * dt
        if self.distance_to_target() < arrival_threshold:
            return True
        # Past the target, the remaining offset points against the velocity
        return (self.target_x - self.x) * self.vx + (self.target_y - self.y) * self.vy < 0
