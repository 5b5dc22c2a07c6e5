"""Simulation state container."""

from dataclasses import dataclass, field

from ..config import SimulationConfig
from ..utils import GameRNG
from .boost import BoostState, ComboTracker
from .faction import Faction
from .planet import Planet
from .ship_group import ShipGroup


@dataclass
class GameState:
    """All mutable state of one match.

    The state owns every planet and ship group; ship groups refer to their
    target by index into ``planets``. Engine phases operate on this container
    and the ``Simulation`` orchestrates them.
    """

    config: SimulationConfig
    rng: GameRNG
    planets: list[Planet] = field(default_factory=list)
    ship_groups: list[ShipGroup] = field(default_factory=list)
    boost: BoostState = field(default_factory=BoostState)
    combo: ComboTracker = field(default_factory=ComboTracker)
    selected: int | None = None  # Index of the selected player planet
    send_all_mode: bool = False
    ended: bool = False
    won: bool = False
    sim_time: float = 0.0  # Accumulated accepted tick time (seconds)
    started_at: float = 0.0  # Wall clock at match start
    ended_at: float | None = None  # Wall clock at match end
    group_counter: dict[Faction, int] = field(
        default_factory=lambda: {Faction.PLAYER: 0, Faction.ENEMY: 0}
    )  # Ship group ID generation

    def __post_init__(self):
        """Validate state after initialization."""
        if self.won and not self.ended:
            raise ValueError("A match cannot be won before it has ended")
        if self.selected is not None and not (0 <= self.selected < len(self.planets)):
            raise ValueError(f"Invalid selection: {self.selected}")

    def planets_owned_by(self, faction: Faction) -> list[Planet]:
        return [p for p in self.planets if p.owner is faction]

    def next_group_id(self, faction: Faction) -> str:
        """Allocate the next ship group ID for a faction."""
        group_id = f"{faction.value}-{self.group_counter[faction]:03d}"
        self.group_counter[faction] += 1
        return group_id

    @property
    def send_ratio(self) -> float:
        """Dispatch ratio for the current send mode."""
        if self.send_all_mode:
            return self.config.send_all_ratio
        return self.config.default_send_ratio
