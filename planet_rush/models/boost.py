"""Boost skill and combo counter state (extended variant)."""

from dataclasses import dataclass


@dataclass
class BoostState:
    """Timed, cooldown-gated production multiplier for the player faction.

    The cooldown gates re-activation only; the active window ends on its own
    when ``time_left`` runs out.
    """

    cooldown: float = 0.0
    active: bool = False
    time_left: float = 0.0

    def __post_init__(self):
        """Validate boost state after initialization."""
        if self.cooldown < 0:
            raise ValueError(f"Invalid cooldown: {self.cooldown} (must be >= 0)")
        if self.time_left < 0:
            raise ValueError(f"Invalid time_left: {self.time_left} (must be >= 0)")
        if self.active and self.time_left == 0:
            raise ValueError("Boost cannot be active with no time left")

    @property
    def ready(self) -> bool:
        return self.cooldown <= 0

    def activate(self, duration: float, cooldown: float) -> bool:
        """Start the boost if the cooldown has expired.

        Args:
            duration: How long the boost lasts (seconds)
            cooldown: Delay before the next activation is allowed (seconds)

        Returns:
            True if the boost started, False if still on cooldown
        """
        if not self.ready:
            return False
        self.active = True
        self.time_left = duration
        self.cooldown = cooldown
        return True

    def update(self, dt: float) -> None:
        """Count both timers down by ``dt`` seconds."""
        if self.active:
            self.time_left -= dt
            if self.time_left <= 0:
                self.active = False
                self.time_left = 0.0
        if self.cooldown > 0:
            self.cooldown = max(0.0, self.cooldown - dt)

    def multiplier(self, boost_multiplier: float) -> float:
        """Production multiplier to apply this tick."""
        return boost_multiplier if self.active else 1.0


@dataclass
class ComboTracker:
    """Counts player conquests that follow each other within a wall-clock window.

    Timestamps come from the simulation's injected clock, not from simulation
    time, so pausing the frame loop still lets a combo expire.
    """

    count: int = 0
    best: int = 0
    conquered: int = 0
    last_conquest_at: float | None = None

    def record_conquest(self, now: float) -> None:
        """Register a player conquest at wall time ``now``."""
        self.count += 1
        self.best = max(self.best, self.count)
        self.conquered += 1
        self.last_conquest_at = now

    def decay(self, now: float, window: float) -> None:
        """Reset the streak once ``window`` seconds pass without a conquest."""
        if self.last_conquest_at is None or now - self.last_conquest_at > window:
            self.count = 0
