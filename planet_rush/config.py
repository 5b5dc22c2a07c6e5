"""Simulation configuration and named tuning profiles.

A ``SimulationConfig`` is passed to each ``Simulation`` at construction, so
independent sessions (and tests) can run side by side with different tunings.
Two profiles ship with the game:

- ``classic``: symmetric production, one player planet, an aggressive
  opponent that goes for player planets first.
- ``extended``: player production bonus, two player planets, the boost skill,
  and a cautious opponent that expands into neutral space first.
"""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, PositiveInt, model_validator

from .utils import constants


class TargetPreference(str, Enum):
    """Order in which the opponent considers target factions."""

    NEUTRAL_FIRST = "neutral_first"
    PLAYER_FIRST = "player_first"


Ratio = Annotated[float, Field(gt=0, le=1)]
Probability = Annotated[float, Field(ge=0, le=1)]


class SimulationConfig(BaseModel):
    """All tunable values for one simulation session."""

    model_config = ConfigDict(frozen=True)

    name: Annotated[str, Field(min_length=1)] = "custom"

    # Arena and placement
    arena_width: PositiveFloat = constants.ARENA_WIDTH
    arena_height: PositiveFloat = constants.ARENA_HEIGHT
    planet_count: PositiveInt = constants.PLANET_COUNT
    placement_margin: Annotated[float, Field(ge=0)] = constants.PLACEMENT_MARGIN
    min_planet_radius: PositiveFloat = constants.PLANET_RADIUS_RANGE[0]
    max_planet_radius: PositiveFloat = constants.PLANET_RADIUS_RANGE[1]
    planet_spacing_buffer: Annotated[float, Field(ge=0)] = constants.PLANET_SPACING_BUFFER
    max_placement_attempts: PositiveInt = constants.MAX_PLACEMENT_ATTEMPTS

    # Starting forces
    player_start_planets: Annotated[int, Field(ge=1, le=2)] = 2
    player_initial_units: Annotated[float, Field(ge=0)] = 100.0
    enemy_initial_units: Annotated[float, Field(ge=0)] = 30.0
    neutral_min_units: Annotated[int, Field(ge=0)] = constants.NEUTRAL_UNITS_RANGE[0]
    neutral_max_units: Annotated[int, Field(ge=0)] = constants.NEUTRAL_UNITS_RANGE[1]

    # Production
    base_production_rate: PositiveFloat = constants.BASE_PRODUCTION_RATE
    production_radius_divisor: PositiveFloat = constants.PRODUCTION_RADIUS_DIVISOR
    player_production_multiplier: PositiveFloat = 1.5

    # Movement
    ship_speed: PositiveFloat = constants.SHIP_SPEED
    arrival_threshold: PositiveFloat = constants.ARRIVAL_THRESHOLD

    # Dispatch
    default_send_ratio: Ratio = constants.DEFAULT_SEND_RATIO
    send_all_ratio: Ratio = constants.SEND_ALL_RATIO

    # Opponent policy
    opponent_action_chance: Probability = 0.01
    opponent_min_source_units: Annotated[float, Field(ge=0)] = 30.0
    opponent_safety_margin: PositiveFloat = 2.0
    opponent_send_fraction: Ratio = 0.5
    opponent_target_preference: TargetPreference = TargetPreference.NEUTRAL_FIRST

    # Boost skill and combo
    boost_enabled: bool = True
    boost_cooldown: Annotated[float, Field(ge=0)] = constants.BOOST_COOLDOWN
    boost_duration: PositiveFloat = constants.BOOST_DURATION
    boost_multiplier: PositiveFloat = constants.BOOST_MULTIPLIER
    combo_window: PositiveFloat = constants.COMBO_WINDOW

    # Frame pacing
    max_tick_seconds: PositiveFloat = constants.MAX_TICK_SECONDS

    @model_validator(mode="after")
    def check_ranges(self) -> "SimulationConfig":
        """Reject inverted ranges."""
        if self.min_planet_radius > self.max_planet_radius:
            raise ValueError(
                f"min_planet_radius ({self.min_planet_radius}) exceeds "
                f"max_planet_radius ({self.max_planet_radius})"
            )
        if self.neutral_min_units > self.neutral_max_units:
            raise ValueError(
                f"neutral_min_units ({self.neutral_min_units}) exceeds "
                f"neutral_max_units ({self.neutral_max_units})"
            )
        if 2 * self.placement_margin >= min(self.arena_width, self.arena_height):
            raise ValueError("placement_margin leaves no room to place planets")
        return self


CLASSIC_PROFILE = SimulationConfig(
    name="classic",
    player_start_planets=1,
    player_initial_units=50.0,
    enemy_initial_units=50.0,
    player_production_multiplier=1.0,
    opponent_action_chance=0.02,
    opponent_min_source_units=20.0,
    opponent_safety_margin=1.5,
    opponent_send_fraction=0.6,
    opponent_target_preference=TargetPreference.PLAYER_FIRST,
    boost_enabled=False,
)

EXTENDED_PROFILE = SimulationConfig(name="extended")

PROFILES: dict[str, SimulationConfig] = {
    CLASSIC_PROFILE.name: CLASSIC_PROFILE,
    EXTENDED_PROFILE.name: EXTENDED_PROFILE,
}

DEFAULT_PROFILE = EXTENDED_PROFILE.name


def get_profile(name: str) -> SimulationConfig:
    """Look up a named configuration profile.

    Args:
        name: Profile name ("classic" or "extended")

    Returns:
        The matching SimulationConfig

    Raises:
        KeyError: If no profile has that name
    """
    try:
        return PROFILES[name]
    except KeyError:
        known = ", ".join(sorted(PROFILES))
        raise KeyError(f"Unknown profile '{name}' (known: {known})") from None
