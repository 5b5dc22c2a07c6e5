"""Shared simulation constants.

Profile-independent defaults. Values that differ between the classic and
extended game variants live in ``planet_rush.config``.
"""

# Arena dimensions (distance units)
ARENA_WIDTH = 800.0
ARENA_HEIGHT = 600.0

# Planet placement
PLANET_COUNT = 12
PLACEMENT_MARGIN = 80.0
PLANET_RADIUS_RANGE = (20.0, 40.0)
PLANET_SPACING_BUFFER = 50.0
MAX_PLACEMENT_ATTEMPTS = 100
NEUTRAL_UNITS_RANGE = (10, 29)  # Inclusive

# Production
BASE_PRODUCTION_RATE = 0.5  # Units per second per rate point
PRODUCTION_RADIUS_DIVISOR = 15.0  # production_rate = radius / divisor

# Movement
SHIP_SPEED = 100.0  # Distance units per second
ARRIVAL_THRESHOLD = 5.0

# Boost skill
BOOST_COOLDOWN = 30.0  # Seconds
BOOST_DURATION = 5.0  # Seconds
BOOST_MULTIPLIER = 3.0

# Combo
COMBO_WINDOW = 5.0  # Wall-clock seconds between conquests

# Dispatch ratios
DEFAULT_SEND_RATIO = 0.5
SEND_ALL_RATIO = 0.9

# Frames longer than this are dropped (tab switch, debugger pause)
MAX_TICK_SECONDS = 1.0

# Testing
RNG_SEED_DEFAULT = 42
