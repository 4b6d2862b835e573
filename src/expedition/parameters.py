"""Simulation parameters for the expedition day.

This module is the SINGLE SOURCE OF TRUTH for the constants that drive the
day's stochastic decisions. Unlike tunable balance knobs, most of these are
part of the simulation contract: changing them changes what a fixed seed
produces.

Usage:
    from expedition.parameters import DISCOVERY_CHANCE, COORDINATOR_WATER_COST
"""

# =============================================================================
# WEATHER
# =============================================================================

CLEAR_WEATHER_CEILING = 0.6
"""Morning draws below this value produce Clear weather."""

WINDY_WEATHER_CEILING = 0.85
"""Morning draws in [CLEAR_WEATHER_CEILING, this) produce Windy weather.

Anything at or above it is a Sandstorm.
"""

SANDSTORM_ONSET_CHANCE = 0.15
"""Chance that a sandstorm rolls in after an action phase."""

# =============================================================================
# PROSPECTING
# =============================================================================

DISCOVERY_CHANCE = 0.6
"""Chance that a successful tool use turns up an artifact."""

ARTIFACT_WEIGHT_SCALE = 1.5
ARTIFACT_WEIGHT_OFFSET = 0.2
"""Artifact weight = round(draw * SCALE + OFFSET, 2), i.e. within [0.2, 1.7]."""

ARTIFACT_WEIGHT_DECIMALS = 2

SITE_GRID_SIZE = 50
"""Artifact coordinates are drawn from [0, SITE_GRID_SIZE) on each axis."""

DIG_SECTOR_RANGE = (1, 5)
"""Half-open range of sector numbers a prospector starts clearing."""

# =============================================================================
# SURVEY DRONE
# =============================================================================

DRONE_BREAK_PROBABILITY = {
    "Clear": 0.05,
    "Windy": 0.15,
    "Sandstorm": 0.35,
}
"""Per-survey breakdown probability, keyed by weather value."""

DRONE_DEFAULT_BREAK_PROBABILITY = 0.10
"""Used for any weather missing from DRONE_BREAK_PROBABILITY."""

SECTOR_FIND_CHANCE = 0.5
"""Chance that a survey that did not break the drone finds a promising sector."""

SURVEY_SECTOR_RANGE = (1, 6)

# =============================================================================
# COORDINATOR
# =============================================================================

COORDINATOR_WATER_COST = 2
"""Water units spent per route-planning attempt."""

FORECAST_INDEX_RANGE = (0, 6)
"""Half-open range for the forecast lookup index.

Deliberately wider than the three-entry forecast table: roughly half of all
lookups land out of range and must be recovered with the fallback plan.
"""

# =============================================================================
# INVENTORY
# =============================================================================

INVENTORY_WEIGHT_DECIMALS = 3

# =============================================================================
# RUN DEFAULTS
# =============================================================================

DEFAULT_FORECAST = ("clear", "wind", "sandstorm")

STEP_RANGE = (3, 5)
"""Half-open range of action phases when a run does not fix the step count."""

TOOL_DURABILITY_RANGE = (1, 4)
WATER_RANGE = (0, 5)

DEFAULT_TOOL_TITLE = "Brush #5"
DEFAULT_TOOL_WEIGHT = 0.2
DEFAULT_DRONE_NAME = "Falcon Eye"
DEFAULT_PROSPECTOR_NAME = "Inessa"
DEFAULT_TECHNICIAN_NAME = "Saveliy"
DEFAULT_COORDINATOR_NAME = "Leila"
