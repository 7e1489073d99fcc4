"""Type definitions and constants for the ENERGRID simulation engine.

Energy quantities are dimensionless floats: one unit is whatever a steady
consumer draws per step. The preset constants below describe the two source
presets and the default simulation cadence.
"""

# =============================================================================
# Energy Type Definitions and Aliases
# =============================================================================

type Energy = float

# =============================================================================
# Source Presets
# =============================================================================

# Wind turbine: 1 unit per step, 50k units over its life
WIND_TURBINE_RESERVE: float = 50_000.0
WIND_TURBINE_CAPACITY: float = 1.0

# Coal power plant: 1k units per step, 219M units over its life
COAL_POWER_PLANT_RESERVE: float = 219_000_000.0
COAL_POWER_PLANT_CAPACITY: float = 1_000.0

# =============================================================================
# Load Presets
# =============================================================================

STEADY_DEMAND: float = 1_000.0
TURBINE_BUILD_LOAD: float = 80.0  # Energy spent to manufacture one turbine

# =============================================================================
# Simulation Cadence
# =============================================================================

HOURS_PER_YEAR: int = 365 * 24
DEFAULT_MAX_STEPS: int = HOURS_PER_YEAR * 500
DEFAULT_BUILD_INTERVAL: int = 75  # Steps between two turbine builds
DEFAULT_PROGRESS_INTERVAL: int = 1_000


def steps_to_years(steps: int) -> float:
    """Convert hourly steps to years.

    Args:
        steps: Number of elapsed hourly steps

    Returns:
        Elapsed time in years
    """
    return steps / HOURS_PER_YEAR
