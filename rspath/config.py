"""
Package-wide defaults for vehicle and cost tunables.

Every value can be overridden through the environment before import.
"""

import logging
import os

logger = logging.getLogger(__name__)

# Minimum turning radius (m) used when no vehicle parameters are given.
DEFAULT_TURN_RADIUS: float = float(os.getenv("RSPATH_TURN_RADIUS", "1.1284"))

# Reverse segments cost this many times their forward equivalent.
DEFAULT_REVERSE_COST_MULTIPLIER: float = float(os.getenv("RSPATH_REVERSE_COST_MULTIPLIER", "1.0"))

# Fixed penalty (m) charged for every forward/backward switch.
DEFAULT_GEAR_SWITCH_COST: float = float(os.getenv("RSPATH_GEAR_SWITCH_COST", "0.0"))

logger.debug(
    "rspath defaults: turn_radius=%.4f reverse_cost_multiplier=%.3f gear_switch_cost=%.3f",
    DEFAULT_TURN_RADIUS,
    DEFAULT_REVERSE_COST_MULTIPLIER,
    DEFAULT_GEAR_SWITCH_COST,
)
