import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from . import config
from .common import euclidean, require_non_negative, require_positive


@dataclass
class AckermannParams:
    min_turn_radius: float = config.DEFAULT_TURN_RADIUS
    # Reverse segments are multiplicative, gear switches are additive.
    reverse_cost_multiplier: float = config.DEFAULT_REVERSE_COST_MULTIPLIER
    gear_switch_cost: float = config.DEFAULT_GEAR_SWITCH_COST

    def __post_init__(self):
        self.min_turn_radius = require_positive("min_turn_radius", self.min_turn_radius)
        self.reverse_cost_multiplier = float(self.reverse_cost_multiplier)
        if not math.isfinite(self.reverse_cost_multiplier) or self.reverse_cost_multiplier < 1.0:
            raise ValueError("reverse_cost_multiplier must be finite and >= 1")
        self.gear_switch_cost = require_non_negative("gear_switch_cost", self.gear_switch_cost)

    @property
    def max_curvature(self) -> float:
        return 1.0 / self.min_turn_radius


@dataclass
class Pose:
    x: float
    y: float
    theta: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.theta

    def copy(self) -> "Pose":
        return Pose(self.x, self.y, self.theta)

    def translated(self, dx: float, dy: float) -> "Pose":
        """Return a pose offset by (dx, dy) given in this pose's heading-aligned frame."""
        cos_t = math.cos(self.theta)
        sin_t = math.sin(self.theta)
        return Pose(
            self.x + cos_t * dx - sin_t * dy,
            self.y + sin_t * dx + cos_t * dy,
            self.theta,
        )

    def add_heading(self, delta: float) -> "Pose":
        # Heading is left unwrapped so consecutive samples stay continuous.
        return Pose(self.x, self.y, self.theta + delta)


def poses_to_array(poses: Sequence) -> np.ndarray:
    """Stack poses into an (N, 3) array of x, y, theta."""
    if not poses:
        return np.zeros((0, 3), dtype=float)
    return np.array([(p.x, p.y, p.theta) for p in poses], dtype=float)


def polyline_length(poses: Sequence) -> float:
    """Distance traveled along the straight chords joining consecutive poses."""
    total = 0.0
    for a, b in zip(poses, poses[1:]):
        total += euclidean((a.x, a.y), (b.x, b.y))
    return total
