from dataclasses import dataclass
from enum import Enum

from .common import require_non_negative


class Gear(Enum):
    FORWARD = "Forward"
    BACKWARD = "Backward"

    def __str__(self) -> str:
        return self.value


class Steer(Enum):
    LEFT = "Left"
    STRAIGHT = "Straight"
    RIGHT = "Right"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Action:
    """One constant-steer, constant-gear segment.

    `length` is normalized by the turn radius: swept angle (radians) for a
    curve, distance over turn radius for a straight.
    """

    steer: Steer
    gear: Gear
    length: float

    def __post_init__(self):
        if not isinstance(self.steer, Steer):
            raise TypeError(f"steer must be a Steer, got {self.steer!r}")
        if not isinstance(self.gear, Gear):
            raise TypeError(f"gear must be a Gear, got {self.gear!r}")
        object.__setattr__(self, "length", require_non_negative("length", self.length))

    @property
    def is_curve(self) -> bool:
        return self.steer is not Steer.STRAIGHT

    @property
    def is_reverse(self) -> bool:
        return self.gear is Gear.BACKWARD

    def __str__(self) -> str:
        return f"{self.steer} {self.gear} {self.length:.1f}"
