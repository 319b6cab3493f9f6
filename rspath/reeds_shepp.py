import logging
import math
from typing import Iterable, Iterator, List, Sequence, Tuple

from .common import require_non_negative, require_positive
from .primitives import Action, Gear, Steer
from .robot import AckermannParams

logger = logging.getLogger(__name__)

_SEGMENT_STEER = {
    "L": Steer.LEFT,
    "S": Steer.STRAIGHT,
    "R": Steer.RIGHT,
}


class ActionSet:
    """
    Ordered Reeds-Shepp plan: a sequence of actions and their summed length.

    `length` is the sum of the normalized action lengths, or `math.inf` for a
    plan the solver marked as infeasible. An infinite set stays infinite.
    """

    def __init__(self, initial_length: float = 0.0):
        initial_length = float(initial_length)
        if initial_length != 0.0 and initial_length != math.inf:
            raise ValueError("initial_length must be 0 or math.inf")
        self.actions: List[Action] = []
        self.length = initial_length

    @classmethod
    def infeasible(cls) -> "ActionSet":
        return cls(math.inf)

    @classmethod
    def from_segments(
        cls,
        segment_types: Sequence[str],
        segment_lengths: Sequence[float],
        turning_radius: float,
    ) -> "ActionSet":
        """
        Build a plan from L/S/R segment types and signed lengths in meters.

        A negative length means the segment is driven in reverse. Zero-length
        segments are dropped.
        """
        turning_radius = require_positive("turning_radius", turning_radius)
        if len(segment_types) != len(segment_lengths):
            raise ValueError("Segment types and lengths differ")
        action_set = cls()
        for seg_type, seg_len in zip(segment_types, segment_lengths):
            steer = _SEGMENT_STEER.get(seg_type)
            if steer is None:
                raise ValueError(f"Unknown Reeds–Shepp segment type: {seg_type!r}")
            seg_len = float(seg_len)
            if abs(seg_len) <= 1e-9:
                continue
            gear = Gear.FORWARD if seg_len >= 0.0 else Gear.BACKWARD
            action_set.add_action(steer, gear, abs(seg_len) / turning_radius)
        logger.debug("Converted %d segments into %s", len(segment_types), action_set)
        return action_set

    def add_action(self, steer: Steer, gear: Gear, length: float) -> Action:
        action = Action(steer, gear, length)
        self.actions.append(action)
        if self.length != math.inf:
            self.length += action.length
        return action

    def freeze(self) -> Tuple[Action, ...]:
        return tuple(self.actions)

    @property
    def is_feasible(self) -> bool:
        return self.length != math.inf and bool(self.actions)

    @property
    def gear_switches(self) -> int:
        return sum(1 for a, b in zip(self.actions, self.actions[1:]) if a.gear is not b.gear)

    def __len__(self) -> int:
        return len(self.actions)

    def __iter__(self) -> Iterator[Action]:
        return iter(self.actions)

    def __str__(self) -> str:
        return "".join(str(a) for a in self.actions)

    def __repr__(self) -> str:
        return f"ActionSet(length={self.length!r}, actions={self.actions!r})"

    def calculate_cost(self, unit: float, reverse_cost_multiplier: float, gear_switch_cost: float) -> float:
        return calculate_cost(self, unit, reverse_cost_multiplier, gear_switch_cost)

    def cost_for(self, params: AckermannParams) -> float:
        """Cost in meters using the vehicle's turn radius and penalties."""
        return calculate_cost(
            self, params.min_turn_radius, params.reverse_cost_multiplier, params.gear_switch_cost
        )

    def get_waypoints(self, start, turn_radius: float) -> list:
        return get_waypoints(self, start, turn_radius)

    def waypoints_for(self, start, params: AckermannParams) -> list:
        return get_waypoints(self, start, params.min_turn_radius)


def _check_cost_weights(unit: float, reverse_cost_multiplier: float, gear_switch_cost: float) -> Tuple[float, float, float]:
    unit = require_non_negative("unit", unit)
    reverse_cost_multiplier = float(reverse_cost_multiplier)
    if not math.isfinite(reverse_cost_multiplier) or reverse_cost_multiplier < 1.0:
        raise ValueError("reverse_cost_multiplier must be finite and >= 1")
    gear_switch_cost = require_non_negative("gear_switch_cost", gear_switch_cost)
    return unit, reverse_cost_multiplier, gear_switch_cost


def _fold_cost(
    actions: Sequence[Action], unit: float, reverse_cost_multiplier: float, gear_switch_cost: float
) -> float:
    # Lengths are summed before scaling by `unit` so that neutral weights give
    # exactly the same result as `length * unit`.
    weighted_length = 0.0
    switch_cost = 0.0
    prev_gear = actions[0].gear
    for action in actions:
        if action.gear is Gear.BACKWARD:
            weighted_length += action.length * reverse_cost_multiplier
        else:
            weighted_length += action.length
        if action.gear is not prev_gear:
            switch_cost += gear_switch_cost
        prev_gear = action.gear
    return weighted_length * unit + switch_cost


def calculate_cost(
    action_set: ActionSet, unit: float, reverse_cost_multiplier: float, gear_switch_cost: float
) -> float:
    """
    Scalar cost of a plan for ranking candidates.

    Backward actions are scaled by `reverse_cost_multiplier` and every change
    of gear between consecutive actions adds `gear_switch_cost`. Infeasible or
    empty plans cost `math.inf`.
    """
    unit, reverse_cost_multiplier, gear_switch_cost = _check_cost_weights(
        unit, reverse_cost_multiplier, gear_switch_cost
    )
    if action_set.length == math.inf or not action_set.actions:
        return math.inf
    if reverse_cost_multiplier == 1.0 and gear_switch_cost == 0.0:
        return action_set.length * unit
    return _fold_cost(action_set.actions, unit, reverse_cost_multiplier, gear_switch_cost)


def step_count(action: Action, turn_radius: float) -> int:
    """Number of samples for an action, about one per meter and never zero."""
    return max(1, int(math.ceil(action.length * turn_radius)))


def _action_step(action: Action, turn_radius: float, n: int) -> Tuple[float, float, float]:
    """Local-frame (dx, dy) and heading change for one of the `n` steps of `action`."""
    if action.steer is Steer.STRAIGHT:
        dx = action.length * turn_radius / n
        if action.gear is Gear.BACKWARD:
            dx = -dx
        return dx, 0.0, 0.0

    piece_angle = action.length / n
    # Chord of the arc, bisected by heading + phi.
    phi = piece_angle / 2.0
    chord = 2.0 * turn_radius * math.sin(phi)
    dx = chord * math.cos(phi)
    dy = chord * math.sin(phi)
    if action.steer is Steer.RIGHT:
        dy = -dy
        piece_angle = -piece_angle
    if action.gear is Gear.BACKWARD:
        dx = -dx
        piece_angle = -piece_angle
    return dx, dy, piece_angle


def get_waypoints(actions: Iterable[Action], start, turn_radius: float) -> list:
    """
    Sample the poses reached by driving `actions` from `start`.

    `start` only needs `copy()`, `translated(dx, dy)` and `add_heading(delta)`.
    The first pose is a copy of `start`; each action contributes
    `step_count(action, turn_radius)` poses placed exactly on its arc.
    """
    turn_radius = require_positive("turn_radius", turn_radius)
    prev = start.copy()
    poses = [prev]
    n_actions = 0
    for action in actions:
        n_actions += 1
        n = step_count(action, turn_radius)
        dx, dy, dtheta = _action_step(action, turn_radius, n)
        for _ in range(n):
            prev = prev.translated(dx, dy)
            if dtheta:
                prev = prev.add_heading(dtheta)
            poses.append(prev)
    logger.debug("Sampled %d poses from %d actions (turn_radius=%.3f)", len(poses), n_actions, turn_radius)
    return poses
