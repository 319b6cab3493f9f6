import math

from rspath import ActionSet, Pose
from rspath.common import heading_diff


def test_reeds_shepp_straight_line():
    action_set = ActionSet.from_segments(("S",), (2.0,), turning_radius=1.0)
    end = action_set.get_waypoints(Pose(0.0, 0.0, 0.0), 1.0)[-1]
    assert abs(action_set.length - 2.0) < 1e-6
    assert abs(end.x - 2.0) < 1e-9
    assert abs(end.y) < 1e-9


def test_reeds_shepp_lsl_reaches_goal():
    r = 1.5
    quarter = r * math.pi / 2.0
    action_set = ActionSet.from_segments(("L", "S", "L"), (quarter, 3.0, quarter), turning_radius=r)
    end = action_set.get_waypoints(Pose(0.0, 0.0, 0.0), r)[-1]
    # Left quarter turn, 3 m north, left quarter turn.
    assert abs(end.x - 0.0) < 1e-9
    assert abs(end.y - (2.0 * r + 3.0)) < 1e-9
    assert abs(heading_diff(end.theta, math.pi)) < 1e-9
    assert abs(action_set.calculate_cost(r, 1.0, 0.0) - (2.0 * quarter + 3.0)) < 1e-9


def test_reeds_shepp_cusp_plan_charges_reverse():
    r = 1.0
    action_set = ActionSet.from_segments(("R", "L"), (0.5, -0.5), turning_radius=r)
    assert action_set.gear_switches == 1
    assert abs(action_set.calculate_cost(r, 2.0, 1.0) - (0.5 + 1.0 + 1.0)) < 1e-9
    end = action_set.get_waypoints(Pose(0.0, 0.0, 0.0), r)[-1]
    # Reverse with left steer keeps rotating clockwise.
    assert abs(end.theta - (-1.0)) < 1e-9
