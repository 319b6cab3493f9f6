import math

import numpy as np
import pytest

from rspath import AckermannParams, Pose, polyline_length, poses_to_array
from rspath import config


def test_translated_uses_heading_aligned_frame():
    pose = Pose(1.0, 2.0, math.pi / 2.0)
    moved = pose.translated(2.0, 1.0)
    assert abs(moved.x - 0.0) < 1e-12
    assert abs(moved.y - 4.0) < 1e-12
    assert moved.theta == pose.theta
    assert pose == Pose(1.0, 2.0, math.pi / 2.0)


def test_add_heading_and_copy_return_new_poses():
    pose = Pose(0.0, 0.0, 3.0)
    turned = pose.add_heading(1.0)
    assert turned.theta == 4.0
    assert pose.theta == 3.0
    clone = pose.copy()
    assert clone == pose and clone is not pose


def test_poses_to_array_and_polyline_length():
    poses = [Pose(0.0, 0.0, 0.0), Pose(3.0, 4.0, 0.1), Pose(3.0, 6.0, 0.2)]
    arr = poses_to_array(poses)
    assert arr.shape == (3, 3)
    assert np.allclose(arr[:, 2], [0.0, 0.1, 0.2])
    assert polyline_length(poses) == 7.0
    assert poses_to_array([]).shape == (0, 3)
    assert polyline_length([]) == 0.0


def test_default_params_come_from_config():
    params = AckermannParams()
    assert params.min_turn_radius == config.DEFAULT_TURN_RADIUS
    assert params.reverse_cost_multiplier == config.DEFAULT_REVERSE_COST_MULTIPLIER
    assert params.gear_switch_cost == config.DEFAULT_GEAR_SWITCH_COST
    assert abs(params.max_curvature * params.min_turn_radius - 1.0) < 1e-12


@pytest.mark.parametrize(
    "kwargs",
    [
        {"min_turn_radius": 0.0},
        {"min_turn_radius": math.inf},
        {"reverse_cost_multiplier": 0.9},
        {"gear_switch_cost": -1.0},
    ],
)
def test_params_validation(kwargs):
    with pytest.raises(ValueError):
        AckermannParams(**kwargs)
