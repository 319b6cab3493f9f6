"""
Cost evaluation and waypoint sampling for Reeds-Shepp plans of car-like robots.
Exports:
- ActionSet, Action, Gear, Steer
- PathWord
- AckermannParams, Pose
"""

from .primitives import Action, Gear, Steer
from .path_words import PATH_WORD_FAMILIES, PathWord
from .reeds_shepp import ActionSet, calculate_cost, get_waypoints
from .robot import AckermannParams, Pose, polyline_length, poses_to_array

__all__ = [
    "Action",
    "ActionSet",
    "AckermannParams",
    "Gear",
    "PATH_WORD_FAMILIES",
    "PathWord",
    "Pose",
    "Steer",
    "calculate_cost",
    "get_waypoints",
    "polyline_length",
    "poses_to_array",
]
