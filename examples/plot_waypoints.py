"""
Quick-start visualization for sampled Reeds-Shepp plans.

What it does:
- Builds a few hand-written plans (as a solver would emit them).
- Samples waypoints at the vehicle turn radius.
- Plots the sampled poses with heading arrows and prints each plan's cost.

Run:
    python -m examples.plot_waypoints

If you don't have matplotlib installed, install it with:
    pip install matplotlib
"""

import math
from pathlib import Path

import numpy as np

from rspath import AckermannParams, ActionSet, Gear, Pose, Steer, poses_to_array

try:
    import matplotlib.pyplot as plt
except ImportError:
    plt = None


def make_plans():
    parallel_park = ActionSet()
    parallel_park.add_action(Steer.STRAIGHT, Gear.FORWARD, 1.5)
    parallel_park.add_action(Steer.RIGHT, Gear.BACKWARD, math.pi / 4.0)
    parallel_park.add_action(Steer.LEFT, Gear.BACKWARD, math.pi / 4.0)

    u_turn = ActionSet.from_segments(("L", "S", "L"), (1.8, 2.0, 1.8), turning_radius=1.1284)

    three_point = ActionSet()
    three_point.add_action(Steer.LEFT, Gear.FORWARD, math.pi / 3.0)
    three_point.add_action(Steer.RIGHT, Gear.BACKWARD, math.pi / 3.0)
    three_point.add_action(Steer.LEFT, Gear.FORWARD, math.pi / 3.0)
    return {"parallel park": parallel_park, "u-turn": u_turn, "three point": three_point}


def plot(plans, params: AckermannParams, start: Pose):
    if plt is None:
        print("matplotlib not available; install it with `pip install matplotlib` to see the plot.")
        return

    fig, ax = plt.subplots(figsize=(7, 5))
    ax.scatter(start.x, start.y, c="green", marker="*", s=90, label="start")
    for label, action_set in plans.items():
        arr = poses_to_array(action_set.waypoints_for(start, params))
        ax.plot(arr[:, 0], arr[:, 1], lw=1.5, marker="o", markersize=3, label=label)
        ax.quiver(arr[:, 0], arr[:, 1], np.cos(arr[:, 2]), np.sin(arr[:, 2]), width=0.003, alpha=0.5)

    ax.set_aspect("equal")
    ax.set_title("Reeds-Shepp waypoints")
    ax.legend(loc="best")
    out_dir = Path(__file__).resolve().parent / "outputs"
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / "reeds_shepp_waypoints.png"
    fig.savefig(out_path, dpi=150, bbox_inches="tight")
    print(f"Saved: {out_path}")
    plt.show()


def main():
    params = AckermannParams(min_turn_radius=1.1284, reverse_cost_multiplier=1.5, gear_switch_cost=2.0)
    start = Pose(0.0, 0.0, 0.0)
    plans = make_plans()
    for label, action_set in plans.items():
        print(f"{label}: {action_set} cost={action_set.cost_for(params):.3f} m")
    plot(plans, params, start)


if __name__ == "__main__":
    main()
