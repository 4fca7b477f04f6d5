"""Curve sanity statistics: point count, bounds, and quadrant-seam steps."""

import numpy as np

from pseudohilbert.config import TOLERANCE
from pseudohilbert.curve import num_points


def step_lengths(points):
    """Euclidean distance between each pair of consecutive points."""
    return np.hypot(*np.diff(points, axis=0).T)


def seam_indices(order):
    """Step indices where one quadrant's copy hands over to the next.

    Step ``k`` joins point ``k`` to point ``k + 1``; for order N the seams
    sit at ``q*4**(N-1) - 1`` for q = 1, 2, 3.  Order 1 has no seams.
    """
    if order < 2:
        return []
    quarter = num_points(order - 1)
    return [q * quarter - 1 for q in (1, 2, 3)]


def _inner_steps(steps, order):
    mask = np.ones(len(steps), dtype=bool)
    mask[seam_indices(order)] = False
    return steps[mask]


def curve_stats(points, order):
    """Summary dict for a generated curve."""
    steps = step_lengths(points)
    seams = seam_indices(order)
    return {
        "order": order,
        "points": len(points),
        "expected_points": num_points(order),
        "x_min": float(points[:, 0].min()),
        "x_max": float(points[:, 0].max()),
        "y_min": float(points[:, 1].min()),
        "y_max": float(points[:, 1].max()),
        "min_step": float(steps.min()),
        "max_step": float(steps.max()),
        "expected_step": 2.0 ** -order,
        "seam_steps": [float(steps[i]) for i in seams],
    }


def check_curve(points, order, tol=TOLERANCE):
    """Return a list of problems with ``points``; empty means it looks right."""
    problems = []
    expected = num_points(order)
    if len(points) != expected:
        problems.append(f"expected {expected} points, got {len(points)}")
        return problems

    low = points.min(axis=0)
    high = points.max(axis=0)
    if (low < -tol).any() or (high > 1 + tol).any():
        problems.append(
            f"coordinates outside the unit square: "
            f"x [{low[0]:.6g}, {high[0]:.6g}], y [{low[1]:.6g}, {high[1]:.6g}]"
        )

    if order >= 2:
        steps = step_lengths(points)
        inner_max = _inner_steps(steps, order).max()
        for i in seam_indices(order):
            if steps[i] > inner_max + tol:
                problems.append(
                    f"jump of {steps[i]:.6g} at seam {i}->{i + 1} "
                    f"(largest in-quadrant step {inner_max:.6g})"
                )
    return problems


def print_curve_summary(stats):
    """Print a short report for one curve_stats() dict."""
    print(f"  Order:       {stats['order']}")
    print(f"  Points:      {stats['points']} (expected {stats['expected_points']})")
    print(f"  X range:     [{stats['x_min']:.15f}, {stats['x_max']:.15f}]")
    print(f"  Y range:     [{stats['y_min']:.15f}, {stats['y_max']:.15f}]")
    print(f"  Step length: {stats['min_step']:.6g} .. {stats['max_step']:.6g} "
          f"(grid {stats['expected_step']:.6g})")
    if stats["seam_steps"]:
        seams = ", ".join(f"{s:.6g}" for s in stats["seam_steps"])
        print(f"  Seam steps:  {seams}")
