"""In-place geometric transforms over (n, 2) point arrays.

All functions mutate ``points`` and return it so calls can be chained.
Coordinates are y-down (screen convention), which swaps the usual sign
pattern of the rotation formulas:

    clockwise:          (x, y) -> (-y, x)
    counter-clockwise:  (x, y) -> (y, -x)

both taken relative to the rotation origin.
"""

import numpy as np


def _check(points):
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"expected an (n, 2) point array, got shape {points.shape}")
    if not np.issubdtype(points.dtype, np.floating):
        raise ValueError(f"expected a floating-point array, got dtype {points.dtype}")


def _reflect(column, origin):
    column -= origin
    column *= -1
    column += origin


# ── Reflections ───────────────────────────────────────────────────────

def reflect_vertical(points, origin_x):
    """Mirror every point across the vertical line x = origin_x."""
    _check(points)
    _reflect(points[:, 0], origin_x)
    return points


def reflect_horizontal(points, origin_y):
    """Mirror every point across the horizontal line y = origin_y."""
    _check(points)
    _reflect(points[:, 1], origin_y)
    return points


# ── Rotations ─────────────────────────────────────────────────────────

def _rotate(points, origin, negate_axis):
    _check(points)
    origin = np.asarray(origin, dtype=np.float64)
    points -= origin
    points[:, [0, 1]] = points[:, [1, 0]]
    points[:, negate_axis] *= -1
    points += origin
    return points


def rotate_clockwise(points, origin):
    """Rotate 90° clockwise about ``origin`` (y-down)."""
    return _rotate(points, origin, 0)


def rotate_counterclockwise(points, origin):
    """Rotate 90° counter-clockwise about ``origin`` (y-down)."""
    return _rotate(points, origin, 1)


# ── Scaling ───────────────────────────────────────────────────────────

def scale(points, factor, origin):
    """Scale uniformly by ``factor`` about ``origin``.

    With factor 0.5 and a corner of the unit square as origin, this both
    shrinks a full-size curve to a quarter of the area and moves it into
    that corner's quadrant.
    """
    _check(points)
    origin = np.asarray(origin, dtype=np.float64)
    points -= origin
    points *= factor
    points += origin
    return points
