"""Pseudo-Hilbert curve coordinates for plotting, with optional smoothing.

Thin layer over pseudohilbert.curve so plot code gets plain (xs, ys)
arrays in the unit square.
"""

import numpy as np

from pseudohilbert.curve import generate


# ── Traversal palette (start → end of the curve) ──────────────────────
CURVE_CMAP = "viridis"
BACKGROUND = "#1a1a2e"

# Line widths that keep the curve readable as order grows
LINE_WIDTHS = {1: 3.0, 2: 2.2, 3: 1.6, 4: 1.1, 5: 0.7, 6: 0.45}
MIN_LINE_WIDTH = 0.25


def line_width(order):
    return LINE_WIDTHS.get(order, MIN_LINE_WIDTH)


def chaikin_smooth(xs, ys, iterations=2):
    """Round corners of a polyline using Chaikin's corner-cutting algorithm.

    Each iteration replaces every segment with two points at 25 % and 75 %,
    progressively turning sharp turns into smooth arcs.  The smoothed line
    stays inside the convex hull of the input, so a curve in the unit
    square stays in the unit square.
    """
    pts = np.column_stack([xs, ys])
    for _ in range(iterations):
        q = 0.75 * pts[:-1] + 0.25 * pts[1:]   # 25 % along each segment
        r = 0.25 * pts[:-1] + 0.75 * pts[1:]   # 75 % along each segment
        new_pts = np.empty((2 * len(q), 2))
        new_pts[0::2] = q
        new_pts[1::2] = r
        pts = new_pts
    return pts[:, 0], pts[:, 1]


def curve_xy(order, smooth=0):
    """Return (xs, ys) for the pseudo-Hilbert curve of ``order``.

    ``smooth`` is the number of Chaikin iterations (0 = raw corners).
    """
    pts = generate(order)
    xs, ys = pts[:, 0], pts[:, 1]
    if smooth:
        xs, ys = chaikin_smooth(xs, ys, iterations=smooth)
    return xs, ys
