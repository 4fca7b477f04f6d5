"""Recursive pseudo-Hilbert curve construction.

An order-N curve is four copies of the order-(N-1) curve, each reflected
and rotated so its endpoints meet its neighbours, then scaled by one half
into its quadrant.  Quadrants are laid out in the same order as the
order-1 pattern: bottom-left, top-left, top-right, bottom-right.
"""

import operator
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from pseudohilbert.config import (
    BASE_PATTERN,
    CENTER,
    DEFAULT_WORKERS,
    QUADRANT_ORIGINS,
    QUADRANT_SCALE,
)
from pseudohilbert.geometry import (
    reflect_vertical,
    rotate_clockwise,
    rotate_counterclockwise,
    scale,
)

DTYPE = np.float64


class InvalidOrderError(ValueError):
    """Raised when a curve order below 1 is requested."""


def _validate_order(order):
    order = operator.index(order)  # TypeError for floats, strings, None
    if order < 1:
        raise InvalidOrderError(f"curve order must be >= 1, got {order}")
    return order


def num_points(order):
    """Number of points in a curve of the given order (4 ** order)."""
    return 1 << (2 * _validate_order(order))


# ── Quadrant transforms ───────────────────────────────────────────────

def _orient_bottom_left(work):
    reflect_vertical(work, 0.5)
    rotate_clockwise(work, CENTER)


def _orient_bottom_right(work):
    reflect_vertical(work, 0.5)
    rotate_counterclockwise(work, CENTER)


# None = the lower-order curve is already oriented for that quadrant
QUADRANT_TRANSFORMS = (
    _orient_bottom_left,
    None,   # top left
    None,   # top right
    _orient_bottom_right,
)


def _fill_quadrant(out, lo, i):
    """Copy ``lo`` into slice ``i`` of ``out`` and transform it in place."""
    n = len(lo)
    work = out[i * n:(i + 1) * n]
    work[:] = lo
    orient = QUADRANT_TRANSFORMS[i]
    if orient is not None:
        orient(work)
    scale(work, QUADRANT_SCALE, QUADRANT_ORIGINS[i])


# ── Public API ────────────────────────────────────────────────────────

def generate(order, workers=None):
    """Return the pseudo-Hilbert curve of ``order`` as a (4**order, 2) array.

    The caller owns the returned array.  With ``workers`` > 1 the four
    quadrants are filled from a thread pool; the result is identical to the
    sequential build.

    Raises InvalidOrderError for order < 1 and TypeError for non-integers.
    MemoryError from numpy is left to propagate.
    """
    order = _validate_order(order)
    if workers is None:
        workers = DEFAULT_WORKERS
    return _build(order, workers)


def _build(order, workers):
    if order == 1:
        return np.array(BASE_PATTERN, dtype=DTYPE)

    # Shared read-only template for all four quadrants
    lo = _build(order - 1, workers)
    lo.flags.writeable = False

    out = np.empty((4 * len(lo), 2), dtype=DTYPE)
    quadrants = range(len(QUADRANT_ORIGINS))
    if workers > 1:
        with ThreadPoolExecutor(max_workers=min(workers, 4)) as pool:
            futures = [pool.submit(_fill_quadrant, out, lo, i) for i in quadrants]
            for future in futures:
                future.result()
    else:
        for i in quadrants:
            _fill_quadrant(out, lo, i)
    return out
