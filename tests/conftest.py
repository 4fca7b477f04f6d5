"""Shared fixtures for pseudohilbert tests."""

import numpy as np
import pytest

from pseudohilbert.curve import generate


# The order-2 curve, quadrant by quadrant.  Every coordinate is a dyadic
# fraction, so the generator must reproduce it exactly.
ORDER_2 = [
    # bottom left
    (0.125, 0.875), (0.375, 0.875), (0.375, 0.625), (0.125, 0.625),
    # top left
    (0.125, 0.375), (0.125, 0.125), (0.375, 0.125), (0.375, 0.375),
    # top right
    (0.625, 0.375), (0.625, 0.125), (0.875, 0.125), (0.875, 0.375),
    # bottom right
    (0.875, 0.625), (0.625, 0.625), (0.625, 0.875), (0.875, 0.875),
]


@pytest.fixture
def order2():
    return np.array(ORDER_2)


@pytest.fixture
def curve4():
    """Fresh order-4 curve (256 points)."""
    return generate(4)


@pytest.fixture
def scattered():
    """Arbitrary non-grid points, some outside the unit square."""
    rng = np.random.default_rng(1234)
    return rng.uniform(-2.0, 3.0, size=(50, 2))
