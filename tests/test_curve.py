"""Tests for recursive pseudo-Hilbert generation."""

import numpy as np
import pytest

from pseudohilbert import curve
from pseudohilbert.analyze import seam_indices, step_lengths
from pseudohilbert.config import BASE_PATTERN
from pseudohilbert.curve import InvalidOrderError, generate, num_points


class TestBaseCase:

    def test_order_one_pattern(self):
        pts = generate(1)
        np.testing.assert_array_equal(
            pts, [[0.25, 0.75], [0.25, 0.25], [0.75, 0.25], [0.75, 0.75]]
        )

    def test_order_one_is_a_copy(self):
        pts = generate(1)
        pts[:] = 0.0
        np.testing.assert_array_equal(generate(1), np.array(BASE_PATTERN))

    def test_dtype_and_layout(self):
        pts = generate(3)
        assert pts.dtype == np.float64
        assert pts.flags.c_contiguous
        assert pts.flags.writeable


class TestRecursion:

    def test_order_two_exact(self, order2):
        np.testing.assert_array_equal(generate(2), order2)

    @pytest.mark.parametrize("order", range(1, 8))
    def test_length(self, order):
        pts = generate(order)
        assert pts.shape == (4 ** order, 2)
        assert len(pts) == num_points(order)

    @pytest.mark.parametrize("order", range(1, 8))
    def test_inside_unit_square(self, order):
        pts = generate(order)
        assert pts.min() >= -1e-9
        assert pts.max() <= 1 + 1e-9

    @pytest.mark.parametrize("order", range(2, 8))
    def test_seams_no_larger_than_inner_steps(self, order):
        steps = step_lengths(generate(order))
        seams = seam_indices(order)
        inner = np.delete(steps, seams)
        for i in seams:
            assert steps[i] <= inner.max() + 1e-12

    @pytest.mark.parametrize("order", range(1, 8))
    def test_every_step_is_one_grid_cell(self, order):
        steps = step_lengths(generate(order))
        np.testing.assert_allclose(steps, 2.0 ** -order, rtol=1e-9)

    @pytest.mark.parametrize("order", range(1, 6))
    def test_visits_every_cell_centre_once(self, order):
        side = 2 ** order
        cells = np.floor(generate(order) * side).astype(int)
        assert len({tuple(c) for c in cells}) == side * side

    def test_starts_bottom_left_ends_bottom_right(self, curve4):
        cell = 2.0 ** -5
        np.testing.assert_allclose(curve4[0], [cell, 1 - cell])
        np.testing.assert_allclose(curve4[-1], [1 - cell, 1 - cell])

    def test_quadrants_in_fixed_order(self, curve4):
        quarter = len(curve4) // 4
        centres = [curve4[i * quarter:(i + 1) * quarter].mean(axis=0) for i in range(4)]
        np.testing.assert_allclose(
            centres, [[0.25, 0.75], [0.25, 0.25], [0.75, 0.25], [0.75, 0.75]]
        )

    def test_top_quadrants_are_scaled_copies(self):
        lo = generate(3)
        hi = generate(4)
        quarter = len(lo)
        np.testing.assert_array_equal(hi[quarter:2 * quarter], lo * 0.5)
        np.testing.assert_array_equal(hi[2 * quarter:3 * quarter],
                                      lo * 0.5 + [0.5, 0.0])


class TestDeterminism:

    def test_idempotent(self):
        np.testing.assert_array_equal(generate(6), generate(6))

    def test_returns_fresh_arrays(self):
        a = generate(3)
        b = generate(3)
        assert a is not b
        a[0] = (9.0, 9.0)
        assert b[0, 0] != 9.0

    @pytest.mark.parametrize("workers", [2, 4, 8])
    def test_threaded_matches_sequential(self, workers):
        np.testing.assert_array_equal(generate(6, workers=workers), generate(6))


class TestInvalidOrder:

    @pytest.mark.parametrize("order", [0, -1, -15])
    def test_below_one_raises(self, order):
        with pytest.raises(InvalidOrderError):
            generate(order)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            generate(0)

    @pytest.mark.parametrize("order", [1.5, "3", None])
    def test_non_integer_raises_type_error(self, order):
        with pytest.raises(TypeError):
            generate(order)

    def test_num_points_validates(self):
        with pytest.raises(InvalidOrderError):
            num_points(0)

    def test_numpy_integer_accepted(self):
        assert generate(np.int64(2)).shape == (16, 2)

    def test_memory_error_propagates(self, monkeypatch):
        def no_memory(*args, **kwargs):
            raise MemoryError("cannot allocate")

        monkeypatch.setattr(curve.np, "empty", no_memory)
        with pytest.raises(MemoryError):
            generate(3)
