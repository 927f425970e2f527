"""
Unit tests for neighborhood extraction and convolution.

Tests cover:
- Window extraction sizes and contents
- Shrink law for different kernel sizes
- Identity kernel
- Kernel validation
"""

import numpy as np
import pytest

from imaging.convolution import (apply_convolution, check_kernel, get_neighbors,
                                 matrix_scalar_operator)


@pytest.fixture
def ramp():
    """5x5 matrix with distinct values 0..24."""
    return np.arange(25, dtype=np.float64).reshape(5, 5)


class TestGetNeighbors:
    """Test neighborhood extraction."""

    def test_radius_one_on_5x5(self, ramp):
        windows = get_neighbors(ramp, 1)
        assert windows.shape == (3, 3, 3, 3)

    def test_window_is_centered(self, ramp):
        windows = get_neighbors(ramp, 1)
        np.testing.assert_array_equal(windows[0, 0], ramp[0:3, 0:3])
        np.testing.assert_array_equal(windows[2, 1], ramp[2:5, 1:4])
        assert windows[1, 1][1, 1] == ramp[2, 2]

    def test_too_small_is_empty(self):
        windows = get_neighbors(np.ones((2, 2)), 1)
        assert windows.size == 0
        assert windows.shape[:2] == (0, 0)

    def test_one_axis_too_small_is_empty(self):
        assert get_neighbors(np.ones((5, 2)), 1).shape[:2] == (0, 0)

    def test_radius_zero(self, ramp):
        windows = get_neighbors(ramp, 0)
        assert windows.shape == (5, 5, 1, 1)
        np.testing.assert_array_equal(windows[:, :, 0, 0], ramp)

    def test_negative_radius_rejected(self, ramp):
        with pytest.raises(ValueError, match="non-negative"):
            get_neighbors(ramp, -1)

    def test_windows_do_not_share_input_memory(self):
        matrix = np.zeros((3, 3))
        windows = get_neighbors(matrix, 1)
        matrix[1, 1] = 42.0
        assert windows[0, 0][1, 1] == 0.0
        assert not np.shares_memory(windows, matrix)

    def test_non_2d_rejected(self):
        with pytest.raises(ValueError):
            get_neighbors(np.ones((3, 3, 3)), 1)


class TestApplyConvolution:
    """Test kernel convolution."""

    @pytest.mark.parametrize("h,w,k", [(5, 5, 3), (7, 4, 3), (9, 12, 5), (5, 5, 5), (6, 8, 1)])
    def test_shrink_law(self, h, w, k):
        matrix = np.random.default_rng(0).random((h, w))
        out = apply_convolution(matrix, np.ones((k, k)))
        r = k // 2
        assert out.shape == (h - 2 * r, w - 2 * r)

    def test_identity_kernel(self, ramp):
        out = apply_convolution(ramp, np.array([[1.0]]))
        np.testing.assert_array_equal(out, ramp)

    def test_frobenius_product(self, ramp):
        kernel = np.arange(9, dtype=np.float64).reshape(3, 3)
        out = apply_convolution(ramp, kernel)
        assert out[1, 2] == pytest.approx(np.sum(ramp[1:4, 2:5] * kernel))

    def test_no_kernel_flip(self):
        # Cross-correlation: a horizontal ramp gives a positive Gx response
        matrix = np.tile(np.arange(5, dtype=np.float64), (3, 1))
        gx = np.array([[-1, 0, 1], [-2, 0, 2], [-1, 0, 1]], dtype=np.float64)
        out = apply_convolution(matrix, gx)
        np.testing.assert_allclose(out, np.full((1, 3), 8.0))

    def test_box_blur_of_constant(self):
        out = apply_convolution(np.full((6, 6), 3.0), np.ones((3, 3)) / 9)
        np.testing.assert_allclose(out, np.full((4, 4), 3.0))

    def test_smaller_than_kernel_is_empty(self):
        out = apply_convolution(np.ones((4, 4)), np.ones((5, 5)))
        assert out.shape == (0, 0)

    def test_input_not_modified(self, ramp):
        before = ramp.copy()
        apply_convolution(ramp, np.ones((3, 3)))
        np.testing.assert_array_equal(ramp, before)


class TestKernelValidation:
    """Test kernel precondition checks."""

    def test_non_square(self):
        with pytest.raises(ValueError, match="square"):
            apply_convolution(np.ones((5, 5)), np.ones((3, 1)))

    def test_even_side(self):
        with pytest.raises(ValueError, match="odd"):
            apply_convolution(np.ones((5, 5)), np.ones((2, 2)))

    def test_not_2d(self):
        with pytest.raises(ValueError):
            check_kernel(np.ones(3))

    def test_valid_kernel_passes(self):
        kernel = check_kernel([[0, 1, 0], [1, -4, 1], [0, 1, 0]])
        assert kernel.dtype == np.float64


class TestMatrixScalarOperator:
    """Test elementwise operator helper."""

    def test_add(self):
        out = matrix_scalar_operator(np.ones((2, 3)), np.full((2, 3), 2.0), np.add)
        np.testing.assert_array_equal(out, np.full((2, 3), 3.0))

    def test_shape_mismatch(self):
        with pytest.raises(ValueError, match="mismatch"):
            matrix_scalar_operator(np.ones((2, 3)), np.ones((3, 2)), np.add)
