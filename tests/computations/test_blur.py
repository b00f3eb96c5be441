import numpy as np
import pytest

from computations.blur import blur


class TestBlur:
    def test_zero_radius_returns_copy(self):
        buffer = np.arange(12, dtype=np.uint8).reshape(2, 2, 3)
        result = blur(buffer, 0)
        np.testing.assert_array_equal(result, buffer)
        assert result is not buffer

    def test_constant_image_is_unchanged(self):
        buffer = np.full((6, 6, 3), 100.0)
        np.testing.assert_allclose(blur(buffer, 2.0), buffer)

    def test_channels_are_blurred_independently(self):
        # Arrange
        buffer = np.zeros((9, 9, 3))
        buffer[4, 4, 0] = 255.0
        # Act
        result = blur(buffer, 1.0)
        # Assert
        assert result[..., 1:].max() == 0
        assert result[4, 3, 0] > 0
        assert result[..., 0].sum() == pytest.approx(255.0)

    def test_integer_input_keeps_dtype(self):
        # Arrange
        buffer = np.zeros((5, 5, 3), dtype=np.uint8)
        buffer[2, 2] = 255
        # Act
        result = blur(buffer, 0.8)
        # Assert
        assert result.dtype == np.uint8
        assert 0 < result[2, 2, 0] < 255
