import re

import numpy as np
import pytest

from container_models import RGB, ChannelSelector, ImageContainer
from exceptions import ImageShapeMismatchError
from mutations import ChannelOperation, ConstantOperand, ImageOperand
from mutations.operators import (
    Add,
    Divide,
    Multiply,
    Overlay,
    ShiftLeft,
    ShiftRight,
    Subtract,
)
from parsers import parse_channel_selector

BLUE = RGB(0, 0, 255)


class TestChannelOperation:
    @pytest.mark.parametrize(
        "operator, expected",
        [
            pytest.param(Add(), (255, 0, 255, 255), id="add"),
            pytest.param(Subtract(), (255, 0, 255, 255), id="sub"),
            pytest.param(Multiply(), (0, 0, 0, 255), id="mult"),
            pytest.param(Divide(), (255, 0, 0, 255), id="div"),
        ],
    )
    def test_red_image_against_blue(
        self, red_image: ImageContainer, operator, expected: tuple[int, ...]
    ):
        # Arrange
        operation = ChannelOperation(operator, rhs=ConstantOperand(BLUE))
        # Act
        result = operation(red_image).unwrap()
        # Assert
        assert result.height == red_image.height
        assert result.width == red_image.width
        assert all(
            result.get_pixel(x, y) == expected
            for x in range(result.width)
            for y in range(result.height)
        )

    def test_shift_left_with_explicit_selector(self, red_image: ImageContainer):
        # Arrange
        operation = ChannelOperation(
            ShiftLeft(bits=1),
            lhs=parse_channel_selector(["r", "g", "b"]),
            rhs=ConstantOperand(BLUE),
        )
        # Act
        result = operation(red_image).unwrap()
        # Assert
        assert result.get_pixel(0, 0) == (255, 0, 0, 255)

    def test_overlay_red_on_red(self, red_image: ImageContainer):
        operation = ChannelOperation(Overlay(), rhs=ConstantOperand(RGB(255, 0, 0)))
        result = operation(red_image).unwrap()
        assert result == red_image

    def test_left_selector_swaps_channels(self):
        # Arrange
        image = ImageContainer.from_pixels([[(10, 20, 30, 40)]])
        operation = ChannelOperation(
            Add(), lhs=ChannelSelector(2, 1, 0), rhs=ConstantOperand(RGB(0, 0, 0))
        )
        # Act
        result = operation(image).unwrap()
        # Assert
        assert result.get_pixel(0, 0) == (30, 20, 10, 40)

    def test_right_selector_remaps_constant(self):
        # Arrange
        image = ImageContainer.from_pixels([[(0, 0, 0, 255)]])
        rhs = ConstantOperand(RGB(1, 2, 3), ChannelSelector(2, 2, 3))
        # Act
        result = ChannelOperation(Add(), rhs=rhs)(image).unwrap()
        # Assert
        assert result.get_pixel(0, 0) == (3, 3, 0, 255)

    def test_missing_operand_uses_fallback_color(self, red_image: ImageContainer):
        result = ChannelOperation(Add())(red_image).unwrap()
        assert result == red_image

    def test_fallback_color_argument(self, red_image: ImageContainer):
        operation = ChannelOperation(Add(), fallback_color=RGB(0, 10, 0))
        result = operation(red_image).unwrap()
        assert result.get_pixel(1, 1) == (255, 10, 0, 255)

    def test_fallback_color_from_settings(
        self, red_image: ImageContainer, monkeypatch: pytest.MonkeyPatch
    ):
        # Arrange
        monkeypatch.setenv("IMOPS_FALLBACK_COLOR", "#000080")
        # Act
        result = ChannelOperation(Add())(red_image).unwrap()
        # Assert
        assert result.get_pixel(0, 1) == (255, 0, 128, 255)

    def test_unary_operator_ignores_operand(self):
        # Arrange
        image = ImageContainer.from_pixels([[(128, 64, 3, 7)]])
        operation = ChannelOperation(ShiftRight(bits=1), rhs=ConstantOperand(BLUE))
        # Act
        result = operation(image).unwrap()
        # Assert
        assert result.get_pixel(0, 0) == (64, 32, 1, 7)

    def test_image_operand(self, gradient_image: ImageContainer):
        # Arrange
        other = ImageContainer.blank(
            gradient_image.width, gradient_image.height, (0, 5, 0, 0)
        )
        other.put_pixel(0, 0, (55, 5, 0, 0))
        operation = ChannelOperation(
            Add(), rhs=ImageOperand(other, ChannelSelector(0, 1, 1))
        )
        # Act
        result = operation(gradient_image).unwrap()
        # Assert
        assert result.get_pixel(0, 0) == (255, 5, 5, 255)
        assert result.get_pixel(3, 2) == (50, 5, 5, 0)

    def test_image_operand_shape_mismatch(self, red_image: ImageContainer):
        # Arrange
        other = ImageContainer.blank(3, 2)
        operation = ChannelOperation(Add(), rhs=ImageOperand(other))
        expected = f"Operand image shape: {other.data.shape} does not match image shape: {red_image.data.shape}"
        # Act / Assert
        with pytest.raises(ImageShapeMismatchError, match=re.escape(expected)):
            operation.apply_on_image(red_image)

    def test_image_operand_shape_mismatch_is_failure(self, red_image: ImageContainer):
        operation = ChannelOperation(Add(), rhs=ImageOperand(ImageContainer.blank(1, 1)))
        result = operation(red_image)
        assert isinstance(result.failure(), ImageShapeMismatchError)

    def test_alpha_is_preserved(self, random_image: ImageContainer):
        result = ChannelOperation(Multiply(), rhs=ConstantOperand(BLUE))(
            random_image
        ).unwrap()
        np.testing.assert_array_equal(result.alpha, random_image.alpha)

    def test_input_is_not_modified(self, random_image: ImageContainer):
        # Arrange
        original = random_image.data.copy()
        # Act
        _ = ChannelOperation(Add(raw=True), rhs=ConstantOperand(BLUE))(random_image)
        # Assert
        np.testing.assert_array_equal(random_image.data, original)

    @pytest.mark.parametrize("max_workers", [1, 2, 4])
    def test_parallel_rows_match_sequential(
        self,
        random_image: ImageContainer,
        monkeypatch: pytest.MonkeyPatch,
        max_workers: int,
    ):
        # Arrange
        monkeypatch.setenv("IMOPS_CHUNK_ROWS", "2")
        operator = Subtract(raw=True)
        rhs = ConstantOperand(RGB(17, 99, 201))
        expected = ChannelOperation(operator, rhs=rhs, max_workers=1)(random_image)
        # Act
        result = ChannelOperation(operator, rhs=rhs, max_workers=max_workers)(
            random_image
        )
        # Assert
        assert result.unwrap() == expected.unwrap()
