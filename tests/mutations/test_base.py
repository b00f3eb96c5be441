from typing import override

import numpy as np
import pytest
from returns.pipeline import flow, is_successful
from returns.pointfree import bind

from container_models import ImageContainer
from mutations.base import ImageMutation


class TestBaseMutations:
    class FakeMutation(ImageMutation):
        @property
        def skip_predicate(self) -> bool:
            return self.value == 0

        def __init__(self, value: int) -> None:
            self.value = value

        @override
        def apply_on_image(self, image: ImageContainer) -> ImageContainer:
            """Brighten the red channel by `value`."""
            data = image.data.copy()
            data[..., 0] += self.value
            return image.with_data(data)

    @pytest.fixture
    def image_container(self) -> ImageContainer:
        return ImageContainer.blank(2, 2, (10, 0, 0, 255))

    @pytest.mark.parametrize(
        "get_result",
        [
            pytest.param(
                lambda mutation, image_container: mutation.apply_on_image(
                    image_container
                ),
                id="apply_on_image",
            ),
            pytest.param(
                lambda mutation, image_container: mutation(image_container).unwrap(),
                id="call_interface",
            ),
        ],
    )
    def test_returns_edited_image(self, image_container: ImageContainer, get_result):
        # Arrange
        mutation = self.FakeMutation(value=5)
        # Act
        result = get_result(mutation, image_container)
        # Assert
        assert result.get_pixel(1, 1).red == 15
        assert image_container.get_pixel(1, 1).red == 10

    def test_call_wraps_exception_in_failure(
        self, image_container: ImageContainer, monkeypatch: pytest.MonkeyPatch
    ):
        # Arrange
        def raise_error(*_):
            raise RuntimeError("boom")

        monkeypatch.setattr(self.FakeMutation, "apply_on_image", raise_error)
        mutation = self.FakeMutation(value=2)
        # Act
        result = mutation(image_container)
        # Assert
        assert not is_successful(result)

    def test_skip_returns_copy(self, image_container: ImageContainer):
        # Act
        result = self.FakeMutation(value=0)(image_container).unwrap()
        # Assert
        assert result == image_container
        assert result.data is not image_container.data, "Skipped mutation must copy."

    def test_mutations_chain_in_flow(self, image_container: ImageContainer):
        # Act
        result = flow(
            image_container,
            self.FakeMutation(value=1),
            bind(self.FakeMutation(value=2)),
            bind(self.FakeMutation(value=3)),
        )
        # Assert
        assert result.unwrap().get_pixel(0, 0).red == 16
        np.testing.assert_array_equal(result.unwrap().alpha, image_container.alpha)
