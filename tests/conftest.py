import logging

import numpy as np
import pytest
from loguru import logger

from container_models import ImageContainer
from settings import get_settings

RED = (255, 0, 0, 255)


class PropagateHandler(logging.Handler):
    """Handler that propagates loguru records to standard logging."""

    def emit(self, record: logging.LogRecord) -> None:
        logging.getLogger(record.name).handle(record)


@pytest.fixture
def caplog(caplog):
    """Fixture to enable caplog to capture loguru logs."""
    handler_id = logger.add(PropagateHandler(), format="{message}")
    yield caplog
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read the settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def red_image() -> ImageContainer:
    """A 2x2 solid red, opaque image."""
    return ImageContainer.blank(width=2, height=2, pixel=RED)


@pytest.fixture
def random_image() -> ImageContainer:
    """A 7x5 image of random colors and random alpha."""
    rng = np.random.default_rng(42)
    return ImageContainer(data=rng.integers(0, 256, size=(5, 7, 4), dtype=np.uint8))


@pytest.fixture
def gradient_image() -> ImageContainer:
    """A 4x3 image whose red channel decreases from left to right."""
    row = [(200, 0, 0, 255), (150, 0, 0, 128), (100, 0, 0, 64), (50, 0, 0, 0)]
    return ImageContainer.from_pixels([row, row, row])
