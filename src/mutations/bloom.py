from typing import override

import numpy as np
from loguru import logger
from returns.result import safe

from computations.blur import blur
from computations.color import luminance
from container_models.image import ImageContainer
from mutations.base import ImageMutation
from utils.constants import CHANNEL_MAX
from utils.logger import log_railway_function


class GlowBloom(ImageMutation):
    """
    Luminance-masked bloom.

    Pixels brighter than `threshold` form a bright pass, all other pixels are
    black in it. The bright pass is blurred and added onto the source image,
    scaled by `intensity` and clamped to 255. Alpha is copied unchanged.

    This differs from :class:`~mutations.operators.BloomMix`, which mixes
    every pixel with a constant color and does not blur.
    """

    def __init__(self, threshold: float, radius: float, intensity: float = 1.0) -> None:
        """
        :param threshold: Luminance (0-255) a pixel must exceed to glow.
        :param radius: Standard deviation of the Gaussian blur in pixels.
        :param intensity: Weight of the blurred bright pass.
        """
        if radius < 0:
            raise ValueError("`radius` must be a non-negative number.")
        if intensity < 0:
            raise ValueError("`intensity` must be a non-negative number.")
        self.threshold = threshold
        self.radius = radius
        self.intensity = intensity

    @property
    def skip_predicate(self) -> bool:
        """Skip when the bright pass has no weight."""
        if self.intensity == 0:
            logger.warning("skipping bloom, intensity is zero.")
            return True
        return False

    @log_railway_function(
        "Failed to apply bloom",
        "Successfully applied bloom",
    )
    @safe
    def __call__(self, image: ImageContainer) -> ImageContainer:
        if self.skip_predicate:
            return image.with_data(image.data.copy())
        return self.apply_on_image(image)

    @override
    def apply_on_image(self, image: ImageContainer) -> ImageContainer:
        """
        Add the blurred bright pass to the image.

        :param image: Input image, not modified.
        :returns: New image with glow applied.
        """
        rgb = image.rgb.astype(np.float64)
        bright = luminance(image.rgb) > self.threshold
        logger.debug(
            f"Blooming {int(bright.sum())} bright pixels with radius {self.radius}"
        )
        bright_pass = np.where(bright[..., np.newaxis], rgb, 0.0)
        glow = blur(bright_pass, self.radius)

        output = image.data.copy()
        output[..., :3] = np.trunc(
            np.clip(rgb + glow * self.intensity, 0, CHANNEL_MAX)
        ).astype(np.uint8)
        return image.with_data(output)
