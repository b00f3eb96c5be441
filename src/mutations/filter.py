from typing import override

import numpy as np
from loguru import logger
from returns.result import safe

from container_models.base import Pixel
from container_models.channels import ChannelSelector
from container_models.image import ImageContainer
from container_models.predicates import KeyPredicate
from models.enums import FilterMode
from mutations.base import ImageMutation
from utils.logger import log_railway_function


class ThresholdFilter(ImageMutation):
    """
    Image mutation that replaces pixels based on a key range predicate.

    In `include` mode pixels that do not match the predicate are replaced,
    in `exclude` mode pixels that match are replaced. Replaced pixels get the
    full replacement value including its alpha; other pixels are copied
    unchanged.
    """

    def __init__(
        self,
        predicate: KeyPredicate,
        mode: FilterMode,
        replacement: Pixel,
        lhs: ChannelSelector | None = None,
    ) -> None:
        """
        Initialize the ThresholdFilter mutation.

        :param predicate: Key and threshold ranges tested for every pixel.
        :param mode: Whether matching pixels are kept or replaced.
        :param replacement: RGBA value written into replaced pixels.
        :param lhs: Selector remapping the channels that feed the predicate.
        """
        self.predicate = predicate
        self.mode = mode
        self.replacement = replacement
        self.lhs = lhs or ChannelSelector.identity()

    @log_railway_function(
        "Failed to filter image",
        "Successfully filtered image",
    )
    @safe
    def __call__(self, image: ImageContainer) -> ImageContainer:
        return self.apply_on_image(image)

    def replacement_mask(self, image: ImageContainer) -> np.ndarray:
        """Boolean (H, W) mask of the pixels that will be replaced."""
        matches = self.predicate.mask(self.lhs.resolve(image.rgb))
        match self.mode:
            case FilterMode.INCLUDE:
                return ~matches
            case FilterMode.EXCLUDE:
                return matches

    @override
    def apply_on_image(self, image: ImageContainer) -> ImageContainer:
        """
        Replace the pixels selected by the predicate and mode.

        :param image: Input image, not modified.
        :returns: New image with replaced pixels.
        """
        replace = self.replacement_mask(image)
        logger.debug(
            f"Replacing {int(replace.sum())} of {replace.size} pixels "
            f"({self.mode} {self.predicate.key})"
        )
        output = image.data.copy()
        output[replace] = self.replacement
        return image.with_data(output)
