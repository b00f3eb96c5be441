from functools import reduce
from typing import NamedTuple

import numpy as np
from pydantic import Field

from computations.color import key_values
from container_models.base import BinaryMask, KeyArray, RGBArray
from models.base import BaseModelConfig
from models.enums import SortKey


class ThresholdRange(NamedTuple):
    """Open interval of key values; both bounds are excluded."""

    minimum: float
    maximum: float

    def contains(self, values: KeyArray) -> BinaryMask:
        return (values > self.minimum) & (values < self.maximum)


class KeyPredicate(BaseModelConfig):
    """
    Membership test of a pixel key against one or more threshold ranges.

    A pixel matches when its key lies strictly inside any of the ranges.
    """

    key: SortKey = Field(..., description="Pixel property that is tested.")
    ranges: tuple[ThresholdRange, ...] = Field(
        ...,
        min_length=1,
        description="Ranges in the native unit of the key: 0-255 for luminance and "
        "channels, 0-360 for hue, 0-1 for saturation and value.",
    )

    def evaluate(self, values: KeyArray) -> BinaryMask:
        """Evaluate the predicate on precomputed key values."""
        return reduce(
            np.logical_or,
            (threshold.contains(values) for threshold in self.ranges),
        )

    def mask(self, rgb: RGBArray) -> BinaryMask:
        """Evaluate the predicate on every pixel of an array of shape (..., 3)."""
        return self.evaluate(key_values(rgb, self.key))
