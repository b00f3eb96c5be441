"""
Channel Operation Mutation
==========================

The channel-remapping operator framework. For every pixel:

1. the left triple is read from the source pixel, remapped by the left
   :class:`~container_models.channels.ChannelSelector`;
2. the right triple comes from the operand (a constant color resolved once
   per call, or a second image resolved per pixel);
3. the operator is applied to the three pairs independently;
4. the alpha of the source pixel is copied unchanged.

Each output pixel depends only on the input pixel at the same position, so
rows are evaluated in independent chunks.
"""

from typing import override

import numpy as np
from loguru import logger
from returns.result import safe

from computations.parallel import partition, run_partitioned
from container_models.base import RGB
from container_models.channels import ChannelSelector
from container_models.image import ImageContainer
from mutations.base import ImageMutation
from mutations.operands import ConstantOperand, Operand
from mutations.operators import Operator, apply_operator, is_unary
from parsers.colors import hex_to_rgb
from settings import get_settings
from utils.logger import log_railway_function


class ChannelOperation(ImageMutation):
    """
    Apply a per-channel operator to every pixel of an image.

    :param operator: Operator variant from :mod:`mutations.operators`.
    :param lhs: Selector for the left operand, identity when omitted.
    :param rhs: Right operand. When omitted, a constant operand of
        `fallback_color` is used.
    :param fallback_color: Color used when `rhs` is omitted. Defaults to the
        configured `fallback_color` setting.
    :param max_workers: Number of threads, defaults to the `max_workers` setting.
    """

    def __init__(
        self,
        operator: Operator,
        lhs: ChannelSelector | None = None,
        rhs: Operand | None = None,
        fallback_color: RGB | None = None,
        max_workers: int | None = None,
    ) -> None:
        settings = get_settings()
        self.operator = operator
        self.lhs = lhs or ChannelSelector.identity()
        self.rhs = rhs or ConstantOperand(
            fallback_color or hex_to_rgb(settings.fallback_color)
        )
        self.max_workers = max_workers or settings.max_workers
        self.chunk_rows = settings.chunk_rows

    @log_railway_function(
        "Failed to apply channel operation",
        "Successfully applied channel operation",
    )
    @safe
    def __call__(self, image: ImageContainer) -> ImageContainer:
        return self.apply_on_image(image)

    @override
    def apply_on_image(self, image: ImageContainer) -> ImageContainer:
        """
        Evaluate the operator for all pixels.

        :param image: Source image, left operand and alpha source.
        :returns: New image of the same size.
        :raises ImageShapeMismatchError: If an image operand differs in size.
        """
        logger.debug(
            f"Applying {self.operator} with lhs={self.lhs} on {image.width}x{image.height} image"
        )
        right = (
            np.zeros(3, dtype=np.uint8)
            if is_unary(self.operator)
            else self.rhs.resolve(image)
        )
        output = np.empty_like(image.data)

        def evaluate_rows(rows: slice) -> None:
            right_rows = right if right.ndim == 1 else right[rows]
            output[rows, :, :3] = apply_operator(
                self.operator, self.lhs.resolve(image.rgb[rows]), right_rows
            )
            output[rows, :, 3] = image.alpha[rows]

        run_partitioned(
            evaluate_rows, partition(image.height, self.chunk_rows), self.max_workers
        )
        return image.with_data(output)
