"""
Scanline Pixel Sorting
======================

Pixel sorting streaks an image by sorting the pixels that satisfy a key
predicate, independently along every row (horizontal) or column (vertical).

For one scanline:

1. the predicate is evaluated once for every pixel, giving a selection mask;
2. the selected pixels are stable-sorted by their key, ascending or, when
   reversed, descending;
3. the sorted pixels are written back into the selected positions in order.

Unselected pixels keep their position and value, and the selected pixels of
a line are only permuted among themselves. Because both the gather and the
scatter step use the same mask, the number of sorted values always equals
the number of positions they are written to.
"""

from typing import override

import numpy as np
from loguru import logger
from returns.result import safe

from computations.color import key_values
from computations.parallel import partition, run_partitioned
from container_models.base import BinaryMask, KeyArray
from container_models.image import ImageContainer
from container_models.predicates import KeyPredicate
from models.enums import Direction
from mutations.base import ImageMutation
from settings import get_settings
from utils.logger import log_railway_function


def sort_scanline(
    line: np.ndarray, keys: KeyArray, mask: BinaryMask, reverse: bool = False
) -> None:
    """
    Sort the selected pixels of a single scanline in place.

    :param line: Pixels of the line, shape (N, 4). Modified in place.
    :param keys: Key value of every pixel, shape (N,).
    :param mask: Selection mask, shape (N,).
    :param reverse: Sort descending instead of ascending. Pixels with equal
        keys keep their relative order in both directions.
    """
    selected_keys = keys[mask]
    if selected_keys.size < 2:
        return
    order = np.argsort(-selected_keys if reverse else selected_keys, kind="stable")
    line[mask] = line[mask][order]


class PixelSort(ImageMutation):
    """
    Image mutation that sorts the pixels matching a predicate along every
    row or column.

    The predicate key is also the sort key.
    """

    def __init__(
        self,
        predicate: KeyPredicate,
        direction: Direction = Direction.HORIZONTAL,
        reverse: bool = False,
        max_workers: int | None = None,
    ) -> None:
        """
        Initialize the PixelSort mutation.

        :param predicate: Key and threshold ranges selecting sortable pixels.
        :param direction: Sort along rows (horizontal) or columns (vertical).
        :param reverse: Sort descending.
        :param max_workers: Number of threads, defaults to the `max_workers` setting.
        """
        self.predicate = predicate
        self.direction = direction
        self.reverse = reverse
        self.max_workers = max_workers or get_settings().max_workers

    @log_railway_function(
        "Failed to sort pixels",
        "Successfully sorted pixels",
    )
    @safe
    def __call__(self, image: ImageContainer) -> ImageContainer:
        return self.apply_on_image(image)

    def _as_lines[T: np.ndarray](self, array: T) -> T:
        """View `array` with scanlines along the first axis."""
        if self.direction is Direction.VERTICAL:
            return np.swapaxes(array, 0, 1)
        return array

    @override
    def apply_on_image(self, image: ImageContainer) -> ImageContainer:
        """
        Sort every scanline of the image.

        :param image: Input image, not modified.
        :returns: New image with sorted scanlines.
        """
        output = image.data.copy()
        keys = key_values(image.rgb, self.predicate.key)
        mask = self.predicate.evaluate(keys)

        lines = self._as_lines(output)
        line_keys = self._as_lines(keys)
        line_masks = self._as_lines(mask)
        n_lines = lines.shape[0]
        logger.debug(
            f"Sorting {int(mask.sum())} selected pixels over {n_lines} "
            f"{self.direction} lines by {self.predicate.key}"
        )

        def sort_lines(part: slice) -> None:
            for index in range(part.start, part.stop):
                sort_scanline(
                    lines[index], line_keys[index], line_masks[index], self.reverse
                )

        lines_per_task = max(1, -(-n_lines // self.max_workers))
        run_partitioned(sort_lines, partition(n_lines, lines_per_task), self.max_workers)
        return image.with_data(output)
