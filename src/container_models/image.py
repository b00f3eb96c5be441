"""Image container architecture.

This module defines the data container used to represent images throughout
the library.

Architecture
------------
::

    +--------------------------------------+
    |           ImageContainer             |
    |--------------------------------------|
    | data     : ImageRGBA (H, W, 4) uint8 |
    | height   : int (rows)                |
    | width    : int (columns)             |
    +--------------------------------------+
    | from_file(path) -> cls               |
    | from_pixels(rows) -> cls             |
    | blank(width, height, pixel) -> cls   |
    | get_pixel(x, y) -> Pixel             |
    | put_pixel(x, y, pixel)               |
    | rgb -> RGBArray                      |
    | alpha -> NDArray                     |
    | with_data(data) -> ImageContainer    |
    | export_png(path) -> Path             |
    +--------------------------------------+

- :class:`ImageContainer` is the single container for all pixel data.
- Stores pixels as a row-major ``(height, width, 4)`` uint8 array, origin at
  the top-left corner, channels ordered red, green, blue, alpha.
- Compared by data equality.

.. note::

    Mutations never modify the container they receive. They build a new
    array and wrap it with :meth:`ImageContainer.with_data`.
"""

from __future__ import annotations
from collections.abc import Iterable, Sequence
from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from PIL import Image
from pydantic import BaseModel, ConfigDict

from container_models.base import ImageRGBA, Pixel, RGBArray


class ImageContainer(BaseModel):
    data: ImageRGBA

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True,
        extra="forbid",
        regex_engine="rust-regex",
        revalidate_instances="always",
    )

    @property
    def height(self) -> int:
        """Return the height (number of rows) of the image."""
        return self.data.shape[0]

    @property
    def width(self) -> int:
        """Return the width (number of columns) of the image."""
        return self.data.shape[1]

    @property
    def rgb(self) -> RGBArray:
        """Read-only view on the color channels, shape (H, W, 3)."""
        rgb = self.data[..., :3]
        rgb.setflags(write=False)
        return rgb

    @property
    def alpha(self) -> NDArray[np.uint8]:
        """Read-only view on the alpha channel, shape (H, W)."""
        alpha = self.data[..., 3]
        alpha.setflags(write=False)
        return alpha

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImageContainer):
            return NotImplemented
        return np.array_equal(self.data, other.data)

    def get_pixel(self, x: int, y: int) -> Pixel:
        """Return the pixel at column `x` and row `y`."""
        return Pixel(*(int(value) for value in self.data[y, x]))

    def put_pixel(self, x: int, y: int, pixel: Sequence[int]) -> None:
        """Overwrite the pixel at column `x` and row `y`."""
        self.data[y, x] = pixel

    def with_data(self, data: NDArray) -> ImageContainer:
        """Wrap `data` in a new container of the same type."""
        return self.__class__(data=data)

    @classmethod
    def blank(
        cls, width: int, height: int, pixel: Sequence[int] = (0, 0, 0, 0)
    ) -> ImageContainer:
        """Create an image of `width` x `height` filled with a single pixel value."""
        data = np.empty((height, width, 4), dtype=np.uint8)
        data[...] = pixel
        return cls(data=data)

    @classmethod
    def from_pixels(cls, rows: Iterable[Iterable[Sequence[int]]]) -> ImageContainer:
        """Create an image from rows of RGBA pixels."""
        return cls(data=np.array([list(row) for row in rows], dtype=np.int64))

    @classmethod
    def from_file(cls, image_file: Path) -> ImageContainer:
        """
        Load an image file. Every supported format is converted to 8-bit RGBA.

        :param image_file: The path to the image file.
        :returns: An instance of `ImageContainer`.
        """
        with Image.open(image_file) as image:
            return cls(data=np.asarray(image.convert("RGBA"), dtype=np.uint8).copy())

    def export_png(self, output_path: Path) -> Path:
        """
        Save the image to disk as PNG.

        :param output_path: The path where the image should be written.
        :returns: The path to the saved image.
        """
        Image.fromarray(self.data).save(output_path, format="PNG")
        return output_path
