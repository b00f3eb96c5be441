"""
Right-hand operand sources for channel operations.

An operand turns the image being processed into the array of right channel
values that the operator receives:

- :class:`ConstantOperand` holds a single color. It is remapped by its
  selector once per call and broadcast over all pixels.
- :class:`ImageOperand` holds a second image of the same dimensions. Its
  pixels are remapped by its selector per pixel.
"""

from dataclasses import dataclass, field

import numpy as np

from container_models.base import RGB, RGBArray
from container_models.channels import ChannelSelector
from container_models.image import ImageContainer
from exceptions import ImageShapeMismatchError


@dataclass(frozen=True)
class ConstantOperand:
    color: RGB
    selector: ChannelSelector = field(default_factory=ChannelSelector.identity)

    def resolve(self, image: ImageContainer) -> RGBArray:
        """Return the remapped color as an array of shape (3,)."""
        return self.selector.resolve(np.asarray(self.color, dtype=np.uint8))


@dataclass(frozen=True)
class ImageOperand:
    image: ImageContainer
    selector: ChannelSelector = field(default_factory=ChannelSelector.identity)

    def resolve(self, image: ImageContainer) -> RGBArray:
        """
        Return the remapped pixels of the operand image, shape (H, W, 3).

        :raises ImageShapeMismatchError: If the operand image and `image`
            differ in width or height.
        """
        if self.image.data.shape != image.data.shape:
            raise ImageShapeMismatchError(
                f"Operand image shape: {self.image.data.shape} does not match image shape: {image.data.shape}"
            )
        return self.selector.resolve(self.image.rgb)


type Operand = ConstantOperand | ImageOperand
