"""
Immutable value types and the image container used by every mutation.

The :class:`ImageContainer` wraps a decoded RGBA buffer. Mutations receive a
container and return a new one, so an input image is never modified and can
be fed to several independent operations.
"""

from .base import RGB, Pixel
from .channels import ChannelSelector
from .image import ImageContainer
from .predicates import KeyPredicate, ThresholdRange


__all__ = [
    "ImageContainer",
    "ChannelSelector",
    "KeyPredicate",
    "Pixel",
    "RGB",
    "ThresholdRange",
]
