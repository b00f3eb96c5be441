"""
Image Mutations Module
======================

This package contains all available `ImageMutation` implementations.

Each mutation represents a single, well-defined transformation that can
be applied to an `ImageContainer`. Mutations are designed to be composable and
can be chained together using a pipeline (e.g. `returns.pipeline.flow`).
"""

from .bloom import GlowBloom
from .channel_operation import ChannelOperation
from .filter import ThresholdFilter
from .operands import ConstantOperand, ImageOperand
from .sort import PixelSort


__all__ = [
    "ChannelOperation",
    "ConstantOperand",
    "GlowBloom",
    "ImageOperand",
    "PixelSort",
    "ThresholdFilter",
]
