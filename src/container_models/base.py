from __future__ import annotations
from collections.abc import Sequence
from functools import partial
from typing import Annotated, NamedTuple

import numpy as np
from numpy import uint8
from numpy.typing import NDArray
from pydantic import AfterValidator, BeforeValidator, PlainSerializer

from computations.color import KeyArray, RGBArray


class RGB(NamedTuple):
    red: int
    green: int
    blue: int


class Pixel(NamedTuple):
    red: int
    green: int
    blue: int
    alpha: int

    @property
    def rgb(self) -> RGB:
        return RGB(self.red, self.green, self.blue)


def serialize_ndarray(array_: NDArray) -> list:
    """Serialize numpy array to a Python list for JSON serialization."""
    return array_.tolist()


def coerce_to_uint8(value: Sequence | NDArray | None) -> NDArray[uint8] | None:
    """
    Coerce input to a `uint8` numpy array.

    Integer arrays of another dtype are accepted as long as every value fits
    in 0..255, so nested lists and int64 arrays can be used to build images.
    """
    if isinstance(value, Sequence):
        value = np.asarray(value)
    if isinstance(value, np.ndarray) and value.dtype != uint8:
        if not np.issubdtype(value.dtype, np.integer):
            raise ValueError(f"Expected integer pixel values, got dtype {value.dtype}")
        if value.size and (value.min() < 0 or value.max() > 255):
            raise ValueError("Array's value(s) out of range")
        return value.astype(uint8)
    return value


def validate_shape(n_dims: int, value: NDArray) -> NDArray:
    if (array_dims := len(value.shape)) != n_dims:
        raise ValueError(
            f"Array shape mismatch, expected {n_dims} dimension(s), but got {array_dims}"
        )
    return value


def validate_channels(n_channels: int, value: NDArray) -> NDArray:
    if value.shape[-1] != n_channels:
        raise ValueError(
            f"Expected {n_channels} channels, but got {value.shape[-1]}"
        )
    return value


type ImageRGBA = Annotated[
    NDArray[uint8],
    BeforeValidator(coerce_to_uint8),
    AfterValidator(partial(validate_shape, 3)),
    AfterValidator(partial(validate_channels, 4)),
    PlainSerializer(serialize_ndarray),
]  # Shape: (H, W, 4)
type BinaryMask = NDArray[np.bool_]  # Shape: (...)
