from __future__ import annotations
from collections.abc import Iterable
from typing import NamedTuple

import numpy as np

from container_models.base import RGBArray
from models.enums import Channel
from utils.constants import ZERO_CHANNEL_INDEX


class ChannelSelector(NamedTuple):
    """
    Source channel index for each destination channel (red, green, blue).

    Indices 0, 1 and 2 select red, green and blue of the source. Index 3
    selects a channel of zeros, which is what unknown channel names resolve
    to when selectors are parsed leniently.
    """

    red: int
    green: int
    blue: int

    @classmethod
    def identity(cls) -> ChannelSelector:
        return cls(0, 1, 2)

    @classmethod
    def from_channels(cls, channels: Iterable[Channel | None]) -> ChannelSelector:
        indices = [
            ZERO_CHANNEL_INDEX if channel is None else channel.index
            for channel in channels
        ]
        if len(indices) != 3:
            raise ValueError(f"A channel selector needs 3 channels, got {len(indices)}")
        return cls(*indices)

    @property
    def is_identity(self) -> bool:
        return self == self.identity()

    def resolve(self, rgb: RGBArray) -> RGBArray:
        """
        Remap the last axis of `rgb` according to this selector.

        :param rgb: Array of shape (..., 3) with red, green and blue values.
        :returns: A new array of the same shape with the selected channels.
        """
        if self.is_identity:
            return rgb.copy()
        padded = np.concatenate([rgb, np.zeros_like(rgb[..., :1])], axis=-1)
        return padded[..., list(self)]

    def __str__(self) -> str:
        return ",".join("rgb0"[index] for index in self)
