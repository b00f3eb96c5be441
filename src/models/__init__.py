from .base import BaseModelConfig
from .enums import Channel, Direction, FilterMode, SortKey

__all__ = ["BaseModelConfig", "Channel", "Direction", "FilterMode", "SortKey"]
