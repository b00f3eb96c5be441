"""
Parsing of operation configuration and image files.

The configuration parsers turn the textual arguments a command line tool
receives (channel names, colors, keys, directions, thresholds) into typed
values, raising a :class:`~exceptions.ConfigurationError` subclass when an
argument is invalid. The loaders read and write image files within
railway-oriented pipelines, returning `IOResult` containers.
"""

from .colors import hex_to_rgb, parse_color, parse_rgba
from .loaders import load_image, save_image
from .tokens import (
    parse_channel_selector,
    parse_direction,
    parse_filter_mode,
    parse_sort_key,
    parse_threshold_ranges,
)

__all__ = (
    "hex_to_rgb",
    "load_image",
    "parse_channel_selector",
    "parse_color",
    "parse_direction",
    "parse_filter_mode",
    "parse_rgba",
    "parse_sort_key",
    "parse_threshold_ranges",
    "save_image",
)
