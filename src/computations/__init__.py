"""
Stateless numeric helpers used by the mutations: color-space conversion,
blurring and data-parallel partitioning.
"""

from .blur import blur
from .color import key_values, luminance, rgb_to_hsv
from .parallel import partition, run_partitioned

__all__ = [
    "blur",
    "key_values",
    "luminance",
    "rgb_to_hsv",
    "partition",
    "run_partitioned",
]
