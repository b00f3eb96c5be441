from typing import Final

# ITU-R BT.709 luma coefficients for R, G and B.
LUMINANCE_WEIGHTS: Final[tuple[float, float, float]] = (0.2126, 0.7152, 0.0722)

CHANNEL_MAX: Final[int] = 255
CHANNEL_LEVELS: Final[int] = 256
MAX_SHIFT_BITS: Final[int] = 8

# Index of the all-zero pseudo channel used by lenient channel selectors.
ZERO_CHANNEL_INDEX: Final[int] = 3
