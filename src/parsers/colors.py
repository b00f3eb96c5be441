import re
from collections.abc import Sequence
from numbers import Integral
from typing import Final

from container_models.base import RGB, Pixel
from exceptions import ColorParseError
from utils.constants import CHANNEL_MAX

_HEX_COLOR: Final[re.Pattern[str]] = re.compile(
    r"#?(?P<digits>[0-9a-fA-F]{6}(?:[0-9a-fA-F]{2})?)"
)


def _hex_digits(value: str, allow_alpha: bool) -> list[int]:
    match = _HEX_COLOR.fullmatch(value.strip())
    if match is None or (len(match["digits"]) == 8 and not allow_alpha):
        expected = "#rrggbb[aa]" if allow_alpha else "#rrggbb"
        raise ColorParseError(f"Invalid hex color: {value!r}, expected {expected}")
    digits = match["digits"]
    return [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]


def hex_to_rgb(value: str) -> RGB:
    """
    Decode a ``#rrggbb`` or ``rrggbb`` hex string.

    :raises ColorParseError: If `value` is not a 6 digit hex color.
    """
    return RGB(*_hex_digits(value, allow_alpha=False))


def _channels_from_sequence(value: Sequence, size: int) -> list[int]:
    if len(value) != size:
        raise ColorParseError(f"Expected {size} color channels, got {len(value)}")
    channels = []
    for channel in value:
        if isinstance(channel, bool) or not isinstance(channel, Integral):
            raise ColorParseError(f"Color channel must be an integer, got {channel!r}")
        if not 0 <= channel <= CHANNEL_MAX:
            raise ColorParseError(
                f"Color channel must be between 0 and {CHANNEL_MAX}, got {channel}"
            )
        channels.append(int(channel))
    return channels


def parse_color(value: str | Sequence[int]) -> RGB:
    """
    Parse a constant color from a hex string or a sequence of three integers.

    :raises ColorParseError: If the value cannot be decoded.
    """
    if isinstance(value, str):
        return hex_to_rgb(value)
    return RGB(*_channels_from_sequence(value, 3))


def parse_rgba(value: str | Sequence[int]) -> Pixel:
    """
    Parse a pixel value with optional alpha.

    Accepts ``#rrggbb``, ``#rrggbbaa`` or a sequence of three or four
    integers. Alpha defaults to 255.

    :raises ColorParseError: If the value cannot be decoded.
    """
    if isinstance(value, str):
        channels = _hex_digits(value, allow_alpha=True)
    else:
        channels = _channels_from_sequence(value, 4 if len(value) == 4 else 3)
    if len(channels) == 3:
        channels.append(CHANNEL_MAX)
    return Pixel(*channels)
