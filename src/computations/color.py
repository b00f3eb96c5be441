"""Pure color-space helpers operating on arrays of RGB values."""

import numpy as np
from numpy.typing import NDArray

from models.enums import SortKey
from utils.constants import CHANNEL_MAX, LUMINANCE_WEIGHTS

type RGBArray = NDArray[np.uint8]  # Shape: (..., 3)
type KeyArray = NDArray[np.float64]  # Shape: (...)


def luminance(rgb: RGBArray) -> KeyArray:
    """
    Compute the perceptual brightness of RGB values with ITU-R BT.709 weights.

    :param rgb: Array of shape (..., 3).
    :returns: Array of shape (...) with values in [0, 255].
    """
    return rgb.astype(np.float64) @ np.asarray(LUMINANCE_WEIGHTS)


def rgb_to_hsv(rgb: RGBArray) -> tuple[KeyArray, KeyArray, KeyArray]:
    """
    Convert RGB values to hue, saturation and value.

    Hue is expressed in degrees in [0, 360), saturation and value in [0, 1].
    Grey pixels get hue 0 and black pixels get saturation 0.

    :param rgb: Array of shape (..., 3).
    :returns: Tuple of hue, saturation and value arrays of shape (...).
    """
    scaled = rgb.astype(np.float64) / CHANNEL_MAX
    red, green, blue = scaled[..., 0], scaled[..., 1], scaled[..., 2]
    maximum = scaled.max(axis=-1)
    delta = maximum - scaled.min(axis=-1)

    chromatic = delta > 0
    safe_delta = np.where(chromatic, delta, 1.0)
    hue = np.select(
        [maximum == red, maximum == green],
        [
            np.mod((green - blue) / safe_delta, 6.0),
            (blue - red) / safe_delta + 2.0,
        ],
        default=(red - green) / safe_delta + 4.0,
    )
    hue = np.where(chromatic, hue * 60.0, 0.0)

    saturation = np.divide(
        delta, maximum, out=np.zeros_like(delta), where=maximum > 0
    )
    return hue, saturation, maximum


def key_values(rgb: RGBArray, key: SortKey) -> KeyArray:
    """
    Compute the numeric value of `key` for every pixel.

    Units: luminance and the color channels in [0, 255], hue in degrees
    [0, 360), saturation and value in [0, 1].
    """
    match key:
        case SortKey.LUMINANCE:
            return luminance(rgb)
        case SortKey.RED:
            return rgb[..., 0].astype(np.float64)
        case SortKey.GREEN:
            return rgb[..., 1].astype(np.float64)
        case SortKey.BLUE:
            return rgb[..., 2].astype(np.float64)
        case SortKey.HUE:
            return rgb_to_hsv(rgb)[0]
        case SortKey.SATURATION:
            return rgb_to_hsv(rgb)[1]
        case SortKey.VALUE:
            return rgb_to_hsv(rgb)[2]
