import numpy as np
from numpy.typing import NDArray
from scipy.ndimage import gaussian_filter

from utils.constants import CHANNEL_MAX


def blur[T: np.number](buffer: NDArray[T], radius: float) -> NDArray[T]:
    """
    Gaussian blur every channel of an image buffer independently.

    This function wraps `scipy.ndimage.gaussian_filter`, using `radius` as
    the standard deviation along both image axes and no smoothing across
    channels. Borders are handled by reflection.

    :param buffer: Array of shape (H, W, C).
    :param radius: Standard deviation of the Gaussian kernel in pixels.
    :returns: Blurred array with the dtype of `buffer`. Integer input is
        rounded and clipped to the 8-bit range.
    """
    if radius <= 0:
        return buffer.copy()
    blurred = gaussian_filter(
        buffer.astype(np.float64), sigma=(radius, radius, 0), mode="reflect"
    )
    if np.issubdtype(buffer.dtype, np.integer):
        return np.clip(np.rint(blurred), 0, CHANNEL_MAX).astype(buffer.dtype)
    return blurred.astype(buffer.dtype)
