from pathlib import Path

from returns.io import impure_safe

from container_models.image import ImageContainer
from utils.logger import log_railway_function


@log_railway_function(
    "Failed to load image file",
    "Successfully loaded image file",
)
@impure_safe
def load_image(image_file: Path) -> ImageContainer:
    """
    Load an image file into an RGBA `ImageContainer`.

    :param image_file: The path to a file in any format Pillow can decode.
    :returns: An `IOResult` with the loaded image.
    """
    return ImageContainer.from_file(image_file)


@log_railway_function(
    "Failed to save image file",
    "Successfully saved image file",
)
@impure_safe
def save_image(image: ImageContainer, output_path: Path) -> Path:
    """
    Write an `ImageContainer` to disk as PNG.

    :param image: The image to save.
    :param output_path: Destination path; parent directories must exist.
    :returns: An `IOResult` with the written path.
    """
    return image.export_png(output_path)
