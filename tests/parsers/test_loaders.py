from pathlib import Path

from returns.io import IOSuccess
from returns.pipeline import is_successful

from container_models import ImageContainer
from parsers import load_image, save_image


class TestLoaders:
    def test_save_then_load(self, gradient_image: ImageContainer, tmp_path: Path):
        # Arrange
        path = tmp_path / "gradient.png"
        # Act
        saved = save_image(gradient_image, path)
        loaded = load_image(path)
        # Assert
        assert saved == IOSuccess(path)
        assert loaded == IOSuccess(gradient_image)

    def test_missing_file_is_failure(self, tmp_path: Path, caplog):
        # Act
        result = load_image(tmp_path / "missing.png")
        # Assert
        assert not is_successful(result)
        assert "Failed to load image file" in caplog.messages

    def test_save_into_missing_directory_is_failure(
        self, red_image: ImageContainer, tmp_path: Path
    ):
        result = save_image(red_image, tmp_path / "missing" / "red.png")
        assert not is_successful(result)

    def test_load_logs_success(self, red_image: ImageContainer, tmp_path: Path, caplog):
        red_image.export_png(tmp_path / "red.png")
        _ = load_image(tmp_path / "red.png")
        assert "Successfully loaded image file" in caplog.messages
