"""Library settings and configuration."""

from __future__ import annotations

from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version
from typing import Annotated

from loguru import logger
from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Library configuration settings.

    Settings can be configured via:

    1. Environment variables (e.g., IMOPS_MAX_WORKERS=4)
    2. .env file in the working directory
    3. Default values defined below

    All settings use the IMOPS_ prefix for environment variables.

    .. rubric:: Examples

    Process scanlines with four worker threads::

        export IMOPS_MAX_WORKERS=4

    Resolve unknown channel names to zero instead of failing::

        export IMOPS_STRICT_CHANNEL_SELECTORS=false
    """

    # Operand Configuration
    fallback_color: Annotated[
        str,
        Field(
            default="#000000",
            description="Hex color used as right operand when an operation gets no operand.",
        ),
    ]

    strict_channel_selectors: Annotated[
        bool,
        Field(
            default=True,
            description="If True, unknown channel names are rejected while parsing. "
            "If False, they resolve to a channel of zeros.",
        ),
    ]

    # Parallelism Configuration
    max_workers: Annotated[
        int,
        Field(
            default=1,
            description="Number of threads used for row chunks and scanlines",
            gt=0,
        ),
    ]

    chunk_rows: Annotated[
        int,
        Field(
            default=256,
            description="Number of image rows evaluated per task by the operator framework",
            gt=0,
        ),
    ]

    model_config = SettingsConfigDict(
        env_prefix="IMOPS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        validate_assignment=True,
        extra="forbid",
        populate_by_name=True,
    )

    @field_validator("fallback_color", mode="after")
    @classmethod
    def validate_fallback_color(cls, fallback_color: str) -> str:
        """Validate that the fallback color is a 6 digit hex string."""
        digits = fallback_color.removeprefix("#")
        if len(digits) != 6 or any(c not in "0123456789abcdefABCDEF" for c in digits):
            raise ValueError(f"invalid hex color: {fallback_color}")
        return fallback_color

    @computed_field  # type: ignore[prop-decorator]
    @property
    def library_version(self) -> str:
        """
        Get the library version from package metadata.

        :return: The version from pyproject.toml.
                 Falls back to "0.0.0" if the package is not installed.
        """
        try:
            return version("imops")
        except PackageNotFoundError:
            logger.warning("Could not determine package version, using fallback '0.0.0'")
            return "0.0.0"

    def log_startup_config(self) -> None:
        """Log the active configuration."""
        logger.info("=" * 60)
        logger.info("imops configuration:")
        logger.info(f"  Version: {self.library_version}")
        logger.info(f"  Fallback color: {self.fallback_color}")
        logger.info(f"  Strict channel selectors: {self.strict_channel_selectors}")
        logger.info(f"  Workers: {self.max_workers}")
        logger.info(f"  Rows per chunk: {self.chunk_rows}")
        logger.info("=" * 60)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    :return: The library settings instance.
    """
    return Settings()  # type: ignore
