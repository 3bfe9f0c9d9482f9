"""Configuration management for the KRA Document Generator.

This module handles environment variable loading and provides type-safe
configuration access using Pydantic models. Every setting has a default
pointing at the bundled resources, so the generator runs without any
environment configured.
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

RESOURCES_DIR = Path(__file__).parent / "resources"
APPLICATION_NAME = "KRA Document Generator"


class Config(BaseSettings):
    """Application configuration loaded from environment variables and .env file.

    All configuration values are automatically loaded from:
    1. `.env` file in the working directory (if present)
    2. Environment variables prefixed with ``DOCGEN_`` (as fallback)

    Attributes:
        output_dir: Directory where generated PDF files are written
        p9_template_path: HTML template for the P9 annual report
        p9_data_path: JSON data file for the P9 annual report
        statement_template_path: HTML template for the account statement
        statement_data_path: JSON data file for the account statement
        statement_logo_path: Logo image embedded into the account statement
        statement_logo_reference: Literal asset path in the statement template
            that is replaced by the embedded logo
        pdf_producer: Application name written into the PDF metadata
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    output_dir: Path = Field(
        default=Path("out"),
        description="Directory where generated PDF files are written",
    )

    p9_template_path: Path = Field(
        default=RESOURCES_DIR / "p-nine-report.html",
        description="HTML template for the P9 annual report",
    )

    p9_data_path: Path = Field(
        default=RESOURCES_DIR / "data" / "p9-data.json",
        description="JSON data file for the P9 annual report",
    )

    statement_template_path: Path = Field(
        default=RESOURCES_DIR / "account-statements.html",
        description="HTML template for the account statement",
    )

    statement_data_path: Path = Field(
        default=RESOURCES_DIR / "data" / "account-statements-data.json",
        description="JSON data file for the account statement",
    )

    statement_logo_path: Path = Field(
        default=RESOURCES_DIR / "assets" / "ukulima-sacco-logo.png",
        description="Logo image embedded into the account statement",
    )

    statement_logo_reference: str = Field(
        default="assets/ukulima-sacco-logo.png",
        description="Literal asset path in the statement template replaced by the logo",
        min_length=1,
    )

    pdf_producer: str = Field(
        default=APPLICATION_NAME,
        description="Application name written into the PDF metadata",
        min_length=1,
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate log level is one of the allowed values.

        Args:
            value: Log level string to validate

        Returns:
            Uppercase log level string

        Raises:
            ValueError: If log level is not one of the allowed values
        """
        allowed_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in allowed_levels:
            raise ValueError(
                f"log_level must be one of {allowed_levels}, got {value}"
            )
        return upper_value


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance.

    Loads configuration from `.env` file (if present) and environment variables
    on first call and returns the same instance on subsequent calls.

    Returns:
        Config instance with loaded configuration values

    Raises:
        ValueError: If configuration values are invalid
    """
    global _config
    if _config is None:
        _config = Config()
        logger.debug(
            f"Configuration loaded: "
            f"OUTPUT_DIR={_config.output_dir}, "
            f"PDF_PRODUCER={_config.pdf_producer}, "
            f"LOG_LEVEL={_config.log_level}"
        )
    return _config


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when configuration changes at runtime.

    Returns:
        New Config instance with reloaded configuration values
    """
    global _config
    _config = Config()
    return _config
