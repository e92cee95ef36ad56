"""
Application configuration using Pydantic Settings.
All configuration is loaded from environment variables with sensible defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings loaded from environment variables.

    Only presentation of the rendered code is configurable. The payload
    size ceiling and the error correction level are fixed by the EPC
    standard and live next to the code that enforces them.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Core Settings
    # ==========================================================================
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ==========================================================================
    # Rendering Configuration
    # ==========================================================================
    girocode_caption_text: str = Field(
        default="Giro-Code",
        description="Caption drawn on the top edge of the frame",
    )
    girocode_caption_size: int = Field(
        default=20,
        ge=1,
        le=200,
        description="Caption font size in pixels",
    )
    girocode_module_size: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Pixels per QR module; also used as frame stroke width",
    )
    girocode_caption_offset: int = Field(
        default=15,
        ge=0,
        description="Extra canvas height above the code reserved for the caption",
    )
    girocode_border: int = Field(
        default=4,
        ge=0,
        description="Quiet zone around the code, in modules",
    )
    girocode_corner_radius: int = Field(default=20, ge=0)
    girocode_font_path: str = Field(
        default="/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
        description="TrueType font for the caption; Pillow's default font is used if missing",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings.

    Using lru_cache ensures settings are loaded once and reused,
    avoiding repeated environment variable parsing.
    """
    return Settings()
