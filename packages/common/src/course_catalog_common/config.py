"""Configuration management.

Settings are read from ``CATALOG_*`` environment variables (or a ``.env``
file) and cached for the lifetime of the process. Call
``get_settings.cache_clear()`` after changing the environment in tests.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
VALID_LOG_FORMATS = {"console", "json"}
VALID_OUTPUT_FORMATS = {"json", "csv"}


class Settings(BaseSettings):
    """Pipeline settings with development defaults."""

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    input_path: str = Field(
        default="data-raw/catalog_text.txt",
        description="Plain-text catalog document",
    )
    output_path: str = Field(
        default="data/course_catalog.json",
        description="Destination of the canonical course table",
    )
    output_format: str = Field(default="json", description="json or csv")
    datasets_dir: Optional[str] = Field(
        default=None,
        description="Directory with curated YAML datasets (None = packaged defaults)",
    )
    min_expected_courses: int = Field(
        default=100,
        ge=0,
        description="Extraction below this count is reported as a gap",
    )
    strict: bool = Field(
        default=False,
        description="Fail on keeper-less cross-listings and duplicate titles",
    )
    log_level: str = Field(default="INFO", description="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    log_format: str = Field(default="console", description="console or json")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(VALID_LOG_LEVELS)}")
        return upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        lower = v.lower()
        if lower not in VALID_LOG_FORMATS:
            raise ValueError(f"log_format must be one of {sorted(VALID_LOG_FORMATS)}")
        return lower

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        lower = v.lower()
        if lower not in VALID_OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {sorted(VALID_OUTPUT_FORMATS)}"
            )
        return lower


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
