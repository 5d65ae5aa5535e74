"""
Configuration management for egnumbers.

Configuration is loaded from:
1. Environment variables (highest priority), prefixed ``EGNUMBERS_`` with
   ``__`` between nested sections, e.g. ``EGNUMBERS_NATIONAL_ID__STRICT_MODE=true``
2. A YAML file (``egnumbers.yaml``, ``config/egnumbers.yaml`` or the path
   in ``EGNUMBERS_CONFIG_FILE``)
3. Default values (lowest priority)
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

CONFIG_FILE_ENV = "EGNUMBERS_CONFIG_FILE"


class NationalIdSettings(BaseModel):
    """National ID parser configuration."""

    # Reject IDs whose governorate code is not in the table
    strict_mode: bool = False
    # Clamp days past the end of the month (Feb 30 -> Feb 28/29)
    auto_correct_invalid_days: bool = False
    validate_age: bool = False
    min_age: int = 0
    max_age: int = 150

    @model_validator(mode="after")
    def check_age_range(self) -> "NationalIdSettings":
        if self.min_age > self.max_age:
            raise ValueError(f"min_age ({self.min_age}) must not exceed max_age ({self.max_age})")
        return self


class BankCardSettings(BaseModel):
    """Bank card analyser configuration."""

    include_luhn_trace: bool = False
    mask_char: str = Field(default="•", min_length=1, max_length=1)


class PhoneSettings(BaseModel):
    """Phone number validator configuration."""

    accept_international: bool = True
    accept_without_leading_zero: bool = False
    accept_formatted: bool = True
    accept_arabic_digits: bool = True
    allow_special_services: bool = True
    # Append a missing last digit to 10-digit numbers starting 01
    auto_fix_incomplete: bool = False
    # Reject prefixes that are not in the carrier table
    strict_carrier: bool = False


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    json_format: bool = False
    file: str | None = None


class Settings(BaseSettings):
    """Main settings class that combines all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix="EGNUMBERS_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    national_id: NationalIdSettings = Field(default_factory=NationalIdSettings)
    bank_card: BankCardSettings = Field(default_factory=BankCardSettings)
    phone: PhoneSettings = Field(default_factory=PhoneSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # YAML values arrive as init kwargs; environment variables override them
        return env_settings, init_settings, dotenv_settings, file_secret_settings


def load_yaml_config(path: Path | None = None) -> dict:
    """Load configuration from YAML file."""
    if path is None:
        env_path = os.environ.get(CONFIG_FILE_ENV)
        candidates = [Path(env_path)] if env_path else [
            Path("egnumbers.yaml"),
            Path("config/egnumbers.yaml"),
        ]
        for candidate in candidates:
            if candidate.exists():
                path = candidate
                break

    if not path or not path.exists():
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            "Settings file is not valid YAML",
            setting_name=str(path),
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            "Settings file must contain a mapping",
            setting_name=str(path),
            setting_value=type(data).__name__,
        )
    return data


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    yaml_config = load_yaml_config()

    # Environment variables take precedence over the YAML file
    return Settings(**yaml_config)


def reload_settings() -> Settings:
    """Force reload of settings (clears cache)."""
    get_settings.cache_clear()
    return get_settings()
