# src/cnbrate/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables and an optional .env file with validation.

Files that USE this module:
- cnbrate.app (loads settings for logging and default currencies)
- cnbrate.adapters.providers.cnb (feed URL, timeout and retry policy)

Files that this module USES:
- cnbrate.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library logging (level name validation)
from pathlib import Path  # Object-oriented filesystem paths
from typing import Annotated, List, Optional, Union  # Type hints

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict  # Settings management with Pydantic

from cnbrate.shared.validators import (
    parse_currency_list,  # Split comma-separated currency codes
    validate_currency_code,  # Validate 3-letter currency code
    validate_http_url,  # Validate http(s) URL
)

CNB_DAILY_URL = (
    "https://www.cnb.cz/en/financial-markets/foreign-exchange-market/"
    "central-bank-exchange-rate-fixing/central-bank-exchange-rate-fixing/daily.txt"
)

DEFAULT_CURRENCIES = ["USD", "EUR", "CZK", "JPY", "KES", "RUB", "THB", "TRY", "XYZ"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- CNB feed ---
    cnb_base_url: str = Field(default=CNB_DAILY_URL, alias="CNB_BASE_URL")

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)
    retry_count: int = Field(default=3, alias="CNB_RETRY_COUNT", ge=0, le=10)
    retry_delay_seconds: float = Field(default=2.0, alias="CNB_RETRY_DELAY_SECONDS", ge=0.0, le=60.0)

    # --- Requested currencies when none are given on the command line ---
    default_currencies: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_CURRENCIES), alias="DEFAULT_CURRENCIES"
    )

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="CNBRATE_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for setup_logging."""
        return logging.getLevelName(self.log_level)

    @property
    def log_path(self) -> Optional[Path]:
        """Resolved log file path, if file logging is configured."""
        if self.log_dir:
            return Path(self.log_dir) / "cnbrate.log"
        if self.log_file:
            return Path(self.log_file)
        return None

    @field_validator("cnb_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate feed URL format."""
        if not validate_http_url(v):
            raise ValueError("CNB_BASE_URL must be an http(s) URL")
        return v

    @field_validator("default_currencies", mode="before")
    @classmethod
    def split_currencies(cls, v: Union[str, List[str]]) -> List[str]:
        """Accept a comma-separated string as well as a list."""
        if isinstance(v, str):
            return parse_currency_list(v)
        return [str(code).strip().upper() for code in v if str(code).strip()]

    @field_validator("default_currencies")
    @classmethod
    def validate_currencies(cls, v: List[str]) -> List[str]:
        """Validate every default currency code."""
        invalid = [code for code in v if not validate_currency_code(code)]
        if invalid:
            raise ValueError(f"Invalid currency codes in DEFAULT_CURRENCIES: {', '.join(invalid)}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate logging level name."""
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return level


# Global settings instance
settings = Settings()
