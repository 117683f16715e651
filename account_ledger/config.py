"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for
environment-based configuration. Defaults reproduce the standard ledger
behaviour; environment variables only tune the starting balance and logging.
"""

from decimal import Decimal
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .currency import DEFAULT_INITIAL_BALANCE, MIN_BALANCE, MAX_BALANCE, is_within_bounds


class LedgerConfig(BaseSettings):
    """Account ledger configuration"""

    model_config = SettingsConfigDict(env_prefix="LEDGER_", case_sensitive=False)

    # Ledger configuration
    initial_balance: Decimal = DEFAULT_INITIAL_BALANCE

    # Logging configuration
    log_level: str = "WARNING"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr

    @field_validator("initial_balance")
    @classmethod
    def _check_initial_balance(cls, value: Decimal) -> Decimal:
        if not is_within_bounds(value):
            raise ValueError(f"initial_balance must be between {MIN_BALANCE} and {MAX_BALANCE}")
        return value.copy_abs()

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return value

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return value


# Global configuration instance, created on first use
config: Optional[LedgerConfig] = None


def get_config() -> LedgerConfig:
    """Get global configuration instance"""
    global config
    if config is None:
        config = LedgerConfig()
    return config


def reload_config() -> LedgerConfig:
    """Reload configuration from environment"""
    global config
    config = LedgerConfig()
    return config
