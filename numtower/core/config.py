"""
Library configuration.

Centralized configuration management with environment variables.
Every setting can be overridden with a ``NUMTOWER_`` prefixed variable.
"""

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings"""

    model_config = SettingsConfigDict(
        env_prefix="NUMTOWER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None

    # Rational approximation of binary floats
    MAX_DENOMINATOR: int = 10**12
    DOUBLE_TOLERANCE: float = 5e-324  # smallest positive subnormal double

    # Decimal interop
    DECIMAL_PRECISION: int = 28
    DECIMAL_FAST_PATH_DIGITS: int = 18

    # Significant digits kept for non-terminating Rational -> BigDecimal
    BIG_DECIMAL_PRECISION: int = 64

    @field_validator("MAX_DENOMINATOR", "DECIMAL_PRECISION", "BIG_DECIMAL_PRECISION")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must be positive")
        return v

    @field_validator("DECIMAL_FAST_PATH_DIGITS")
    @classmethod
    def validate_fast_path_digits(cls, v: int) -> int:
        if v < 0 or v > 28:
            raise ValueError("must be between 0 and 28")
        return v

    @field_validator("DOUBLE_TOLERANCE")
    @classmethod
    def validate_tolerance(cls, v: float) -> float:
        if not v >= 0.0:
            raise ValueError("must be a non-negative number")
        return v

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v not in ("json", "text"):
            raise ValueError("LOG_FORMAT must be 'json' or 'text'")
        return v


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
