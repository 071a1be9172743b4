"""
Configuration management for Halting.

Loads configuration from environment variables and provides validated settings
for the assessment simulation and the console.
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class HaltingConfig(BaseSettings):
    """Halting simulation configuration."""

    # Simulation grid
    grid_size: int = Field(
        default=8,
        ge=1,
        description="Size of the computation index / natural number range",
        alias="HALTING_GRID_SIZE"
    )

    distinguished_index: int = Field(
        default=6,
        description="Registry slot holding the assessor as a computation",
        alias="HALTING_DISTINGUISHED_INDEX"
    )

    include_assessor: bool = Field(
        default=True,
        description="Whether the distinguished slot actually holds the assessor",
        alias="HALTING_INCLUDE_ASSESSOR"
    )

    assessor_test: bool = Field(
        default=False,
        description="Enable the specialised test for the self-referential cell",
        alias="HALTING_ASSESSOR_TEST"
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level",
        alias="LOG_LEVEL"
    )

    # Console
    buffer_width: int = Field(
        default=100,
        ge=20,
        description="Console width used for result lines",
        alias="HALTING_BUFFER_WIDTH"
    )

    model_config = SettingsConfigDict(
        populate_by_name=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @model_validator(mode="after")
    def _check_distinguished_index(self) -> "HaltingConfig":
        if not 1 <= self.distinguished_index <= self.grid_size:
            raise ValueError(
                f"distinguished_index must lie within 1..{self.grid_size}, "
                f"got {self.distinguished_index}"
            )
        return self


# Global config instance
_config: Optional[HaltingConfig] = None


def get_config() -> HaltingConfig:
    """Get the global Halting configuration."""
    global _config
    if _config is None:
        _config = HaltingConfig()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next call reloads it."""
    global _config
    _config = None
