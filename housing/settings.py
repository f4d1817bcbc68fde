"""
Housing settings using pydantic-settings for type-safe configuration.

Generation ranges, logging level, and the snapshot location are read from
HOUSING_* environment variables (or a .env file) once and cached.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from housing.models import ROOM_BED_RANGE, TENT_BED_RANGE

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR")


class HousingSettings(BaseSettings):
    """
    Housing settings loaded from environment variables.

    All settings have defaults suitable for local use.
    """

    model_config = SettingsConfigDict(
        env_prefix="HOUSING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    # === Generation ===
    room_min_beds: int = Field(default=ROOM_BED_RANGE[0], description="Fewest beds in a generated room")
    room_max_beds: int = Field(default=ROOM_BED_RANGE[1], description="Most beds in a generated room")
    tent_min_beds: int = Field(default=TENT_BED_RANGE[0], description="Fewest beds in a generated tent")
    tent_max_beds: int = Field(default=TENT_BED_RANGE[1], description="Most beds in a generated tent")
    random_seed: int | None = Field(
        default=None,
        description="Seed for reproducible inventory generation (unset = nondeterministic)",
    )

    # === Logging ===
    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("HOUSING_LOG_LEVEL", "LOG_LEVEL", "log_level"),
        description="TRACE, DEBUG, INFO, WARNING, or ERROR",
    )

    # === Persistence ===
    snapshot_path: Path = Field(
        default=Path("data/housing_snapshot.json"),
        description="Where save_snapshot/load_snapshot read and write by default",
    )

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {', '.join(LOG_LEVELS)}")
        return v

    @model_validator(mode="after")
    def validate_bed_ranges(self) -> HousingSettings:
        for label, low, high, bounds in (
            ("room", self.room_min_beds, self.room_max_beds, ROOM_BED_RANGE),
            ("tent", self.tent_min_beds, self.tent_max_beds, TENT_BED_RANGE),
        ):
            if low > high:
                raise ValueError(f"{label} bed range is inverted: {low} > {high}")
            if low < bounds[0] or high > bounds[1]:
                raise ValueError(f"{label} bed range {low}-{high} outside allowed {bounds[0]}-{bounds[1]}")
        return self


@lru_cache
def get_settings() -> HousingSettings:
    """
    Get cached settings instance.

    Settings are loaded once and cached for the lifetime of the process.
    """
    return HousingSettings()
