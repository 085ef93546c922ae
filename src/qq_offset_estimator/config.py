"""Configuration management for offset estimation."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import tomllib

from .estimator import MAX_ALPHA, MIN_ALPHA, SeedSource, fixed_seed_source, wall_clock_seed_source
from .rng import U64_MAX


class LoggingConfig(BaseModel):
    """Log output settings for the CLI and API facade."""

    level: str = Field(default="INFO", description="Logging level name")
    json_format: bool = Field(default=True, description="JSON lines instead of plain text")
    # stderr when unset; stdout is reserved for the estimate.
    log_file: str | None = Field(default=None, description="Rotating log file path")
    max_bytes: int = Field(default=1_000_000, ge=0, description="Rotation threshold in bytes")
    backup_count: int = Field(default=3, ge=0, description="Rotated files kept")


class EstimatorConfig(BaseModel):
    """Estimation pipeline settings."""

    # Alpha bounds applied before synthetic sample generation.
    min_alpha: float = Field(default=MIN_ALPHA, ge=1.0, description="Lower alpha clamp")
    max_alpha: float = Field(default=MAX_ALPHA, ge=1.0, description="Upper alpha clamp")
    # Seed policy used when no explicit seed is supplied.
    seed_policy: Literal["fixed", "wall_clock"] = Field(default="fixed", description="Seed policy")
    # Pinned seed; overrides the policy when set.
    seed: int | None = Field(default=None, ge=0, le=U64_MAX, description="Pinned generator seed")

    @model_validator(mode="after")
    def _check_alpha_bounds(self) -> "EstimatorConfig":
        if self.max_alpha < self.min_alpha:
            raise ValueError("max_alpha must be >= min_alpha")
        return self

    def seed_source(self) -> SeedSource:
        """Return the seed-source callable selected by this configuration."""

        if self.seed is not None:
            pinned = self.seed
            return lambda: pinned
        if self.seed_policy == "wall_clock":
            return wall_clock_seed_source
        return fixed_seed_source


class EstimatorSettings(BaseSettings):
    """Configuration settings loaded from env or optional TOML."""

    # Environment keys use QQOE_ prefix and "__" nesting.
    model_config = SettingsConfigDict(env_prefix="QQOE_", env_nested_delimiter="__", extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    estimator: EstimatorConfig = Field(default_factory=EstimatorConfig)

    @classmethod
    def from_toml(cls, path: str | Path) -> "EstimatorSettings":
        data = tomllib.loads(Path(path).read_text())
        return cls(**data)
