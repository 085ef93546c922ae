"""Pydantic models for validation."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .rng import U64_MAX


class OffsetRequestModel(BaseModel):
    """Validated estimation request."""

    model_config = ConfigDict(extra="ignore")

    samples: list[float] = Field(default_factory=list)
    seed: int | None = Field(default=None, ge=0, le=U64_MAX)
