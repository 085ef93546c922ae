"""Public API facade for the offset estimator.

Assembles an estimator from settings with logging configured, for callers
that want the configured behaviour rather than the bare defaults.
"""

from __future__ import annotations

import logging

from .config import EstimatorSettings
from .estimator import OffsetEstimator
from .logging_utils import configure_logging


def build_estimator(
    settings: EstimatorSettings | None = None,
    logger: logging.Logger | None = None,
) -> OffsetEstimator:
    """Create an OffsetEstimator from settings with logging configured."""

    settings = settings or EstimatorSettings()
    configure_logging(settings.logging)

    config = settings.estimator
    return OffsetEstimator(
        min_alpha=config.min_alpha,
        max_alpha=config.max_alpha,
        seed_source=config.seed_source(),
        logger=logger or logging.getLogger("qq_offset_estimator"),
    )
