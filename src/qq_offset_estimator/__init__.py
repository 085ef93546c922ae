"""Clock offset estimation from one-way-delay samples via Gamma QQ regression."""

from .api import build_estimator
from .config import EstimatorConfig, EstimatorSettings, LoggingConfig
from .errors import (
    DegenerateDistributionError,
    DegenerateRegressionError,
    InsufficientSamplesError,
    InvalidSampleError,
    OffsetEstimationError,
    SampleLengthMismatchError,
)
from .estimator import (
    MAX_ALPHA,
    MIN_ALPHA,
    OffsetEstimate,
    OffsetEstimator,
    SeedSource,
    estimate,
    fixed_seed_source,
    wall_clock_seed_source,
)
from .gamma import GammaParameters, estimate_gamma_parameters, gamma_variates, generate_gamma_values
from .logging_utils import JsonFormatter, configure_logging
from .models import OffsetRequestModel
from .regression import RegressionFit, estimate_offset, fit_qq_regression, plotting_positions
from .rng import LcgRng, fixed_seed

__all__ = [
    "estimate",
    "estimate_offset",
    "fit_qq_regression",
    "plotting_positions",
    "RegressionFit",
    "OffsetEstimate",
    "OffsetEstimator",
    "SeedSource",
    "fixed_seed_source",
    "wall_clock_seed_source",
    "MIN_ALPHA",
    "MAX_ALPHA",
    "GammaParameters",
    "estimate_gamma_parameters",
    "gamma_variates",
    "generate_gamma_values",
    "LcgRng",
    "fixed_seed",
    "OffsetEstimationError",
    "InsufficientSamplesError",
    "DegenerateDistributionError",
    "DegenerateRegressionError",
    "InvalidSampleError",
    "SampleLengthMismatchError",
    "EstimatorConfig",
    "EstimatorSettings",
    "LoggingConfig",
    "JsonFormatter",
    "configure_logging",
    "OffsetRequestModel",
    "build_estimator",
]
