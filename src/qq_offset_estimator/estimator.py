"""Clock offset estimation from one-way-delay difference samples.

The pipeline fits a Gamma distribution to the observed samples, draws an
equally sized synthetic sample from the fitted distribution, and reads the
offset off the QQ regression between the two sorted samples.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Iterable

from .gamma import GammaParameters, estimate_gamma_parameters, generate_gamma_values
from .regression import RegressionFit, fit_qq_regression
from .rng import U64_MAX, fixed_seed, validate_seed
from .samples import as_samples

MIN_ALPHA = 1.0
MAX_ALPHA = 4.0

SeedSource = Callable[[], int]


def fixed_seed_source() -> int:
    """Reproducible seed policy: the first output of a zero-seeded generator."""

    return fixed_seed()


def wall_clock_seed_source() -> int:
    """Entropy seed policy: the nanosecond wall clock folded to 64 bits."""

    return time.time_ns() & U64_MAX


@dataclass(frozen=True)
class OffsetEstimate:
    """Offset estimate together with the intermediate results behind it.

    Attributes:
        offset: Estimated clock offset, in the unit of the samples.
        raw_parameters: Moment estimate before alpha clamping.
        parameters: Parameters used to generate the synthetic sample.
        seed: Seed of the synthetic sample generator.
        fit: QQ regression fit.
        count: Number of observed samples.
    """

    offset: float
    raw_parameters: GammaParameters
    parameters: GammaParameters
    seed: int
    fit: RegressionFit
    count: int


class OffsetEstimator:
    """Estimate clock offsets with a configurable seed policy and alpha bounds.

    Instances hold only immutable configuration; each call owns its own
    generator, so one estimator can serve concurrent callers.
    """

    def __init__(
        self,
        min_alpha: float = MIN_ALPHA,
        max_alpha: float = MAX_ALPHA,
        seed_source: SeedSource = fixed_seed_source,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the estimator.

        Args:
            min_alpha: Lower alpha bound; must be at least 1 for the sampler.
            max_alpha: Upper alpha bound.
            seed_source: Zero-argument callable used when no seed is given.
            logger: Logger for diagnostic events.
        """

        if min_alpha < 1.0:
            raise ValueError("min_alpha must be >= 1")
        if max_alpha < min_alpha:
            raise ValueError("max_alpha must be >= min_alpha")
        self._min_alpha = min_alpha
        self._max_alpha = max_alpha
        self._seed_source = seed_source
        self._logger = logger or logging.getLogger(__name__)

    @property
    def alpha_bounds(self) -> tuple[float, float]:
        return (self._min_alpha, self._max_alpha)

    def resolve_seed(self, seed: int | None = None) -> int:
        """Return ``seed`` if given, otherwise a value from the seed source."""

        if seed is None:
            return validate_seed(self._seed_source())
        return validate_seed(seed)

    def estimate(self, samples: Iterable[float], seed: int | None = None) -> float:
        """Return the estimated offset for ``samples``."""

        return self.estimate_detailed(samples, seed).offset

    def estimate_detailed(self, samples: Iterable[float], seed: int | None = None) -> OffsetEstimate:
        """Run the full pipeline and return the offset with its diagnostics.

        Raises:
            InsufficientSamplesError: Fewer than two samples.
            InvalidSampleError: A sample is NaN or infinite.
            DegenerateDistributionError: Gamma parameters are undefined.
            DegenerateRegressionError: The regression has no x-intercept.
        """

        observed = as_samples(samples)
        n = len(observed)

        raw_parameters = estimate_gamma_parameters(observed)
        self._logger.debug(
            "gamma_parameters_estimated",
            extra={"alpha": raw_parameters.alpha, "beta": raw_parameters.beta, "count": n},
        )
        parameters = raw_parameters.clamp_alpha(self._min_alpha, self._max_alpha)
        if parameters.alpha != raw_parameters.alpha:
            self._logger.debug(
                "alpha_clamped",
                extra={"raw_alpha": raw_parameters.alpha, "alpha": parameters.alpha},
            )

        resolved_seed = self.resolve_seed(seed)
        self._logger.debug("seed_resolved", extra={"seed": resolved_seed, "explicit": seed is not None})

        synthetic = generate_gamma_values(parameters.alpha, parameters.beta, n, resolved_seed)
        fit = fit_qq_regression(sorted(observed), sorted(synthetic))
        self._logger.debug(
            "offset_estimated",
            extra={"offset": fit.offset, "slope": fit.slope, "intercept": fit.intercept},
        )
        return OffsetEstimate(
            offset=fit.offset,
            raw_parameters=raw_parameters,
            parameters=parameters,
            seed=resolved_seed,
            fit=fit,
            count=n,
        )


def estimate(
    samples: Iterable[float],
    seed: int | None = None,
    *,
    seed_source: SeedSource = fixed_seed_source,
) -> float:
    """Estimate the clock offset from one-way-delay difference samples.

    Args:
        samples: Observed OWD differences, in any order.
        seed: Seed for the synthetic sample; ``seed_source`` is used if None.
        seed_source: Seed policy for calls without an explicit seed.

    Returns:
        The estimated offset, in the unit of the samples.
    """

    return OffsetEstimator(seed_source=seed_source).estimate(samples, seed)
