"""QQ-plot regression between observed and synthetic order statistics.

Method from E. Mota-Garcia, R. Hasimoto-Beltran. "A new model-based
clock-offset approximation over IP networks". Computer Communications 53,
2014, pp. 26-36. https://doi.org/10.1016/j.comcom.2014.07.006
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .errors import DegenerateRegressionError, SampleLengthMismatchError
from .samples import as_samples, running_sum


@dataclass(frozen=True)
class RegressionFit:
    """Ordinary least squares fit ``y = slope * t + intercept``.

    Attributes:
        slope: Fitted slope.
        intercept: Fitted intercept.
        offset: x-axis crossing of the fitted line (``t`` at ``y = 0``).
        count: Number of regression points.
    """

    slope: float
    intercept: float
    offset: float
    count: int


def plotting_positions(count: int) -> list[float]:
    """Return rank-based plotting positions ``(i - 0.5) / n`` for ``i = 1..n``."""

    return [((rank + 1) - 0.5) / count for rank in range(count)]


def fit_qq_regression(sorted_x: Sequence[float], sorted_y: Sequence[float]) -> RegressionFit:
    """Fit the QQ regression line of ``sorted_y`` against ``sorted_x``.

    Both sequences must already be sorted ascending and have the same length.
    The regressor is each x order statistic shifted by its plotting position.

    Raises:
        SampleLengthMismatchError: The sequences differ in length.
        InsufficientSamplesError: Fewer than two points.
        InvalidSampleError: A value is NaN or infinite.
        DegenerateRegressionError: The slope is zero or undefined.
    """

    if len(sorted_x) != len(sorted_y):
        raise SampleLengthMismatchError(len(sorted_x), len(sorted_y))
    x_values = as_samples(sorted_x)
    y_values = as_samples(sorted_y)
    n = len(x_values)
    if min(y_values) == max(y_values):
        # The mean of a constant sequence can round away from the constant.
        raise DegenerateRegressionError("Response is constant; slope is zero")

    t_values = [x - p for x, p in zip(x_values, plotting_positions(n))]
    t_mean = running_sum(t_values) / n
    y_mean = running_sum(y_values) / n

    numerator = running_sum((t - t_mean) * (y - y_mean) for t, y in zip(t_values, y_values))
    denominator = running_sum((t - t_mean) * (t - t_mean) for t in t_values)
    if denominator == 0.0:
        raise DegenerateRegressionError("Regressor has zero spread; slope is undefined")

    slope = numerator / denominator
    if slope == 0.0 or not math.isfinite(slope):
        raise DegenerateRegressionError(f"Regression slope is {slope}; offset is undefined")
    intercept = y_mean - slope * t_mean

    # Point where the regression line crosses the x-axis (y = 0).
    offset = -intercept / slope
    if not math.isfinite(offset):
        raise DegenerateRegressionError(f"Regression offset is not finite: {offset}")
    return RegressionFit(slope=slope, intercept=intercept, offset=offset, count=n)


def estimate_offset(sorted_x: Sequence[float], sorted_y: Sequence[float]) -> float:
    """Return the x-intercept of the QQ regression of ``sorted_y`` on ``sorted_x``."""

    return fit_qq_regression(sorted_x, sorted_y).offset
