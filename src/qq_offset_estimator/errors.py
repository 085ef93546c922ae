"""Typed failures raised by the offset estimation pipeline.

Every error derives from :class:`ValueError` so callers that already guard
numeric input with ``except ValueError`` keep working.
"""

from __future__ import annotations


class OffsetEstimationError(ValueError):
    """Base class for all estimation failures."""


class InsufficientSamplesError(OffsetEstimationError):
    """Fewer than two samples were supplied."""

    def __init__(self, count: int, required: int = 2) -> None:
        super().__init__(f"At least {required} samples are required, got {count}")
        self.count = count
        self.required = required


class DegenerateDistributionError(OffsetEstimationError):
    """Sample moments do not define a Gamma distribution."""


class DegenerateRegressionError(OffsetEstimationError):
    """The QQ regression line has no x-intercept."""


class InvalidSampleError(OffsetEstimationError):
    """A sample value is NaN or infinite."""

    def __init__(self, index: int, value: float) -> None:
        super().__init__(f"Sample {index} is not finite: {value!r}")
        self.index = index
        self.value = value


class SampleLengthMismatchError(OffsetEstimationError):
    """The two regression inputs have different lengths."""

    def __init__(self, x_count: int, y_count: int) -> None:
        super().__init__(f"Sequences must have equal length, got {x_count} and {y_count}")
        self.x_count = x_count
        self.y_count = y_count
