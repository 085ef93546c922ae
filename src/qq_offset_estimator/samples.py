"""Sample sequence helpers shared by the pipeline stages."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from .errors import InsufficientSamplesError, InvalidSampleError

Samples = tuple[float, ...]


def as_samples(values: Iterable[float], minimum: int = 2) -> Samples:
    """Freeze ``values`` into a tuple of finite floats.

    Raises:
        InvalidSampleError: An element is NaN or infinite.
        InsufficientSamplesError: Fewer than ``minimum`` elements.
    """

    samples = tuple(float(value) for value in values)
    for index, value in enumerate(samples):
        if not math.isfinite(value):
            raise InvalidSampleError(index, value)
    if len(samples) < minimum:
        raise InsufficientSamplesError(len(samples), minimum)
    return samples


def running_sum(values: Iterable[float]) -> float:
    """Sum ``values`` strictly left to right.

    The builtin ``sum`` compensates rounding on newer interpreters; the
    seeded fixtures are defined on plain sequential accumulation.
    """

    total = 0.0
    for value in values:
        total += value
    return total


def mean(values: Sequence[float]) -> float:
    return running_sum(values) / len(values)
