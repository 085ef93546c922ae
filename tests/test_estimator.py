import math
import threading

import pytest

from qq_offset_estimator import estimator as estimator_module
from qq_offset_estimator.errors import (
    DegenerateDistributionError,
    InsufficientSamplesError,
    InvalidSampleError,
)
from qq_offset_estimator.estimator import (
    OffsetEstimator,
    estimate,
    fixed_seed_source,
    wall_clock_seed_source,
)
from qq_offset_estimator.rng import INCREMENT, U64_MAX

FIXTURE_SAMPLES = [0.1, 0.2, 0.3, 0.4, 0.5]
FIXTURE_OFFSET = 0.19495758127356233


def test_estimate_matches_seeded_fixture() -> None:
    assert estimate(FIXTURE_SAMPLES, seed=43) == FIXTURE_OFFSET


def test_estimate_ignores_input_order() -> None:
    assert estimate([0.4, 0.1, 0.5, 0.3, 0.2], seed=43) == FIXTURE_OFFSET


def test_estimate_accepts_iterators() -> None:
    assert estimate(iter(FIXTURE_SAMPLES), seed=43) == FIXTURE_OFFSET


def test_estimate_is_deterministic_for_seed() -> None:
    samples = [1.53, 2.00, 2.75, 3.10, 4.93, 5.33]
    assert estimate(samples, seed=10000) == estimate(samples, seed=10000)


def test_estimate_without_seed_uses_fixed_policy() -> None:
    assert fixed_seed_source() == INCREMENT
    assert estimate(FIXTURE_SAMPLES) == estimate(FIXTURE_SAMPLES, seed=INCREMENT)


def test_seed_source_is_injectable() -> None:
    assert estimate(FIXTURE_SAMPLES, seed_source=lambda: 43) == FIXTURE_OFFSET


def test_explicit_seed_skips_seed_source() -> None:
    def failing_source() -> int:
        raise AssertionError("seed source must not be called")

    assert estimate(FIXTURE_SAMPLES, seed=43, seed_source=failing_source) == FIXTURE_OFFSET


def test_wall_clock_seed_source_folds_to_64_bits(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(estimator_module.time, "time_ns", lambda: 2**64 + 43)
    assert wall_clock_seed_source() == 43
    assert estimate(FIXTURE_SAMPLES, seed_source=wall_clock_seed_source) == FIXTURE_OFFSET


def test_wall_clock_seed_source_range() -> None:
    seed = wall_clock_seed_source()
    assert 0 <= seed <= U64_MAX


@pytest.mark.parametrize("seed", [-1, U64_MAX + 1])
def test_estimate_rejects_out_of_range_seed(seed: int) -> None:
    with pytest.raises(ValueError):
        estimate(FIXTURE_SAMPLES, seed=seed)


def test_estimate_rejects_out_of_range_seed_source() -> None:
    with pytest.raises(ValueError):
        estimate(FIXTURE_SAMPLES, seed_source=lambda: -5)


def test_estimate_requires_two_samples() -> None:
    with pytest.raises(InsufficientSamplesError):
        estimate([0.5], seed=1)


def test_estimate_rejects_non_finite_samples() -> None:
    with pytest.raises(InvalidSampleError) as excinfo:
        estimate([0.1, 0.2, -math.inf], seed=1)
    assert excinfo.value.index == 2


def test_estimate_rejects_zero_mean() -> None:
    with pytest.raises(DegenerateDistributionError):
        estimate([-0.2, 0.2], seed=1)


def test_estimate_detailed_clamps_high_alpha() -> None:
    result = OffsetEstimator().estimate_detailed([9.8, 9.9, 10.0, 10.1, 10.2], seed=7)
    assert result.raw_parameters.alpha > 4.0
    assert result.parameters.alpha == 4.0
    assert result.parameters.beta == result.raw_parameters.beta
    assert math.isfinite(result.offset)


def test_estimate_detailed_clamps_low_alpha() -> None:
    result = OffsetEstimator().estimate_detailed([0.1, 0.2, 5.0, 9.0], seed=7)
    assert result.raw_parameters.alpha < 1.0
    assert result.parameters.alpha == 1.0


def test_estimate_detailed_reports_fit() -> None:
    result = OffsetEstimator().estimate_detailed(FIXTURE_SAMPLES, seed=43)
    assert result.offset == FIXTURE_OFFSET
    assert result.fit.offset == result.offset
    assert result.seed == 43
    assert result.count == 5
    assert result.parameters.alpha == 3.6


def test_custom_alpha_bounds() -> None:
    estimator = OffsetEstimator(min_alpha=2.0, max_alpha=3.0)
    assert estimator.alpha_bounds == (2.0, 3.0)
    result = estimator.estimate_detailed(FIXTURE_SAMPLES, seed=43)
    assert result.parameters.alpha == 3.0


def test_offset_estimator_rejects_invalid_bounds() -> None:
    with pytest.raises(ValueError):
        OffsetEstimator(min_alpha=0.5)
    with pytest.raises(ValueError):
        OffsetEstimator(min_alpha=3.0, max_alpha=2.0)


def test_estimate_negative_mean_samples() -> None:
    offset = estimate([-0.5, -0.1, -0.3, -0.2, -0.45], seed=3)
    assert math.isfinite(offset)


def test_estimate_logs_pipeline_events(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("DEBUG", logger="qq_offset_estimator")
    OffsetEstimator().estimate([9.8, 9.9, 10.0, 10.1, 10.2], seed=7)
    messages = [record.getMessage() for record in caplog.records]
    assert messages == [
        "gamma_parameters_estimated",
        "alpha_clamped",
        "seed_resolved",
        "offset_estimated",
    ]
    assert caplog.records[2].seed == 7


def test_estimator_thread_safety_smoke() -> None:
    estimator = OffsetEstimator()
    results: list[float] = []
    errors: list[Exception] = []
    lock = threading.Lock()

    def worker() -> None:
        try:
            for _ in range(50):
                offset = estimator.estimate(FIXTURE_SAMPLES, seed=43)
                with lock:
                    results.append(offset)
        except Exception as exc:  # noqa: BLE001
            errors.append(exc)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert not errors
    assert results == [FIXTURE_OFFSET] * 400


def test_estimate_rejects_overflowing_samples() -> None:
    with pytest.raises(DegenerateDistributionError):
        estimate([1e200, 2e200, 3e200], seed=1)
