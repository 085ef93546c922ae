"""Command line entry point for offset estimation."""

from __future__ import annotations

import argparse
import logging
import sys
import tomllib
from typing import Iterable, Sequence, TextIO

from pydantic import ValidationError

from .api import build_estimator
from .config import EstimatorSettings
from .errors import OffsetEstimationError
from .models import OffsetRequestModel

logger = logging.getLogger(__name__)


def read_samples(lines: Iterable[str]) -> list[float]:
    """Parse one value per line, skipping blank lines and ``#`` comments."""

    values: list[float] = []
    for number, line in enumerate(lines, start=1):
        text = line.split("#", 1)[0].strip()
        if not text:
            continue
        try:
            values.append(float(text))
        except ValueError as exc:
            raise ValueError(f"line {number}: cannot parse {text!r} as a number") from exc
    return values


def _open_samples(path: str) -> TextIO:
    if path == "-":
        return sys.stdin
    return open(path, encoding="utf-8")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Estimate clock offset from OWD difference samples")
    parser.add_argument("samples", help="File with one sample per line, or '-' for stdin")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the synthetic Gamma sample")
    parser.add_argument(
        "--seed-policy",
        choices=["fixed", "wall_clock"],
        default=None,
        help="Seed policy when --seed is not given; overrides a seed pinned in the config",
    )
    parser.add_argument("--config", default=None, help="Path to TOML configuration file")
    parser.add_argument("--verbose", action="store_true", help="Print fit diagnostics")
    args = parser.parse_args(argv)

    try:
        settings = EstimatorSettings.from_toml(args.config) if args.config else EstimatorSettings()
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as exc:
        print(f"error: invalid configuration: {exc}", file=sys.stderr)
        return 2
    if args.seed_policy:
        settings.estimator.seed_policy = args.seed_policy
        settings.estimator.seed = None

    try:
        source = _open_samples(args.samples)
        try:
            values = read_samples(source)
        finally:
            if source is not sys.stdin:
                source.close()
        request = OffsetRequestModel(samples=values, seed=args.seed)
    except (OSError, ValueError, ValidationError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    estimator = build_estimator(settings)
    try:
        result = estimator.estimate_detailed(request.samples, request.seed)
    except OffsetEstimationError as exc:
        logger.error("estimation_failed", extra={"error": type(exc).__name__, "detail": str(exc)})
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"offset: {result.offset!r}")
        print(f"samples: {result.count}")
        print(f"alpha: {result.parameters.alpha!r} (raw {result.raw_parameters.alpha!r})")
        print(f"beta: {result.parameters.beta!r}")
        print(f"seed: {result.seed}")
        print(f"slope: {result.fit.slope!r}")
        print(f"intercept: {result.fit.intercept!r}")
    else:
        print(repr(result.offset))
    return 0


if __name__ == "__main__":
    sys.exit(main())
