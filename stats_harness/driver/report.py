"""Computation and rendering of the three statistics."""

from __future__ import annotations

import json
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path

from stats_harness.engine.averages import histogram, mean, standard_deviation


@dataclass(frozen=True)
class StatsResult:
    count: int
    mean: Decimal
    standard_deviation: Decimal
    histogram: list[int]


def compute(samples: Sequence[Decimal]) -> StatsResult:
    """Run all three statistics; any failure aborts before output.

    The histogram runs first so out-of-range samples are rejected before
    any arithmetic on them.
    """
    frequencies = histogram(samples)
    return StatsResult(
        count=len(samples),
        mean=mean(samples),
        standard_deviation=standard_deviation(samples),
        histogram=frequencies,
    )


def render(result: StatsResult) -> Iterator[str]:
    yield ""
    yield f"Matrix mean average: {result.mean}"
    yield ""
    yield f"Matrix standard deviation: {result.standard_deviation}"
    yield ""
    yield "Matrix frequencies:"
    for i, frequency in enumerate(result.histogram):
        yield f"Class: {i + 1}  Frequency: {frequency}"


def dump_json(result: StatsResult, path: str | Path) -> None:
    """Write the raw result as JSON; decimals are kept as strings."""
    payload = {
        "count": result.count,
        "mean": str(result.mean),
        "standard_deviation": str(result.standard_deviation),
        "histogram": result.histogram,
    }
    Path(path).write_text(json.dumps(payload, indent=2))
