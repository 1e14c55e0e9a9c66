"""Single-line CSV input for the harness."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from pathlib import Path

import structlog

from stats_harness.common.constants import CSV_DELIMITER
from stats_harness.common.errors import ParseError


def parse_samples(text: str) -> list[Decimal]:
    """Split *text* on commas and parse every token as a finite decimal."""
    samples: list[Decimal] = []
    for position, raw in enumerate(text.split(CSV_DELIMITER), start=1):
        token = raw.strip()
        try:
            value = Decimal(token)
        except InvalidOperation:
            raise ParseError(position, raw) from None
        if not value.is_finite():
            raise ParseError(position, raw)
        samples.append(value)
    return samples


def read_samples(path: str | Path) -> list[Decimal]:
    """Read the whole file at *path* and parse it as one CSV line."""
    text = Path(path).read_text(encoding="utf-8")
    samples = parse_samples(text)
    structlog.get_logger("reader").info(
        "samples_parsed", path=str(path), count=len(samples)
    )
    return samples
