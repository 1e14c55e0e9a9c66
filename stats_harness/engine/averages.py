"""Mean, population standard deviation and class frequencies over decimals.

Every function is pure: it reads the samples once or twice, never mutates
them, and evaluates in its own decimal context so the caller's global
context has no effect on the result.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal, InvalidOperation, localcontext

import structlog

from stats_harness.common.constants import (
    BUCKET_COUNT,
    BUCKET_WIDTH,
    DECIMAL_PRECISION,
    SAMPLE_MAX,
    SAMPLE_MIN,
    SQRT_TOLERANCE,
)
from stats_harness.common.errors import InvalidInputError

Number = Decimal | int | float | str


def _as_decimal(value: Number) -> Decimal:
    # floats go through repr so 0.1 stays 0.1
    try:
        d = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
    except InvalidOperation:
        raise InvalidInputError(f"not a number: {value!r}") from None
    if not d.is_finite():
        raise InvalidInputError(f"not a finite number: {value!r}")
    return d


def _decimals(samples: Iterable[Number]) -> list[Decimal]:
    values = [_as_decimal(v) for v in samples]
    if not values:
        raise InvalidInputError("samples must not be empty")
    return values


def mean(samples: Sequence[Number]) -> Decimal:
    """Arithmetic mean of *samples*."""
    values = _decimals(samples)
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        return sum(values, Decimal(0)) / len(values)


def standard_deviation(samples: Sequence[Number]) -> Decimal:
    """Population standard deviation (divisor is the sample count)."""
    values = _decimals(samples)
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        m = mean(values)
        cumulative = sum(((v - m) * (v - m) for v in values), Decimal(0))
        return square_root(cumulative / len(values))


def histogram(samples: Sequence[Number]) -> list[int]:
    """Count samples per class of width ``BUCKET_WIDTH`` over [0, 100).

    Values are validated before any counting, so a bad sample never
    produces a partial result.
    """
    values = [_as_decimal(v) for v in samples]
    for i, v in enumerate(values):
        if not SAMPLE_MIN <= v < SAMPLE_MAX:
            raise InvalidInputError(
                f"sample {i} = {v} is outside [{SAMPLE_MIN}, {SAMPLE_MAX})"
            )
    frequencies = [0] * BUCKET_COUNT
    for v in values:
        frequencies[int(v // BUCKET_WIDTH)] += 1
    return frequencies


def square_root(x: Number) -> Decimal:
    """Babylonian square root of *x*.

    Keeps an estimate ``r`` above the root and a correction ``d = x / r``
    below it, and stops once ``r - d <= SQRT_TOLERANCE`` or once averaging
    no longer lowers ``r`` at the working precision.  Since the true root
    lies between the two, ``r`` is within the tolerance of it.

    Raises:
        InvalidInputError: *x* is negative.
    """
    x = _as_decimal(x)
    if x < 0:
        raise InvalidInputError(f"cannot take the square root of {x}")
    if x == 0:
        return Decimal(0)

    log = structlog.get_logger("averages")
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        # r * d == x either way round; start with r on the high side
        r, d = (x, Decimal(1)) if x >= 1 else (Decimal(1), x)
        iterations = 0
        while r - d > SQRT_TOLERANCE:
            nxt = (r + d) / 2
            # at this precision r can stall one step above d for huge x
            if nxt >= r:
                break
            r = nxt
            d = x / r
            iterations += 1
    if structlog.is_configured():
        log.debug(
            "sqrt_converged", x=str(x), root=str(r), iterations=iterations
        )
    return r
