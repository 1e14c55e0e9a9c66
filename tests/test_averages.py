from decimal import Decimal, getcontext, localcontext
import random

import pytest

from stats_harness.common.errors import InvalidInputError
from stats_harness.engine.averages import histogram, mean, standard_deviation

SAMPLES = [0, 5, 19, 27, 56, 57, 59, 89, 98, 99]
CENT = Decimal("0.01")


def test_mean_of_reference_samples():
    assert mean(SAMPLES).quantize(CENT) == Decimal("50.90")


def test_mean_is_exact_sum_over_count():
    values = [Decimal("0.1"), Decimal("0.2"), Decimal("0.3")]
    assert mean(values) == Decimal("0.2")
    assert mean([0.1, 0.2]) == Decimal("0.15")


def test_mean_empty():
    with pytest.raises(InvalidInputError):
        mean([])


def test_standard_deviation_of_reference_samples():
    assert standard_deviation(SAMPLES).quantize(CENT) == Decimal("35.21")


def test_standard_deviation_uses_population_divisor():
    # population sd of 2,4,4,4,5,5,7,9 is exactly 2; the sample estimator is not
    sd = standard_deviation([2, 4, 4, 4, 5, 5, 7, 9])
    assert abs(sd - 2) <= Decimal("0.000001")


def test_standard_deviation_empty():
    with pytest.raises(InvalidInputError):
        standard_deviation([])


@pytest.mark.parametrize("value", [0, 50, Decimal("42.5"), Decimal("99.99")])
def test_constant_samples(value):
    values = [value] * 7
    assert mean(values) == Decimal(value)
    assert standard_deviation(values) == 0


def test_single_sample():
    assert mean([50]) == 50
    assert standard_deviation([50]) == 0
    assert histogram([50]) == [0, 0, 0, 0, 0, 1, 0, 0, 0, 0]


def test_small_variance_below_one():
    # variance 0.25 exercises the seed ordering for roots of values under 1
    sd = standard_deviation([Decimal("1.5"), Decimal("2.5")])
    assert abs(sd - Decimal("0.5")) <= Decimal("0.000001")


def test_standard_deviation_is_order_invariant():
    shuffled = SAMPLES[:]
    random.Random(7).shuffle(shuffled)
    assert standard_deviation(shuffled) == standard_deviation(SAMPLES)
    assert standard_deviation(SAMPLES[::-1]) == standard_deviation(SAMPLES)


def test_operations_are_idempotent():
    assert mean(SAMPLES) == mean(SAMPLES)
    assert standard_deviation(SAMPLES) == standard_deviation(SAMPLES)
    assert histogram(SAMPLES) == histogram(SAMPLES)


def test_input_is_not_mutated():
    values = [Decimal(v) for v in SAMPLES]
    copy = values[:]
    mean(values)
    standard_deviation(values)
    histogram(values)
    assert values == copy


def test_caller_context_does_not_leak():
    with localcontext() as ctx:
        ctx.prec = 3
        sd = standard_deviation(SAMPLES)
    assert sd.quantize(CENT) == Decimal("35.21")
    assert getcontext().prec == 28


def test_histogram_of_reference_samples():
    result = histogram(SAMPLES)
    assert len(result) == 10
    assert result == [2, 1, 1, 0, 0, 3, 0, 0, 1, 2]


def test_histogram_counts_sum_to_sample_count():
    rng = random.Random(42)
    values = [Decimal(rng.randrange(0, 10000)) / 100 for _ in range(500)]
    assert sum(histogram(values)) == len(values)


def test_histogram_class_edges():
    assert histogram([Decimal("9.999999"), 10, Decimal("89.5"), 90]) == [
        1, 1, 0, 0, 0, 0, 0, 0, 1, 1,
    ]


def test_histogram_empty():
    assert histogram([]) == [0] * 10


@pytest.mark.parametrize("bad", [100, Decimal("100.0"), 150, -1, Decimal("-0.001")])
def test_histogram_rejects_out_of_range(bad):
    with pytest.raises(InvalidInputError):
        histogram([1, 2, bad])


@pytest.mark.parametrize("bad", ["abc", "NaN", float("inf")])
def test_non_numbers_rejected(bad):
    with pytest.raises(InvalidInputError):
        mean([1, bad])


def test_standard_deviation_of_huge_values_terminates():
    big = Decimal("102189000000000000000000000")
    sd = standard_deviation([big, 17])
    expected = (big - 17) / 2
    assert abs(sd - expected) <= expected * Decimal("1e-20")
