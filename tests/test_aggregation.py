"""Tests for weighted aggregation and scale conversion."""

import pytest

from tradejournal.schemas import Allocation
from tradejournal.services import DegenerateSetupError, EmptyAllocationError
from tradejournal.services.setup import (
    allocation_weights,
    to_percent_scale,
    total_fraction,
    weighted_price,
)


def test_weighted_price_of_even_split():
    rows = [Allocation(price=100, percent=0.5), Allocation(price=110, percent=0.5)]
    assert weighted_price(rows) == pytest.approx(105)


def test_weighted_price_renormalizes_partial_allocations():
    """Allocations that do not reach 100% yet still give a weighted price."""
    rows = [Allocation(price=100, percent=0.3), Allocation(price=110, percent=0.1)]
    assert weighted_price(rows) == pytest.approx(102.5)


def test_weighted_price_skips_placeholder_rows():
    rows = [
        Allocation(price=100, percent=0.5),
        Allocation(price=0, percent=0.5),
        Allocation(price=120, percent=0),
        Allocation(),
    ]
    assert weighted_price(rows) == pytest.approx(100)


def test_duplicate_prices_count_separately():
    rows = [
        Allocation(price=100, percent=25),
        Allocation(price=100, percent=25),
        Allocation(price=200, percent=50),
    ]
    assert weighted_price(rows) == pytest.approx(150)


def test_weighted_price_is_scale_independent():
    fractions = [Allocation(price=100, percent=0.6), Allocation(price=98, percent=0.4)]
    assert weighted_price(fractions) == pytest.approx(weighted_price(to_percent_scale(fractions)))


@pytest.mark.parametrize(
    "rows",
    [
        [],
        [Allocation()],
        [Allocation(price=100, percent=0), Allocation(price=-5, percent=0.5)],
    ],
)
def test_weighted_price_without_valid_rows_fails(rows):
    with pytest.raises(EmptyAllocationError):
        weighted_price(rows)


def test_empty_allocation_is_a_degeneracy():
    with pytest.raises(DegenerateSetupError):
        weighted_price([Allocation()])


def test_weights_sum_to_one():
    rows = [
        Allocation(price=100, percent=0.2),
        Allocation(price=101, percent=0.15),
        Allocation(price=0, percent=0.4),
        Allocation(price=99, percent=0.05),
    ]
    weights = allocation_weights(rows)
    assert len(weights) == 3
    assert sum(weights) == pytest.approx(1.0)
    assert weights[0] == pytest.approx(0.5)


def test_weights_without_valid_rows_fail():
    with pytest.raises(EmptyAllocationError):
        allocation_weights([])


def test_weighted_price_is_repeatable():
    rows = [Allocation(price=101.37, percent=0.33), Allocation(price=99.12, percent=0.67)]
    assert weighted_price(rows) == weighted_price(rows)


def test_to_percent_scale_keeps_prices():
    rows = to_percent_scale([Allocation(price=110, percent=0.25), Allocation(price=120, percent=0.75)])
    assert [r.price for r in rows] == [110, 120]
    assert [r.percent for r in rows] == [25, 75]


def test_total_fraction_counts_priced_rows_only():
    rows = [
        Allocation(price=110, percent=0.5),
        Allocation(price=120, percent=0.25),
        Allocation(price=0, percent=0.25),
    ]
    assert total_fraction(rows) == pytest.approx(0.75)
