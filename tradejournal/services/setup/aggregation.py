"""
Weighted Aggregation

Percent-weighted average price across a set of allocation rows.

Weights are re-normalized against the sum of the valid rows, so a form
whose allocations do not add up yet still gets a meaningful price.
"""

from typing import Iterable

from tradejournal.schemas.allocation import Allocation
from tradejournal.services.base import EmptyAllocationError


def weighted_rows(allocations: Iterable[Allocation]) -> list[Allocation]:
    """Rows with both a positive price and a positive percent."""
    return [row for row in allocations if row.is_weighted]


def allocation_weights(allocations: Iterable[Allocation]) -> list[float]:
    """
    Normalized weight of each valid row, in row order. Sums to 1.

    Raises:
        EmptyAllocationError: If no row is valid
    """
    rows = weighted_rows(allocations)
    if not rows:
        raise EmptyAllocationError("No allocation with a positive price and percent")

    total = sum(row.percent for row in rows)
    return [row.percent / total for row in rows]


def weighted_price(allocations: Iterable[Allocation]) -> float:
    """
    Σ(price * percent) / Σ(percent) over the valid rows.

    Raises:
        EmptyAllocationError: If no row is valid (not yet computable, not zero)
    """
    rows = weighted_rows(allocations)
    if not rows:
        raise EmptyAllocationError("No allocation with a positive price and percent")

    total = sum(row.percent for row in rows)
    return sum(row.price * row.percent for row in rows) / total


# =============================================================================
# SCALE CONVERSION (0-1 <-> 0-100)
# =============================================================================


def to_percent_scale(allocations: Iterable[Allocation]) -> list[Allocation]:
    """Rows with percents on the 0-1 scale, rescaled to 0-100."""
    return [Allocation(price=row.price, percent=row.percent * 100) for row in allocations]


def total_fraction(allocations: Iterable[Allocation]) -> float:
    """Sum of percents of the priced rows, on the 0-1 scale."""
    return sum(row.percent for row in allocations if row.is_priced)
