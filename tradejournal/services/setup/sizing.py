"""
Position Sizing

Risk-based sizing: the amount risked ("one R") divided by the stop-loss
distance fraction gives the notional position; leverage turns it into
margin. Ranges are the caller's job; only arithmetic degeneracies are
signalled here.
"""

import math
from typing import Optional

from tradejournal.schemas.metrics import PositionSizing
from tradejournal.services.base import DivisionByZeroError, ValidationError


def risk_amount(portfolio_value: float, risk_percent: float) -> float:
    """One R: portfolio value times the risked fraction."""
    return portfolio_value * risk_percent


def position_sizing(
    portfolio_value: float,
    risk_percent: float,
    leverage: float,
    sl_distance_pct: float,
    weighted_entry: Optional[float] = None,
) -> PositionSizing:
    """
    Size a position so that hitting the stop-loss costs exactly one R.

    Args:
        portfolio_value: Account value (> 0)
        risk_percent: Fraction risked, e.g. 0.01 for 1%
        leverage: >= 1
        sl_distance_pct: Stop-loss distance as a fraction of the entry
        weighted_entry: When given, also report the quantity in units

    Raises:
        DivisionByZeroError: sl_distance_pct or leverage is zero
    """
    if sl_distance_pct == 0:
        raise DivisionByZeroError("Stop-loss distance is zero; position size is undefined")
    if leverage == 0:
        raise DivisionByZeroError("Leverage is zero; margin is undefined")

    one_r = risk_amount(portfolio_value, risk_percent)
    size = one_r / sl_distance_pct
    quantity = size / weighted_entry if weighted_entry else None

    return PositionSizing(
        one_r=one_r,
        position_size=size,
        margin=size / leverage,
        quantity=quantity,
    )


def max_safe_leverage(sl_distance_pct: float, ceiling: int = 125) -> int:
    """
    Highest whole leverage whose liquidation distance (1 / leverage) still
    lies beyond the stop-loss, clamped to [1, ceiling].
    """
    if sl_distance_pct < 0:
        raise ValidationError(f"sl_distance_pct must be non-negative, got {sl_distance_pct}")
    if sl_distance_pct == 0:
        raise DivisionByZeroError("Stop-loss distance is zero; leverage limit is undefined")
    return max(1, min(ceiling, math.floor(1 / sl_distance_pct)))
