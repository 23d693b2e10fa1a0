"""
Allocation & Trade Validators

Business-rule checks returned as data, never raised: a form shows every
simultaneous problem at once.

Scales differ on purpose and are part of each contract:
    validate_allocation  -> percents on the 0-100 scale
    validate_trade       -> total_take_profit_percent on the 0-1 scale
"""

from typing import Iterable, Optional

from tradejournal.core.messages import Translator, format_number, render
from tradejournal.schemas.allocation import Allocation
from tradejournal.schemas.validation import (
    AllocationValidationResult,
    TradeCheck,
    TradeValidationResult,
)

DEFAULT_ALLOCATION_TOLERANCE = 0.1  # percentage points
TAKE_PROFIT_TOLERANCE = 0.001  # 0-1 scale


def validate_allocation(
    allocations: Iterable[Allocation],
    tolerance: float = DEFAULT_ALLOCATION_TOLERANCE,
    translate: Optional[Translator] = None,
) -> AllocationValidationResult:
    """
    Check that the priced rows add up to 100%.

    Zero-percent rows with a price still count (at 0). A list without any
    priced row has not been attempted yet and is not reported.

    Args:
        allocations: Rows with percents on the 0-100 scale
        tolerance: Allowed deviation in percentage points
        translate: Optional translation collaborator
    """
    priced = [row for row in allocations if row.is_priced]
    total = sum(row.percent for row in priced)
    valid = not priced or abs(total - 100) <= tolerance

    errors: list[str] = []
    if not valid:
        errors.append(
            render("validations.allocationMustEqual100", translate, total=f"{total:.1f}")
        )

    return AllocationValidationResult(valid=valid, total=total, errors=errors)


def validate_trade(
    check: TradeCheck,
    translate: Optional[Translator] = None,
    tolerance: float = TAKE_PROFIT_TOLERANCE,
) -> TradeValidationResult:
    """
    Risk/reward floor, leverage ceiling and take-profit completeness.

    Every rule runs; errors keep this fixed order:
        1. risk/reward below minimum
        2. leverage above maximum
        3. take-profit allocation != 100%
    """
    errors: list[str] = []

    # Rule 1: Risk/reward floor
    if check.risk_reward_ratio < check.min_risk_reward:
        errors.append(
            render(
                "validations.rrBelowMinimum",
                translate,
                ratio=f"{check.risk_reward_ratio:.2f}",
                minimum=format_number(check.min_risk_reward),
            )
        )

    # Rule 2: Leverage ceiling
    if check.leverage > check.max_leverage:
        errors.append(
            render(
                "validations.leverageExceedsMax",
                translate,
                leverage=format_number(check.leverage),
                maximum=format_number(check.max_leverage),
            )
        )

    # Rule 3: Take-profit allocation completeness
    if abs(check.total_take_profit_percent - 1.0) > tolerance:
        errors.append(
            render(
                "validations.tpAllocationMustEqual100",
                translate,
                total=f"{check.total_take_profit_percent * 100:.0f}",
            )
        )

    return TradeValidationResult(valid=not errors, errors=errors)
