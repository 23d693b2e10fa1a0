"""
Calculator API Endpoints

Endpoints the journal frontend calls on every edit of a trade setup.
"""

import logging
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from tradejournal.core.config import settings
from tradejournal.schemas.allocation import Allocation
from tradejournal.schemas.metrics import TradeSetupReport
from tradejournal.schemas.trade import TradeSetupInput
from tradejournal.schemas.validation import (
    AllocationValidationResult,
    TradeCheck,
    TradeValidationResult,
)
from tradejournal.services.base import EmptyAllocationError
from tradejournal.services.setup import (
    get_trade_setup_service,
    validate_allocation,
    validate_trade,
    weighted_price,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class WeightedPriceRequest(BaseModel):
    """Rows to aggregate."""

    allocations: list[Allocation]


class WeightedPriceResponse(BaseModel):
    """`weighted_price` is None while no row is valid."""

    weighted_price: Optional[float] = None
    computable: bool
    valid_rows: int


class AllocationCheckRequest(BaseModel):
    """Rows with percents on the 0-100 scale."""

    allocations: list[Allocation]
    tolerance: float = Field(default_factory=lambda: settings.allocation_tolerance, ge=0)


@router.post("/metrics", response_model=TradeSetupReport)
async def compute_metrics(request: TradeSetupInput):
    """
    Compute and validate a full trade setup.

    Returns weighted prices, distances, risk/reward, layout, sizing and
    every failing rule. Incomplete setups come back with `pending` reasons
    instead of metrics.
    """
    service = get_trade_setup_service()
    return await service.execute(request)


@router.post("/weighted-price", response_model=WeightedPriceResponse)
async def get_weighted_price(request: WeightedPriceRequest):
    """Percent-weighted average price of the valid rows."""
    valid_rows = sum(1 for row in request.allocations if row.is_weighted)
    try:
        price = weighted_price(request.allocations)
    except EmptyAllocationError:
        return WeightedPriceResponse(computable=False, valid_rows=0)
    return WeightedPriceResponse(weighted_price=price, computable=True, valid_rows=valid_rows)


@router.post("/allocation/validate", response_model=AllocationValidationResult)
async def check_allocation(request: AllocationCheckRequest):
    """Check that priced rows add up to 100% (0-100 scale)."""
    return validate_allocation(request.allocations, request.tolerance)


@router.post("/trade/validate", response_model=TradeValidationResult)
async def check_trade(request: TradeCheck):
    """
    Risk/reward, leverage and take-profit allocation rules.

    `total_take_profit_percent` is on the 0-1 scale.
    """
    result = validate_trade(request, tolerance=settings.take_profit_tolerance)
    if not result.valid:
        logger.info(f"Trade rejected: {len(result.errors)} rule(s) failed")
    return result
