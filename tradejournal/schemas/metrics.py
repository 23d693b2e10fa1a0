"""
Derived Trade Metrics

Everything the engine computes from a trade setup. None of these values is
stored; they are recomputed on every change.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from tradejournal.schemas.trade import PositionType
from tradejournal.schemas.validation import AllocationValidationResult, TradeValidationResult


class LevelLabel(str, Enum):
    TP = "TP"
    SL = "SL"
    ENTRY = "ENTRY"


class TradeDistances(BaseModel):
    """Absolute distances from the weighted entry, plus their fractions of it."""

    sl_distance: float = Field(..., ge=0)
    tp_distance: float = Field(..., ge=0)
    sl_distance_pct: float = Field(..., ge=0, description="Decimal fraction, not x100")
    tp_distance_pct: float = Field(..., ge=0, description="Decimal fraction, not x100")

    class Config:
        frozen = True


class PositionSizing(BaseModel):
    """Risk-based position size for one trade. Inputs are range-checked upstream."""

    one_r: float = Field(..., description="Currency amount risked")
    position_size: float = Field(..., description="Notional exposure")
    margin: float = Field(..., description="Position size / leverage")
    quantity: Optional[float] = Field(
        default=None,
        description="Units at the weighted entry, when known",
    )

    class Config:
        frozen = True


class PriceLevel(BaseModel):
    """One horizontal level of the setup visualization."""

    label: LevelLabel
    price: float
    share: Optional[float] = Field(
        default=None,
        description="Display weight of the bar next to this level (display only)",
    )
    averaged: bool = Field(
        default=False,
        description="Level aggregates more than one row",
    )

    class Config:
        frozen = True


class SetupLayout(BaseModel):
    """Direction-aware top/entry/bottom arrangement of a setup."""

    position_type: PositionType
    top: PriceLevel
    entry: PriceLevel
    bottom: PriceLevel

    class Config:
        frozen = True


class TakeProfitRatio(BaseModel):
    """Risk/reward of a single take-profit row."""

    price: float
    percent: float
    rr: float

    class Config:
        frozen = True


class TradeMetrics(BaseModel):
    """All derived values for a computable setup."""

    weighted_entry: float
    weighted_take_profit: float
    stop_loss: float
    position_type: PositionType
    distances: TradeDistances
    risk_reward_ratio: float
    planned_weighted_rr: float
    take_profit_ratios: list[TakeProfitRatio]
    layout: SetupLayout
    max_safe_leverage: int
    sizing: Optional[PositionSizing] = None

    class Config:
        frozen = True


class TradeSetupReport(BaseModel):
    """
    Everything the presentation layer renders for one setup.

    `metrics` is None while the setup is not yet computable; `pending`
    then says why. `accepted` is True only when metrics exist and every
    check passed.
    """

    metrics: Optional[TradeMetrics] = None
    pending: list[str] = Field(default_factory=list)
    entry_allocation: AllocationValidationResult
    take_profit_allocation: AllocationValidationResult
    validation: Optional[TradeValidationResult] = None
    accepted: bool = False

    class Config:
        frozen = True
