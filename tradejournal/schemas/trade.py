"""
Trade Setup

The aggregate the engine works on: partial entries, one stop-loss, partial
take-profits and a direction. Allocation percents are on the 0-1 scale here.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from tradejournal.schemas.allocation import Allocation


class PositionType(str, Enum):
    LONG = "LONG"
    SHORT = "SHORT"


class ExitType(str, Enum):
    TP1 = "TP1"
    TP2 = "TP2"
    TP3 = "TP3"
    TP4 = "TP4"
    BE = "BE"  # Break-even
    SL = "SL"


class TradeSetup(BaseModel):
    """
    Entries, stop-loss and take-profits of one trade.

    No range checks here: the engine must accept transient states while a
    form is being edited. Structural checks live in the form schemas.
    """

    entries: list[Allocation] = Field(..., description="Partial entries, 0-1 percents")
    stop_loss: float
    take_profits: list[Allocation] = Field(..., description="Partial exits, 0-1 percents")
    position_type: PositionType

    class Config:
        json_schema_extra = {
            "example": {
                "entries": [
                    {"price": 100.0, "percent": 0.6},
                    {"price": 98.0, "percent": 0.4},
                ],
                "stop_loss": 94.0,
                "take_profits": [
                    {"price": 110.0, "percent": 0.5},
                    {"price": 120.0, "percent": 0.5},
                ],
                "position_type": "LONG",
            }
        }


class TradeSetupInput(BaseModel):
    """
    Input of the trade setup service.

    Sizing fields are optional; without them the report carries no
    position sizing. Limits fall back to the configured defaults.
    """

    setup: TradeSetup
    portfolio_value: Optional[float] = Field(default=None, gt=0, description="Account value")
    risk_percent: Optional[float] = Field(
        default=None,
        ge=0.001,
        le=1,
        description="Fraction of the portfolio risked (0.01 = 1%)",
    )
    leverage: int = Field(default=1, ge=1, le=125)
    min_risk_reward: Optional[float] = None
    max_leverage: Optional[int] = Field(
        default=None,
        description="Defaults to the max safe leverage of the setup",
    )
