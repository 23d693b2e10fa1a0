"""
Form Schemas

Declarative structural constraints on the trade, calculator and settings
forms. Per-field constraints are pydantic field constraints; message keys
are looked up per dotted field path and pydantic error type; cross-field
refinements are listed per form with the field path they attach to.

Evaluation lives in tradejournal.services.forms.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, ClassVar, Optional

from pydantic import BaseModel, Field

from tradejournal.core.config import settings
from tradejournal.schemas.trade import ExitType

PAIR_PATTERN = r"^[A-Z]+/[A-Z]+$"
LEVERAGE_MIN = 1
LEVERAGE_CEILING = 125
MIN_TAKE_PROFITS = 1
MAX_TAKE_PROFITS = 4

# Error types pydantic reports for the same user mistake
_NOT_A_WHOLE_NUMBER = ("int_from_float", "int_parsing", "int_type")


@dataclass(frozen=True)
class Refinement:
    """A cross-field rule; `check` returns True when the form is fine."""

    target: tuple[str, ...]
    message_key: str
    check: Callable[[Any], bool]


def _leverage_messages() -> dict[str, str]:
    messages = {
        "greater_than_equal": "validations.leverageMin",
        "less_than_equal": "validations.leverageMax",
    }
    for code in _NOT_A_WHOLE_NUMBER:
        messages[code] = "validations.leverageInteger"
    return messages


def _r_percent_messages() -> dict[str, str]:
    return {
        "greater_than_equal": "validations.rPercentMin",
        "less_than_equal": "validations.rPercentMax",
    }


def _positive(key: str) -> dict[str, str]:
    return {"greater_than": key}


_PERCENT_RANGE = {
    "greater_than": "validations.percentRange",
    "less_than_equal": "validations.percentRange",
}


class FormSchema(BaseModel):
    """Base for all form schemas."""

    field_messages: ClassVar[dict[str, dict[str, str]]] = {}
    refinements: ClassVar[list[Refinement]] = []

    class Config:
        allow_inf_nan = False


# =============================================================================
# ROWS
# =============================================================================


class PlannedTakeProfit(BaseModel):
    """A planned exit. Percent is on the 0-1 scale."""

    price: float = Field(..., gt=0)
    percent: float = Field(..., gt=0.01, le=1)
    rr: Optional[float] = Field(default=None, description="Filled in by the engine")

    class Config:
        allow_inf_nan = False


class ExitRecord(BaseModel):
    """An executed exit of a closed or partially closed trade."""

    type: ExitType
    price: float = Field(..., gt=0)
    percent: float = Field(..., gt=0.01, le=1)
    rr: float
    pnl: float

    class Config:
        allow_inf_nan = False


# =============================================================================
# FORMS
# =============================================================================


class TradeForm(FormSchema):
    """Journal entry of a planned (and possibly executed) trade."""

    pair: str = Field(..., min_length=1, pattern=PAIR_PATTERN)
    exchange: str = Field(..., min_length=1)
    analysis_date: date
    trade_date: date
    portfolio_value: float = Field(..., gt=0)
    r_percent: float = Field(..., ge=0.001, le=1)
    min_rr: float = Field(..., gt=0)
    planned_pe: float = Field(..., gt=0)
    planned_sl: float = Field(..., gt=0)
    leverage: int = Field(..., ge=LEVERAGE_MIN, le=LEVERAGE_CEILING)
    planned_tps: list[PlannedTakeProfit] = Field(
        ..., min_length=MIN_TAKE_PROFITS, max_length=MAX_TAKE_PROFITS
    )
    notes: Optional[str] = None
    effective_pe: Optional[float] = Field(default=None, gt=0)
    close_date: Optional[date] = None
    exits: Optional[list[ExitRecord]] = None

    field_messages: ClassVar[dict[str, dict[str, str]]] = {
        "pair": {
            "missing": "validations.pairRequired",
            "string_too_short": "validations.pairRequired",
            "string_pattern_mismatch": "validations.pairFormat",
        },
        "exchange": {
            "missing": "validations.exchangeRequired",
            "string_too_short": "validations.exchangeRequired",
        },
        "portfolio_value": _positive("validations.portfolioMustBePositive"),
        "r_percent": _r_percent_messages(),
        "min_rr": _positive("validations.minRRMustBePositive"),
        "planned_pe": _positive("validations.entryMustBePositive"),
        "planned_sl": _positive("validations.slMustBePositive"),
        "leverage": _leverage_messages(),
        "planned_tps": {
            "too_short": "validations.atLeastOneTP",
            "too_long": "validations.maxFourTPs",
        },
        "planned_tps.price": _positive("validations.priceMustBePositive"),
        "planned_tps.percent": _PERCENT_RANGE,
        "effective_pe": _positive("validations.entryMustBePositive"),
        "exits.type": {"enum": "validations.exitTypeInvalid"},
        "exits.price": _positive("validations.priceMustBePositive"),
        "exits.percent": _PERCENT_RANGE,
    }

    refinements: ClassVar[list[Refinement]] = [
        Refinement(
            target=("planned_sl",),
            message_key="validations.slMustDifferFromEntry",
            check=lambda form: form.planned_pe != form.planned_sl,
        ),
        Refinement(
            target=("planned_tps",),
            message_key="validations.tpMustDifferFromEntry",
            check=lambda form: all(tp.price != form.planned_pe for tp in form.planned_tps),
        ),
    ]

    class Config:
        json_schema_extra = {
            "example": {
                "pair": "BTC/USDT",
                "exchange": "Binance",
                "analysis_date": "2024-03-01",
                "trade_date": "2024-03-02",
                "portfolio_value": 10000,
                "r_percent": 0.01,
                "min_rr": 2,
                "planned_pe": 62000,
                "planned_sl": 60000,
                "leverage": 10,
                "planned_tps": [
                    {"price": 66000, "percent": 0.5},
                    {"price": 70000, "percent": 0.5},
                ],
            }
        }


class CalculatorForm(FormSchema):
    """Single-entry position calculator."""

    portfolio: float = Field(..., gt=0)
    r_percent: float = Field(..., ge=0.001, le=1)
    min_rr: float = Field(..., gt=0)
    pe: float = Field(..., gt=0)
    sl: float = Field(..., gt=0)
    tp: float = Field(..., gt=0)
    leverage: int = Field(..., ge=LEVERAGE_MIN, le=LEVERAGE_CEILING)

    field_messages: ClassVar[dict[str, dict[str, str]]] = {
        "portfolio": _positive("validations.portfolioMustBePositive"),
        "r_percent": _r_percent_messages(),
        "min_rr": _positive("validations.minRRMustBePositive"),
        "pe": _positive("validations.entryMustBePositive"),
        "sl": _positive("validations.slMustBePositive"),
        "tp": _positive("validations.tpMustBePositive"),
        "leverage": _leverage_messages(),
    }

    refinements: ClassVar[list[Refinement]] = [
        Refinement(
            target=("sl",),
            message_key="validations.slMustDifferFromEntry",
            check=lambda form: form.pe != form.sl,
        ),
        Refinement(
            target=("tp",),
            message_key="validations.tpMustDifferFromEntry",
            check=lambda form: form.pe != form.tp,
        ),
    ]


class SettingsForm(FormSchema):
    """Account-wide defaults."""

    initial_capital: float = Field(..., gt=0)
    current_r_percent: float = Field(..., ge=0.001, le=1)
    default_min_rr: float = Field(..., gt=0)
    default_leverage: int = Field(..., ge=LEVERAGE_MIN, le=LEVERAGE_CEILING)
    currency: str = Field(default_factory=lambda: settings.default_currency)

    field_messages: ClassVar[dict[str, dict[str, str]]] = {
        "initial_capital": _positive("validations.initialCapitalMustBePositive"),
        "current_r_percent": _r_percent_messages(),
        "default_min_rr": _positive("validations.minRRMustBePositive"),
        "default_leverage": _leverage_messages(),
    }
