"""
Message Catalog

English fallback strings for every validation message, keyed the same way
the frontend's translation files are. A translator, when supplied, receives
the key and the parameters and its result is used verbatim.
"""

from decimal import Decimal
from typing import Any, Callable, Mapping, Optional

Translator = Callable[[str, Mapping[str, Any]], str]


MESSAGES: dict[str, str] = {
    # Form fields
    "validations.pairRequired": "Trading pair is required",
    "validations.pairFormat": "Must be in format BTC/USDT",
    "validations.exchangeRequired": "Exchange is required",
    "validations.portfolioMustBePositive": "Portfolio value must be positive",
    "validations.initialCapitalMustBePositive": "Initial capital must be positive",
    "validations.rPercentMin": "R% must be at least 0.1%",
    "validations.rPercentMax": "R% cannot exceed 100%",
    "validations.minRRMustBePositive": "Minimum RR must be positive",
    "validations.entryMustBePositive": "Entry price must be positive",
    "validations.slMustBePositive": "Stop loss must be positive",
    "validations.tpMustBePositive": "Take profit must be positive",
    "validations.priceMustBePositive": "Price must be positive",
    "validations.percentRange": "Percent must be between 1% and 100%",
    "validations.leverageInteger": "Leverage must be a whole number",
    "validations.leverageMin": "Leverage must be at least 1x",
    "validations.leverageMax": "Leverage cannot exceed 125x",
    "validations.atLeastOneTP": "At least one take profit is required",
    "validations.maxFourTPs": "Maximum 4 take profits allowed",
    "validations.exitTypeInvalid": "Exit type must be one of TP1, TP2, TP3, TP4, BE, SL",
    "validations.required": "This field is required",
    # Cross-field refinements
    "validations.slMustDifferFromEntry": "Stop Loss must be different from Entry",
    "validations.tpMustDifferFromEntry": "Take Profit prices must not equal Entry Price",
    # Business rules
    "validations.allocationMustEqual100": "Allocation ({total}%) must equal 100%",
    "validations.rrBelowMinimum": "RR ({ratio}) is below minimum ({minimum})",
    "validations.leverageExceedsMax": "Leverage ({leverage}x) exceeds max safe leverage ({maximum}x)",
    "validations.tpAllocationMustEqual100": "TP allocation ({total}%) must equal 100%",
}


def render(key: str, translate: Optional[Translator] = None, **params: Any) -> str:
    """Resolve a message key through the translator or the English catalog."""
    if translate is not None:
        return translate(key, params)
    return MESSAGES[key].format(**params)


def format_number(value: float) -> str:
    """Plain rendering of a limit value (2 -> "2", 1.5 -> "1.5", no exponents)."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")
