"""
TradeJournal Schema Contracts

Data shapes shared by the engine, the form schemas and the HTTP layer.
"""

from tradejournal.schemas.allocation import Allocation, placeholder
from tradejournal.schemas.trade import (
    ExitType,
    PositionType,
    TradeSetup,
    TradeSetupInput,
)
from tradejournal.schemas.validation import (
    AllocationValidationResult,
    FieldError,
    SchemaValidationResult,
    TradeCheck,
    TradeValidationResult,
)
from tradejournal.schemas.metrics import (
    LevelLabel,
    PositionSizing,
    PriceLevel,
    SetupLayout,
    TakeProfitRatio,
    TradeDistances,
    TradeMetrics,
    TradeSetupReport,
)
from tradejournal.schemas.forms import (
    CalculatorForm,
    ExitRecord,
    PlannedTakeProfit,
    Refinement,
    SettingsForm,
    TradeForm,
)

__all__ = [
    # Allocation
    "Allocation",
    "placeholder",
    # Trade
    "ExitType",
    "PositionType",
    "TradeSetup",
    "TradeSetupInput",
    # Validation
    "AllocationValidationResult",
    "FieldError",
    "SchemaValidationResult",
    "TradeCheck",
    "TradeValidationResult",
    # Metrics
    "LevelLabel",
    "PositionSizing",
    "PriceLevel",
    "SetupLayout",
    "TakeProfitRatio",
    "TradeDistances",
    "TradeMetrics",
    "TradeSetupReport",
    # Forms
    "CalculatorForm",
    "ExitRecord",
    "PlannedTakeProfit",
    "Refinement",
    "SettingsForm",
    "TradeForm",
]
