"""
Trade Setup Engine

CONTRACT:
    Input:  TradeSetupInput (entries + stop-loss + take-profits + sizing inputs)
    Output: TradeSetupReport

RESPONSIBILITIES:
    - Weighted entry / take-profit prices
    - Stop-loss and take-profit distances, risk/reward
    - Direction-aware layout of the setup
    - Position sizing, margin and max safe leverage
    - Allocation and trade rule validation

PURE PYTHON - No I/O.
All math is deterministic and reproducible.
"""

from tradejournal.services.setup.aggregation import (
    allocation_weights,
    to_percent_scale,
    total_fraction,
    weighted_price,
    weighted_rows,
)
from tradejournal.services.setup.calculations import (
    compute_distances,
    distance_percentage,
    infer_position_type,
    planned_weighted_rr,
    risk_reward_ratio,
    setup_layout,
    take_profit_ratios,
    visual_shares,
)
from tradejournal.services.setup.entry_manager import EntryManager
from tradejournal.services.setup.interface import TradeSetupServiceInterface
from tradejournal.services.setup.service import TradeSetupService, get_trade_setup_service
from tradejournal.services.setup.sizing import max_safe_leverage, position_sizing, risk_amount
from tradejournal.services.setup.validators import validate_allocation, validate_trade

__all__ = [
    "EntryManager",
    "TradeSetupService",
    "TradeSetupServiceInterface",
    "allocation_weights",
    "compute_distances",
    "distance_percentage",
    "get_trade_setup_service",
    "infer_position_type",
    "max_safe_leverage",
    "planned_weighted_rr",
    "position_sizing",
    "risk_amount",
    "risk_reward_ratio",
    "setup_layout",
    "take_profit_ratios",
    "to_percent_scale",
    "total_fraction",
    "validate_allocation",
    "validate_trade",
    "visual_shares",
    "weighted_price",
    "weighted_rows",
]
