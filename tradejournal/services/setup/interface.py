"""
Trade Setup Service Interface

Defines the contract for the trade setup engine.
"""

from abc import abstractmethod

from tradejournal.schemas.metrics import TradeSetupReport
from tradejournal.schemas.trade import TradeSetupInput
from tradejournal.services.base import BaseService


class TradeSetupServiceInterface(BaseService[TradeSetupInput, TradeSetupReport]):
    """
    Trade Setup Service Contract.

    INPUT: TradeSetupInput
        - setup: entries, stop-loss, take-profits, direction (0-1 percents)
        - portfolio_value / risk_percent: optional sizing inputs
        - leverage, min_risk_reward, max_leverage: limits (defaults from settings)

    OUTPUT: TradeSetupReport
        - metrics: weighted prices, distances, ratios, layout, sizing
        - pending: why metrics are not computable yet
        - entry_allocation / take_profit_allocation: 0-100 sum checks
        - validation: trade rule results
        - accepted: every check passed

    PIPELINE (in order):
        1. Weighted aggregation of entries and take-profits
        2. Distances and risk/reward
        3. Position sizing
        4. Allocation checks
        5. Trade validation
    """

    @property
    def name(self) -> str:
        return "TradeSetupService"

    @abstractmethod
    async def execute(self, input_data: TradeSetupInput) -> TradeSetupReport:
        """Compute and validate a trade setup."""
        pass

    @abstractmethod
    def evaluate(self, input_data: TradeSetupInput) -> TradeSetupReport:
        """Synchronous form of execute()."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Trade setup service is always healthy (pure computation)."""
        pass
