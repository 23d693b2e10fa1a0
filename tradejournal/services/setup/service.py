"""
Trade Setup Service Implementation

Runs the whole engine for one setup:
    Weighted Aggregation → Distances & Ratios → Position Sizing → Validators

PURE PYTHON - deterministic, no I/O, no shared state.
"""

import logging
from typing import Optional

from tradejournal.core.config import settings
from tradejournal.core.messages import Translator
from tradejournal.schemas.metrics import TradeMetrics, TradeSetupReport
from tradejournal.schemas.trade import TradeSetupInput
from tradejournal.schemas.validation import TradeCheck
from tradejournal.services.base import DegenerateSetupError
from tradejournal.services.setup.aggregation import (
    to_percent_scale,
    total_fraction,
    weighted_price,
    weighted_rows,
)
from tradejournal.services.setup.calculations import (
    compute_distances,
    planned_weighted_rr,
    risk_reward_ratio,
    setup_layout,
    take_profit_ratios,
)
from tradejournal.services.setup.interface import TradeSetupServiceInterface
from tradejournal.services.setup.sizing import max_safe_leverage, position_sizing
from tradejournal.services.setup.validators import validate_allocation, validate_trade

logger = logging.getLogger(__name__)


class TradeSetupService(TradeSetupServiceInterface):
    """
    Trade Setup Engine.

    Degenerate setups (empty rows, stop-loss on the entry) are reported as
    pending instead of failing; business-rule failures are reported as data.
    """

    def __init__(self, translate: Optional[Translator] = None):
        self._translate = translate

    @property
    def name(self) -> str:
        return "TradeSetupService"

    async def execute(self, input_data: TradeSetupInput) -> TradeSetupReport:
        """Compute and validate a trade setup."""
        return self.evaluate(input_data)

    def evaluate(self, input_data: TradeSetupInput) -> TradeSetupReport:
        setup = input_data.setup

        # Allocation checks work on the 0-100 scale
        entry_allocation = validate_allocation(
            to_percent_scale(setup.entries),
            settings.allocation_tolerance,
            self._translate,
        )
        take_profit_allocation = validate_allocation(
            to_percent_scale(setup.take_profits),
            settings.allocation_tolerance,
            self._translate,
        )

        try:
            metrics = self.compute_metrics(input_data)
        except DegenerateSetupError as e:
            logger.debug(f"Setup not computable yet: {e.message}")
            return TradeSetupReport(
                pending=[e.message],
                entry_allocation=entry_allocation,
                take_profit_allocation=take_profit_allocation,
            )

        check = TradeCheck(
            risk_reward_ratio=metrics.risk_reward_ratio,
            min_risk_reward=(
                input_data.min_risk_reward
                if input_data.min_risk_reward is not None
                else settings.default_min_risk_reward
            ),
            leverage=input_data.leverage,
            max_leverage=(
                input_data.max_leverage
                if input_data.max_leverage is not None
                else metrics.max_safe_leverage
            ),
            total_take_profit_percent=total_fraction(setup.take_profits),
        )
        validation = validate_trade(check, self._translate, settings.take_profit_tolerance)

        accepted = validation.valid and entry_allocation.valid and take_profit_allocation.valid
        logger.info(
            f"{setup.position_type.value} setup "
            f"{'accepted' if accepted else 'rejected'}: RR={metrics.risk_reward_ratio:.2f}"
        )

        return TradeSetupReport(
            metrics=metrics,
            entry_allocation=entry_allocation,
            take_profit_allocation=take_profit_allocation,
            validation=validation,
            accepted=accepted,
        )

    def compute_metrics(self, input_data: TradeSetupInput) -> TradeMetrics:
        """
        Derived values of a setup.

        Raises:
            DegenerateSetupError: If the setup is not computable yet
        """
        setup = input_data.setup

        weighted_entry = weighted_price(setup.entries)
        weighted_take_profit = weighted_price(setup.take_profits)
        if setup.stop_loss <= 0:
            raise DegenerateSetupError("Stop-loss is not set")

        distances = compute_distances(weighted_entry, setup.stop_loss, weighted_take_profit)
        rr = risk_reward_ratio(distances.sl_distance, distances.tp_distance)
        ratios = take_profit_ratios(weighted_entry, distances.sl_distance, setup.take_profits)

        layout = setup_layout(
            setup.position_type,
            weighted_entry,
            setup.stop_loss,
            weighted_take_profit,
            distances.sl_distance,
            distances.tp_distance,
            entry_rows=len(weighted_rows(setup.entries)),
            take_profit_rows=len(ratios),
        )

        sizing = None
        if input_data.portfolio_value and input_data.risk_percent:
            sizing = position_sizing(
                input_data.portfolio_value,
                input_data.risk_percent,
                input_data.leverage,
                distances.sl_distance_pct,
                weighted_entry=weighted_entry,
            )

        return TradeMetrics(
            weighted_entry=weighted_entry,
            weighted_take_profit=weighted_take_profit,
            stop_loss=setup.stop_loss,
            position_type=setup.position_type,
            distances=distances,
            risk_reward_ratio=rr,
            planned_weighted_rr=planned_weighted_rr(ratios),
            take_profit_ratios=ratios,
            layout=layout,
            max_safe_leverage=max_safe_leverage(
                distances.sl_distance_pct, settings.leverage_ceiling
            ),
            sizing=sizing,
        )

    async def health_check(self) -> bool:
        """Trade setup service is always healthy (pure computation)."""
        return True


# Singleton instance
_service_instance: Optional[TradeSetupService] = None


def get_trade_setup_service() -> TradeSetupService:
    """Get or create trade setup service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = TradeSetupService()
    return _service_instance
