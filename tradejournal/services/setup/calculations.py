"""
Distance & Ratio Calculations

Pure functions deriving distances, risk/reward ratios and the
direction-aware layout of a trade setup from its weighted prices.
Distances are magnitudes; direction only decides which side of the entry
is risk and which is reward.
"""

from typing import Iterable

from tradejournal.schemas.allocation import Allocation
from tradejournal.schemas.metrics import (
    LevelLabel,
    PriceLevel,
    SetupLayout,
    TakeProfitRatio,
    TradeDistances,
)
from tradejournal.schemas.trade import PositionType
from tradejournal.services.base import (
    DegenerateSetupError,
    DivisionByZeroError,
    EmptyAllocationError,
    ValidationError,
)
from tradejournal.services.setup.aggregation import weighted_rows


def _require_non_negative(**values: float) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValidationError(f"{name} must be non-negative, got {value}", {name: value})


# =============================================================================
# DISTANCES
# =============================================================================


def stop_loss_distance(weighted_entry: float, stop_loss: float) -> float:
    return abs(weighted_entry - stop_loss)


def take_profit_distance(weighted_entry: float, weighted_take_profit: float) -> float:
    return abs(weighted_take_profit - weighted_entry)


def distance_percentage(distance: float, weighted_entry: float) -> float:
    """Distance as a decimal fraction of the entry (0.05, not 5)."""
    _require_non_negative(distance=distance, weighted_entry=weighted_entry)
    if weighted_entry == 0:
        raise DivisionByZeroError("Weighted entry is zero")
    return distance / weighted_entry


def compute_distances(
    weighted_entry: float,
    stop_loss: float,
    weighted_take_profit: float,
) -> TradeDistances:
    sl_distance = stop_loss_distance(weighted_entry, stop_loss)
    tp_distance = take_profit_distance(weighted_entry, weighted_take_profit)
    return TradeDistances(
        sl_distance=sl_distance,
        tp_distance=tp_distance,
        sl_distance_pct=distance_percentage(sl_distance, weighted_entry),
        tp_distance_pct=distance_percentage(tp_distance, weighted_entry),
    )


# =============================================================================
# RATIOS
# =============================================================================


def risk_reward_ratio(sl_distance: float, tp_distance: float) -> float:
    """
    Reward per unit of risk.

    Raises:
        DivisionByZeroError: Stop-loss sits on the weighted entry
        ValidationError: A distance is negative
    """
    _require_non_negative(sl_distance=sl_distance, tp_distance=tp_distance)
    if sl_distance == 0:
        raise DivisionByZeroError(
            "Stop-loss equals weighted entry; risk/reward is undefined",
            {"sl_distance": sl_distance, "tp_distance": tp_distance},
        )
    return tp_distance / sl_distance


def take_profit_ratios(
    weighted_entry: float,
    sl_distance: float,
    take_profits: Iterable[Allocation],
) -> list[TakeProfitRatio]:
    """Risk/reward of every valid take-profit row, in row order."""
    return [
        TakeProfitRatio(
            price=row.price,
            percent=row.percent,
            rr=risk_reward_ratio(sl_distance, take_profit_distance(weighted_entry, row.price)),
        )
        for row in weighted_rows(take_profits)
    ]


def planned_weighted_rr(ratios: list[TakeProfitRatio]) -> float:
    """Percent-weighted average of per-target ratios."""
    if not ratios:
        raise EmptyAllocationError("No take-profit to weight")
    total = sum(r.percent for r in ratios)
    return sum(r.rr * r.percent for r in ratios) / total


def visual_shares(sl_distance: float, tp_distance: float) -> tuple[float, float]:
    """
    (sl_share, tp_share) of the combined distance. Display weights only.
    """
    _require_non_negative(sl_distance=sl_distance, tp_distance=tp_distance)
    total = sl_distance + tp_distance
    if total == 0:
        raise DivisionByZeroError("Stop-loss and take-profit both sit on the entry")
    sl_share = sl_distance / total
    return sl_share, 1 - sl_share


# =============================================================================
# DIRECTION
# =============================================================================


def infer_position_type(entry: float, stop_loss: float) -> PositionType:
    """LONG when the stop is below the entry, SHORT when above."""
    if stop_loss == entry:
        raise DegenerateSetupError("Stop-loss equals entry; direction is undefined")
    return PositionType.LONG if stop_loss < entry else PositionType.SHORT


def setup_layout(
    position_type: PositionType,
    weighted_entry: float,
    stop_loss: float,
    weighted_take_profit: float,
    sl_distance: float,
    tp_distance: float,
    entry_rows: int = 1,
    take_profit_rows: int = 1,
) -> SetupLayout:
    """
    Top/entry/bottom levels of the setup.

    LONG puts the take-profit on top and the stop-loss below the entry;
    SHORT inverts that.
    """
    sl_share, tp_share = visual_shares(sl_distance, tp_distance)

    take_profit = PriceLevel(
        label=LevelLabel.TP,
        price=weighted_take_profit,
        share=tp_share,
        averaged=take_profit_rows > 1,
    )
    stop = PriceLevel(label=LevelLabel.SL, price=stop_loss, share=sl_share)
    entry = PriceLevel(
        label=LevelLabel.ENTRY,
        price=weighted_entry,
        averaged=entry_rows > 1,
    )

    if position_type == PositionType.LONG:
        top, bottom = take_profit, stop
    else:
        top, bottom = stop, take_profit

    return SetupLayout(position_type=position_type, top=top, entry=entry, bottom=bottom)
