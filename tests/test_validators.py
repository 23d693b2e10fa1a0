"""Tests for the allocation and trade validators."""

import pytest

from tradejournal.core.messages import format_number
from tradejournal.schemas import Allocation, TradeCheck
from tradejournal.services.setup import (
    to_percent_scale,
    total_fraction,
    validate_allocation,
    validate_trade,
)


# =============================================================================
# ALLOCATION (0-100 scale)
# =============================================================================


def test_empty_allocation_is_not_flagged():
    result = validate_allocation([])
    assert result.valid
    assert result.total == 0
    assert result.errors == []


def test_placeholder_rows_only_are_not_flagged():
    result = validate_allocation([Allocation(), Allocation(price=0, percent=40)])
    assert result.valid
    assert result.total == 0
    assert result.errors == []


def test_allocation_within_tolerance():
    result = validate_allocation(
        [
            Allocation(price=100, percent=33.33),
            Allocation(price=101, percent=33.33),
            Allocation(price=102, percent=33.29),
        ]
    )
    assert result.valid
    assert result.total == pytest.approx(99.95)
    assert result.errors == []


def test_incomplete_allocation_reports_total():
    result = validate_allocation([Allocation(price=100, percent=50)])
    assert not result.valid
    assert result.total == 50
    assert result.errors == ["Allocation (50.0%) must equal 100%"]


def test_priced_zero_percent_row_counts():
    result = validate_allocation([Allocation(price=100, percent=100), Allocation(price=101, percent=0)])
    assert result.valid
    assert result.total == 100


def test_unpriced_rows_are_ignored_in_total():
    result = validate_allocation([Allocation(price=100, percent=60), Allocation(price=0, percent=40)])
    assert not result.valid
    assert result.total == 60


def test_over_allocation_is_flagged():
    result = validate_allocation([Allocation(price=100, percent=70), Allocation(price=105, percent=40)])
    assert not result.valid
    assert result.errors == ["Allocation (110.0%) must equal 100%"]


def test_custom_tolerance():
    rows = [Allocation(price=100, percent=99)]
    assert not validate_allocation(rows).valid
    assert validate_allocation(rows, tolerance=1.0).valid


def test_allocation_message_goes_through_translator():
    calls = []

    def translate(key, params):
        calls.append((key, dict(params)))
        return f"{key}|{params['total']}"

    result = validate_allocation([Allocation(price=100, percent=50)], translate=translate)
    assert result.errors == ["validations.allocationMustEqual100|50.0"]
    assert calls == [("validations.allocationMustEqual100", {"total": "50.0"})]


# =============================================================================
# TRADE (0-1 take-profit scale)
# =============================================================================


def test_trade_below_minimum_rr():
    result = validate_trade(
        TradeCheck(
            risk_reward_ratio=1.5,
            min_risk_reward=2,
            leverage=10,
            max_leverage=20,
            total_take_profit_percent=1.0,
        )
    )
    assert not result.valid
    assert result.errors == ["RR (1.50) is below minimum (2)"]



def test_large_limits_print_without_exponent():
    result = validate_trade(
        TradeCheck(
            risk_reward_ratio=3,
            min_risk_reward=1_234_567,
            leverage=2_500_000,
            max_leverage=1_234_567.5,
            total_take_profit_percent=1.0,
        )
    )
    assert result.errors == [
        "RR (3.00) is below minimum (1234567)",
        "Leverage (2500000x) exceeds max safe leverage (1234567.5x)",
    ]


@pytest.mark.parametrize(
    "value,expected",
    [(2, "2"), (2.0, "2"), (1.5, "1.5"), (0.1, "0.1"), (1e-7, "0.0000001"), (1e6, "1000000")],
)
def test_format_number(value, expected):
    assert format_number(value) == expected

def test_trade_leverage_and_allocation_errors_in_order():
    result = validate_trade(
        TradeCheck(
            risk_reward_ratio=3,
            min_risk_reward=2,
            leverage=50,
            max_leverage=20,
            total_take_profit_percent=0.9,
        )
    )
    assert not result.valid
    assert result.errors == [
        "Leverage (50x) exceeds max safe leverage (20x)",
        "TP allocation (90%) must equal 100%",
    ]


def test_trade_reports_every_failure():
    result = validate_trade(
        TradeCheck(
            risk_reward_ratio=0.8,
            min_risk_reward=1.5,
            leverage=30,
            max_leverage=10,
            total_take_profit_percent=1.2,
        )
    )
    assert len(result.errors) == 3
    assert result.errors[0].startswith("RR (0.80)")
    assert result.errors[1].startswith("Leverage (30x)")
    assert result.errors[2].startswith("TP allocation (120%)")


def test_valid_trade():
    result = validate_trade(
        TradeCheck(
            risk_reward_ratio=2,
            min_risk_reward=2,
            leverage=20,
            max_leverage=20,
            total_take_profit_percent=0.9995,
        )
    )
    assert result.valid
    assert result.errors == []


def test_trade_validation_is_repeatable():
    check = TradeCheck(
        risk_reward_ratio=1.2,
        min_risk_reward=2,
        leverage=10,
        max_leverage=5,
        total_take_profit_percent=0.5,
    )
    assert validate_trade(check) == validate_trade(check)


def test_trade_messages_go_through_translator():
    def translate(key, params):
        return key

    result = validate_trade(
        TradeCheck(
            risk_reward_ratio=1,
            min_risk_reward=2,
            leverage=50,
            max_leverage=20,
            total_take_profit_percent=0.5,
        ),
        translate=translate,
    )
    assert result.errors == [
        "validations.rrBelowMinimum",
        "validations.leverageExceedsMax",
        "validations.tpAllocationMustEqual100",
    ]


# =============================================================================
# SCALE BOUNDARY
# =============================================================================


def test_take_profit_scales_do_not_mix():
    """0-1 take-profit rows must be rescaled before the 0-100 allocation check."""
    take_profits = [Allocation(price=110, percent=0.5), Allocation(price=120, percent=0.5)]

    assert not validate_allocation(take_profits).valid
    assert validate_allocation(to_percent_scale(take_profits)).valid

    check = TradeCheck(
        risk_reward_ratio=3,
        min_risk_reward=2,
        leverage=1,
        max_leverage=10,
        total_take_profit_percent=total_fraction(take_profits),
    )
    assert validate_trade(check).valid

    check_on_wrong_scale = check.model_copy(
        update={"total_take_profit_percent": validate_allocation(to_percent_scale(take_profits)).total}
    )
    assert not validate_trade(check_on_wrong_scale).valid
