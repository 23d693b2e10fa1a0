"""Tests for distances, ratios and the setup layout."""

import pytest

from tradejournal.schemas import Allocation, LevelLabel, PositionType
from tradejournal.services import DegenerateSetupError, DivisionByZeroError, ValidationError
from tradejournal.services.setup import (
    compute_distances,
    distance_percentage,
    infer_position_type,
    planned_weighted_rr,
    risk_reward_ratio,
    setup_layout,
    take_profit_ratios,
    visual_shares,
)


def test_long_distances_and_ratio():
    distances = compute_distances(weighted_entry=100, stop_loss=90, weighted_take_profit=130)
    assert distances.sl_distance == pytest.approx(10)
    assert distances.tp_distance == pytest.approx(30)
    assert risk_reward_ratio(distances.sl_distance, distances.tp_distance) == pytest.approx(3)


def test_short_distances_are_magnitudes():
    distances = compute_distances(weighted_entry=100, stop_loss=110, weighted_take_profit=70)
    assert distances.sl_distance == pytest.approx(10)
    assert distances.tp_distance == pytest.approx(30)


def test_distance_percentages_are_fractions():
    distances = compute_distances(weighted_entry=200, stop_loss=190, weighted_take_profit=240)
    assert distances.sl_distance_pct == pytest.approx(0.05)
    assert distances.tp_distance_pct == pytest.approx(0.2)


def test_distance_percentage_of_zero_entry_fails():
    with pytest.raises(DivisionByZeroError):
        distance_percentage(5, 0)


def test_ratio_with_stop_on_entry_signals_degeneracy():
    with pytest.raises(DivisionByZeroError) as exc_info:
        risk_reward_ratio(0, 30)
    assert isinstance(exc_info.value, ZeroDivisionError)
    assert isinstance(exc_info.value, DegenerateSetupError)


def test_ratio_rejects_negative_distances():
    with pytest.raises(ValidationError):
        risk_reward_ratio(-1, 30)


def test_visual_shares():
    sl_share, tp_share = visual_shares(10, 30)
    assert sl_share == pytest.approx(0.25)
    assert tp_share == pytest.approx(0.75)


def test_visual_shares_of_flat_setup_fail():
    with pytest.raises(DivisionByZeroError):
        visual_shares(0, 0)


def test_infer_position_type():
    assert infer_position_type(entry=100, stop_loss=90) == PositionType.LONG
    assert infer_position_type(entry=100, stop_loss=110) == PositionType.SHORT


def test_infer_position_type_with_stop_on_entry_fails():
    with pytest.raises(DegenerateSetupError):
        infer_position_type(entry=100, stop_loss=100)


def test_long_layout_puts_take_profit_on_top():
    layout = setup_layout(PositionType.LONG, 100, 90, 130, 10, 30)
    assert layout.top.label == LevelLabel.TP
    assert layout.top.price == 130
    assert layout.top.share == pytest.approx(0.75)
    assert layout.bottom.label == LevelLabel.SL
    assert layout.bottom.price == 90
    assert layout.entry.price == 100


def test_short_layout_puts_stop_loss_on_top():
    layout = setup_layout(PositionType.SHORT, 100, 110, 70, 10, 30)
    assert layout.top.label == LevelLabel.SL
    assert layout.top.price == 110
    assert layout.top.share == pytest.approx(0.25)
    assert layout.bottom.label == LevelLabel.TP
    assert layout.bottom.price == 70


def test_layout_marks_averaged_levels():
    layout = setup_layout(PositionType.LONG, 100, 90, 130, 10, 30, entry_rows=2, take_profit_rows=1)
    assert layout.entry.averaged
    assert not layout.top.averaged
    assert not layout.bottom.averaged


def test_layout_is_repeatable():
    first = setup_layout(PositionType.SHORT, 100, 110, 70, 10, 30)
    second = setup_layout(PositionType.SHORT, 100, 110, 70, 10, 30)
    assert first == second


def test_take_profit_ratios_per_row():
    ratios = take_profit_ratios(
        weighted_entry=100,
        sl_distance=10,
        take_profits=[
            Allocation(price=120, percent=0.5),
            Allocation(price=140, percent=0.5),
            Allocation(),
        ],
    )
    assert [r.rr for r in ratios] == pytest.approx([2, 4])
    assert planned_weighted_rr(ratios) == pytest.approx(3)


def test_planned_weighted_rr_without_targets_fails():
    with pytest.raises(DegenerateSetupError):
        planned_weighted_rr([])
