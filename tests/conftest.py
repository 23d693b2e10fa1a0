"""Pytest configuration and fixtures for all tests.

Keeps the engine defaults independent of any local .env file.
"""

import pytest

from tradejournal.core.config import settings
from tradejournal.schemas import Allocation, TradeSetup


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Pin the engine defaults the tests assert against."""
    monkeypatch.setattr(settings, "allocation_tolerance", 0.1)
    monkeypatch.setattr(settings, "take_profit_tolerance", 0.001)
    monkeypatch.setattr(settings, "default_min_risk_reward", 2.0)
    monkeypatch.setattr(settings, "leverage_ceiling", 125)
    monkeypatch.setattr(settings, "default_currency", "USD")
    yield


@pytest.fixture
def long_setup() -> TradeSetup:
    """Entry 100, stop 90, single target 130 (RR 3)."""
    return TradeSetup(
        entries=[Allocation(price=100, percent=1.0)],
        stop_loss=90,
        take_profits=[Allocation(price=130, percent=1.0)],
        position_type="LONG",
    )
