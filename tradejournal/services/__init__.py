"""
TradeJournal Services

Service layer containing all business logic.
Each service has a defined interface (contract) and implementation.
"""

from tradejournal.services.base import (
    BaseService,
    DegenerateSetupError,
    DivisionByZeroError,
    EmptyAllocationError,
    ServiceError,
    ValidationError,
)

__all__ = [
    "BaseService",
    "DegenerateSetupError",
    "DivisionByZeroError",
    "EmptyAllocationError",
    "ServiceError",
    "ValidationError",
]
