"""
Validation Results

Business-rule and structural failures are returned as data so a form can
show every simultaneous problem at once.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field


class FieldError(BaseModel):
    """A structural error attached to one field path."""

    path: list[Union[str, int]]
    code: str = Field(..., description="Pydantic error type or 'refinement'")
    message: str
    key: Optional[str] = Field(default=None, description="Message catalog key")

    class Config:
        frozen = True

    @property
    def field(self) -> str:
        """Dotted rendering of the path, e.g. 'planned_tps.0.price'."""
        return ".".join(str(part) for part in self.path)


class SchemaValidationResult(BaseModel):
    """Outcome of evaluating a form schema."""

    valid: bool
    errors: list[FieldError] = Field(default_factory=list)

    class Config:
        frozen = True

    def errors_for(self, *path: Union[str, int]) -> list[FieldError]:
        """Errors whose path starts with the given prefix."""
        prefix = list(path)
        return [e for e in self.errors if e.path[: len(prefix)] == prefix]


class AllocationValidationResult(BaseModel):
    """Allocation sum check. `total` is on the 0-100 scale."""

    valid: bool
    total: float
    errors: list[str] = Field(default_factory=list)

    class Config:
        frozen = True


class TradeCheck(BaseModel):
    """
    Inputs of the trade validator.

    `total_take_profit_percent` is on the 0-1 scale, unlike the 0-100
    scale of the allocation validator.
    """

    risk_reward_ratio: float
    min_risk_reward: float
    leverage: float
    max_leverage: float
    total_take_profit_percent: float = Field(..., description="0-1 scale")

    class Config:
        json_schema_extra = {
            "example": {
                "risk_reward_ratio": 2.5,
                "min_risk_reward": 2,
                "leverage": 10,
                "max_leverage": 20,
                "total_take_profit_percent": 1.0,
            }
        }


class TradeValidationResult(BaseModel):
    """Accept/reject decision with every failing rule, in rule order."""

    valid: bool
    errors: list[str] = Field(default_factory=list)

    class Config:
        frozen = True
