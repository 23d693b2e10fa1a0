"""
Allocation Rows

A (price, percent) pair describing one partial entry or exit fill.

Rows are deliberately unconstrained: an editable list keeps empty
placeholder rows (price or percent <= 0) around while the user types,
and every consumer decides for itself which rows count.
"""

from pydantic import BaseModel, Field


class Allocation(BaseModel):
    """One partial entry or take-profit fill."""

    price: float = Field(default=0.0, description="Fill price")
    percent: float = Field(
        default=0.0,
        description="Share of the position (0-1 or 0-100 depending on the consumer)",
    )

    class Config:
        frozen = True
        json_schema_extra = {"example": {"price": 100.0, "percent": 0.5}}

    @property
    def is_priced(self) -> bool:
        return self.price > 0

    @property
    def is_weighted(self) -> bool:
        """Counts toward a weighted price."""
        return self.price > 0 and self.percent > 0


def placeholder() -> Allocation:
    """An empty row, as added by the row editor."""
    return Allocation(price=0.0, percent=0.0)
