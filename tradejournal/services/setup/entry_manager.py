"""
Entry Manager

Index-addressed list of allocation rows owned by one editing session.
Never holds fewer than one row.
"""

import logging
from typing import Iterable, Literal, Optional

from tradejournal.schemas.allocation import Allocation, placeholder
from tradejournal.services.base import ValidationError

logger = logging.getLogger(__name__)

RowField = Literal["price", "percent"]


class EntryManager:
    """
    Editable rows of entries or take-profits.

    Rows are immutable Allocation values; updates replace the row at an
    index. `max_rows` caps `add` (take-profits stop at four).
    """

    def __init__(
        self,
        initial: Optional[Iterable[Allocation]] = None,
        max_rows: Optional[int] = None,
    ):
        self._max_rows = max_rows
        self._rows: list[Allocation] = []
        self.replace(initial if initial is not None else [placeholder()])

    @property
    def entries(self) -> tuple[Allocation, ...]:
        return tuple(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, index: int) -> Allocation:
        return self._rows[index]

    def add(self) -> None:
        """Append an empty row, unless the ceiling is reached."""
        if self._max_rows is not None and len(self._rows) >= self._max_rows:
            logger.debug(f"Row ceiling {self._max_rows} reached; add ignored")
            return
        self._rows.append(placeholder())

    def remove(self, index: int) -> None:
        """Drop the row at `index`. No-op when only one row is left."""
        if len(self._rows) <= 1:
            return
        self._check_index(index)
        del self._rows[index]

    def update(self, index: int, field: RowField, value: float) -> None:
        """Set `price` or `percent` of the row at `index`."""
        if field not in ("price", "percent"):
            raise ValidationError(f"Unknown row field: {field}", {"field": field})
        self._check_index(index)
        self._rows[index] = self._rows[index].model_copy(update={field: value})

    def replace(self, rows: Iterable[Allocation]) -> None:
        """Swap the whole list; an empty list leaves one empty row."""
        new_rows = list(rows)
        if self._max_rows is not None:
            new_rows = new_rows[: self._max_rows]
        self._rows = new_rows or [placeholder()]

    def _check_index(self, index: int) -> None:
        if not -len(self._rows) <= index < len(self._rows):
            raise IndexError(f"Row index {index} out of range ({len(self._rows)} rows)")
