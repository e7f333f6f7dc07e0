"""
Schema Module - Defines columns, rows and tables

A Table owns its column definitions (fixed at creation) and its rows, kept
in insertion order. Rows are lists of text cells aligned with the columns.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

from .errors import NotFoundError, SchemaError, ValidationError
from .types import ColumnType, TypeValidator

logger = logging.getLogger(__name__)

Row = List[str]


@dataclass(frozen=True)
class Column:
    """Represents a column in a table"""
    name: str
    type_name: str

    @property
    def col_type(self) -> Optional[ColumnType]:
        """Declared type, or None when the type name is not one memtab knows"""
        return TypeValidator.parse_type(self.type_name)

    def __str__(self) -> str:
        return f"{self.name}:{self.type_name}"


@dataclass
class Table:
    """Represents a table: a name, its columns and its rows"""
    name: str
    columns: List[Column] = field(default_factory=list)
    rows: List[Row] = field(default_factory=list)

    def get_column_names(self) -> List[str]:
        """Get list of column names"""
        return [col.name for col in self.columns]

    def column_index(self, name: str) -> Optional[int]:
        """Index of the first column with exactly this name, or None"""
        for idx, col in enumerate(self.columns):
            if col.name == name:
                return idx
        return None

    def _require_column(self, name: str) -> int:
        idx = self.column_index(name)
        if idx is None:
            raise NotFoundError(f"Column '{name}' not found in table '{self.name}'.")
        return idx

    def _check_value(self, idx: int, value: str) -> None:
        column = self.columns[idx]
        if not TypeValidator.is_valid(value, column.col_type):
            raise ValidationError(f"Invalid type for column '{column.name}'", column=column.name)

    def append_row(self, values: Sequence[str]) -> None:
        """Validate a full row of values and append it"""
        if len(values) != len(self.columns):
            raise SchemaError(f"Expected {len(self.columns)} values, got {len(values)}.")

        # Every cell is checked before the row is stored
        for idx, value in enumerate(values):
            self._check_value(idx, value)

        self.rows.append(list(values))
        logger.debug("Appended row to %s (%d rows)", self.name, len(self.rows))

    def extend_rows(self, rows: Sequence[Row]) -> int:
        """Append copies of rows without validating them; returns count appended"""
        copied = [list(row) for row in rows]
        self.rows.extend(copied)
        return len(copied)

    def select(self, filter_column: Optional[str] = None, filter_value: Optional[str] = None) -> Iterator[Row]:
        """
        Iterate rows in storage order, optionally keeping only rows whose
        cell in filter_column equals filter_value exactly.

        The column is resolved immediately so a bad name fails here, not on
        first iteration. Each call starts a fresh scan.
        """
        idx = None if filter_column is None else self._require_column(filter_column)
        return self._scan(idx, filter_value, len(self.rows))

    def _scan(self, idx: Optional[int], value: Optional[str], limit: int) -> Iterator[Row]:
        for row in self.rows[:limit]:
            if idx is None or row[idx] == value:
                yield row

    def update_where(self, filter_column: str, filter_value: str,
                     target_column: str, new_value: str) -> int:
        """Set target_column to new_value on every matching row; returns count updated"""
        filter_idx = self._require_column(filter_column)
        target_idx = self._require_column(target_column)
        self._check_value(target_idx, new_value)

        updated = 0
        for row in self.rows:
            if row[filter_idx] == filter_value:
                row[target_idx] = new_value
                updated += 1

        logger.debug("Updated %d row(s) in %s", updated, self.name)
        return updated

    def delete_where(self, filter_column: str, filter_value: str) -> int:
        """Remove every matching row, keeping survivors in order; returns count removed"""
        idx = self._require_column(filter_column)

        survivors = [row for row in self.rows if row[idx] != filter_value]
        deleted = len(self.rows) - len(survivors)
        self.rows[:] = survivors

        logger.debug("Deleted %d row(s) from %s", deleted, self.name)
        return deleted

    def count(self) -> int:
        """Return number of rows"""
        return len(self.rows)

    def to_dict(self) -> dict:
        """Describe the table's schema and size"""
        return {
            'name': self.name,
            'columns': [
                {'name': col.name, 'type': col.type_name}
                for col in self.columns
            ],
            'rows': len(self.rows),
        }
