"""
Database - The table registry for one memtab session

Tables are kept in creation order. Names are not required to be unique:
creating a table never fails because the name is taken, and every lookup
resolves to the first table with a matching name.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Sequence, Union

from .errors import NotFoundError, SchemaError
from .schema import Column, Row, Table
from .types import ColumnType, TypeValidator

logger = logging.getLogger(__name__)


class Database:
    """
    memtab Database instance.

    Usage:
        db = Database()
        db.create_table("users", ["id", "name"], ["int", "string"])
        db.insert_row("users", ["1", "Alice"])
        for row in db.view("users"):
            print(row)
    """

    def __init__(self):
        self._tables: List[Table] = []

    def find_table(self, name: str) -> Optional[Table]:
        """First table with this name, or None"""
        for table in self._tables:
            if table.name == name:
                return table
        return None

    def get_table(self, name: str) -> Table:
        """First table with this name; raises NotFoundError if there is none"""
        table = self.find_table(name)
        if table is None:
            raise NotFoundError(f"Table '{name}' not found.")
        return table

    def create_table(self, name: str, column_names: Sequence[str],
                     column_types: Sequence[Union[str, ColumnType]]) -> Table:
        """
        Create a table from parallel lists of column names and types.

        Args:
            name: Table name (an existing table with the same name is kept)
            column_names: Column names, in order
            column_types: Type names or ColumnTypes, one per column;
                unknown names are kept and reject every value

        Returns:
            The new Table
        """
        if len(column_names) != len(column_types):
            raise SchemaError("Mismatch between column names and types.")

        columns = [
            Column(col_name, str(col_type))
            for col_name, col_type in zip(column_names, column_types)
        ]
        for col in columns:
            if TypeValidator.parse_type(col.type_name) is None:
                logger.debug("Column %s.%s has unknown type %r; it accepts no values", name, col.name, col.type_name)
        return self._add_table(Table(name, columns))

    def create_table_from_existing(self, name: str, source_name: str) -> Table:
        """Create an empty table with the same columns as source_name"""
        source = self.get_table(source_name)
        return self._add_table(Table(name, list(source.columns)))

    def _add_table(self, table: Table) -> Table:
        if self.find_table(table.name) is not None:
            logger.debug("Table %s already exists; new table is shadowed by it", table.name)
        self._tables.append(table)
        logger.debug("Created table %s (%s)", table.name, ' '.join(str(c) for c in table.columns))
        return table

    def insert_row(self, table_name: str, values: Sequence[str]) -> None:
        """Insert one row of textual values"""
        self.get_table(table_name).append_row(values)

    def copy_rows(self, dest_name: str, source_name: str) -> int:
        """
        Append every current row of source_name to dest_name.

        Only the column counts must agree; cells are not re-validated
        against the destination's column types.

        Returns:
            Number of rows copied
        """
        dest = self.get_table(dest_name)
        source = self.get_table(source_name)

        if len(dest.columns) != len(source.columns):
            raise SchemaError(
                f"Column count mismatch: '{dest.name}' has {len(dest.columns)} columns, "
                f"'{source.name}' has {len(source.columns)}."
            )

        copied = dest.extend_rows(list(source.rows))
        logger.debug("Copied %d row(s) from %s into %s", copied, source.name, dest.name)
        return copied

    def view(self, table_name: str, filter_column: Optional[str] = None,
             filter_value: Optional[str] = None) -> Iterator[Row]:
        """Rows of a table, optionally filtered by column equality"""
        return self.get_table(table_name).select(filter_column, filter_value)

    def update(self, table_name: str, filter_column: str, filter_value: str,
               target_column: str, new_value: str) -> int:
        """Update matching rows; returns count updated"""
        return self.get_table(table_name).update_where(filter_column, filter_value, target_column, new_value)

    def delete(self, table_name: str, filter_column: str, filter_value: str) -> int:
        """Delete matching rows; returns count deleted"""
        return self.get_table(table_name).delete_where(filter_column, filter_value)

    def tables(self) -> List[str]:
        """List all table names in creation order."""
        return [table.name for table in self._tables]

    def describe(self, table_name: str) -> Dict[str, Any]:
        """
        Get table schema information.

        Args:
            table_name: Name of table to describe

        Returns:
            Dictionary with table name, columns and row count
        """
        return self.get_table(table_name).to_dict()

    def count(self, table_name: str) -> int:
        """Get row count for a table."""
        return self.get_table(table_name).count()
