"""
Query Executor - Executes parsed statements

Takes statements from the parser and runs them against a Database,
returning a QueryResult.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..parser.parser import (
    CreateTableStatement, CreateTableAsStatement, InsertStatement, InsertSelectStatement,
    ViewStatement, UpdateStatement, DeleteStatement,
)
from .database import Database
from .errors import CommandError, DBError


@dataclass
class QueryResult:
    """
    Result of one command: either a success payload or the error it hit.

    `columns`/`rows` are only set for VIEW.
    """
    table: Optional[str] = None
    columns: Optional[List[str]] = None
    rows: List[List[str]] = field(default_factory=list)
    affected_rows: int = 0
    message: str = ""
    error: Optional[DBError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self) -> str:
        """Text shown to the user for this result"""
        if self.error is not None:
            return f"Query Error: {self.error}"

        if self.columns is None:
            return self.message

        lines = [self.table, ''.join(f"{name}\t" for name in self.columns)]
        for row in self.rows:
            lines.append(''.join(f"{value}\t" for value in row))
        return '\n'.join(lines)


class QueryExecutor:
    """
    Executes memtab statements against a Database.

    Handles the six command forms.
    """

    def __init__(self, database: Database):
        self.database = database

    def execute(self, stmt: Any) -> QueryResult:
        """Execute a parsed statement"""
        if isinstance(stmt, CreateTableStatement):
            return self._execute_create_table(stmt)
        elif isinstance(stmt, CreateTableAsStatement):
            return self._execute_create_table_as(stmt)
        elif isinstance(stmt, InsertStatement):
            return self._execute_insert(stmt)
        elif isinstance(stmt, InsertSelectStatement):
            return self._execute_insert_select(stmt)
        elif isinstance(stmt, ViewStatement):
            return self._execute_view(stmt)
        elif isinstance(stmt, UpdateStatement):
            return self._execute_update(stmt)
        elif isinstance(stmt, DeleteStatement):
            return self._execute_delete(stmt)
        raise CommandError(f"Unsupported statement type: {type(stmt).__name__}")

    def _execute_create_table(self, stmt: CreateTableStatement) -> QueryResult:
        self.database.create_table(
            stmt.table,
            [col.name for col in stmt.columns],
            [col.data_type for col in stmt.columns],
        )
        return QueryResult(table=stmt.table, message=f"Table '{stmt.table}' created.")

    def _execute_create_table_as(self, stmt: CreateTableAsStatement) -> QueryResult:
        self.database.create_table_from_existing(stmt.table, stmt.source)
        return QueryResult(table=stmt.table, message=f"Table '{stmt.table}' created from '{stmt.source}'.")

    def _execute_insert(self, stmt: InsertStatement) -> QueryResult:
        self.database.insert_row(stmt.table, stmt.values)
        return QueryResult(table=stmt.table, affected_rows=1, message=f"Inserted into {stmt.table}")

    def _execute_insert_select(self, stmt: InsertSelectStatement) -> QueryResult:
        copied = self.database.copy_rows(stmt.table, stmt.source)
        return QueryResult(
            table=stmt.table,
            affected_rows=copied,
            message=f"Copied {copied} row(s) from {stmt.source} into {stmt.table}",
        )

    def _execute_view(self, stmt: ViewStatement) -> QueryResult:
        table = self.database.get_table(stmt.table)
        if stmt.where is None:
            rows = self.database.view(stmt.table)
        else:
            rows = self.database.view(stmt.table, stmt.where.column, stmt.where.value)

        return QueryResult(
            table=table.name,
            columns=table.get_column_names(),
            rows=[list(row) for row in rows],
        )

    def _execute_update(self, stmt: UpdateStatement) -> QueryResult:
        updated = self.database.update(
            stmt.table,
            stmt.where.column, stmt.where.value,
            stmt.assignment.column, stmt.assignment.value,
        )
        return QueryResult(table=stmt.table, affected_rows=updated,
                           message=f"Updated {updated} row(s) in {stmt.table}")

    def _execute_delete(self, stmt: DeleteStatement) -> QueryResult:
        deleted = self.database.delete(stmt.table, stmt.where.column, stmt.where.value)
        return QueryResult(table=stmt.table, affected_rows=deleted,
                           message=f"Deleted {deleted} row(s) from {stmt.table}")
