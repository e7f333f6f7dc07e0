"""
Command Parser - Converts a tokenized command line into a statement

Each verb has a fixed token grammar. CREATE and INSERT also have an
alternate "SELECT" form which is tried first against a read-only cursor;
if it does not match token for token the cursor goes back to the first
token and the plain form is parsed from scratch.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from ..core.errors import CommandError, ParseError
from .lexer import Token, tokenize

logger = logging.getLogger(__name__)


# ============================================================================
# Statement Types
# ============================================================================

@dataclass
class ColumnDef:
    """Column definition for CREATE TABLE"""
    name: str
    data_type: str


@dataclass
class Condition:
    """A `<column> <op> <value>` clause; the operator token is not interpreted"""
    column: str
    operator: str
    value: str


@dataclass
class CreateTableStatement:
    """CREATE TABLE <name> <col:type> ..."""
    table: str
    columns: List[ColumnDef] = field(default_factory=list)


@dataclass
class CreateTableAsStatement:
    """CREATE TABLE <name> AS SELECT * FROM <source> WHERE 1=0;"""
    table: str
    source: str


@dataclass
class InsertStatement:
    """INSERT INTO <table> VALUES <v1>,<v2>,..."""
    table: str
    values: List[str] = field(default_factory=list)


@dataclass
class InsertSelectStatement:
    """INSERT INTO <table> SELECT * FROM <source>"""
    table: str
    source: str


@dataclass
class ViewStatement:
    """VIEW <table> [WHERE <col> = <val>]"""
    table: str
    where: Optional[Condition] = None


@dataclass
class UpdateStatement:
    """UPDATE <table> WHERE <col> = <val> SET <col> = <val>"""
    table: str
    where: Condition
    assignment: Condition


@dataclass
class DeleteStatement:
    """DELETE <table> WHERE <col> = <val>"""
    table: str
    where: Condition


# Alternate forms: literal tokens, None where any token is captured
CREATE_AS_FORM = ('CREATE', 'TABLE', None, 'AS', 'SELECT', '*', 'FROM', None, 'WHERE', '1=0;')
INSERT_SELECT_FORM = ('INSERT', 'INTO', None, 'SELECT', '*', 'FROM', None)


# ============================================================================
# Parser
# ============================================================================

class Parser:
    """
    Token-cursor parser for the memtab command language.

    Parses one command line into a statement.
    """

    def __init__(self, text: str, tokens: Optional[List[Token]] = None):
        self.text = text
        self.tokens = tokens if tokens is not None else tokenize(text)
        self.pos = 0

    def _current(self) -> Optional[Token]:
        """Get current token, or None past the end"""
        if self.pos >= len(self.tokens):
            return None
        return self.tokens[self.pos]

    def _at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def _advance(self) -> Optional[Token]:
        """Advance and return current token"""
        token = self._current()
        self.pos += 1
        return token

    def _expect(self, literal: str) -> Token:
        """Expect a specific literal keyword"""
        token = self._current()
        if token is None or token.value != literal:
            found = token.value if token else 'end of line'
            raise ParseError(f"Expected '{literal}', found '{found}'.")
        return self._advance()

    def _expect_word(self, what: str) -> Token:
        """Expect any token; `what` names it in the error"""
        if self._at_end():
            raise ParseError(f"Expected {what}.")
        return self._advance()

    def _match_form(self, form: Sequence[Optional[str]]) -> Optional[List[str]]:
        """
        Match a fixed token form from the cursor to the end of the line.

        Returns the captured tokens, or None on any mismatch. Raises nothing.
        """
        captured = []
        for expected in form:
            token = self._advance()
            if token is None:
                return None
            if expected is None:
                captured.append(token.value)
            elif token.value != expected:
                return None
        if not self._at_end():
            return None
        return captured

    def _speculate(self, form: Sequence[Optional[str]]) -> Optional[List[str]]:
        """Try an alternate form from token zero; the cursor is reset to zero either way"""
        self.pos = 0
        captured = self._match_form(form)
        self.pos = 0
        if captured is None:
            logger.debug("Alternate form %s did not match; reparsing %r", ' '.join(f or '_' for f in form), self.text)
        return captured

    def parse(self) -> Any:
        """Parse a single command"""
        if not self.tokens:
            raise CommandError("Empty command")

        verb = self.tokens[0].value
        if verb == 'CREATE':
            return self._parse_create()
        elif verb == 'INSERT':
            return self._parse_insert()
        elif verb == 'VIEW':
            return self._parse_view()
        elif verb == 'DELETE':
            return self._parse_delete()
        elif verb == 'UPDATE':
            return self._parse_update()
        raise CommandError(f"Unsupported command: {verb}")

    def _parse_create(self) -> Any:
        """Parse CREATE TABLE, trying the AS SELECT form first"""
        captured = self._speculate(CREATE_AS_FORM)
        if captured is not None:
            return CreateTableAsStatement(table=captured[0], source=captured[1])

        self._expect('CREATE')
        self._expect('TABLE')
        table = self._expect_word("table name").value

        columns = []
        while not self._at_end():
            columns.append(self._parse_column_def(self._advance().value))

        return CreateTableStatement(table=table, columns=columns)

    def _parse_column_def(self, spec: str) -> ColumnDef:
        """Parse a `name:type` column token"""
        separators = spec.count(':')
        if separators == 0:
            raise ParseError(f"Missing ':' in column definition '{spec}'.")
        if separators > 1:
            raise ParseError(f"Too many ':' in column definition '{spec}'.")

        name, data_type = spec.split(':')
        if not name:
            raise ParseError(f"Empty column name in column definition '{spec}'.")
        return ColumnDef(name=name, data_type=data_type)

    def _parse_insert(self) -> Any:
        """Parse INSERT, trying the SELECT form first"""
        captured = self._speculate(INSERT_SELECT_FORM)
        if captured is not None:
            return InsertSelectStatement(table=captured[0], source=captured[1])

        self._advance()
        self._expect_word("'INTO'")
        table = self._expect_word("table name").value
        marker = self._expect_word("'VALUES'")

        # Everything after the marker is the value list, split on commas as-is;
        # an empty final piece (trailing comma or empty list) is not a value
        remainder = self.text[marker.end:].lstrip()
        self.pos = len(self.tokens)
        values = remainder.split(',')
        if values[-1] == '':
            values.pop()

        return InsertStatement(table=table, values=values)

    def _parse_condition(self, what: str) -> Condition:
        column = self._expect_word(f"{what} column").value
        operator = self._expect_word("'='").value
        value = self._expect_word(f"{what} value").value
        return Condition(column=column, operator=operator, value=value)

    def _parse_view(self) -> ViewStatement:
        """Parse VIEW <table> [WHERE <col> = <val>]"""
        self._advance()
        table = self._expect_word("table name").value

        where = None
        current = self._current()
        if current is not None and current.value == 'WHERE':
            self._advance()
            where = self._parse_condition("filter")

        return ViewStatement(table=table, where=where)

    def _parse_delete(self) -> DeleteStatement:
        """Parse DELETE <table> WHERE <col> = <val>"""
        self._advance()
        table = self._expect_word("table name").value
        self._expect('WHERE')
        where = self._parse_condition("filter")
        return DeleteStatement(table=table, where=where)

    def _parse_update(self) -> UpdateStatement:
        """Parse UPDATE <table> WHERE <col> = <val> SET <col> = <val>"""
        self._advance()
        table = self._expect_word("table name").value
        self._expect('WHERE')
        where = self._parse_condition("filter")
        self._expect('SET')
        assignment = self._parse_condition("target")
        return UpdateStatement(table=table, where=where, assignment=assignment)


def parse_command(text: str) -> Any:
    """Convenience function to parse one command line"""
    return Parser(text).parse()
