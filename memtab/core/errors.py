"""
Errors - Failure kinds raised by the storage model and the command parser

Every failure a command can hit is a DBError. The CommandInterpreter is the
only place that catches them and turns them into a report line.
"""


class DBError(Exception):
    """Base class for all memtab errors"""


class ParseError(DBError):
    """Malformed command text (bad column spec, missing tokens)"""


class SchemaError(DBError):
    """Shape mismatch: names vs types, values vs columns, table vs table"""


class ValidationError(DBError):
    """A cell value does not fit its column's type"""

    def __init__(self, message: str, column: str = None):
        self.column = column
        super().__init__(message)


class NotFoundError(DBError, LookupError):
    """A table or column name resolves to nothing"""


class CommandError(DBError):
    """Unrecognized command verb"""
