"""Core module - Database, Schema, Types, Executor, Interpreter, REPL"""

from .database import Database
from .errors import DBError, ParseError, SchemaError, ValidationError, NotFoundError, CommandError
from .schema import Column, Table
from .types import ColumnType, TypeValidator
from .executor import QueryExecutor, QueryResult
from .interpreter import CommandInterpreter
from .repl import REPL

__all__ = [
    'Database', 'CommandInterpreter', 'REPL',
    'Column', 'Table',
    'ColumnType', 'TypeValidator',
    'QueryExecutor', 'QueryResult',
    'DBError', 'ParseError', 'SchemaError', 'ValidationError', 'NotFoundError', 'CommandError',
]
