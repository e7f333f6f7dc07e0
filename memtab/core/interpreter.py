"""
Command Interpreter - Runs one command line against a Database

This is the only place memtab errors are caught: a failing command comes
back as a QueryResult carrying the error, and the session carries on.
"""

import logging
from typing import Optional

from ..parser.parser import Parser
from .database import Database
from .errors import DBError
from .executor import QueryExecutor, QueryResult

logger = logging.getLogger(__name__)


class CommandInterpreter:
    """
    Tokenizes, parses and executes command lines.

    Usage:
        interpreter = CommandInterpreter()
        print(interpreter.process("CREATE TABLE t id:int name:string"))
        print(interpreter.process("INSERT INTO t VALUES 1,Alice"))
        print(interpreter.process("VIEW t"))
    """

    def __init__(self, database: Optional[Database] = None):
        self.database = database if database is not None else Database()
        self.executor = QueryExecutor(self.database)

    def execute(self, line: str) -> QueryResult:
        """Execute one command line; DBErrors are returned, not raised"""
        try:
            stmt = Parser(line).parse()
            return self.executor.execute(stmt)
        except DBError as e:
            logger.info("Command failed (%s): %s", type(e).__name__, e)
            return QueryResult(error=e)

    def process(self, line: str) -> str:
        """Execute one command line and return the text to show"""
        return self.execute(line).render()
