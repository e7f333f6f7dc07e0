"""
memtab - An in-memory record store driven by a small command language

One session, no persistence: tables of typed text cells managed through
CREATE, INSERT, VIEW, UPDATE and DELETE commands.
"""

__version__ = "1.0.0"

from .core.database import Database
from .core.interpreter import CommandInterpreter
from .core.repl import REPL

__all__ = ["Database", "CommandInterpreter", "REPL"]
