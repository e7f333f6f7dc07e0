"""Parser module - Lexer and Parser"""

from .lexer import Lexer, Token, tokenize
from .parser import Parser, parse_command

__all__ = ['Lexer', 'Token', 'tokenize', 'Parser', 'parse_command']
