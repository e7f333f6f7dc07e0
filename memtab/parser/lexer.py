"""
Command Lexer - Splits a command line into tokens

A token is a maximal run of non-whitespace characters. Each token keeps its
offset in the raw line so a grammar can take the rest of the line verbatim
(INSERT ... VALUES does this for its comma-separated values).
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Token:
    """A single token"""
    value: str
    position: int

    @property
    def end(self) -> int:
        return self.position + len(self.value)

    def __repr__(self):
        return f"Token({self.value!r}, {self.position})"


class Lexer:
    """Command lexer - converts a line of text to tokens"""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def _current_char(self) -> Optional[str]:
        """Get current character or None if at end"""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def _skip_whitespace(self) -> None:
        while self._current_char() is not None and self._current_char().isspace():
            self.pos += 1

    def _read_word(self) -> Token:
        start = self.pos
        while self._current_char() is not None and not self._current_char().isspace():
            self.pos += 1
        return Token(self.text[start:self.pos], start)

    def tokenize(self) -> List[Token]:
        """Tokenize the entire input"""
        tokens = []
        self._skip_whitespace()
        while self._current_char() is not None:
            tokens.append(self._read_word())
            self._skip_whitespace()
        return tokens


def tokenize(text: str) -> List[Token]:
    """Convenience function to tokenize a command line"""
    return Lexer(text).tokenize()
