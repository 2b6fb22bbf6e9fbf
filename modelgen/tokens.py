"""Tokens produced by the definition lexer."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """The kinds of token the lexer produces."""

    INVALID = "invalid"
    CHAR = "char"
    COMMENT = "comment"
    EOF = "EOF"
    ERROR = "error"
    FLOAT = "float"
    INT = "int"
    NAME = "name"
    SPACE = "space"
    STRING = "string"

    def __str__(self) -> str:
        return self.value


_QUOTED = {
    TokenKind.COMMENT,
    TokenKind.ERROR,
    TokenKind.NAME,
    TokenKind.SPACE,
    TokenKind.STRING,
}


@dataclass
class Token:
    """A lexical token covering source positions start (inclusive) to end."""

    kind: TokenKind
    start: int = 0
    end: int = 0
    text: str = ""
    inum: int = 0
    fnum: float = 0.0

    def is_char(self, c: str) -> bool:
        """True if this is a single-character token holding c."""
        return self.kind == TokenKind.CHAR and self.text == c

    def is_eof(self) -> bool:
        """True if this token marks the end of the input."""
        return self.kind == TokenKind.EOF

    def __str__(self) -> str:
        s = f"{str(self.kind):<15}"
        if self.kind == TokenKind.CHAR:
            s += f": {self.text}"
        elif self.kind in _QUOTED:
            s += f": {json.dumps(self.text, ensure_ascii=False)}"
        elif self.kind == TokenKind.FLOAT:
            s += f": {self.fnum}"
        elif self.kind == TokenKind.INT:
            s += f": {self.inum}"
        return s