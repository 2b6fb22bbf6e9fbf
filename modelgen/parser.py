"""Parses model definition files into model definitions."""

from __future__ import annotations

import os
from pathlib import Path

from .defx import Field, Model, Type, TypeKind
from .lexer import tokenize
from .tokens import Token, TokenKind

_SIMPLE_KINDS = {
    "bool": TypeKind.BOOL,
    "bytes": TypeKind.BYTES,
    "float": TypeKind.FLOAT,
    "int": TypeKind.INT,
    "ref": TypeKind.REF,
    "string": TypeKind.STRING,
    "time": TypeKind.TIME,
}


class ParseError(Exception):
    """A syntax error in a definition file, with its location."""

    def __init__(self, message: str, path: str, line: int, excerpt: str) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.line = line
        self.excerpt = excerpt

    def __str__(self) -> str:
        return f"{os.path.abspath(self.path)}:{self.line} : {self.message}\n{self.excerpt}"


class Parser:
    """A recursive-descent parser over the tokens of one definition text."""

    def __init__(self, text: str, path: str) -> None:
        self.text = text
        self.path = path
        self._tokens = tokenize(text)
        self.token = Token(TokenKind.INVALID)

    def parse(self) -> list[Model]:
        """Parse every model in the text."""
        self._next()
        models = []
        while not self.token.is_eof():
            models.append(self._parse_model())
        return models

    def _parse_model(self) -> Model:
        if self.token.kind != TokenKind.INT:
            raise self._expected("model id")
        model_id = int(self.token.inum)
        self._next()

        if self.token.kind != TokenKind.NAME:
            raise self._expected("model name")
        name = self.token.text
        self._next()

        if not self.token.is_char("{"):
            raise self._expected("'{'")
        self._next()

        fields = []
        while not self.token.is_char("}"):
            fields.append(self._parse_field())
        self._next()
        return Model(model_id, name, fields)

    def _parse_field(self) -> Field:
        if self.token.kind != TokenKind.NAME:
            raise self._expected("field name")
        name = self.token.text
        self._next()

        if not self.token.is_char(":"):
            raise self._expected("':'")
        self._next()
        return Field(name, self._parse_type())

    def _parse_type(self) -> Type:
        if not self.token.is_char("["):
            return self._parse_simple_type()
        self._next()
        if self.token.is_char("]"):
            self._next()
            return Type(TypeKind.ARRAY, sub=self._parse_type())
        return self._parse_map_type()

    def _parse_simple_type(self) -> Type:
        if self.token.kind != TokenKind.NAME:
            raise self._expected("type name")
        name = self.token.text
        kind = _SIMPLE_KINDS.get(name)
        typ = Type(kind) if kind is not None else Type(TypeKind.MODEL, name=name)
        self._next()
        return typ

    def _parse_map_type(self) -> Type:
        key = self._parse_simple_type()
        if not self.token.is_char("]"):
            raise self._expected("']'")
        self._next()
        return Type(TypeKind.MAP, key=key, sub=self._parse_type())

    def _next(self) -> None:
        for token in self._tokens:
            if token.kind not in (TokenKind.COMMENT, TokenKind.SPACE):
                self.token = token
                return

    def _expected(self, want: str) -> ParseError:
        token = self.token
        if token.kind == TokenKind.ERROR:
            message = token.text
        else:
            message = f"expected {want}, found {token.kind}"
        line_start = self.text.rfind("\n", 0, token.start) + 1
        line_end = self.text.find("\n", token.start)
        if line_end < 0:
            line_end = len(self.text)
        line_no = self.text.count("\n", 0, line_start) + 1
        column = token.start - line_start
        width = max(1, min(token.end, line_end) - token.start)
        excerpt = self.text[line_start:line_end] + "\n" + " " * column + "^" * width
        return ParseError(message, self.path, line_no, excerpt)


def parse_text(text: str, path: str = "<text>") -> list[Model]:
    """Parse definitions from text; path is used only in error messages."""
    return Parser(text, path).parse()


def parse_file(path: str | os.PathLike) -> list[Model]:
    """Read and parse a definition file."""
    text = Path(path).read_text(encoding="utf-8")
    return Parser(text, str(path)).parse()