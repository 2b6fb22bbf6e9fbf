"""Splits definition source text into tokens."""

from __future__ import annotations

from collections.abc import Iterator

from .tokens import Token, TokenKind

_DECIMAL = "0123456789"


class _Source:
    def __init__(self, text: str) -> None:
        self.text = text

    def at(self, i: int) -> str:
        """The character at i, or an empty string past the end."""
        return self.text[i] if 0 <= i < len(self.text) else ""


def _is_decimal(ch: str) -> bool:
    return ch != "" and ch in _DECIMAL


def _is_sign(ch: str) -> bool:
    return ch != "" and ch in "-+"


def _digit_value(ch: str, base: int) -> int:
    if not ch or not ch.isascii() or not ch.isalnum():
        return -1
    value = int(ch, 36)
    return value if value < base else -1


def tokenize(text: str) -> Iterator[Token]:
    """Yield every token of text, spaces and comments included, ending with EOF."""
    src = _Source(text)
    i = 0
    while True:
        this = src.at(i)
        nxt = src.at(i + 1)
        if this == "":
            yield Token(TokenKind.EOF, i, i)
            return
        if this.isspace():
            token, end = _lex_space(src, i)
        elif this == "/" and nxt == "/":
            token, end = _lex_comment_single(src, i + 2)
        elif this == "/" and nxt == "*":
            token, end = _lex_comment_multi(src, i + 2)
        elif this.isalpha() or this == "_":
            token, end = _lex_name(src, i)
        elif _is_decimal(this):
            token, end = _lex_number(src, i)
        elif _is_sign(this) and _is_decimal(nxt):
            token, end = _lex_number(src, i + 1)
            if this == "-":
                token.inum = -token.inum
                token.fnum = -token.fnum
        elif this == '"':
            token, end = _lex_string(src, i + 1)
        else:
            token, end = Token(TokenKind.CHAR, text=this), i + 1
        token.start = i
        token.end = end
        yield token
        i = end


def _lex_space(src: _Source, i: int) -> tuple[Token, int]:
    start = i
    while src.at(i).isspace() and src.at(i):
        i += 1
    return Token(TokenKind.SPACE, text=src.text[start:i]), i


def _lex_comment_single(src: _Source, i: int) -> tuple[Token, int]:
    start = i
    while True:
        ch = src.at(i)
        if ch == "":
            return Token(TokenKind.COMMENT, text=src.text[start:i]), i
        if ch == "\n":
            return Token(TokenKind.COMMENT, text=src.text[start:i]), i + 1
        i += 1


def _lex_comment_multi(src: _Source, i: int) -> tuple[Token, int]:
    parts: list[str] = []
    nest = 0
    while True:
        ch = src.at(i)
        if ch == "":
            return Token(TokenKind.COMMENT, text="".join(parts)), i
        nxt = src.at(i + 1)
        if ch == "/" and nxt == "*":
            parts.append("/*")
            nest += 1
            i += 2
        elif ch == "*" and nxt == "/":
            if nest == 0:
                return Token(TokenKind.COMMENT, text="".join(parts)), i + 2
            parts.append("*/")
            nest -= 1
            i += 2
        else:
            parts.append(ch)
            i += 1


def _lex_name(src: _Source, i: int) -> tuple[Token, int]:
    start = i
    while True:
        ch = src.at(i)
        if not ch or not (ch.isalpha() or ch == "_" or _is_decimal(ch)):
            break
        i += 1
    return Token(TokenKind.NAME, text=src.text[start:i]), i


def _error(message: str, end: int) -> tuple[Token, int]:
    return Token(TokenKind.ERROR, text=message), end


def _lex_number(src: _Source, i: int) -> tuple[Token, int]:
    ch = src.at(i)
    nxt = src.at(i + 1)
    prefixes = {"b": 2, "o": 8, "d": 10, "x": 16}
    if ch != "0":
        base = 10
    elif nxt in prefixes and nxt:
        base = prefixes[nxt]
        i += 2
    elif _digit_value(nxt, 8) >= 0:
        base = 8
        i += 1
    else:
        return _error("invalid explicit number base", i + 1)

    def next_digit() -> int:
        nonlocal i
        while src.at(i) == "_":
            i += 1
        return _digit_value(src.at(i), base)

    digit = next_digit()
    if digit < 0:
        return _error(f"invalid base {base} number", i + 1)
    inum = 0
    while digit >= 0:
        inum = inum * base + digit
        i += 1
        digit = next_digit()
    if not (src.at(i) == "." or _is_sign(src.at(i))):
        return Token(TokenKind.INT, inum=inum), i

    fnum = float(inum)
    if src.at(i) == ".":
        i += 1
        fdiv = float(base)
        digit = next_digit()
        if digit < 0:
            return _error(f"invalid base {base} float", i + 1)
        while digit >= 0:
            fnum += digit / fdiv
            fdiv *= base
            i += 1
            digit = next_digit()
    return Token(TokenKind.FLOAT, inum=inum, fnum=fnum), i


def _lex_string(src: _Source, i: int) -> tuple[Token, int]:
    start = i
    while True:
        ch = src.at(i)
        if ch == "":
            return _error("end-of-file in string", i)
        if ch == '"':
            return Token(TokenKind.STRING, text=src.text[start:i]), i + 1
        if ch == "\\":
            return _error("escape sequences in strings are not supported", i + 1)
        i += 1