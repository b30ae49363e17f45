"""Token source: scans expression text one token at a time."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .errors import ErrorReporter
from .ir import SourceLocation
from . import constants

logger = logging.getLogger(__name__)


class TokenKind(str, Enum):
    NUMBER = "NUMBER"
    LPAREN = "("
    RPAREN = ")"
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    EOF = "EOF"


_PUNCTUATION: dict[str, TokenKind] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "+": TokenKind.ADD,
    "-": TokenKind.SUB,
    "*": TokenKind.MUL,
    "/": TokenKind.DIV,
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: int | None
    location: SourceLocation

    def __str__(self) -> str:
        if self.kind == TokenKind.NUMBER:
            return str(self.value)
        if self.kind == TokenKind.EOF:
            return "end of input"
        return self.kind.value


class Lexer:
    """Exposes the current token and an ``advance()`` to move past it.

    The first token is scanned on construction.
    """

    def __init__(self, source: str, reporter: ErrorReporter | None = None):
        self._source = source
        self._reporter = reporter or ErrorReporter()
        self._pos = 0
        self._line = 1
        self._col = 1
        self.token_count = 0
        self.current: Token = self._next()

    def advance(self) -> Token:
        self.current = self._next()
        return self.current

    def _next(self) -> Token:
        token = self._scan()
        self.token_count += 1
        return token

    def _bump(self, ch: str):
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1

    def _skip_whitespace(self):
        while self._pos < len(self._source) and self._source[self._pos].isspace():
            self._bump(self._source[self._pos])

    def _scan(self) -> Token:
        self._skip_whitespace()
        line, col = self._line, self._col
        if self._pos >= len(self._source):
            return Token(TokenKind.EOF, None, self._span(line, col))

        ch = self._source[self._pos]
        if ch in _PUNCTUATION:
            self._bump(ch)
            return Token(_PUNCTUATION[ch], None, self._span(line, col))

        if "0" <= ch <= "9":
            start = self._pos
            while self._pos < len(self._source) and "0" <= self._source[self._pos] <= "9":
                self._bump(self._source[self._pos])
            text = self._source[start : self._pos]
            try:
                value = int(text)
            except ValueError:
                # Longer than sys.get_int_max_str_digits() allows.
                self._reporter.error(
                    constants.MSG_LITERAL_TOO_LONG, self._span(line, col)
                )
            return Token(TokenKind.NUMBER, value, self._span(line, col))

        self._reporter.error(
            f"unexpected character {ch!r}",
            SourceLocation(start_line=line, start_col=col, end_line=line, end_col=col + 1),
        )

    def _span(self, line: int, col: int) -> SourceLocation:
        return SourceLocation(
            start_line=line, start_col=col, end_line=self._line, end_col=self._col
        )


def tokenize(source: str, reporter: ErrorReporter | None = None) -> list[Token]:
    """Scan *source* completely; the returned list always ends with an EOF token."""
    lexer = Lexer(source, reporter)
    tokens = [lexer.current]
    while lexer.current.kind != TokenKind.EOF:
        tokens.append(lexer.advance())
    logger.debug("Scanned %d tokens", len(tokens))
    return tokens
