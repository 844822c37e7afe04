"""Tokenizer for the MiniC expression language."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Iterator, List

__all__ = ["TokenType", "Token", "LexError", "tokenize"]


class TokenType(enum.IntEnum):
    """Kinds of tokens produced by the lexer."""

    EOF = -1
    T_L_PAREN = 1
    T_R_PAREN = 2
    T_SEMICOLON = 3
    T_L_BRACE = 4
    T_R_BRACE = 5
    T_ASSIGN = 6
    T_COMMA = 7
    T_ADD = 8
    T_SUB = 9
    T_RETURN = 10
    T_INT = 11
    T_VOID = 12
    T_ID = 13
    T_DIGIT = 14
    WS = 15

    @property
    def literal(self) -> str | None:
        """The fixed spelling of this token kind, if it has one."""
        return _LITERALS.get(self)


_LITERALS = {
    TokenType.T_L_PAREN: "(",
    TokenType.T_R_PAREN: ")",
    TokenType.T_SEMICOLON: ";",
    TokenType.T_L_BRACE: "{",
    TokenType.T_R_BRACE: "}",
    TokenType.T_ASSIGN: "=",
    TokenType.T_COMMA: ",",
    TokenType.T_ADD: "+",
    TokenType.T_SUB: "-",
    TokenType.T_RETURN: "return",
    TokenType.T_INT: "int",
    TokenType.T_VOID: "void",
}

_KEYWORDS = {
    "return": TokenType.T_RETURN,
    "int": TokenType.T_INT,
    "void": TokenType.T_VOID,
}

_PUNCTUATION = {
    text: kind
    for kind, text in _LITERALS.items()
    if text not in _KEYWORDS
}

_TOKEN_RE = re.compile(
    r"(?P<ws>[ \t\r\n]+)"
    r"|(?P<digit>0|[1-9][0-9]*)"
    r"|(?P<id>[A-Za-z_][A-Za-z0-9_]*)"
    r"|(?P<punct>[(){};=,+\-])"
)


@dataclass(frozen=True)
class Token:
    """A lexical token with its 1-based line and 0-based column."""

    kind: TokenType
    text: str
    line: int
    column: int


class LexError(ValueError):
    """Raised when the input holds a character no token can start with."""

    def __init__(self, char: str, line: int, column: int) -> None:
        super().__init__(
            f"line {line}:{column} token recognition error at: {char!r}"
        )
        self.char = char
        self.line = line
        self.column = column


def _scan(text: str) -> Iterator[Token]:
    pos = 0
    line = 1
    line_start = 0
    length = len(text)
    while pos < length:
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            raise LexError(text[pos], line, pos - line_start)
        lexeme = match.group()
        column = pos - line_start
        group = match.lastgroup
        if group == "ws":
            newlines = lexeme.count("\n")
            if newlines:
                line += newlines
                line_start = pos + lexeme.rfind("\n") + 1
        elif group == "digit":
            yield Token(TokenType.T_DIGIT, lexeme, line, column)
        elif group == "id":
            yield Token(_KEYWORDS.get(lexeme, TokenType.T_ID), lexeme, line, column)
        else:
            yield Token(_PUNCTUATION[lexeme], lexeme, line, column)
        pos = match.end()
    yield Token(TokenType.EOF, "<EOF>", line, pos - line_start)


def tokenize(text: str) -> List[Token]:
    """Split source text into tokens, skipping whitespace.

    The returned list always ends with a single EOF token.
    """
    return list(_scan(text))