# monkey/tokens.py
# Token kinds and the immutable Token pair handed from the lexer to the parser.

from __future__ import annotations
from enum import Enum
from typing import NamedTuple


class TokenType(str, Enum):
    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # identifiers + literals
    IDENT = "IDENT"
    INT = "INT"
    TRUE = "TRUE"
    FALSE = "FALSE"

    # operators
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"
    LT = "<"
    GT = ">"
    EQ = "=="
    NOT_EQ = "!="

    # delimiters
    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"

    # keywords
    LET = "LET"
    RETURN = "RETURN"

    def __str__(self) -> str:
        return self.value


class Token(NamedTuple):
    type: TokenType
    literal: str

    def __str__(self) -> str:
        if self.type is TokenType.EOF:
            return "EOF"
        if self.literal == self.type.value:
            return repr(self.literal)
        return f"{self.type.value}({self.literal!r})"


KEYWORDS = {
    "let": TokenType.LET,
    "return": TokenType.RETURN,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
}


def lookup_ident(word: str) -> TokenType:
    """Keyword kind for `word`, or IDENT."""
    return KEYWORDS.get(word, TokenType.IDENT)


def eof() -> Token:
    return Token(TokenType.EOF, "")
