# monkey/lexer.py
# Regex scanner producing the flat token stream consumed by the parser.
# Always ends with exactly one EOF token; unknown characters become ILLEGAL
# tokens and are reported by the parser, so lexing never raises.

from __future__ import annotations
import re
from typing import List

from .tokens import Token, TokenType, lookup_ident

TOK_REGEX = re.compile(
    r"""
    (?P<ws>\s+)|
    (?P<int>[0-9]+)|
    (?P<word>[A-Za-z_][A-Za-z0-9_]*)|
    (?P<op>==|!=|[=+\-!*/<>,;()])|
    (?P<illegal>.)
    """, re.VERBOSE | re.DOTALL
)

# Literal text -> kind, for everything matched by the `op` group.
OPERATORS = {t.value: t for t in (
    TokenType.EQ, TokenType.NOT_EQ, TokenType.ASSIGN, TokenType.PLUS,
    TokenType.MINUS, TokenType.BANG, TokenType.ASTERISK, TokenType.SLASH,
    TokenType.LT, TokenType.GT, TokenType.COMMA, TokenType.SEMICOLON,
    TokenType.LPAREN, TokenType.RPAREN,
)}


def tokenize(text: str) -> List[Token]:
    tokens: List[Token] = []
    for m in TOK_REGEX.finditer(text or ""):
        kind = m.lastgroup
        val = m.group(kind)
        if kind == "ws":
            continue
        if kind == "int":
            tokens.append(Token(TokenType.INT, val))
        elif kind == "word":
            tokens.append(Token(lookup_ident(val), val))
        elif kind == "op":
            tokens.append(Token(OPERATORS[val], val))
        else:
            tokens.append(Token(TokenType.ILLEGAL, val))
    tokens.append(Token(TokenType.EOF, ""))
    return tokens
