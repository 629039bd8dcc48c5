# monkey/parser.py
# Pratt-style (precedence climbing) parser for Monkey.
#
# Binding power (loosest -> tightest):
#   ==, !=
#   <, >
#   +, -
#   *, /
#   prefix: !, -
#   ( grouping / call
#
# Errors never abort the parse: each one is appended to `Parser.errors`, the
# broken statement is dropped and the parser skips ahead to the next `;`.

from __future__ import annotations
import logging
import re
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .ast_nodes import (
    BooleanLiteral,
    Expression,
    ExpressionStatement,
    Identifier,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    PrefixExpression,
    Program,
    ReturnStatement,
    Statement,
)
from .lexer import tokenize
from .tokens import Token, TokenType, eof

logger = logging.getLogger(__name__)

LOWEST = 0
EQUALS = 1
LESSGREATER = 2
SUM = 3
PRODUCT = 4
PREFIX = 5
CALL = 6

PRECEDENCE: Dict[TokenType, int] = {
    TokenType.EQ: EQUALS,
    TokenType.NOT_EQ: EQUALS,
    TokenType.LT: LESSGREATER,
    TokenType.GT: LESSGREATER,
    TokenType.PLUS: SUM,
    TokenType.MINUS: SUM,
    TokenType.SLASH: PRODUCT,
    TokenType.ASTERISK: PRODUCT,
    TokenType.LPAREN: CALL,
}

_EOF = eof()
_DIGITS = re.compile(r"[0-9]+")

PrefixFn = Callable[[], Optional[Expression]]
InfixFn = Callable[[Expression], Optional[Expression]]


class Parser:
    """Cursor over an owned token buffer plus an append-only error log."""

    def __init__(self, tokens: Sequence[Token]):
        if len(tokens) < 2:
            raise ValueError(f"Parser needs at least 2 tokens, got {len(tokens)}")
        self.tokens: Tuple[Token, ...] = tuple(tokens)
        self.pos = 0
        self.errors: List[str] = []

        self.prefix_fns: Dict[TokenType, PrefixFn] = {
            TokenType.IDENT: self.parse_identifier,
            TokenType.INT: self.parse_integer_literal,
            TokenType.TRUE: self.parse_boolean,
            TokenType.FALSE: self.parse_boolean,
            TokenType.BANG: self.parse_prefix_expression,
            TokenType.MINUS: self.parse_prefix_expression,
            TokenType.LPAREN: self.parse_grouped_expression,
        }
        self.infix_fns: Dict[TokenType, InfixFn] = {
            t: self.parse_infix_expression
            for t in (
                TokenType.PLUS, TokenType.MINUS, TokenType.ASTERISK, TokenType.SLASH,
                TokenType.LT, TokenType.GT, TokenType.EQ, TokenType.NOT_EQ,
            )
        }

    # ------------------------------ cursor ------------------------------------

    def _at(self, pos: int) -> Token:
        # Reading past the buffer yields EOF, so a stream missing its EOF still terminates.
        if pos >= len(self.tokens):
            return _EOF
        return self.tokens[pos]

    @property
    def current_token(self) -> Token:
        return self._at(self.pos)

    @property
    def peek_token(self) -> Token:
        return self._at(self.pos + 1)

    def next_token(self) -> None:
        if self.pos < len(self.tokens):
            self.pos += 1

    def current_is(self, t: TokenType) -> bool:
        return self.current_token.type is t

    def peek_is(self, t: TokenType) -> bool:
        return self.peek_token.type is t

    def expect_peek(self, t: TokenType) -> bool:
        if self.peek_is(t):
            self.next_token()
            return True
        self.peek_error(t)
        return False

    def peek_precedence(self) -> int:
        return PRECEDENCE.get(self.peek_token.type, LOWEST)

    def current_precedence(self) -> int:
        return PRECEDENCE.get(self.current_token.type, LOWEST)

    # ------------------------------ errors ------------------------------------

    def add_error(self, msg: str) -> None:
        logger.debug("parse error at token %d: %s", self.pos, msg)
        self.errors.append(msg)

    def peek_error(self, t: TokenType) -> None:
        self.add_error(f"Expected token {t.value}, got {self.peek_token}")

    def skip_semicolon(self) -> None:
        if self.peek_is(TokenType.SEMICOLON):
            self.next_token()

    def synchronize(self) -> None:
        """Skip the rest of a broken statement, stopping on its `;` or EOF."""
        while not (self.current_is(TokenType.SEMICOLON) or self.current_is(TokenType.EOF)):
            self.next_token()

    # ------------------------------ statements --------------------------------

    def parse_program(self) -> Program:
        statements: List[Statement] = []
        while not self.current_is(TokenType.EOF):
            try:
                stmt = self.parse_statement()
            except RecursionError:
                self.add_error("Expression nested too deeply")
                stmt = None
            if stmt is None:
                self.synchronize()
            else:
                statements.append(stmt)
            self.next_token()
        return Program(tuple(statements))

    def parse_statement(self) -> Optional[Statement]:
        t = self.current_token.type
        if t is TokenType.LET:
            return self.parse_let_statement()
        if t is TokenType.RETURN:
            return self.parse_return_statement()
        return self.parse_expression_statement()

    def parse_let_statement(self) -> Optional[LetStatement]:
        tok = self.current_token
        if not self.expect_peek(TokenType.IDENT):
            return None
        name = Identifier(self.current_token, self.current_token.literal)
        if not self.expect_peek(TokenType.ASSIGN):
            return None
        self.next_token()
        value = self.parse_expression(LOWEST)
        if value is None:
            return None
        self.skip_semicolon()
        return LetStatement(tok, name, value)

    def parse_return_statement(self) -> Optional[ReturnStatement]:
        tok = self.current_token
        self.next_token()
        value = self.parse_expression(LOWEST)
        if value is None:
            return None
        self.skip_semicolon()
        return ReturnStatement(tok, value)

    def parse_expression_statement(self) -> Optional[ExpressionStatement]:
        tok = self.current_token
        expr = self.parse_expression(LOWEST)
        if expr is None:
            return None
        self.skip_semicolon()
        return ExpressionStatement(tok, expr)

    # ------------------------------ expressions -------------------------------

    def parse_expression(self, precedence: int) -> Optional[Expression]:
        prefix = self.prefix_fns.get(self.current_token.type)
        if prefix is None:
            self.add_error(f"No prefix function for token: {self.current_token}")
            return None
        left = prefix()
        if left is None:
            return None

        while not self.peek_is(TokenType.SEMICOLON) and precedence < self.peek_precedence():
            infix = self.infix_fns.get(self.peek_token.type)
            if infix is None:
                return left
            self.next_token()
            left = infix(left)
            if left is None:
                return None
        return left

    def parse_identifier(self) -> Expression:
        return Identifier(self.current_token, self.current_token.literal)

    def parse_integer_literal(self) -> Optional[Expression]:
        tok = self.current_token
        if not _DIGITS.fullmatch(tok.literal):
            self.add_error(f"Could not parse {tok.literal!r} as integer")
            return None
        return IntegerLiteral(tok, int(tok.literal))

    def parse_boolean(self) -> Expression:
        return BooleanLiteral(self.current_token, self.current_is(TokenType.TRUE))

    def parse_prefix_expression(self) -> Optional[Expression]:
        tok = self.current_token
        self.next_token()
        right = self.parse_expression(PREFIX)
        if right is None:
            return None
        return PrefixExpression(tok, tok.literal, right)

    def parse_infix_expression(self, left: Expression) -> Optional[Expression]:
        tok = self.current_token
        precedence = self.current_precedence()
        self.next_token()
        right = self.parse_expression(precedence)
        if right is None:
            return None
        return InfixExpression(tok, left, tok.literal, right)

    def parse_grouped_expression(self) -> Optional[Expression]:
        self.next_token()
        expr = self.parse_expression(LOWEST)
        if expr is None:
            return None
        if not self.expect_peek(TokenType.RPAREN):
            return None
        return expr


def parse(tokens: Sequence[Token]) -> Tuple[Program, List[str]]:
    """Parse a token sequence; returns the (possibly partial) program and its errors."""
    p = Parser(tokens)
    program = p.parse_program()
    return program, p.errors


def parse_text(text: str) -> Tuple[Program, List[str]]:
    tokens = tokenize(text)
    # Blank source lexes to a lone EOF; that is an empty program, not a short stream.
    if len(tokens) == 1:
        return Program(()), []
    return parse(tokens)
