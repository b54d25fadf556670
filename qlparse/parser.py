"""qlparse parser — recursive-descent parser producing an AST from a token tree."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Sequence, TypeVar

from qlparse.lexer import Bracket, Token, TokenType, COMMA, COLON, tokenize
from qlparse.errors import ParseError
from qlparse.ast_nodes import (
    Name,
    Value,
    NullValue,
    NameValue,
    StringValue,
    ArrayValue,
    Field,
    Root,
    Query,
    Mutation,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Keyword lookup
# ---------------------------------------------------------------------------

class Keyword(Enum):
    QUERY = "query"
    MUTATION = "mutation"
    NULL = "null"


KEYWORDS: dict[str, Keyword] = {kw.value: kw for kw in Keyword}


def keyword(tok: Token) -> Keyword | None:
    """Return the keyword spelled by *tok*, or None for any other token."""
    if tok.type != TokenType.NAME:
        return None
    return KEYWORDS.get(tok.value)


# Token kinds that may start a value in parse_value.
VALUE_START: frozenset[TokenType] = frozenset({
    TokenType.NAME,
    TokenType.NUMBER,
    TokenType.STRING,
})

# Token kinds that may start an element of a value list.  Numbers are not
# among them, so ``[1, 2]`` is rejected even though ``x: 1`` is accepted.
VALUE_LIST_START: frozenset[TokenType] = frozenset({
    TokenType.NAME,
    TokenType.STRING,
})


def _starts_value(tok: Token) -> bool:
    return tok.type in VALUE_START or tok.is_tree(Bracket.SQUARE)


def _starts_list_value(tok: Token) -> bool:
    return tok.type in VALUE_LIST_START or tok.is_tree(Bracket.SQUARE)


def number_text(literal: str) -> str:
    """Re-stringify a number literal in positional notation.

    Leading zeros of the integer part and trailing zeros of the fraction are
    dropped: ``007`` -> ``7``, ``1.50`` -> ``1.5``, ``2.0`` -> ``2``.
    """
    sign = "-" if literal.startswith("-") else ""
    whole, _, frac = literal.lstrip("-").partition(".")
    whole = whole.lstrip("0") or "0"
    frac = frac.rstrip("0")
    if frac:
        return f"{sign}{whole}.{frac}"
    return f"{sign}{whole}"


class Parser:
    """Recursive-descent parser for the query language.

    A parser is a cursor over one scope: the top-level token sequence, or
    the children of a single bracketed ``TREE`` token.  Descending into a
    bracketed region creates a fresh ``Parser`` over that tree's children;
    the backing sequence itself is never modified.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = tokens
        self.pos: int = 0

    # -- Cursor primitives -------------------------------------------------

    def next_tok(self) -> Token:
        """Consume and return the front token; raise at end of stream."""
        if self.pos >= len(self.tokens):
            raise ParseError("Unexpected end of stream")
        tok = self.tokens[self.pos]
        self.bump()
        return tok

    def bump(self) -> None:
        # Precondition: not at end of stream
        self.pos += 1

    def peek_tok(self) -> Token | None:
        """Return the front token without consuming it, or None at end."""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def eat(self, atom: Token) -> None:
        """Consume the next token, which must be exactly *atom*."""
        if self.next_tok() != atom:
            raise ParseError("Unexpected token")

    def maybe_eat(self, atom: Token) -> None:
        """Consume the next token only if it is *atom*; never raises."""
        if self.peek_tok() == atom:
            self.bump()

    def ignore_newlines(self) -> None:
        while True:
            tok = self.peek_tok()
            if tok is None or tok.type != TokenType.NEWLINE:
                return
            self.bump()

    @property
    def remaining(self) -> int:
        return len(self.tokens) - self.pos

    # -- Root --------------------------------------------------------------

    def parse_query(self) -> Root:
        """Parse the root production.

        ::

            query { field list }
            mutation ...
            { field list }

        Tokens left over after the root production are not examined.
        """
        tok = self.next_tok()
        kw = keyword(tok)

        if kw == Keyword.QUERY:
            body_tok = self.next_tok()
            if not body_tok.is_tree(Bracket.BRACE):
                raise ParseError("Unexpected token, expected: `{`")
            result = Query(fields=Parser(body_tok.children).parse_field_list())
        elif kw == Keyword.MUTATION:
            # TODO parse the mutation body once mutation fields are defined
            logger.debug("mutation root; body not parsed")
            return Mutation()
        elif tok.is_tree(Bracket.BRACE):
            result = Query(fields=Parser(tok.children).parse_field_list())
        else:
            raise ParseError("Unexpected token, expected: identifier or `{`")

        logger.debug("query root with %d fields", len(result.fields))
        return result

    # -- Lists -------------------------------------------------------------

    def _parse_list(self, maybe_parse_item: Callable[[], T | None]) -> tuple[T, ...]:
        """Parse items until the scope is exhausted.

        Items may be separated by a comma, newlines, both, or nothing.
        """
        self.ignore_newlines()

        result: list[T] = []
        while True:
            item = maybe_parse_item()
            if item is None:
                break
            result.append(item)
            self.maybe_eat(COMMA)
            self.ignore_newlines()

        return tuple(result)

    def parse_field_list(self) -> tuple[Field, ...]:
        return self._parse_list(self.maybe_parse_field)

    def parse_arg_list(self) -> tuple[tuple[Name, Value], ...]:
        return self._parse_list(self.maybe_parse_arg)

    def parse_value_list(self) -> tuple[Value, ...]:
        return self._parse_list(self.maybe_parse_value)

    # -- Fields ------------------------------------------------------------

    def maybe_parse_field(self) -> Field | None:
        tok = self.peek_tok()
        if tok is None:
            return None
        if tok.type == TokenType.NAME:
            return self.parse_field()
        raise ParseError("Unexpected token, expected: field")

    def parse_field(self) -> Field:
        """Parse ``Name (args)? { field list }?``."""
        name = self.parse_name()
        args = self.maybe_parse_args()
        fields = self.maybe_parse_fields()
        return Field(name=name, alias=None, args=args, fields=fields)

    def parse_name(self) -> Name:
        tok = self.next_tok()
        if tok.type != TokenType.NAME:
            raise ParseError("Unexpected token, expected: name")
        return Name(tok.value)

    def maybe_parse_args(self) -> tuple[tuple[Name, Value], ...]:
        tok = self.peek_tok()
        if tok is not None and tok.is_tree(Bracket.PAREN):
            self.bump()
            return Parser(tok.children).parse_arg_list()
        return ()

    def maybe_parse_fields(self) -> tuple[Field, ...]:
        tok = self.peek_tok()
        if tok is not None and tok.is_tree(Bracket.BRACE):
            self.bump()
            return Parser(tok.children).parse_field_list()
        return ()

    # -- Arguments ---------------------------------------------------------

    def maybe_parse_arg(self) -> tuple[Name, Value] | None:
        tok = self.peek_tok()
        if tok is None:
            return None
        if tok.type == TokenType.NAME:
            return self.parse_arg()
        raise ParseError("Unexpected token, expected: name")

    def parse_arg(self) -> tuple[Name, Value]:
        """Parse ``Name : Value``."""
        name = self.parse_name()
        self.eat(COLON)
        value = self.parse_value()
        return (name, value)

    # -- Values ------------------------------------------------------------

    def maybe_parse_value(self) -> Value | None:
        tok = self.peek_tok()
        if tok is None:
            return None
        if _starts_list_value(tok):
            return self.parse_value()
        raise ParseError("Unexpected token, expected: value")

    def parse_value(self) -> Value:
        tok = self.next_tok()

        if not _starts_value(tok):
            raise ParseError("Unexpected token, expected: value")
        if keyword(tok) == Keyword.NULL:
            return NullValue()
        if tok.type == TokenType.NAME:
            return NameValue(Name(tok.value))
        if tok.type == TokenType.NUMBER:
            # Numbers are not a value kind of their own; they are carried
            # as the text of the number.
            return NameValue(Name(number_text(tok.value)))
        if tok.type == TokenType.STRING:
            return StringValue(tok.value)
        return ArrayValue(Parser(tok.children).parse_value_list())


def parse_query(source: str) -> Root:
    """Tokenize and parse *source*, returning a ``Query`` or ``Mutation``."""
    tokens = tokenize(source)
    return Parser(tokens).parse_query()
