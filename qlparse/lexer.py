"""qlparse lexer — scans query text into a bracket-nested token tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from qlparse.errors import ParseError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Token types
# ---------------------------------------------------------------------------

class TokenType(Enum):
    # Atoms
    NAME = auto()
    NUMBER = auto()
    STRING = auto()
    COLON = auto()         # :
    COMMA = auto()         # ,
    BANG = auto()          # !
    NEWLINE = auto()

    # Bracketed group
    TREE = auto()


class Bracket(Enum):
    BRACE = auto()         # { }
    PAREN = auto()         # ( )
    SQUARE = auto()        # [ ]


OPENERS: dict[str, Bracket] = {
    "{": Bracket.BRACE,
    "(": Bracket.PAREN,
    "[": Bracket.SQUARE,
}

CLOSERS: dict[str, Bracket] = {
    "}": Bracket.BRACE,
    ")": Bracket.PAREN,
    "]": Bracket.SQUARE,
}

PUNCTUATION: dict[str, TokenType] = {
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
    "!": TokenType.BANG,
}

ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "n": "\n",
    "t": "\t",
}


# ---------------------------------------------------------------------------
# Token dataclass
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Any = None
    bracket: Bracket | None = None
    children: tuple[Token, ...] = ()

    @property
    def is_atom(self) -> bool:
        return self.type != TokenType.TREE

    def is_tree(self, bracket: Bracket) -> bool:
        return self.type == TokenType.TREE and self.bracket == bracket

    def __repr__(self) -> str:
        if self.type == TokenType.TREE:
            return f"Token(TREE, {self.bracket.name}, {list(self.children)!r})"
        if self.value is None:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r})"


def _is_digit(ch: str) -> bool:
    return ch != "" and "0" <= ch <= "9"


def _is_name_start(ch: str) -> bool:
    return ch.isascii() and (ch.isalpha() or ch == "_")


def _is_name_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == "_")


def name(text: str) -> Token:
    return Token(TokenType.NAME, text)


def tree(bracket: Bracket, *children: Token) -> Token:
    return Token(TokenType.TREE, bracket=bracket, children=tuple(children))


COLON = Token(TokenType.COLON)
COMMA = Token(TokenType.COMMA)
BANG = Token(TokenType.BANG)
NEWLINE = Token(TokenType.NEWLINE)


# ---------------------------------------------------------------------------
# Lexer
# ---------------------------------------------------------------------------

class Lexer:
    """Scans query text and produces a tuple of tokens.

    Bracket pairs are matched while scanning: every ``{}``, ``()`` and
    ``[]`` region becomes a single ``TREE`` token whose children are the
    tokens between the brackets.  Matching uses an explicit stack, so the
    depth of the input is bounded only by memory.
    """

    def __init__(self, source: str) -> None:
        self.source = source.strip()
        self.pos: int = 0

    # -- Character-level helpers -------------------------------------------

    def _current(self) -> str:
        """Return the character at the current position, or '' at EOF."""
        if self.pos < len(self.source):
            return self.source[self.pos]
        return ""

    def peek(self) -> str:
        """Look ahead one character without consuming it."""
        next_pos = self.pos + 1
        if next_pos < len(self.source):
            return self.source[next_pos]
        return ""

    def advance(self) -> str:
        ch = self._current()
        self.pos += 1
        return ch

    # -- Main entry point --------------------------------------------------

    def tokenize(self) -> tuple[Token, ...]:
        """Scan the entire source and return the top-level tokens."""
        # Each frame is (bracket, tokens collected inside it); the bottom
        # frame has no bracket and collects the top-level tokens.
        stack: list[tuple[Bracket | None, list[Token]]] = [(None, [])]

        while self.pos < len(self.source):
            ch = self._current()
            tokens = stack[-1][1]

            if ch in (" ", "\t", "\r"):
                self.advance()
                continue

            if ch == "\n":
                tokens.append(NEWLINE)
                self.advance()
                continue

            # Comments: # to end of line
            if ch == "#":
                self._skip_comment()
                continue

            if ch == '"':
                tokens.append(self._read_string())
                continue

            if _is_digit(ch) or (ch == "-" and _is_digit(self.peek())):
                tokens.append(self._read_number())
                continue

            if _is_name_start(ch):
                tokens.append(self._read_identifier())
                continue

            if ch in PUNCTUATION:
                tokens.append(Token(PUNCTUATION[ch]))
                self.advance()
                continue

            if ch in OPENERS:
                stack.append((OPENERS[ch], []))
                self.advance()
                continue

            if ch in CLOSERS:
                bracket, children = stack[-1]
                if bracket is None:
                    raise ParseError(f"Unmatched closing bracket: {ch!r}")
                if bracket != CLOSERS[ch]:
                    raise ParseError(f"Mismatched closing bracket: {ch!r}")
                stack.pop()
                stack[-1][1].append(tree(bracket, *children))
                self.advance()
                continue

            raise ParseError(f"Unexpected character: {ch!r}")

        if len(stack) > 1:
            raise ParseError("Unclosed bracket at end of input")

        result = tuple(stack[0][1])
        logger.debug("tokenized %d top-level tokens", len(result))
        return result

    # -- Token readers -----------------------------------------------------

    def _skip_comment(self) -> None:
        while self.pos < len(self.source) and self._current() != "\n":
            self.advance()

    def _read_string(self) -> Token:
        """Read a double-quoted string, resolving backslash escapes."""
        self.advance()  # consume opening "

        value_chars: list[str] = []

        while self.pos < len(self.source):
            ch = self.advance()
            if ch == '"':
                return Token(TokenType.STRING, "".join(value_chars))
            if ch == "\n":
                raise ParseError("Unterminated string literal")
            if ch == "\\":
                escaped = self.advance()
                if escaped not in ESCAPES:
                    raise ParseError(f"Invalid escape sequence: \\{escaped}")
                value_chars.append(ESCAPES[escaped])
                continue
            value_chars.append(ch)

        raise ParseError("Unterminated string literal")

    def _read_number(self) -> Token:
        """Read an integer or decimal literal: -?[0-9]+(\\.[0-9]+)?

        The token keeps the literal text; the parser turns it into a name.
        """
        chars: list[str] = []

        if self._current() == "-":
            chars.append(self.advance())

        while self.pos < len(self.source) and _is_digit(self._current()):
            chars.append(self.advance())

        if self._current() == "." and _is_digit(self.peek()):
            chars.append(self.advance())
            while self.pos < len(self.source) and _is_digit(self._current()):
                chars.append(self.advance())

        return Token(TokenType.NUMBER, "".join(chars))

    def _read_identifier(self) -> Token:
        """Read an identifier: [a-zA-Z_][a-zA-Z0-9_]*"""
        chars: list[str] = []

        while self.pos < len(self.source) and _is_name_char(self._current()):
            chars.append(self.advance())

        return name("".join(chars))


def tokenize(source: str) -> tuple[Token, ...]:
    """Tokenize *source* into a bracket-nested token tree."""
    return Lexer(source).tokenize()
