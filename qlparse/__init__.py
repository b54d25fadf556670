"""qlparse — parses GraphQL-like selection queries into an immutable AST."""

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
from qlparse.errors import QlError, ParseError, ConfigError
from qlparse.lexer import Lexer, Token, TokenType, Bracket, tokenize
from qlparse.parser import Parser, parse_query
from qlparse.printer import format_query

parse = parse_query

__all__ = [
    "parse", "parse_query", "tokenize", "format_query",
    "Lexer", "Parser", "Token", "TokenType", "Bracket",
    "Name", "Value", "NullValue", "NameValue", "StringValue", "ArrayValue",
    "Field", "Root", "Query", "Mutation",
    "QlError", "ParseError", "ConfigError",
]
