"""qlparse MCP Server — exposes the query parser via MCP protocol."""

from mcp.server.fastmcp import FastMCP

from qlparse.errors import QlError
from qlparse.parser import parse_query
from qlparse.printer import format_query

mcp = FastMCP("qlparse")


@mcp.tool()
def ql_check(source: str) -> str:
    """Check query syntax. Validates that the text is a well-formed query.

    Args:
        source: The query text, e.g. "{ human(id: 1002) { name } }"
    """
    return check_query(source)


def check_query(source: str) -> str:
    """Core logic for checking a query — testable without MCP."""
    try:
        parse_query(source)
        return "OK"
    except QlError as e:
        return f"Error: {e}"


@mcp.tool()
def ql_parse(source: str) -> str:
    """Parse a query and return its syntax tree.

    Args:
        source: The query text to parse
    """
    return parse_query_text(source)


def parse_query_text(source: str) -> str:
    """Core logic for parsing a query — testable without MCP."""
    try:
        return repr(parse_query(source))
    except QlError as e:
        return f"Error: {e}"


@mcp.tool()
def ql_format(source: str) -> str:
    """Parse a query and return it in canonical layout.

    Args:
        source: The query text to format
    """
    return format_query_text(source)


def format_query_text(source: str) -> str:
    """Core logic for formatting a query — testable without MCP."""
    try:
        return format_query(parse_query(source))
    except QlError as e:
        return f"Error: {e}"


@mcp.prompt()
def query_language_guide() -> str:
    """Reference for writing queries this parser accepts."""
    return """Queries select fields, optionally with arguments and nested selections.

1. A document is `{ ... }`, `query { ... }`, or `mutation` (the mutation body is not parsed).
2. A field is a name, then optional arguments `(name: value, ...)`, then an optional `{ ... }` selection.
3. Values are `null`, names, numbers, "strings", or arrays `[v1, v2]`. Array elements may be `null`, names, strings or arrays, but not numbers.
4. Fields, arguments and array elements are separated by commas, newlines, or nothing.
5. Comments start with `#` and run to the end of the line.

Example:
{
  human(id: 1002) {
    name
    appearsIn
    friends(first: 2, tags: ["a", "b"]) { name }
  }
}
"""


if __name__ == "__main__":
    mcp.run(transport="stdio")
