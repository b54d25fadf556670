"""qlparse printer — walks the AST and emits canonical query text."""

from __future__ import annotations

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
from qlparse.errors import QlError

ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
}


class Printer:
    """Render a parsed query back to source text.

    The output re-parses to an equal AST.  Sibling fields are separated by
    newlines or by commas, depending on *separator*.
    """

    def __init__(self, root: Root, indent: int = 2, separator: str = "newline") -> None:
        if separator not in ("newline", "comma"):
            raise QlError(f"Unknown separator: {separator!r}")
        self.root = root
        self.indent = indent
        self.separator = separator
        self.indent_level: int = 0

    def print(self) -> str:
        if isinstance(self.root, Mutation):
            return "mutation\n"
        if isinstance(self.root, Query):
            return "\n".join(self._emit_selection(self.root.fields)) + "\n"
        raise QlError(f"Unsupported root type: {type(self.root).__name__}")

    def _indent(self) -> str:
        return " " * (self.indent * self.indent_level)

    # -- Selections --------------------------------------------------------

    def _emit_selection(self, fields: tuple[Field, ...]) -> list[str]:
        """Emit ``{ ... }`` around *fields*, one field per line."""
        if not fields:
            return ["{}"]

        lines = ["{"]
        self.indent_level += 1
        for i, field in enumerate(fields):
            field_lines = self._emit_field(field)
            if self.separator == "comma" and i < len(fields) - 1:
                field_lines[-1] += ","
            lines.extend(field_lines)
        self.indent_level -= 1
        lines.append(f"{self._indent()}}}")
        return lines

    def _emit_field(self, field: Field) -> list[str]:
        head = f"{self._indent()}{self._emit_name(field.name)}"
        if field.args:
            args = ", ".join(
                f"{self._emit_name(name)}: {self._emit_value(value)}"
                for name, value in field.args
            )
            head += f"({args})"
        if not field.fields:
            return [head]

        body = self._emit_selection(field.fields)
        return [f"{head} {body[0]}"] + body[1:]

    # -- Values ------------------------------------------------------------

    def _emit_name(self, name: Name) -> str:
        return name.value

    def _emit_value(self, node: Value) -> str:
        if isinstance(node, NullValue):
            return "null"
        if isinstance(node, NameValue):
            return self._emit_name(node.name)
        if isinstance(node, StringValue):
            return self._emit_string(node.value)
        if isinstance(node, ArrayValue):
            return "[" + ", ".join(self._emit_value(e) for e in node.elements) + "]"
        raise QlError(f"Unsupported value type: {type(node).__name__}")

    def _emit_string(self, text: str) -> str:
        return '"' + "".join(ESCAPES.get(ch, ch) for ch in text) + '"'


def format_query(root: Root, indent: int = 2, separator: str = "newline") -> str:
    """Render *root* as canonical query text."""
    return Printer(root, indent=indent, separator=separator).print()
