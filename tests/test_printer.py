"""Tests for qlparse printer — canonical query text."""

import pytest

from qlparse.ast_nodes import Name, StringValue, Query, Mutation
from qlparse.errors import QlError
from qlparse.parser import parse_query
from qlparse.printer import Printer, format_query

from ast_helpers import field_named


def fmt(src: str, **kwargs) -> str:
    return format_query(parse_query(src), **kwargs)


class TestFormat:
    def test_single_field(self):
        assert fmt("{a}") == "{\n  a\n}\n"

    def test_empty_query(self):
        assert fmt("query {}") == "{}\n"

    def test_mutation(self):
        assert fmt("mutation { whatever }") == "mutation\n"

    def test_nested_with_args(self):
        assert fmt("{ human(id: 1002) { name, appearsIn, id } }") == (
            "{\n"
            "  human(id: 1002) {\n"
            "    name\n"
            "    appearsIn\n"
            "    id\n"
            "  }\n"
            "}\n"
        )

    def test_values(self):
        assert fmt('{ a(x: null, y: [b, "s", [c]], z: 1.50) }') == '{\n  a(x: null, y: [b, "s", [c]], z: 1.5)\n}\n'

    def test_comma_separator(self):
        assert fmt("{ a b { c d } }", separator="comma") == (
            "{\n"
            "  a,\n"
            "  b {\n"
            "    c,\n"
            "    d\n"
            "  }\n"
            "}\n"
        )

    def test_indent(self):
        assert fmt("{ a { b } }", indent=4) == "{\n    a {\n        b\n    }\n}\n"

    def test_string_escapes(self):
        root = Query((field_named("a", args=[(Name("s"), StringValue('say "hi"\n'))]),))
        text = format_query(root)
        assert text == '{\n  a(s: "say \\"hi\\"\\n")\n}\n'
        assert parse_query(text) == root

    def test_unknown_separator(self):
        with pytest.raises(QlError, match="separator"):
            Printer(Mutation(), separator="semicolon")

    def test_output_reparses_to_same_tree(self):
        src = """query {
          search(text: "luke", limit: 10, tags: [a, "b", [null]]) {
            name
            friends(first: 3) { name, id }
          }
          droid(id: 2001) { name }
        }"""
        root = parse_query(src)
        assert parse_query(format_query(root)) == root
        assert parse_query(format_query(root, separator="comma")) == root

    def test_small_decimal_stays_positional(self):
        text = fmt("{ f(x: 0.00001) }")
        assert text == "{\n  f(x: 0.00001)\n}\n"
        assert parse_query(text) == parse_query("{ f(x: 0.00001) }")

    @pytest.mark.parametrize("number", [
        "0.000000000000000000001",
        "123456789012345678901234567890.5",
        "-0.0000001",
        "9" * 5000,
    ])
    def test_extreme_numbers_round_trip(self, number):
        root = parse_query("{ f(x: " + number + ") }")
        assert parse_query(format_query(root)) == root
