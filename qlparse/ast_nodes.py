"""qlparse AST node definitions.

Every node is a frozen dataclass; sequences are held as tuples so that a
parsed query is immutable and hashable once constructed.
"""

from __future__ import annotations

from dataclasses import dataclass


# ── Names ───────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Name:
    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Name must be a non-empty string")

    def __str__(self) -> str:
        return self.value


# ── Values ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Value:
    """Base class for argument values."""


@dataclass(frozen=True)
class NullValue(Value):
    pass


@dataclass(frozen=True)
class NameValue(Value):
    # Numeric literals land here too, as their re-stringified text.
    name: Name


@dataclass(frozen=True)
class StringValue(Value):
    value: str = ""


@dataclass(frozen=True)
class ArrayValue(Value):
    elements: tuple[Value, ...] = ()


# ── Selections ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Field:
    name: Name
    alias: Name | None = None
    args: tuple[tuple[Name, Value], ...] = ()
    fields: tuple[Field, ...] = ()


# ── Roots ───────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Root:
    """Base class for the result of parsing a whole document."""


@dataclass(frozen=True)
class Query(Root):
    fields: tuple[Field, ...] = ()


@dataclass(frozen=True)
class Mutation(Root):
    # The mutation body is not parsed yet.
    pass
