"""Application query – Filter AST (comparison leaves, logical combinators).

The tree is purely structural: composing filters never flattens nested
conjunctions and never cancels a double negation.  Wire form::

    {"op": "eq", "field": "name", "value": "x"}        # Comparison
    {"op": "and", "filters": [...]}                    # Logical
    {"op": "not", "filter": {...}}                     # Negation

Example::

    adults = Comparison.gte("age", 18)
    active = Comparison.eq("status", "active")
    f = (adults & active) | ~Comparison.in_("role", ["guest"])
"""
from __future__ import annotations

import abc
import dataclasses
from enum import Enum
from typing import Any, Mapping

from jsondb_client.kernel.errors import ValidationError

__all__ = [
    "Comparison",
    "ComparisonOp",
    "Filter",
    "Logical",
    "LogicalOp",
    "Negation",
    "filter_from_dict",
]


class ComparisonOp(str, Enum):
    """Leaf operators; semantics are defined by the backend."""

    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    IN = "in"
    CONTAINS = "contains"
    # camelCase on the wire; some backend builds expect "startswith"/"endswith".
    # parse() reads both, to_dict() always sends the camelCase value.
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"
    MATCHES = "matches"

    @classmethod
    def parse(cls, value: "ComparisonOp | str") -> "ComparisonOp":
        """Accept a member, a wire value (``"startsWith"``) or a name
        in any case (``"StartsWith"``, ``"starts_with"``)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.replace("_", "").lower()
            for member in cls:
                if key in (member.value.lower(), member.name.replace("_", "").lower()):
                    return member
        raise ValidationError(
            f"Unknown comparison operator: {value!r}",
            errors=[{"field": "op", "reason": "unknown operator"}],
        )


class LogicalOp(str, Enum):
    AND = "and"
    OR = "or"
    NOT = "not"


class Filter(abc.ABC):
    """Base of the predicate tree.

    Subclasses are frozen dataclasses; the combinators below always build a
    new node and leave their operands untouched.
    """

    @abc.abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return the tagged JSON form sent across the invocation boundary."""

    # Named combinators ------------------------------------------------
    def and_(self, other: "Filter") -> "Logical":
        return Logical(LogicalOp.AND, (self, other))

    def or_(self, other: "Filter") -> "Logical":
        return Logical(LogicalOp.OR, (self, other))

    def not_(self) -> "Negation":
        return Negation(self)

    # Operator overloads -----------------------------------------------
    def __and__(self, other: "Filter") -> "Logical":
        return self.and_(other)

    def __or__(self, other: "Filter") -> "Logical":
        return self.or_(other)

    def __invert__(self) -> "Negation":
        return self.not_()


@dataclasses.dataclass(frozen=True)
class Comparison(Filter):
    """A leaf test against one document field."""

    field: str
    op: ComparisonOp
    value: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.field, str) or not self.field:
            raise ValidationError(
                "Comparison field must be a non-empty string",
                errors=[{"field": "field", "reason": "empty"}],
            )
        op = ComparisonOp.parse(self.op)
        object.__setattr__(self, "op", op)
        if op is ComparisonOp.IN:
            if not isinstance(self.value, (list, tuple)):
                raise ValidationError(
                    f"Operator 'in' on {self.field!r} expects a list value",
                    errors=[{"field": "value", "reason": "expected list"}],
                )
            object.__setattr__(self, "value", tuple(self.value))

    def to_dict(self) -> dict[str, Any]:
        value = list(self.value) if isinstance(self.value, tuple) else self.value
        return {"op": self.op.value, "field": self.field, "value": value}

    # Shortcuts ---------------------------------------------------------
    @classmethod
    def eq(cls, field: str, value: Any) -> "Comparison":
        return cls(field, ComparisonOp.EQ, value)

    @classmethod
    def ne(cls, field: str, value: Any) -> "Comparison":
        return cls(field, ComparisonOp.NE, value)

    @classmethod
    def gt(cls, field: str, value: Any) -> "Comparison":
        return cls(field, ComparisonOp.GT, value)

    @classmethod
    def gte(cls, field: str, value: Any) -> "Comparison":
        return cls(field, ComparisonOp.GTE, value)

    @classmethod
    def lt(cls, field: str, value: Any) -> "Comparison":
        return cls(field, ComparisonOp.LT, value)

    @classmethod
    def lte(cls, field: str, value: Any) -> "Comparison":
        return cls(field, ComparisonOp.LTE, value)

    @classmethod
    def in_(cls, field: str, values: list[Any] | tuple[Any, ...]) -> "Comparison":
        return cls(field, ComparisonOp.IN, values)

    @classmethod
    def contains(cls, field: str, value: Any) -> "Comparison":
        return cls(field, ComparisonOp.CONTAINS, value)

    @classmethod
    def starts_with(cls, field: str, value: str) -> "Comparison":
        return cls(field, ComparisonOp.STARTS_WITH, value)

    @classmethod
    def ends_with(cls, field: str, value: str) -> "Comparison":
        return cls(field, ComparisonOp.ENDS_WITH, value)

    @classmethod
    def matches(cls, field: str, pattern: str) -> "Comparison":
        return cls(field, ComparisonOp.MATCHES, pattern)


@dataclasses.dataclass(frozen=True)
class Logical(Filter):
    """Ordered AND/OR over child filters."""

    op: LogicalOp
    operands: tuple[Filter, ...]

    def __post_init__(self) -> None:
        op = LogicalOp(self.op)
        if op is LogicalOp.NOT:
            raise ValidationError("Use Negation for 'not'", errors=[{"field": "op", "reason": "not"}])
        object.__setattr__(self, "op", op)
        object.__setattr__(self, "operands", tuple(self.operands))

    def to_dict(self) -> dict[str, Any]:
        return {"op": self.op.value, "filters": [f.to_dict() for f in self.operands]}


@dataclasses.dataclass(frozen=True)
class Negation(Filter):
    """Negation of exactly one child filter."""

    operand: Filter

    @property
    def op(self) -> LogicalOp:
        return LogicalOp.NOT

    def to_dict(self) -> dict[str, Any]:
        return {"op": LogicalOp.NOT.value, "filter": self.operand.to_dict()}


def filter_from_dict(data: Mapping[str, Any]) -> Filter:
    """Rebuild a :class:`Filter` from its tagged JSON form."""
    try:
        op = data["op"]
    except (KeyError, TypeError) as exc:
        raise ValidationError("Filter node has no 'op' tag") from exc

    if op in (LogicalOp.AND.value, LogicalOp.OR.value):
        children = data.get("filters")
        if not isinstance(children, list):
            raise ValidationError(f"'{op}' filter expects a 'filters' list")
        return Logical(LogicalOp(op), tuple(filter_from_dict(c) for c in children))
    if op == LogicalOp.NOT.value:
        child = data.get("filter")
        if not isinstance(child, Mapping):
            raise ValidationError("'not' filter expects a 'filter' object")
        return Negation(filter_from_dict(child))
    return Comparison(data.get("field", ""), ComparisonOp.parse(op), data.get("value"))
