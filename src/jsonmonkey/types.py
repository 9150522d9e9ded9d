"""
jsonmonkey Type Definitions
Implements the Value, Identifier and Expression AST domains for JIR programs

This module provides frozen dataclasses for immutable representations,
using Union types with Literal 'kind' fields for dispatch.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import (
    Optional,
    Union,
    Literal,
    TypeAlias,
)

from jsonmonkey.errors import EvalError


#==============================================================================
# Value Domain (v - runtime values)
#==============================================================================

@dataclass(frozen=True)
class NullVal:
    """Null value"""
    kind: Literal["null"]


@dataclass(frozen=True)
class NumberVal:
    """Number value (64-bit float; integers are not a separate variant)"""
    kind: Literal["number"]
    value: float


@dataclass(frozen=True)
class StringVal:
    """String value"""
    kind: Literal["string"]
    value: str


@dataclass(frozen=True)
class BoolVal:
    """Boolean value"""
    kind: Literal["bool"]
    value: bool


# Value union for all values
Value: TypeAlias = Union[
    NullVal,
    NumberVal,
    StringVal,
    BoolVal,
]


#==============================================================================
# Identifiers
#==============================================================================

@dataclass(frozen=True)
class Ident:
    """A binding name. Two identifiers are equal iff their text is equal."""
    name: str

    def __str__(self) -> str:
        return self.name


#==============================================================================
# Expression AST (e - syntactic expressions)
#==============================================================================

@dataclass(frozen=True)
class LitExpr:
    """Literal expression"""
    kind: Literal["lit"]
    value: Value


@dataclass(frozen=True)
class IdentExpr:
    """Reference to a bound name"""
    kind: Literal["ident"]
    ident: Ident


@dataclass(frozen=True)
class AddExpr:
    """Numeric addition or string concatenation"""
    kind: Literal["add"]
    lhs: Expr
    rhs: Expr


@dataclass(frozen=True)
class SubExpr:
    """Numeric subtraction"""
    kind: Literal["sub"]
    lhs: Expr
    rhs: Expr


@dataclass(frozen=True)
class AndExpr:
    """Logical conjunction (both operands always evaluated)"""
    kind: Literal["and"]
    lhs: Expr
    rhs: Expr


@dataclass(frozen=True)
class OrExpr:
    """Logical disjunction (both operands always evaluated)"""
    kind: Literal["or"]
    lhs: Expr
    rhs: Expr


@dataclass(frozen=True)
class NotExpr:
    """Logical negation"""
    kind: Literal["not"]
    operand: Expr


@dataclass(frozen=True)
class EqExpr:
    """Structural equality"""
    kind: Literal["eq"]
    lhs: Expr
    rhs: Expr


@dataclass(frozen=True)
class NotEqExpr:
    """Structural inequality"""
    kind: Literal["notEq"]
    lhs: Expr
    rhs: Expr


@dataclass(frozen=True)
class IfExpr:
    """Conditional expression with an optional else branch"""
    kind: Literal["if"]
    cond: Expr
    then_branch: Expr
    else_branch: Optional[Expr] = None


@dataclass(frozen=True)
class BindExpr:
    """Global binding; evaluates to null"""
    kind: Literal["bind"]
    ident: Ident
    value: Expr


# Expression union for all AST nodes
Expr: TypeAlias = Union[
    LitExpr,
    IdentExpr,
    AddExpr,
    SubExpr,
    AndExpr,
    OrExpr,
    NotExpr,
    EqExpr,
    NotEqExpr,
    IfExpr,
    BindExpr,
]


#==============================================================================
# Type Guards and Utility Functions
#==============================================================================

def is_null(v: Value) -> bool:
    """Check if value is null"""
    return v.kind == "null"


def is_number(v: Value) -> bool:
    """Check if value is a number"""
    return v.kind == "number"


def is_string(v: Value) -> bool:
    """Check if value is a string"""
    return v.kind == "string"


def is_bool(v: Value) -> bool:
    """Check if value is a boolean"""
    return v.kind == "bool"


def values_equal(a: Value, b: Value) -> bool:
    """
    Structural equality across the value domain.

    Values of different kinds are never equal. Numbers compare with IEEE
    semantics, so NaN is not equal to itself.
    """
    if a.kind != b.kind:
        return False
    if a.kind == "null":
        return True
    return a.value == b.value  # type: ignore


#==============================================================================
# Coercions
#==============================================================================

def to_boolean(v: Value) -> bool:
    """Truthiness: every value has one, so this never fails"""
    if v.kind == "bool":
        return v.value
    elif v.kind == "number":
        return v.value != 0.0
    elif v.kind == "string":
        return v.value != ""
    return False


def to_number(v: Value) -> float:
    """
    Numeric coercion, defined only for numbers.

    Raises:
        EvalError: UnsupportedConversion for any non-number value
    """
    if v.kind == "number":
        return v.value
    raise EvalError.unsupported_conversion(v.kind, "number")


def format_number(n: float) -> str:
    """Render a number in its shortest decimal form (1.0 renders as "1")"""
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    if n.is_integer():
        if n == 0 and math.copysign(1.0, n) < 0:
            return "-0"
        return str(int(n))
    return repr(n)


def to_string(v: Value) -> str:
    """Textual coercion, used for presentation only"""
    if v.kind == "number":
        return format_number(v.value)
    elif v.kind == "string":
        return v.value
    elif v.kind == "bool":
        return "true" if v.value else "false"
    return "null"


#==============================================================================
# Value Constructors
#==============================================================================

def null_val() -> NullVal:
    return NullVal(kind="null")


def number_val(value: float) -> NumberVal:
    return NumberVal(kind="number", value=float(value))


def string_val(value: str) -> StringVal:
    return StringVal(kind="string", value=value)


def bool_val(value: bool) -> BoolVal:
    return BoolVal(kind="bool", value=value)


#==============================================================================
# Expression Constructors
#==============================================================================

def lit_expr(value: Value) -> LitExpr:
    return LitExpr(kind="lit", value=value)


def ident_expr(ident: Ident) -> IdentExpr:
    return IdentExpr(kind="ident", ident=ident)


def add_expr(lhs: Expr, rhs: Expr) -> AddExpr:
    return AddExpr(kind="add", lhs=lhs, rhs=rhs)


def sub_expr(lhs: Expr, rhs: Expr) -> SubExpr:
    return SubExpr(kind="sub", lhs=lhs, rhs=rhs)


def and_expr(lhs: Expr, rhs: Expr) -> AndExpr:
    return AndExpr(kind="and", lhs=lhs, rhs=rhs)


def or_expr(lhs: Expr, rhs: Expr) -> OrExpr:
    return OrExpr(kind="or", lhs=lhs, rhs=rhs)


def not_expr(operand: Expr) -> NotExpr:
    return NotExpr(kind="not", operand=operand)


def eq_expr(lhs: Expr, rhs: Expr) -> EqExpr:
    return EqExpr(kind="eq", lhs=lhs, rhs=rhs)


def not_eq_expr(lhs: Expr, rhs: Expr) -> NotEqExpr:
    return NotEqExpr(kind="notEq", lhs=lhs, rhs=rhs)


def if_expr(cond: Expr, then_branch: Expr, else_branch: Optional[Expr] = None) -> IfExpr:
    return IfExpr(kind="if", cond=cond, then_branch=then_branch, else_branch=else_branch)


def bind_expr(ident: Ident, value: Expr) -> BindExpr:
    return BindExpr(kind="bind", ident=ident, value=value)
