"""
jsonmonkey

A minimal expression language whose programs are JSON documents (JIR),
parsed into an expression tree and run by a tree-walking evaluator against a
single global environment per session.

This module provides the public API.
"""

from __future__ import annotations

#==============================================================================
# Types
#==============================================================================

from jsonmonkey.types import (
    Value,
    Expr,
    Ident,
    # Values
    NullVal,
    NumberVal,
    StringVal,
    BoolVal,
    # Expressions
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
)

#==============================================================================
# Value and Expression Constructors
#==============================================================================

from jsonmonkey.types import (
    null_val,
    number_val,
    string_val,
    bool_val,
    lit_expr,
    ident_expr,
    add_expr,
    sub_expr,
    and_expr,
    or_expr,
    not_expr,
    eq_expr,
    not_eq_expr,
    if_expr,
    bind_expr,
)

#==============================================================================
# Type Guards and Coercions
#==============================================================================

from jsonmonkey.types import (
    is_null,
    is_number,
    is_string,
    is_bool,
    values_equal,
    to_boolean,
    to_number,
    to_string,
)

#==============================================================================
# Errors
#==============================================================================

from jsonmonkey.errors import (
    JIRError,
    ParseError,
    ParseErrorCodes,
    EvalError,
    EvalErrorCodes,
)

#==============================================================================
# Environment
#==============================================================================

from jsonmonkey.env import (
    Environment,
    empty_env,
)

#==============================================================================
# Parsing
#==============================================================================

from jsonmonkey.forms import (
    Form,
    FormRegistry,
    create_core_forms,
    define_form,
)

from jsonmonkey.parser import (
    JIRParser,
    ParseOptions,
    parse,
)

#==============================================================================
# Evaluation
#==============================================================================

from jsonmonkey.evaluator import (
    Evaluator,
    EvalOptions,
    evaluate,
    create_evaluator,
)

from jsonmonkey.session import (
    Session,
    new_session,
)

__version__ = "0.1.0"

__all__ = [
    #==========================================================================
    # Types
    #==========================================================================
    "Value",
    "Expr",
    "Ident",
    "NullVal",
    "NumberVal",
    "StringVal",
    "BoolVal",
    "LitExpr",
    "IdentExpr",
    "AddExpr",
    "SubExpr",
    "AndExpr",
    "OrExpr",
    "NotExpr",
    "EqExpr",
    "NotEqExpr",
    "IfExpr",
    "BindExpr",

    #==========================================================================
    # Value and Expression Constructors
    #==========================================================================
    "null_val",
    "number_val",
    "string_val",
    "bool_val",
    "lit_expr",
    "ident_expr",
    "add_expr",
    "sub_expr",
    "and_expr",
    "or_expr",
    "not_expr",
    "eq_expr",
    "not_eq_expr",
    "if_expr",
    "bind_expr",

    #==========================================================================
    # Type Guards and Coercions
    #==========================================================================
    "is_null",
    "is_number",
    "is_string",
    "is_bool",
    "values_equal",
    "to_boolean",
    "to_number",
    "to_string",

    #==========================================================================
    # Errors
    #==========================================================================
    "JIRError",
    "ParseError",
    "ParseErrorCodes",
    "EvalError",
    "EvalErrorCodes",

    #==========================================================================
    # Environment
    #==========================================================================
    "Environment",
    "empty_env",

    #==========================================================================
    # Parsing
    #==========================================================================
    "Form",
    "FormRegistry",
    "create_core_forms",
    "define_form",
    "JIRParser",
    "ParseOptions",
    "parse",

    #==========================================================================
    # Evaluation
    #==========================================================================
    "Evaluator",
    "EvalOptions",
    "evaluate",
    "create_evaluator",
    "Session",
    "new_session",
]
