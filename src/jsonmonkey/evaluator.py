"""
jsonmonkey Evaluator
Implements big-step evaluation: rho |- e ⇓ v

Evaluation is strict and eager: every operand the rules below mention is
evaluated exactly once, left before right. There is a single global
environment, threaded through and mutated only by bind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from jsonmonkey.types import (
    Expr,
    Value,
    AddExpr,
    AndExpr,
    BindExpr,
    EqExpr,
    IdentExpr,
    IfExpr,
    LitExpr,
    NotEqExpr,
    NotExpr,
    OrExpr,
    SubExpr,
    bool_val,
    null_val,
    number_val,
    string_val,
    to_boolean,
    to_number,
    values_equal,
)
from jsonmonkey.errors import EvalError, exhaustive
from jsonmonkey.env import Environment

logger = logging.getLogger(__name__)


#==============================================================================
# Evaluation Options
#==============================================================================

@dataclass
class EvalOptions:
    """Options for expression evaluation"""
    max_depth: int = 300
    trace: bool = False


#==============================================================================
# Evaluation Context
#==============================================================================

@dataclass
class EvalContext:
    """Internal evaluation state for tracking depth and configuration"""
    depth: int = 0
    max_depth: int = 300
    trace: bool = False


#==============================================================================
# Evaluator Class
#==============================================================================

class Evaluator:
    """
    Big-step expression evaluator for JIR expressions.

    The evaluator implements the following inference rules:
    - E-Lit: rho |- lit(v) ⇓ v
    - E-Ident: rho(x) = v ⇒ rho |- ident(x) ⇓ v
    - E-Bind: rho |- e ⇓ v ⇒ rho |- bind(x, e) ⇓ null, rho[x:v]
    - E-Add: rho |- l ⇓ n1, rho |- r ⇓ n2 ⇒ rho |- add(l, r) ⇓ n1 + n2
             (strings concatenate; mixed kinds are an error)
    - E-Sub: rho |- l ⇓ n1, rho |- r ⇓ n2 ⇒ rho |- sub(l, r) ⇓ n1 - n2
    - E-And/E-Or/E-Not: operands coerced by truthiness, no short circuit
    - E-Eq/E-NotEq: structural equality over the value domain
    - E-If: rho |- cond ⇓ v, truthy(v) selects the branch; a missing else
            branch evaluates to null
    """

    def __init__(self, env: Environment):
        """
        Initialize the evaluator.

        Args:
            env: Global environment read by ident and written by bind
        """
        self._env = env

    @property
    def env(self) -> Environment:
        """Get the global environment"""
        return self._env

    #---------------------------------------------------------------------------
    # Public Evaluation API
    #---------------------------------------------------------------------------

    def evaluate(self, expr: Expr, options: Optional[EvalOptions] = None) -> Value:
        """
        Evaluate an expression: rho |- e ⇓ v

        Args:
            expr: Expression to evaluate
            options: Evaluation options (max_depth, trace)

        Returns:
            Result value

        Raises:
            EvalError: If evaluation fails or nests deeper than max_depth
        """
        opts = options or EvalOptions()
        state = EvalContext(
            depth=0,
            max_depth=opts.max_depth,
            trace=opts.trace
        )
        try:
            return self._eval_expr(expr, state)
        except RecursionError:
            # max_depth set above what the interpreter stack can hold
            raise EvalError.depth_limit_exceeded(state.max_depth) from None

    #---------------------------------------------------------------------------
    # Expression Evaluation (Dispatch)
    #---------------------------------------------------------------------------

    def _eval_expr(self, expr: Expr, state: EvalContext) -> Value:
        """
        Main expression dispatch based on expression kind.
        """
        state.depth += 1
        if state.depth > state.max_depth:
            raise EvalError.depth_limit_exceeded(state.max_depth)
        if state.trace:
            logger.debug("%seval %s", "  " * (state.depth - 1), expr.kind)

        try:
            kind = expr.kind

            if kind == "lit":
                return self._eval_lit(expr)
            elif kind == "ident":
                return self._eval_ident(expr)
            elif kind == "bind":
                return self._eval_bind(expr, state)
            elif kind == "add":
                return self._eval_add(expr, state)
            elif kind == "sub":
                return self._eval_sub(expr, state)
            elif kind == "and":
                return self._eval_and(expr, state)
            elif kind == "or":
                return self._eval_or(expr, state)
            elif kind == "not":
                return self._eval_not(expr, state)
            elif kind == "eq":
                return self._eval_eq(expr, state)
            elif kind == "notEq":
                return self._eval_not_eq(expr, state)
            elif kind == "if":
                return self._eval_if(expr, state)
            else:
                exhaustive(expr)
        finally:
            state.depth -= 1

    #---------------------------------------------------------------------------
    # Literals and Bindings
    #---------------------------------------------------------------------------

    def _eval_lit(self, expr: LitExpr) -> Value:
        """E-Lit: rho |- lit(v) ⇓ v"""
        return expr.value

    def _eval_ident(self, expr: IdentExpr) -> Value:
        """
        E-Ident: rho(x) = v
                 -------
                 rho |- ident(x) ⇓ v
        """
        value = self._env.lookup(expr.ident)
        if value is None:
            raise EvalError.undefined_ident(expr.ident.name)
        return value

    def _eval_bind(self, expr: BindExpr, state: EvalContext) -> Value:
        """
        E-Bind: rho |- e ⇓ v
                --------------------------------
                rho |- bind(x, e) ⇓ null, rho[x:v]

        The binding is only written once the right-hand side succeeds.
        """
        value = self._eval_expr(expr.value, state)
        self._env.bind(expr.ident, value)
        if state.trace:
            logger.debug("bound %s", expr.ident)
        return null_val()

    #---------------------------------------------------------------------------
    # Arithmetic
    #---------------------------------------------------------------------------

    def _eval_add(self, expr: AddExpr, state: EvalContext) -> Value:
        lhs = self._eval_expr(expr.lhs, state)
        rhs = self._eval_expr(expr.rhs, state)

        if lhs.kind == "number" and rhs.kind == "number":
            return number_val(lhs.value + rhs.value)
        if lhs.kind == "string" and rhs.kind == "string":
            return string_val(lhs.value + rhs.value)
        raise EvalError.unexpected_type_for_operation("add", lhs.kind, rhs.kind)

    def _eval_sub(self, expr: SubExpr, state: EvalContext) -> Value:
        lhs = self._eval_expr(expr.lhs, state)
        rhs = self._eval_expr(expr.rhs, state)
        return number_val(to_number(lhs) - to_number(rhs))

    #---------------------------------------------------------------------------
    # Boolean Logic
    #---------------------------------------------------------------------------

    def _eval_and(self, expr: AndExpr, state: EvalContext) -> Value:
        lhs = to_boolean(self._eval_expr(expr.lhs, state))
        rhs = to_boolean(self._eval_expr(expr.rhs, state))
        return bool_val(lhs and rhs)

    def _eval_or(self, expr: OrExpr, state: EvalContext) -> Value:
        lhs = to_boolean(self._eval_expr(expr.lhs, state))
        rhs = to_boolean(self._eval_expr(expr.rhs, state))
        return bool_val(lhs or rhs)

    def _eval_not(self, expr: NotExpr, state: EvalContext) -> Value:
        return bool_val(not to_boolean(self._eval_expr(expr.operand, state)))

    #---------------------------------------------------------------------------
    # Comparison
    #---------------------------------------------------------------------------

    def _eval_eq(self, expr: EqExpr, state: EvalContext) -> Value:
        lhs = self._eval_expr(expr.lhs, state)
        rhs = self._eval_expr(expr.rhs, state)
        return bool_val(values_equal(lhs, rhs))

    def _eval_not_eq(self, expr: NotEqExpr, state: EvalContext) -> Value:
        lhs = self._eval_expr(expr.lhs, state)
        rhs = self._eval_expr(expr.rhs, state)
        return bool_val(not values_equal(lhs, rhs))

    #---------------------------------------------------------------------------
    # Control Flow
    #---------------------------------------------------------------------------

    def _eval_if(self, expr: IfExpr, state: EvalContext) -> Value:
        """
        E-IfTrue:  rho |- cond ⇓ v    truthy(v)    rho |- then ⇓ v'
                   ------------------------------------------
                        rho |- if(cond, then, else) ⇓ v'

        E-IfFalse: rho |- cond ⇓ v    not truthy(v)    rho |- else ⇓ v'
                   ---------------------------------------------
                        rho |- if(cond, then, else) ⇓ v'

        With no else branch a falsy condition yields null.
        """
        cond = self._eval_expr(expr.cond, state)
        if to_boolean(cond):
            return self._eval_expr(expr.then_branch, state)
        if expr.else_branch is not None:
            return self._eval_expr(expr.else_branch, state)
        return null_val()


#==============================================================================
# Convenience Functions
#==============================================================================

def create_evaluator(env: Optional[Environment] = None) -> Evaluator:
    """
    Create an evaluator instance.

    Args:
        env: Global environment (optional; a fresh one is created if omitted)

    Returns:
        New Evaluator instance
    """
    return Evaluator(env if env is not None else Environment())


def evaluate(
    expr: Expr,
    env: Environment,
    options: Optional[EvalOptions] = None,
) -> Value:
    """
    Convenience function for single-expression evaluation.

    Args:
        expr: Expression to evaluate
        env: Global environment, mutated in place by bind
        options: Evaluation options (optional)

    Returns:
        Result value
    """
    return Evaluator(env).evaluate(expr, options)
