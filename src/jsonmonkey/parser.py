# jsonmonkey JIR Parser
# Structural classification of decoded JSON into the expression AST

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from typing import Any, List, Optional

from jsonmonkey.errors import ParseError
from jsonmonkey.forms import FormRegistry, create_core_forms
from jsonmonkey.types import (
    Expr,
    Ident,
    bool_val,
    lit_expr,
    null_val,
    number_val,
    string_val,
)

logger = logging.getLogger(__name__)


#==============================================================================
# Parse Options
#==============================================================================

@dataclass
class ParseOptions:
    """Options for JIR parsing"""
    max_depth: int = 256


#==============================================================================
# Parse State
#==============================================================================

class ParseState:
    """Path and depth tracking during parsing"""

    def __init__(self, max_depth: int) -> None:
        self.path: list[str] = []
        self.depth = 0
        self.max_depth = max_depth

    def enter(self, index: int) -> None:
        """Descend into an array element"""
        self.path.append(f"[{index}]")
        self.depth += 1
        if self.depth > self.max_depth:
            raise ParseError.nesting_too_deep(self.current_path(), self.max_depth)

    def leave(self) -> None:
        self.path.pop()
        self.depth -= 1

    def current_path(self) -> str:
        """Get the current path as a JSONPath-like string"""
        return "$" + "".join(self.path)


#==============================================================================
# JSON Decoding
#==============================================================================

def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard constant {name}")


def decode_json(text: str, max_depth: int) -> Any:
    """
    Decode JSON text, mapping every number to a float.

    Raises:
        ParseError: InvalidJson for malformed text, NestingTooDeep when the
            decoder runs out of stack
    """
    try:
        return json.loads(
            text,
            parse_int=float,
            parse_float=float,
            parse_constant=_reject_constant,
        )
    except RecursionError:
        raise ParseError.nesting_too_deep("$", max_depth) from None
    except ValueError as e:
        raise ParseError.invalid_json(str(e)) from e


#==============================================================================
# JIR Parser
#==============================================================================

class JIRParser:
    """
    Translates JIR documents into expression trees.

    Scalars map to literals; an array is a compound form whose head string is
    looked up in the form registry. Arity is checked before any operand is
    parsed, and the first error aborts the whole parse.
    """

    def __init__(
        self,
        forms: Optional[FormRegistry] = None,
        options: Optional[ParseOptions] = None,
    ):
        self._forms = forms if forms is not None else create_core_forms()
        self._options = options or ParseOptions()

    @property
    def forms(self) -> FormRegistry:
        """Get the form registry"""
        return self._forms

    #---------------------------------------------------------------------------
    # Public Parsing API
    #---------------------------------------------------------------------------

    def parse(self, text: str) -> Expr:
        """
        Parse JSON text into an expression.

        Args:
            text: JIR program as JSON text

        Returns:
            Root expression node

        Raises:
            ParseError: If the text is not a valid JIR program
        """
        doc = decode_json(text, self._options.max_depth)
        expr = self.parse_value(doc)
        logger.debug("Parsed %s expression", expr.kind)
        return expr

    def parse_value(self, doc: Any) -> Expr:
        """
        Parse an already-decoded JSON value into an expression.

        Raises:
            ParseError: If the value is not a valid JIR program
        """
        state = ParseState(self._options.max_depth)
        try:
            return self._parse_expr(doc, state)
        except RecursionError:
            # max_depth set above what the interpreter stack can hold
            raise ParseError.nesting_too_deep("$", self._options.max_depth) from None

    #---------------------------------------------------------------------------
    # Expression Classification
    #---------------------------------------------------------------------------

    def _parse_expr(self, value: Any, state: ParseState) -> Expr:
        if value is None:
            return lit_expr(null_val())
        # bool must be tested before numbers
        if isinstance(value, bool):
            return lit_expr(bool_val(value))
        if isinstance(value, (int, float)):
            return self._parse_number(value, state)
        if isinstance(value, str):
            return lit_expr(string_val(value))
        if isinstance(value, list):
            return self._parse_compound(value, state)

        raise ParseError.unsupported_form(state.current_path(), value)

    def _parse_number(self, value: float | int, state: ParseState) -> Expr:
        try:
            number = float(value)
        except OverflowError:
            raise ParseError.unsupported_number_literal(state.current_path(), str(value)) from None
        if not math.isfinite(number):
            raise ParseError.unsupported_number_literal(state.current_path(), str(value))
        return lit_expr(number_val(number))

    def _parse_compound(self, values: List[Any], state: ParseState) -> Expr:
        path = state.current_path()
        if not values or not isinstance(values[0], str):
            raise ParseError.unsupported_form(path, values)

        tag = values[0]
        form = self._forms.lookup(tag)
        if form is None:
            raise ParseError.unsupported_form(path, tag)

        operands = values[1:]
        count = len(operands)
        if not form.check_arity(count):
            if count < form.min_arity:
                raise ParseError.not_enough_args(path, tag, count, form.min_arity)
            raise ParseError.too_many_args(path, tag, count, form.max_arity)

        args: list[Any] = []
        for i, operand in enumerate(operands):
            state.enter(i + 1)
            if form.expects_ident(i):
                args.append(self._parse_ident(operand, state))
            else:
                args.append(self._parse_expr(operand, state))
            state.leave()

        return form.build(*args)

    def _parse_ident(self, value: Any, state: ParseState) -> Ident:
        if not isinstance(value, str):
            raise ParseError.ident_expected(state.current_path(), value)
        return Ident(value)


#==============================================================================
# Convenience Functions
#==============================================================================

def parse(text: str, options: Optional[ParseOptions] = None) -> Expr:
    """
    Convenience function for parsing one JIR program.

    Args:
        text: JIR program as JSON text
        options: Parse options (optional)

    Returns:
        Root expression node
    """
    return JIRParser(options=options).parse(text)
