# jsonmonkey Error Types
# Error domains for JIR parsing and evaluation

from __future__ import annotations

from enum import Enum
from typing import Any


#==============================================================================
# Error Codes
#==============================================================================

class ParseErrorCodes(str, Enum):
    """Error code constants for JIR parse errors"""

    INVALID_JSON = "InvalidJson"
    UNSUPPORTED_FORM = "UnsupportedForm"
    NOT_ENOUGH_ARGS = "NotEnoughArgs"
    TOO_MANY_ARGS = "TooManyArgs"
    IDENT_EXPECTED = "IdentExpected"
    UNSUPPORTED_NUMBER_LITERAL = "UnsupportedNumberLiteral"
    NESTING_TOO_DEEP = "NestingTooDeep"


class EvalErrorCodes(str, Enum):
    """Error code constants for JIR evaluation errors"""

    UNDEFINED_IDENT = "UndefinedIdent"
    UNSUPPORTED_CONVERSION = "UnsupportedConversion"
    UNEXPECTED_TYPE_FOR_OPERATION = "UnexpectedTypeForOperation"
    DEPTH_LIMIT_EXCEEDED = "DepthLimitExceeded"


#==============================================================================
# Base Error Class
#==============================================================================

class JIRError(Exception):
    """Base exception class for every error a session can report"""

    def __init__(self, code: Enum, message: str, meta: dict[str, Any] | None = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = meta

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict suitable for JSON encoding"""
        result: dict[str, Any] = {
            "kind": "error",
            "code": self.code.value,
            "message": self.message,
        }
        if self.meta is not None:
            result["meta"] = self.meta
        return result


#==============================================================================
# Parse Errors
#==============================================================================

class ParseError(JIRError):
    """Raised when JSON text cannot be turned into an AST"""

    def __init__(
        self,
        code: ParseErrorCodes,
        message: str,
        path: str = "$",
        meta: dict[str, Any] | None = None,
    ):
        super().__init__(code, message, meta)
        self.path = path

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["path"] = self.path
        return result

    #---------------------------------------------------------------------------
    # Static factory methods
    #---------------------------------------------------------------------------

    @staticmethod
    def invalid_json(detail: str) -> "ParseError":
        """Create an InvalidJson error"""
        return ParseError(ParseErrorCodes.INVALID_JSON, f"Invalid JSON: {detail}")

    @staticmethod
    def unsupported_form(path: str, form: Any) -> "ParseError":
        """Create an UnsupportedForm error"""
        return ParseError(
            ParseErrorCodes.UNSUPPORTED_FORM,
            f"Unsupported form at {path}: {form!r}",
            path,
            {"form": repr(form)},
        )

    @staticmethod
    def not_enough_args(path: str, tag: str, actual: int, expected_min: int) -> "ParseError":
        """Create a NotEnoughArgs error"""
        return ParseError(
            ParseErrorCodes.NOT_ENOUGH_ARGS,
            f"Not enough arguments at {path}: {tag} expects at least {expected_min}, got {actual}",
            path,
            {"tag": tag, "actual": actual, "expected_min": expected_min},
        )

    @staticmethod
    def too_many_args(path: str, tag: str, actual: int, expected_max: int) -> "ParseError":
        """Create a TooManyArgs error"""
        return ParseError(
            ParseErrorCodes.TOO_MANY_ARGS,
            f"Too many arguments at {path}: {tag} expects at most {expected_max}, got {actual}",
            path,
            {"tag": tag, "actual": actual, "expected_max": expected_max},
        )

    @staticmethod
    def ident_expected(path: str, got: Any) -> "ParseError":
        """Create an IdentExpected error"""
        return ParseError(
            ParseErrorCodes.IDENT_EXPECTED,
            f"Identifier expected at {path}, got {got!r}",
            path,
        )

    @staticmethod
    def unsupported_number_literal(path: str, literal: str) -> "ParseError":
        """Create an UnsupportedNumberLiteral error"""
        return ParseError(
            ParseErrorCodes.UNSUPPORTED_NUMBER_LITERAL,
            f"Number literal at {path} is not a finite 64-bit float: {literal}",
            path,
        )

    @staticmethod
    def nesting_too_deep(path: str, max_depth: int) -> "ParseError":
        """Create a NestingTooDeep error"""
        return ParseError(
            ParseErrorCodes.NESTING_TOO_DEEP,
            f"Nesting too deep at {path}: limit is {max_depth}",
            path,
            {"max_depth": max_depth},
        )


#==============================================================================
# Evaluation Errors
#==============================================================================

class EvalError(JIRError):
    """Raised when a well-formed AST fails at runtime"""

    @staticmethod
    def undefined_ident(name: str) -> "EvalError":
        """Create an UndefinedIdent error"""
        return EvalError(
            EvalErrorCodes.UNDEFINED_IDENT,
            f"Undefined identifier: {name}",
            {"name": name},
        )

    @staticmethod
    def unsupported_conversion(source: str, target: str) -> "EvalError":
        """Create an UnsupportedConversion error"""
        return EvalError(
            EvalErrorCodes.UNSUPPORTED_CONVERSION,
            f"Unsupported conversion: {source} -> {target}",
            {"from": source, "to": target},
        )

    @staticmethod
    def unexpected_type_for_operation(op: str, lhs: str, rhs: str) -> "EvalError":
        """Create an UnexpectedTypeForOperation error"""
        return EvalError(
            EvalErrorCodes.UNEXPECTED_TYPE_FOR_OPERATION,
            f"Unexpected types for {op}: {lhs} and {rhs}",
            {"op": op, "lhs": lhs, "rhs": rhs},
        )

    @staticmethod
    def depth_limit_exceeded(max_depth: int) -> "EvalError":
        """Create a DepthLimitExceeded error"""
        return EvalError(
            EvalErrorCodes.DEPTH_LIMIT_EXCEEDED,
            f"Evaluation exceeded maximum depth of {max_depth}",
            {"max_depth": max_depth},
        )


#==============================================================================
# Exhaustiveness Checking
#==============================================================================

def exhaustive(value: Any) -> None:
    """
    Asserts that a value is unreachable, ensuring exhaustive handling.
    Use in dispatch default cases to ensure all variants are handled.

    Raises:
        AssertionError: If called (indicating unhandled case)
    """
    raise AssertionError(f"Unexpected value: {value!r}")
