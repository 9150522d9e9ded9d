"""
jsonmonkey Form Registry
Table of compound forms recognised by the JIR parser

Provides Form and FormRegistry classes mapping an operator tag (e.g. "$add")
to its arity range and the rule that builds the AST node from parsed operands.
Arity can therefore be checked independently of node construction.
"""

from __future__ import annotations

from typing import Callable, Dict, FrozenSet, List, Optional
from dataclasses import dataclass

from jsonmonkey.types import (
    Expr,
    add_expr,
    and_expr,
    bind_expr,
    eq_expr,
    ident_expr,
    if_expr,
    not_eq_expr,
    not_expr,
    or_expr,
    sub_expr,
)


#==============================================================================
# Form Class
#==============================================================================

@dataclass(frozen=True)
class Form:
    """
    A compound form definition.

    Attributes:
        tag: Operator tag heading the JSON array (e.g., "$add")
        min_arity: Fewest operands accepted (tag excluded)
        max_arity: Most operands accepted (tag excluded)
        ident_positions: Operand indexes that must be bare identifier names
        build: Constructs the AST node from the parsed operands
    """
    tag: str
    min_arity: int
    max_arity: int
    ident_positions: FrozenSet[int]
    build: Callable[..., Expr]

    def check_arity(self, arg_count: int) -> bool:
        """Check if operand count is within the accepted range"""
        return self.min_arity <= arg_count <= self.max_arity

    def expects_ident(self, index: int) -> bool:
        """Check if the operand at index must be an identifier name"""
        return index in self.ident_positions

    def __str__(self) -> str:
        if self.min_arity == self.max_arity:
            arity = str(self.min_arity)
        else:
            arity = f"{self.min_arity}..{self.max_arity}"
        return f"Form({self.tag}/{arity})"


#==============================================================================
# Form Registry
#==============================================================================

class FormRegistry:
    """
    Registry of compound forms keyed by tag.
    """

    def __init__(self) -> None:
        """Create an empty form registry"""
        self._forms: Dict[str, Form] = {}

    def register(self, form: Form) -> "FormRegistry":
        """
        Register a form in the registry.

        Args:
            form: The form to register

        Returns:
            self for chaining

        Raises:
            ValueError: If a form with the same tag already exists
        """
        if form.tag in self._forms:
            raise ValueError(f"Form {form.tag} already registered")
        self._forms[form.tag] = form
        return self

    def register_all(self, forms: List[Form]) -> "FormRegistry":
        """Register multiple forms at once"""
        for form in forms:
            self.register(form)
        return self

    def lookup(self, tag: str) -> Optional[Form]:
        """
        Look up a form by tag.

        Returns:
            The form if found, None otherwise
        """
        return self._forms.get(tag)

    def tags(self) -> List[str]:
        """List all registered tags in registration order"""
        return list(self._forms)

    def __len__(self) -> int:
        return len(self._forms)

    def __contains__(self, tag: str) -> bool:
        return tag in self._forms


#==============================================================================
# Form Builder
#==============================================================================

class FormBuilder:
    """
    Builder pattern for constructing forms with a fluent interface.

    Example:
        form = (FormBuilder("$add")
                .arity(2)
                .build_with(add_expr)
                .build())
    """

    def __init__(self, tag: str) -> None:
        self._tag = tag
        self._min_arity: Optional[int] = None
        self._max_arity: Optional[int] = None
        self._ident_positions: FrozenSet[int] = frozenset()
        self._build: Optional[Callable[..., Expr]] = None

    def arity(self, min_arity: int, max_arity: Optional[int] = None) -> "FormBuilder":
        """Set the operand count; a single argument means an exact count"""
        self._min_arity = min_arity
        self._max_arity = min_arity if max_arity is None else max_arity
        return self

    def idents(self, *positions: int) -> "FormBuilder":
        """Mark operand positions that must be identifier names"""
        self._ident_positions = frozenset(positions)
        return self

    def build_with(self, fn: Callable[..., Expr]) -> "FormBuilder":
        """Set the node construction rule"""
        self._build = fn
        return self

    def build(self) -> Form:
        """
        Build the form.

        Raises:
            ValueError: If required fields are missing or inconsistent
        """
        if self._min_arity is None or self._max_arity is None:
            raise ValueError(f"Form {self._tag} missing arity")
        if self._min_arity > self._max_arity:
            raise ValueError(f"Form {self._tag} has min arity above max arity")
        if self._build is None:
            raise ValueError(f"Form {self._tag} missing node builder")

        return Form(
            tag=self._tag,
            min_arity=self._min_arity,
            max_arity=self._max_arity,
            ident_positions=self._ident_positions,
            build=self._build,
        )


#==============================================================================
# Core Forms
#==============================================================================

def define_form(tag: str) -> FormBuilder:
    """Start building a form definition"""
    return FormBuilder(tag)


def create_core_forms() -> FormRegistry:
    """
    Create a registry holding the ten JIR forms.

    Returns:
        FormRegistry with $add, $sub, $bind, $ref, $if, $and, $or, $not,
        $eq and $notEq registered
    """
    return FormRegistry().register_all([
        define_form("$add").arity(2).build_with(add_expr).build(),
        define_form("$sub").arity(2).build_with(sub_expr).build(),
        define_form("$bind").arity(2).idents(0).build_with(bind_expr).build(),
        define_form("$ref").arity(1).idents(0).build_with(ident_expr).build(),
        define_form("$if").arity(2, 3).build_with(if_expr).build(),
        define_form("$and").arity(2).build_with(and_expr).build(),
        define_form("$or").arity(2).build_with(or_expr).build(),
        define_form("$not").arity(1).build_with(not_expr).build(),
        define_form("$eq").arity(2).build_with(eq_expr).build(),
        define_form("$notEq").arity(2).build_with(not_eq_expr).build(),
    ])
