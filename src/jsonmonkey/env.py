"""
jsonmonkey Environment
The single global binding environment of an interpreter session

Unlike a scoped environment there is no parent chain and no shadowing: one
mutable mapping from Ident to Value lives as long as its session. Bind
evaluation is the only writer and Ident evaluation the only reader.
"""

from __future__ import annotations
from typing import Dict, Iterator, Optional

from jsonmonkey.types import Ident, Value


#==============================================================================
# Value Environment (rho)
# Maps identifiers to their runtime values
#==============================================================================

class Environment:
    """Mutable global value environment."""

    def __init__(self, bindings: Optional[Dict[Ident, Value]] = None):
        """
        Create a new environment.

        Args:
            bindings: Initial value bindings (optional)
        """
        self._bindings: Dict[Ident, Value] = dict(bindings) if bindings else {}

    @property
    def bindings(self) -> Dict[Ident, Value]:
        """Return a copy of the bindings to prevent external mutation."""
        return dict(self._bindings)

    def bind(self, ident: Ident, value: Value) -> None:
        """
        Insert or overwrite a binding in place.

        Args:
            ident: Name to bind
            value: Value to bind
        """
        self._bindings[ident] = value

    def lookup(self, ident: Ident) -> Optional[Value]:
        """
        Look up a value binding in the environment.

        Args:
            ident: Name to look up

        Returns:
            Value if found, None otherwise
        """
        return self._bindings.get(ident)

    def __contains__(self, ident: Ident) -> bool:
        """Check if a name is bound in the environment."""
        return ident in self._bindings

    def __len__(self) -> int:
        """Return the number of bindings."""
        return len(self._bindings)

    def __iter__(self) -> Iterator[Ident]:
        return iter(self._bindings)

    def __repr__(self) -> str:
        return f"Environment({self._bindings})"


def empty_env() -> Environment:
    """
    Create an empty environment.

    Returns:
        New Environment with no bindings
    """
    return Environment()
