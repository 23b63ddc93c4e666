"""Lexical scopes for Sigma.

A Scope owns a BindingStore and points at its enclosing scope through
`outer`. The outer link is only ever read: bindings are always added to the
innermost scope, and lookups walk outward until a binding is found.
"""

from __future__ import annotations

from typing import Optional

from sigma import RuntimeValue
from sigma.errors import SigmaUnboundSymbol
from sigma.types.binding_store import BindingStore


class Scope:
    """One link in the scope chain."""

    __slots__ = ("bindings", "outer")

    def __init__(self, outer: Optional[Scope] = None):
        self.bindings: BindingStore = BindingStore()
        self.outer: Scope | None = outer

    def child(self) -> Scope:
        """Create a new scope nested inside this one."""
        return Scope(outer=self)

    def define(self, name: str, value: RuntimeValue) -> None:
        """Bind `name` in this scope, shadowing any outer binding."""
        self.bindings.insert(name, value)

    def find(self, name: str) -> Optional[Scope]:
        """Find the nearest scope in the chain that binds `name`."""
        scope: Optional[Scope] = self
        while scope is not None:
            if name in scope.bindings:
                return scope
            scope = scope.outer
        return None

    def lookup(self, name: str) -> Optional[RuntimeValue]:
        """Value of `name` in the innermost scope binding it, or None."""
        scope = self.find(name)
        if scope is None:
            return None
        return scope.bindings.lookup(name)

    def resolve(self, name: str) -> RuntimeValue:
        """Like lookup, but raises SigmaUnboundSymbol if `name` is not bound."""
        scope = self.find(name)
        if scope is None:
            raise SigmaUnboundSymbol(f"unbound reference: {name}")
        return scope.bindings.lookup(name)

    def depth(self) -> int:
        n = 0
        scope = self.outer
        while scope is not None:
            n += 1
            scope = scope.outer
        return n

    def __str__(self) -> str:
        """Single-frame view with an indicator for parent."""
        text = repr(self.bindings)
        if self.outer is not None:
            text += " -> ..."
        return text

    def __repr__(self) -> str:
        chain = []
        scope: Optional[Scope] = self
        while scope is not None:
            chain.append(repr(scope.bindings))
            scope = scope.outer
        return f"<Scope chain: {' -> '.join(chain)}>"
