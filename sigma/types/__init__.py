from sigma.types.nil import Nil, NilType
from sigma.types.values import ValueKind, kind_of, format_value
from sigma.types.binding_store import BindingStore
from sigma.types.scope import Scope

__all__ = [
    "Nil",
    "NilType",
    "ValueKind",
    "kind_of",
    "format_value",
    "BindingStore",
    "Scope",
]
