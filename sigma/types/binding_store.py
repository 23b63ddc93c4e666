"""Name -> value bindings owned by a single lexical scope."""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from sigma import RuntimeValue
from sigma.errors import SigmaInternalError


class BindingStore:
    """Associative store with last-write-wins insertion and exact-match lookup."""

    __slots__ = ("_entries",)

    def __init__(self):
        self._entries: dict[str, RuntimeValue] = {}

    def insert(self, name: str, value: RuntimeValue) -> None:
        """Bind `name` to `value`, overwriting an existing binding of the same name."""
        if not isinstance(name, str):
            raise SigmaInternalError(f"could not insert key {name!r} into binding store")
        self._entries[name] = value

    def lookup(self, name: str) -> Optional[RuntimeValue]:
        """Return the value bound to `name`, or None when it is not bound here."""
        return self._entries.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            first = True
            for k, v in self._entries.items():
                if not first:
                    buffer.write(", ")
                buffer.write(f"{k}: {v!r}")
                first = False
            buffer.write("}")
            return buffer.getvalue()
