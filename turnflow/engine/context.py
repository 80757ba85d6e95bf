"""
Action Context - Runtime scratch data consulted by constraints.

The engine never inspects the context itself; it hands it to the
constraint evaluator, which only ever calls lookup(field). Any object
with that method can stand in for ActionContext.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ContextLookup(Protocol):
    """Capability: resolve a constraint field to a value (None if absent)."""

    def lookup(self, field: str) -> Any: ...


@dataclass
class ActionContext:
    """
    Mutable key/value context.

    Fields may be dotted paths into nested mappings or attributes:
        context.set("player", {"figures": 4})
        context.lookup("player.figures")  # 4
    """
    values: dict[str, Any] = field(default_factory=dict)

    def lookup(self, field: str) -> Any:
        """Resolve a field, walking dotted paths. Returns None if absent."""
        if field in self.values:
            return self.values[field]

        parts = field.split(".")
        obj: Any = self.values
        for part in parts:
            if obj is None:
                return None
            if isinstance(obj, dict):
                obj = obj.get(part)
            elif hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return None
        return obj

    def set(self, field: str, value: Any):
        """Set a top-level value."""
        self.values[field] = value

    def update(self, **values: Any):
        """Set several top-level values."""
        self.values.update(values)

    def clear(self):
        self.values.clear()
