"""Protocols for Joinery.

Defines the contract for fragments that know how to render themselves.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Renderable(Protocol):
    """Protocol for values that produce their own text.

    Any object with a ``render()`` method satisfies it; no subclassing needed.
    The builder only calls ``render`` on instances where it is callable;
    classes and plain ``render`` attributes are formatted like other values.
    ``Builder.add`` calls ``render()`` exactly once per call and treats the
    result as plain text.

    Example:
        >>> class Column:
        ...     def __init__(self, table, name):
        ...         self.table, self.name = table, name
        ...     def render(self) -> str:
        ...         return f"{self.table}.{self.name}"
        >>> isinstance(Column("sales", "price"), Renderable)
        True

    Thread Safety:
        Implementations must be deterministic and side-effect free.

    """

    def render(self) -> str:
        """Return the text for this fragment."""
        ...
