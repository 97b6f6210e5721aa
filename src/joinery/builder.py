"""Fluent joiner for parameterized text.

A Builder joins fragments with a fixed delimiter and collects the
parameters passed alongside them, in order. It is a poor man's SQL query
builder for DB-API style ``cursor.execute(query, params)`` calls:

    >>> filters = join(" AND ").add("sales.price > ?", 5)
    >>> join(" ").add("SELECT * FROM sales WHERE").add(filters).add(
    ...     "GROUP BY product HAVING COUNT(*) > ?", 1
    ... ).must_end()
    ('SELECT * FROM sales WHERE sales.price > ? GROUP BY product HAVING COUNT(*) > ?', [5, 1])

Failures never interrupt a chain. The first one is latched and every
later addition is ignored; ``end()`` returns the failure as a value and
``must_end()`` raises BuilderAbortError.

Thread Safety:
A Builder is not safe for concurrent mutation. Use one builder per query
or serialize access externally.

"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from joinery.buffer import TextBuffer
from joinery.config import JoinConfig, get_join_config
from joinery.errors import (
    AccumulationError,
    BuilderAbortError,
    NestedBuilderError,
    RenderError,
)
from joinery.protocols import Renderable
from joinery.utils.logger import get_logger

logger = get_logger(__name__)


class Builder:
    """Delimited text accumulator with parallel parameters.

    Fragments passed to ``add`` may be:
    - ``str``: appended as is
    - ``Builder``: finalized, its text appended and its parameters spliced
      in before the call's own parameters
    - ``Renderable`` instance with a callable ``render``: called once,
      result appended (classes and non-callable ``render`` attributes go
      to the fallback)
    - anything else: formatted with the configured fallback (``str``)

    The delimiter goes before a fragment only when text has already been
    accumulated. A leading empty fragment therefore leaves no trace, while
    an empty fragment after some text still writes the delimiter.

    """

    __slots__ = ("_buffer", "_config", "_delimiter", "_failure", "_parameters")

    def __init__(self, delimiter: str = "", *, config: JoinConfig | None = None) -> None:
        """Initialize an empty builder.

        Args:
            delimiter: Text inserted between successive fragments
            config: Configuration to use (default: the context's current one)
        """
        self._delimiter = delimiter
        self._config = config if config is not None else get_join_config()
        self._buffer = TextBuffer(self._config.max_length)
        self._parameters: list[Any] = []
        self._failure: BaseException | None = None

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def text(self) -> str:
        return self._buffer.build()

    @property
    def parameters(self) -> list[Any]:
        """Copy of the accumulated parameters."""
        return list(self._parameters)

    @property
    def failure(self) -> BaseException | None:
        return self._failure

    @property
    def failed(self) -> bool:
        return self._failure is not None

    def add(self, fragment: Any, *parameters: Any) -> Builder:
        """Append a fragment and its parameters.

        Never raises; a failure is latched and reported by ``end()``.

        Args:
            fragment: str, Builder, Renderable or any other value
            *parameters: Values to append to the parameter list

        Returns:
            self for method chaining
        """
        if self._failure is not None:
            logger.debug("Skipping %s fragment on failed builder", type(fragment).__name__)
            return self

        match fragment:
            case str():
                self._append(fragment, parameters)
            case Builder():
                text, nested, failure = fragment.end()
                if failure is not None:
                    self._latch(NestedBuilderError(failure), cause=failure)
                else:
                    self._append(text, (*nested, *parameters))
            case _:
                text = self._render(fragment)
                if text is not None:
                    self._append(text, parameters)
        return self

    def extend(self, fragments: Iterable[Any]) -> Builder:
        """Add several fragments, without parameters, in order.

        Returns:
            self for method chaining
        """
        for fragment in fragments:
            self.add(fragment)
        return self

    def write(self, s: str) -> int:
        """Write raw text, applying the delimiter rule.

        Empty strings are ignored and never consume a delimiter. Every other
        call is one fragment, so with ``print(..., file=builder)`` a non-empty
        ``sep`` or ``end`` becomes a fragment of its own; pass ``sep=""`` and
        ``end=""`` to get one fragment per argument.

        Returns:
            Number of characters written (0 if nothing was written)
        """
        if self._failure is not None:
            return 0
        if not isinstance(s, str):
            self._latch(
                RenderError(type(s).__name__, "write() argument must be str")
            )
            return 0
        if not s:
            return 0
        return self._append(s, ())

    def end(self) -> tuple[str, list[Any], BaseException | None]:
        """Return the text, a copy of the parameters and the latched failure.

        Does not change the builder; further additions keep appending.
        """
        return self._buffer.build(), list(self._parameters), self._failure

    def must_end(self) -> tuple[str, list[Any]]:
        """Like ``end()`` but raise if a failure was latched.

        Raises:
            BuilderAbortError: With the latched failure as ``__cause__``
        """
        if self._failure is not None:
            raise BuilderAbortError(self._failure) from self._failure
        return self._buffer.build(), list(self._parameters)

    def _render(self, fragment: Any) -> str | None:
        fragment_type = type(fragment).__name__
        try:
            match fragment:
                case Renderable() if not isinstance(fragment, type) and callable(
                    fragment.render
                ):
                    text = fragment.render()
                case _:
                    text = self._config.formatter(fragment)
        except Exception as exc:
            self._latch(RenderError(fragment_type, str(exc)), cause=exc)
            return None

        if not isinstance(text, str):
            self._latch(
                RenderError(fragment_type, f"expected str, got {type(text).__name__}")
            )
            return None
        return text

    def _append(self, text: str, parameters: Iterable[Any]) -> int:
        if self._buffer:
            text = self._delimiter + text
        try:
            self._buffer.append(text)
        except AccumulationError as exc:
            self._latch(exc)
            return 0
        self._parameters.extend(parameters)
        return len(text)

    def _latch(self, failure: BaseException, cause: BaseException | None = None) -> None:
        if cause is not None:
            failure.__cause__ = cause
        # First failure wins
        if self._failure is None:
            logger.debug("Builder failure latched: %s", failure)
            self._failure = failure

    def __repr__(self) -> str:
        return (
            f"Builder(delimiter={self._delimiter!r}, length={len(self._buffer)}, "
            f"parameters={len(self._parameters)}, failed={self.failed})"
        )


def join(delimiter: str = "", *, config: JoinConfig | None = None) -> Builder:
    """Return a new Builder joining fragments with ``delimiter``.

    Example:
        >>> join(", ").add("a").add("b", 1).end()
        ('a, b', [1], None)

    """
    return Builder(delimiter, config=config)


__all__ = ["Builder", "join"]
