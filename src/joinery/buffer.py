"""TextBuffer for O(n) string accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. Tracks the total character count so
callers can test emptiness without joining.

An optional limit turns the buffer into one that can refuse a write;
the refused write raises AccumulationError and leaves the buffer as it was.

Thread Safety:
TextBuffer instances are owned by a single Builder.
No shared mutable state.

"""

from __future__ import annotations

from joinery.errors import AccumulationError


class TextBuffer:
    """Append-only string accumulator.
    
    Usage:
            >>> buf = TextBuffer()
            >>> _ = buf.append("SELECT").append(" 1")
            >>> buf.build()
            'SELECT 1'
            >>> len(buf)
            8
    
    """

    __slots__ = ("_length", "_max_length", "_parts")

    def __init__(self, max_length: int | None = None) -> None:
        """Initialize empty TextBuffer.

        Args:
            max_length: Maximum number of characters accepted (None = unbounded)
        """
        self._parts: list[str] = []
        self._length = 0
        self._max_length = max_length

    @property
    def max_length(self) -> int | None:
        return self._max_length

    def append(self, s: str) -> TextBuffer:
        """Append a string to the buffer.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining

        Raises:
            AccumulationError: If the write would exceed max_length
        """
        if not s:
            return self
        attempted = self._length + len(s)
        if self._max_length is not None and attempted > self._max_length:
            raise AccumulationError(self._max_length, attempted)
        self._parts.append(s)
        self._length = attempted
        return self

    def build(self) -> str:
        """Join all parts into the accumulated string."""
        if len(self._parts) > 1:
            # Collapse so repeated builds stay O(n)
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def __len__(self) -> int:
        """Return total number of characters (not parts)."""
        return self._length

    def __bool__(self) -> bool:
        """Return True if any text has been appended."""
        return self._length > 0
