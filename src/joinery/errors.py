"""Exception classes for Joinery.

Builders never raise these from ``add``; failures are latched and surfaced
by ``Builder.end()`` (as a value) or ``Builder.must_end()`` (raised).
"""

from __future__ import annotations


class JoineryError(Exception):
    """Base exception for all Joinery errors.
    
    Subclass this for specific error categories.
    """

    pass


class AccumulationError(JoineryError):
    """The text buffer refused a write.
    
    Raised by ``TextBuffer.append`` when a write would grow the buffer past
    its configured limit. The buffer is left unchanged.
    """

    def __init__(self, limit: int, attempted: int) -> None:
        """Initialize accumulation error.
        
        Args:
            limit: Maximum number of characters the buffer accepts
            attempted: Buffer length the refused write would have produced
        """
        self.limit = limit
        self.attempted = attempted
        super().__init__(
            f"buffer limit exceeded: {attempted} characters (limit {limit})"
        )


class RenderError(JoineryError):
    """A fragment could not be turned into text.
    
    Raised when a renderable's ``render()`` or the fallback formatter fails
    or returns something other than a string.
    """

    def __init__(self, fragment_type: str, message: str) -> None:
        self.fragment_type = fragment_type
        super().__init__(f"cannot render {fragment_type}: {message}")


class NestedBuilderError(JoineryError):
    """A nested builder carried a latched failure into its parent."""

    def __init__(self, failure: BaseException) -> None:
        """Initialize nested builder error.
        
        Args:
            failure: The failure latched by the nested builder
        """
        self.failure = failure
        super().__init__(f"nested builder failed: {failure}")


class BuilderAbortError(JoineryError):
    """Raised by ``Builder.must_end()`` when a failure is latched.
    
    The latched failure is chained as ``__cause__``.
    """

    def __init__(self, failure: BaseException) -> None:
        self.failure = failure
        super().__init__(f"joinery: {failure}")
