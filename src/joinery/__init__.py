"""
Joinery — fluent text joiner with parameter collection

Joins heterogeneous fragments with a delimiter while collecting the
parameters that go with them, for building parameterized queries and
similar delimited text. Zero runtime dependencies.

Quick Start:
    >>> from joinery import join
    >>> filters = join(" AND ").add("price > ?", 5).add("price < ?", 500)
    >>> query, params = join(" ").add("SELECT * FROM sales WHERE").add(filters).must_end()
    >>> query
    'SELECT * FROM sales WHERE price > ? AND price < ?'
    >>> params
    [5, 500]

Errors:
    Builders latch the first failure instead of raising. ``end()`` returns
    ``(text, params, failure)``; ``must_end()`` raises BuilderAbortError.
"""

from joinery.builder import Builder, join
from joinery.config import (
    JoinConfig,
    get_join_config,
    join_config_context,
    reset_join_config,
    set_join_config,
)
from joinery.errors import (
    AccumulationError,
    BuilderAbortError,
    JoineryError,
    NestedBuilderError,
    RenderError,
)
from joinery.protocols import Renderable

__version__ = "0.1.0"

__all__ = [
    "AccumulationError",
    "Builder",
    "BuilderAbortError",
    "JoinConfig",
    "JoineryError",
    "NestedBuilderError",
    "RenderError",
    "Renderable",
    "__version__",
    "get_join_config",
    "join",
    "join_config_context",
    "reset_join_config",
    "set_join_config",
]
