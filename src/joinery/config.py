"""ContextVar-based join configuration for Joinery.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Builder captures the active config when it is created and keeps it for
its whole lifetime, so changing the config later never affects builders
that already exist.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from joinery import join
    from joinery.config import JoinConfig, join_config_context

    with join_config_context(JoinConfig(max_length=4096)):
        query, params = join(" ").add("SELECT 1").must_end()

"""

from collections.abc import Callable
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(frozen=True, slots=True)
class JoinConfig:
    """Immutable builder configuration.

    Attributes:
        formatter: Fallback used for fragments that are neither strings,
            builders nor renderables. Defaults to the built-in ``str``.
        max_length: Maximum accumulated length per builder. A write past it
            is refused and latched as an AccumulationError. None = unbounded.

    """

    formatter: Callable[[Any], str] = str
    max_length: int | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "JoinConfig":
        """Create JoinConfig from dictionary.

        Only includes keys that are valid JoinConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = JoinConfig.from_dict({"max_length": 80, "other": 1})
            >>> config.max_length
            80

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: JoinConfig = JoinConfig()

_join_config: ContextVar[JoinConfig] = ContextVar(
    "join_config",
    default=_DEFAULT_CONFIG,
)


def get_join_config() -> JoinConfig:
    """Get current join configuration (thread-local)."""
    return _join_config.get()


def set_join_config(config: JoinConfig) -> None:
    """Set join configuration for current context.

    Only affects builders created afterwards in this thread/context.

    """
    _join_config.set(config)


def reset_join_config() -> None:
    """Reset to the default configuration."""
    _join_config.set(_DEFAULT_CONFIG)


@contextmanager
def join_config_context(config: JoinConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Example:
        >>> from joinery import join
        >>> with join_config_context(JoinConfig(max_length=10)):
        ...     b = join(" ").add("a" * 20)
        >>> b.failed
        True

    Properly restores the previous config even if an exception is raised.

    """
    previous = _join_config.get()
    _join_config.set(config)
    try:
        yield
    finally:
        _join_config.set(previous)


__all__ = [
    "JoinConfig",
    "get_join_config",
    "set_join_config",
    "reset_join_config",
    "join_config_context",
]
