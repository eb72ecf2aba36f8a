"""ContextVar-based lexer configuration for jbpl.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer reads the active config once, when it is created.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from jbpl.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(coalesce=False)):
        tokens = lex(source)  # one token per rule emission

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Attributes:
        coalesce: Merge adjacent tokens of the same kind into one token.
            This is the usual highlighter output shape: a comment scanned
            piecewise by the comment state still comes out as one token.
            Error tokens are never merged.
        trace: Log every rule firing, stack transition and fallback at
            DEBUG level on the ``jbpl.lexer.core`` logger.

    """

    coalesce: bool = True
    trace: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> LexConfig.from_dict({"coalesce": False, "colors": "dark"}).coalesce
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexer configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context.

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to the default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: LexConfig to use within the context.

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
