"""ContextVar-based parse configuration for cmarkparser.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The lexer reads the active config once, when it is created.

Usage:
    from cmarkparser.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(max_indent=0)):
        doc = parse(b" # not a heading")

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Note: source_file is intentionally excluded; it is per-call state,
    not configuration.

    Attributes:
        max_indent: Leading SPACE characters tolerated before a block opener
        text_transformer: Optional callback applied to each paragraph line

    """

    max_indent: int = 3
    text_transformer: Callable[[bytes], bytes] | None = None

    def __post_init__(self) -> None:
        if self.max_indent < 0:
            msg = f"max_indent must be >= 0, got {self.max_indent}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> ParseConfig:
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> ParseConfig.from_dict({"max_indent": 1, "unknown_key": "ignored"})
            ParseConfig(max_indent=1, text_transformer=None)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(max_indent=0)):
        ...     get_parse_config().max_indent
        0

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
