"""ContextVar-based configuration for ppr.

Provides thread-local compile configuration using Python's ContextVars
(PEP 567). Config is set once per Converter call and read by the lexer in
that context. Export settings live on ExportConfig, which is passed to the
exporter explicitly.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Direct lexer usage (advanced)
    from ppr.config import CompileConfig, compile_config_context

    with compile_config_context(CompileConfig(separator="\\n")):
        tokens = lex(source)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

# Heading run sizes in half-points, indexed by min(level, 5)
HEADING_SIZES: tuple[int, ...] = (36, 24, 20, 18, 16, 14)

DEFAULT_SEPARATOR = "\\"
LEGACY_SEPARATOR = "\n"


@dataclass(frozen=True, slots=True)
class CompileConfig:
    """Immutable compile configuration.

    Attributes:
        separator: Paragraph separator. A backslash by default; the legacy
            convention uses line breaks (LEGACY_SEPARATOR).
        max_workers: Worker threads for per-paragraph scanning
            (None lets ThreadPoolExecutor decide, 1 scans inline)
        parallel_threshold: Paragraph count below which scanning runs inline
        keep_empty_runs: Keep the empty runs flushed at adjacent toggles
            and paragraph edges instead of dropping them

    """

    separator: str = DEFAULT_SEPARATOR
    max_workers: int | None = None
    parallel_threshold: int = 64
    keep_empty_runs: bool = False

    def __post_init__(self) -> None:
        if not self.separator:
            raise ValueError("separator must be a non-empty string")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError("max_workers must be at least 1")

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "CompileConfig":
        """Create CompileConfig from dictionary.

        Only includes keys that are valid CompileConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = CompileConfig.from_dict({"keep_empty_runs": True, "x": 1})
            >>> config.keep_empty_runs
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


@dataclass(frozen=True, slots=True)
class ExportConfig:
    """Immutable export configuration.

    Attributes:
        extension: Extension given to derived output paths
        heading_sizes: Heading sizes in half-points, smallest last
        underline_color: Hex RGB colour for underlined runs

    """

    extension: str = ".docx"
    heading_sizes: tuple[int, ...] = HEADING_SIZES
    underline_color: str = "000000"

    def __post_init__(self) -> None:
        if not self.heading_sizes:
            raise ValueError("heading_sizes must not be empty")

    def heading_size(self, level: int) -> int:
        """Size for a heading level; levels past the table clamp to its end."""
        return self.heading_sizes[min(level, len(self.heading_sizes) - 1)]

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ExportConfig":
        """Create ExportConfig from dictionary, ignoring unknown keys."""
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "heading_sizes" in filtered:
            filtered["heading_sizes"] = tuple(filtered["heading_sizes"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: CompileConfig = CompileConfig()

# Thread-local configuration via ContextVar
_compile_config: ContextVar[CompileConfig] = ContextVar(
    "compile_config",
    default=_DEFAULT_CONFIG,
)


def get_compile_config() -> CompileConfig:
    """Get current compile configuration (thread-local).

    Returns:
        The active CompileConfig for this thread/context.

    """
    return _compile_config.get()


def set_compile_config(config: CompileConfig) -> None:
    """Set compile configuration for current context.

    Args:
        config: CompileConfig instance to use for this context.

    """
    _compile_config.set(config)


def reset_compile_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _compile_config.set(_DEFAULT_CONFIG)


@contextmanager
def compile_config_context(config: CompileConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Properly restores the previous config even if an exception is raised.

    Example:
        >>> with compile_config_context(CompileConfig(separator="\\n")):
        ...     tokens = lex("P one\\nP two")
        >>> # Automatically reset to previous config

    """
    previous = _compile_config.get()
    _compile_config.set(config)
    try:
        yield
    finally:
        _compile_config.set(previous)


__all__ = [
    "DEFAULT_SEPARATOR",
    "HEADING_SIZES",
    "LEGACY_SEPARATOR",
    "CompileConfig",
    "ExportConfig",
    "compile_config_context",
    "get_compile_config",
    "reset_compile_config",
    "set_compile_config",
]
