"""Error types raised by the fortune pipeline."""

from __future__ import annotations


class FortuneError(Exception):
    """Base error for fortuner."""


class ConfigError(FortuneError):
    """Raised when the run configuration is invalid."""


class InvalidPatternError(ConfigError):
    """Raised when a --pattern value does not compile."""

    def __init__(self, pattern: str) -> None:
        super().__init__(f'Invalid --pattern "{pattern}"')
        self.pattern = pattern


class InvalidSeedError(ConfigError):
    """Raised when a --seed value is not an unsigned 64-bit integer."""

    def __init__(self, value: str) -> None:
        super().__init__(f'"{value}" not a valid integer')
        self.value = value


class _PathError(FortuneError):
    def __init__(self, path: str, cause: OSError) -> None:
        reason = cause.strerror or str(cause)
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.cause = cause


class PathNotFoundError(_PathError):
    """Raised when a configured source path does not exist."""


class FileOpenError(_PathError):
    """Raised when a discovered fortune file cannot be opened or read."""
