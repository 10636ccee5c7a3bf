"""Run configuration and validation."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Sequence

from fortuner.errors import ConfigError, InvalidPatternError, InvalidSeedError
from fortuner.models import FilterMode, RandomMode, SelectionMode

DELIMITER = "%"
RESERVED_EXTENSION = ".dat"
NO_FORTUNES = "No fortunes found"

MAX_SEED = 2**64 - 1


def parse_seed(value: str) -> int:
    """Parse ``value`` as an unsigned 64-bit integer."""
    digits = value[1:] if value.startswith("+") else value
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise InvalidSeedError(value)
    seed = int(digits)
    if seed > MAX_SEED:
        raise InvalidSeedError(value)
    return seed


def compile_pattern(pattern: str, *, insensitive: bool = False) -> re.Pattern[str]:
    flags = re.IGNORECASE if insensitive else 0
    try:
        return re.compile(pattern, flags)
    except re.error as exc:
        raise InvalidPatternError(pattern) from exc


@dataclass(slots=True)
class FortuneConfig:
    sources: list[str] = field(default_factory=list)
    pattern: Optional[re.Pattern[str]] = None
    seed: Optional[int] = None

    @classmethod
    def from_options(
        cls,
        sources: Sequence[str],
        *,
        pattern: Optional[str] = None,
        insensitive: bool = False,
        seed: Optional[str] = None,
    ) -> "FortuneConfig":
        """Validate raw command line values into a config.

        Nothing here touches the filesystem, so bad patterns and seeds are
        reported before any source is read.
        """
        if not sources:
            raise ConfigError("At least one source is required")
        compiled = compile_pattern(pattern, insensitive=insensitive) if pattern is not None else None
        parsed_seed = parse_seed(seed) if seed is not None else None
        return cls(sources=list(sources), pattern=compiled, seed=parsed_seed)

    @property
    def mode(self) -> SelectionMode:
        if self.pattern is not None:
            return FilterMode(self.pattern)
        return RandomMode(self.seed)
