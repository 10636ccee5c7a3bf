"""Core fortuner data models."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(slots=True, frozen=True)
class Fortune:
    """One delimited record of text tagged with its source file name."""

    source: str
    text: str


@dataclass(slots=True, frozen=True)
class FilterMode:
    """Print every fortune matching ``pattern``, grouped by source."""

    pattern: re.Pattern[str]


@dataclass(slots=True, frozen=True)
class RandomMode:
    """Pick a single fortune, reproducibly when ``seed`` is set."""

    seed: Optional[int] = None


SelectionMode = Union[FilterMode, RandomMode]
