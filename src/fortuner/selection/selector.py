"""Fortune selection: pattern filtering or a single random pick."""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional, Sequence, TextIO

from fortuner.config import DELIMITER, NO_FORTUNES
from fortuner.models import FilterMode, Fortune, RandomMode, SelectionMode
from fortuner.selection.random_source import RandomSource, source_for_seed

LOGGER = logging.getLogger(__name__)


def filter_fortunes(fortunes: Sequence[Fortune], pattern: re.Pattern[str]) -> Iterator[Fortune]:
    """Yield fortunes whose text contains a match for ``pattern``."""
    return (fortune for fortune in fortunes if pattern.search(fortune.text))


def render_matches(
    fortunes: Sequence[Fortune],
    pattern: re.Pattern[str],
    *,
    out: TextIO,
    err: TextIO,
) -> int:
    """Write matching fortunes to ``out`` and source headers to ``err``.

    A ``(source)`` header is written whenever the source changes, so runs of
    matches from the same file share one header. Returns the match count.
    """
    previous: Optional[str] = None
    count = 0
    for fortune in filter_fortunes(fortunes, pattern):
        if fortune.source != previous:
            err.write(f"({fortune.source})\n{DELIMITER}\n")
            previous = fortune.source
        out.write(f"{fortune.text}\n{DELIMITER}\n")
        count += 1
    LOGGER.debug("Pattern %r matched %d fortune(s)", pattern.pattern, count)
    return count


def pick_fortune(fortunes: Sequence[Fortune], source: RandomSource) -> str:
    """Return the text of one fortune chosen by ``source``.

    An empty collection is not an error: the fallback message is returned.
    """
    if not fortunes:
        return NO_FORTUNES
    return fortunes[source.choose_index(len(fortunes))].text


def select(
    fortunes: Sequence[Fortune],
    mode: SelectionMode,
    *,
    out: TextIO,
    err: TextIO,
    random_source: Optional[RandomSource] = None,
) -> None:
    """Dispatch on ``mode`` and write the result."""
    if isinstance(mode, FilterMode):
        render_matches(fortunes, mode.pattern, out=out, err=err)
        return

    if isinstance(mode, RandomMode):
        rng = random_source if random_source is not None else source_for_seed(mode.seed)
        out.write(f"{pick_fortune(fortunes, rng)}\n")
        return

    raise TypeError(f"Unknown selection mode: {mode!r}")
