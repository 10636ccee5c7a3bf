"""Fortune file parsing.

A fortune file is plain text where each record is closed by a line holding
only ``%``. Text after the last delimiter is not a record and is dropped.
"""

from __future__ import annotations

import enum
import logging
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from fortuner.config import DELIMITER
from fortuner.errors import FileOpenError
from fortuner.models import Fortune

LOGGER = logging.getLogger(__name__)


class ParseState(enum.Enum):
    EMPTY = "empty"
    ACCUMULATING = "accumulating"


def iter_text_lines(path: Path) -> Iterator[str]:
    """Yield decoded lines from ``path`` without line terminators.

    Lines that are not valid UTF-8 are skipped.
    """
    try:
        handle = path.open("rb")
    except OSError as exc:
        raise FileOpenError(str(path), exc) from exc

    with handle:
        try:
            for number, raw in enumerate(handle, start=1):
                raw = raw.rstrip(b"\n")
                if raw.endswith(b"\r"):
                    raw = raw[:-1]
                try:
                    yield raw.decode("utf-8")
                except UnicodeDecodeError:
                    LOGGER.debug("Skipping undecodable line %d in %s", number, path)
        except OSError as exc:
            raise FileOpenError(str(path), exc) from exc


def parse_lines(lines: Iterable[str], source: str) -> Iterator[Fortune]:
    """Turn delimited lines into fortunes tagged with ``source``."""
    state = ParseState.EMPTY
    buffer: list[str] = []

    for line in lines:
        if line == DELIMITER:
            if state is ParseState.ACCUMULATING:
                text = "\n".join(buffer)
                if text:
                    yield Fortune(source=source, text=text)
                buffer = []
                state = ParseState.EMPTY
        else:
            buffer.append(line)
            state = ParseState.ACCUMULATING

    if state is ParseState.ACCUMULATING:
        LOGGER.debug("Discarding %d unterminated line(s) at end of %s", len(buffer), source)


def iter_fortunes(path: Path) -> Iterator[Fortune]:
    """Yield the fortunes stored in a single file."""
    yield from parse_lines(iter_text_lines(path), path.name)


def read_fortunes(paths: Sequence[Path]) -> list[Fortune]:
    """Read every fortune from ``paths`` in order."""
    fortunes: list[Fortune] = []
    for path in paths:
        found = list(iter_fortunes(path))
        LOGGER.debug("Read %d fortune(s) from %s", len(found), path)
        fortunes.extend(found)
    return fortunes
