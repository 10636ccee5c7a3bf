"""End-to-end fortune run: resolve sources, parse them, select."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from fortuner.config import FortuneConfig
from fortuner.ingestion.parser import read_fortunes
from fortuner.selection.random_source import RandomSource
from fortuner.selection.selector import select
from fortuner.utils.files import find_files

LOGGER = logging.getLogger(__name__)


def run(
    config: FortuneConfig,
    *,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
    random_source: Optional[RandomSource] = None,
) -> None:
    files = find_files(config.sources)
    fortunes = read_fortunes(files)
    LOGGER.debug("Loaded %d fortune(s) from %d file(s)", len(fortunes), len(files))
    select(
        fortunes,
        config.mode,
        out=out if out is not None else sys.stdout,
        err=err if err is not None else sys.stderr,
        random_source=random_source,
    )
