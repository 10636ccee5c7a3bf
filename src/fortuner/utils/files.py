"""Utility helpers for locating fortune files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from fortuner.config import RESERVED_EXTENSION
from fortuner.errors import PathNotFoundError

LOGGER = logging.getLogger(__name__)


def iter_source_paths(root: Path) -> Iterator[Path]:
    """Yield regular files at or below ``root``, skipping reserved index files."""
    candidates: Iterable[Path] = root.rglob("*") if root.is_dir() else (root,)
    for item in candidates:
        if item.is_file() and item.suffix != RESERVED_EXTENSION:
            yield item


def find_files(paths: Sequence[str]) -> list[Path]:
    """Expand source paths into a sorted, de-duplicated list of fortune files.

    Every path must exist; the first missing one aborts the whole lookup.
    """
    files: list[Path] = []
    for raw in paths:
        path = Path(raw)
        try:
            os.stat(raw)
        except OSError as exc:
            raise PathNotFoundError(raw, exc) from exc
        found = list(iter_source_paths(path))
        LOGGER.debug("Found %d file(s) under %s", len(found), raw)
        files.extend(found)

    return sorted(set(files))
