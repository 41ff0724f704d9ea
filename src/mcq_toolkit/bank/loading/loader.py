"""
Module: bank.loading.loader

Purpose:
    Read the plain-text question bank into a list of lines.

Key Functions:
    - read_lines(): Read a question file

Key Classes:
    - LoaderError: The source could not be read

Used By:
    - bank.controller: Main build controller
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)


class LoaderError(Exception):
    """Error reading the question source."""
    pass


def read_lines(path: Path) -> List[str]:
    """
    Read a question bank file.

    Lines keep their terminators; the parser trims them. A leading UTF-8
    byte-order mark is dropped. Undecodable bytes are replaced rather than
    aborting the run.

    Args:
        path: Path to the plain-text bank

    Returns:
        Lines in file order

    Raises:
        LoaderError: If the file is missing or unreadable

    Example:
        >>> lines = read_lines(Path("questions.txt"))
        >>> lines[0]
        'QUESTION: 2+2=?\\n'
    """
    if not path.exists():
        raise LoaderError(f"Question file not found: {path}")
    if not path.is_file():
        raise LoaderError(f"Question source is not a file: {path}")

    try:
        with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
            lines = f.readlines()
    except OSError as e:
        raise LoaderError(f"Cannot read {path}: {e}") from e

    logger.debug(f"Read {len(lines)} lines from {path}")
    return lines
