"""
Text helpers shared by the parser.
"""

from __future__ import annotations


def trim(text: str) -> str:
    """
    Return text without leading/trailing whitespace.

    Pure function: the input is never modified. Line terminators
    ("\\n", "\\r\\n") count as whitespace.

    Example:
        >>> trim("  B: 4 \\r\\n")
        'B: 4'
    """
    return text.strip()


def split_marker(line: str, marker: str) -> str | None:
    """
    Return the text after marker if line starts with it, else None.

    The remainder is returned untrimmed; callers trim as needed.
    """
    if line.startswith(marker):
        return line[len(marker):]
    return None
