"""
Utils Package

Text helpers and serialization functions.
"""

from .serialization import (
    serialize_question,
    deserialize_question,
    serialize_questions,
    load_questions_json,
)
from .text import trim, split_marker

__all__ = [
    "serialize_question",
    "deserialize_question",
    "serialize_questions",
    "load_questions_json",
    "trim",
    "split_marker",
]
