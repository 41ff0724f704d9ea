"""
Output generation for the question-bank pipeline.
"""

from .json_writer import write_questions_json, ExportError

__all__ = [
    "write_questions_json",
    "ExportError",
]
