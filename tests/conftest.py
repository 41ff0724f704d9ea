import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import mcq_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from mcq_toolkit.core.models import MCQ


SAMPLE_BANK = """\
# Arithmetic
QUESTION: 2+2=?
A: 3
B: 4
C: 5
D: 6
ANSWER: B

QUESTION: Capital of France?
C: Paris
A: London
D: Madrid
B: Berlin
ANSWER: c

QUESTION: Largest planet?
a: Jupiter
b: Saturn
c: Earth
d: Mars
ANSWER: A
"""


# Common test fixtures
@pytest.fixture
def sample_text() -> str:
    """Three well-formed question blocks."""
    return SAMPLE_BANK


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Write the sample bank to a file."""
    path = tmp_path / "questions.txt"
    path.write_text(SAMPLE_BANK, encoding="utf-8")
    return path


@pytest.fixture
def sample_question() -> MCQ:
    """The 2+2 question with B (4) correct."""
    return MCQ("2+2=?", ("3", "4", "5", "6"), correct_index=1)


@pytest.fixture
def sample_questions() -> list[MCQ]:
    """Ten distinct questions with varied answer slots."""
    return [
        MCQ(f"Q{i}", (f"q{i}a", f"q{i}b", f"q{i}c", f"q{i}d"), correct_index=i % 4)
        for i in range(10)
    ]
