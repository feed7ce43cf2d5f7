import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import krs_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


SAMPLE_DECK = """\
#: Capitals quiz
#: Answer with the city name
Q: Capital of France?
A: Paris
q: Capital of Italy?
a: Rome, Roma
Q: Pick the first two numbers
A: 1\\, 2, one\\, two
"""


# Common test fixtures
@pytest.fixture
def sample_deck_text():
    """Return the text of a small valid question file."""
    return SAMPLE_DECK


@pytest.fixture
def sample_deck_path(tmp_path: Path):
    """Write the sample question file to disk."""
    path = tmp_path / "questions.krs"
    path.write_text(SAMPLE_DECK, encoding="utf-8")
    return path


@pytest.fixture
def scripted_input():
    """Build an input() replacement that replays replies, then raises EOFError."""
    def _make(replies):
        remaining = list(replies)
        prompts = []

        def _input(prompt=""):
            prompts.append(prompt)
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        _input.prompts = prompts
        return _input
    return _make
