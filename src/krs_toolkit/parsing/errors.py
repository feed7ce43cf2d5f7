"""
Module: parsing.errors

Purpose:
    Exception hierarchy for loading and parsing .krs question files.
    Every parse error is fatal: no partial deck is ever returned.

Key Classes:
    - DeckError: Base class for all deck failures
    - DeckParseError: Base class for malformed file contents
    - LineParseError: Line matches none of the #/Q/A tags
    - QuestionlessAnswerError: Answer line with no pending question
    - DoubleQuestionError: Question line while a question is pending
    - DeckLoadError: File could not be opened, read or decoded

Used By:
    - parsing.lines: Line classification
    - parsing.assembler: Question file assembly
    - cli: Top-level error reporting
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class DeckError(Exception):
    """Base class for question file failures."""
    pass


class DeckParseError(DeckError):
    """Question file contents are malformed."""
    pass


class LineParseError(DeckParseError):
    """
    A line is not a comment, question or answer.

    Attributes:
        line: The offending line, as given to the classifier
    """

    def __init__(self, line: str):
        self.line = line
        super().__init__(
            "could not parse the following as a comment (#: text), "
            f"question (Q: text), or answer (A: text): '{line}'"
        )


class QuestionlessAnswerError(DeckParseError):
    """
    An answer line appeared while no question was pending.

    Attributes:
        line_num: 1-based line number
        line: The raw line text
    """

    def __init__(self, line_num: int, line: str):
        self.line_num = line_num
        self.line = line
        super().__init__(f"answer without preceding question on line {line_num}: '{line}'")


class DoubleQuestionError(DeckParseError):
    """
    A question line appeared while another question was still unanswered.

    Attributes:
        line_num: 1-based line number
        line: The raw line text
    """

    def __init__(self, line_num: int, line: str):
        self.line_num = line_num
        self.line = line
        super().__init__(f"question right after a question on line {line_num}: '{line}'")


class DeckLoadError(DeckError):
    """Question file could not be opened, read or decoded."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        super().__init__(message)
