"""
Module: parsing.lines

Purpose:
    Classify a single trimmed line of a .krs file by its 3-character tag.

        #: text   -> Comment
        Q: text   -> Question
        A: text   -> Answer (payload split into accepted answers)

    The tag letter is case-insensitive ("q: " and "a: " work too).

Key Functions:
    - classify_line(): Turn one line into a Line

Key Classes:
    - Comment: Comment line payload
    - Line: Union of Comment, Question and Answer

Dependencies:
    - core.models.cards: Question, Answer
    - parsing.answers: Answer splitting

Used By:
    - parsing.assembler: Question file assembly
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from krs_toolkit.core.models.cards import Answer, Question

from .answers import split_answers
from .errors import LineParseError

TAG_LENGTH = 3
COMMENT_TAG = "#: "
QUESTION_TAG = "Q: "
ANSWER_TAG = "A: "


@dataclass(frozen=True, slots=True)
class Comment:
    """Text of a comment line, after the "#: " tag."""

    text: str


Line = Union[Comment, Question, Answer]


def classify_line(line: str) -> Line:
    """
    Classify one line by its tag.

    Args:
        line: Line with surrounding whitespace already stripped

    Returns:
        Comment, Question or Answer built from the text after the tag

    Raises:
        LineParseError: If the line is shorter than the tag or the tag
            is not one of "#: ", "Q: ", "A: "

    Example:
        >>> classify_line("q: Capital of France?")
        Question(prompt='Capital of France?')
        >>> classify_line("A: Paris, paris")
        Answer(accepted=['Paris', 'paris'])
    """
    if len(line) < TAG_LENGTH:
        raise LineParseError(line)

    tag = line[:TAG_LENGTH].upper()
    payload = line[TAG_LENGTH:]

    if tag == COMMENT_TAG:
        return Comment(payload)
    if tag == QUESTION_TAG:
        return Question(prompt=payload)
    if tag == ANSWER_TAG:
        return Answer(split_answers(payload))

    raise LineParseError(line)
