"""
Module: parsing

Purpose:
    Parsing of .krs question files into QuestionFile decks.

Key Functions:
    - load_question_file(): Read and parse a file
    - parse_text(): Parse file contents
    - parse_lines(): Parse raw lines
    - classify_line(): Classify a single line
    - split_answers(): Split an answer payload

Used By:
    - cli: Loading the quiz deck
"""

from .answers import split_answers
from .assembler import load_question_file, parse_lines, parse_text
from .errors import (
    DeckError,
    DeckLoadError,
    DeckParseError,
    DoubleQuestionError,
    LineParseError,
    QuestionlessAnswerError,
)
from .lines import Comment, Line, classify_line

__all__ = [
    "split_answers",
    "load_question_file",
    "parse_lines",
    "parse_text",
    "classify_line",
    "Comment",
    "Line",
    "DeckError",
    "DeckLoadError",
    "DeckParseError",
    "DoubleQuestionError",
    "LineParseError",
    "QuestionlessAnswerError",
]
