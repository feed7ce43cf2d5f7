"""
Module: parsing.assembler

Purpose:
    Assemble a QuestionFile from the lines of a .krs file, enforcing that
    every answer follows exactly one pending question.

Key Functions:
    - parse_lines(): Parse an iterable of raw lines
    - parse_text(): Parse a whole file's text
    - load_question_file(): Open, read and parse a file

Rules:
    1. Comment lines accumulate into the header, whatever the pairing state
    2. A question becomes pending; a second one before its answer is an error
    3. An answer closes the pending question; without one it is an error
    4. The first error aborts parsing (no partial result)
    5. A question still pending at end of input is dropped

Dependencies:
    - parsing.lines: Line classification
    - core.models: QuestionFile, Entry

Used By:
    - core.models.deck.QuestionFile.parse / from_path
    - cli: Loading the quiz deck
"""

from __future__ import annotations

import codecs
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from krs_toolkit.core.models.cards import Answer, Entry, Question
from krs_toolkit.core.models.deck import QuestionFile

from .errors import DeckLoadError, DoubleQuestionError, QuestionlessAnswerError
from .lines import Comment, classify_line

logger = logging.getLogger(__name__)


def _strip_terminator(line: str) -> str:
    """Remove a trailing "\\n" or "\\r\\n", as file iteration leaves them on."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def parse_lines(lines: Iterable[str]) -> QuestionFile:
    """
    Parse raw lines into a QuestionFile.

    Each line is stripped of its terminator and surrounding whitespace
    before classification. Line numbers in errors are 1-based and count
    every line.

    Args:
        lines: Raw lines, with or without line terminators

    Returns:
        QuestionFile with comments and entries in file order

    Raises:
        LineParseError: Line has no recognised tag (carries the stripped line)
        DoubleQuestionError: Question while another is pending
        QuestionlessAnswerError: Answer with no pending question

    Example:
        >>> deck = parse_lines(["Q: 2+2", "A: 4"])
        >>> deck.entries[0].answer.accepted
        ['4']
    """
    pending: Optional[Question] = None
    pending_line_num = 0
    comments: List[str] = []
    entries: List[Entry] = []

    for line_num, raw in enumerate(lines, start=1):
        raw = _strip_terminator(raw)
        parsed = classify_line(raw.strip())

        if isinstance(parsed, Comment):
            comments.append(parsed.text)
        elif isinstance(parsed, Question):
            if pending is not None:
                raise DoubleQuestionError(line_num, raw)
            pending = parsed
            pending_line_num = line_num
        elif isinstance(parsed, Answer):
            if pending is None:
                raise QuestionlessAnswerError(line_num, raw)
            entries.append(Entry(pending, parsed))
            pending = None

    if pending is not None:
        logger.warning(
            f"Dropping question on line {pending_line_num} with no answer: {pending.prompt!r}"
        )

    logger.debug(f"Parsed {len(entries)} entries and {len(comments)} comment lines")
    return QuestionFile(comments=comments, entries=entries)


def parse_text(text: str) -> QuestionFile:
    """
    Parse the full text of a question file.

    Only "\\n" ends a line, matching how files are read by
    ``load_question_file``.
    """
    *terminated, last = text.split("\n")
    lines = [line + "\n" for line in terminated]
    # a final terminator does not start another line
    if last:
        lines.append(last)
    return parse_lines(lines)


def load_question_file(path: Path, *, encoding: str = "utf-8") -> QuestionFile:
    """
    Read and parse a question file.

    The file is closed once parsing finishes, whether it succeeds or not.

    Args:
        path: Path to the .krs file
        encoding: Text encoding of the file

    Returns:
        Parsed QuestionFile

    Raises:
        DeckLoadError: File missing, unreadable or not valid text
        DeckParseError: Contents are malformed (see parse_lines)
    """
    path = Path(path)
    logger.debug(f"Loading question file {path}")

    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise DeckLoadError(f"Unknown encoding for {path}: {encoding}", path) from e

    try:
        with open(path, "r", encoding=encoding, newline="\n") as f:
            return parse_lines(f)
    except FileNotFoundError as e:
        raise DeckLoadError(f"Question file not found: {path}", path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise DeckLoadError(f"Failed to read {path}: {e}", path) from e
