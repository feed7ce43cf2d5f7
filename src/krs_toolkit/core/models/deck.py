"""
Module: deck

Purpose:
    Provides QuestionFile - the parsed contents of a .krs file: header
    comments plus the ordered question/answer entries.

Key Classes:
    - QuestionFile: Root artifact produced by parsing

Dependencies:
    - random (std): Entry shuffling
    - parsing.assembler (lazy import): parse/from_path constructors

Used By:
    - parsing.assembler
    - quiz.runner
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from .cards import Entry


@dataclass
class QuestionFile:
    """
    Parsed question file.

    Attributes:
        comments: Comment line texts in file order
        entries: Question/answer entries in file order (until shuffled)
    """

    comments: List[str] = field(default_factory=list)
    entries: List[Entry] = field(default_factory=list)

    @classmethod
    def parse(cls, lines: Iterable[str]) -> QuestionFile:
        """Parse raw lines. See ``parsing.assembler.parse_lines``."""
        from krs_toolkit.parsing.assembler import parse_lines
        return parse_lines(lines)

    @classmethod
    def from_path(cls, path: Path, *, encoding: str = "utf-8") -> QuestionFile:
        """Load and parse a file. See ``parsing.assembler.load_question_file``."""
        from krs_toolkit.parsing.assembler import load_question_file
        return load_question_file(path, encoding=encoding)

    def comment_string(self) -> str:
        """Header text: comments joined by newlines ("" when there are none)."""
        return "\n".join(self.comments)

    def shuffle_entries(self, rng: Optional[random.Random] = None) -> None:
        """
        Randomly permute ``entries`` in place.

        Args:
            rng: Random source, for reproducible orders. Defaults to the
                module-level generator.
        """
        (rng or random).shuffle(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
