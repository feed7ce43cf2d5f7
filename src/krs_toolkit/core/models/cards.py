"""
Module: cards

Purpose:
    Question/answer card models - one prompt paired with the answers
    accepted for it.

Key Classes:
    - Question: Immutable prompt text
    - Answer: Accepted answers, extendable by learner overrides
    - Entry: A (Question, Answer) pair in a deck
    - Correctness: Result of evaluating a learner's reply

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.models.deck.QuestionFile
    - parsing.lines: Line classification
    - quiz.session: Scoring
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, List, Union


class Correctness(Enum):
    """Outcome of comparing a reply against the accepted answers."""

    CORRECT = auto()
    INCORRECT = auto()


@dataclass(frozen=True, slots=True)
class Question:
    """
    A question prompt, shown verbatim to the learner.

    Attributes:
        prompt: Text after the "Q: " tag, internal whitespace preserved
    """

    prompt: str


@dataclass(slots=True)
class Answer:
    """
    The set of replies considered correct for a question.

    Not frozen: a learner can approve their own reply during a quiz,
    which appends it to ``accepted``.

    Attributes:
        accepted: Accepted answers in authored order (duplicates allowed)

    Example:
        >>> answer = Answer(["4", "four"])
        >>> answer.evaluate("4")
        <Correctness.CORRECT: 1>
        >>> answer.evaluate("Four")
        <Correctness.INCORRECT: 2>
    """

    accepted: List[str] = field(default_factory=list)

    def evaluate(self, reply: str) -> Correctness:
        """
        Check ``reply`` by exact membership in ``accepted``.

        No case folding or normalization; callers trim the reply first.
        """
        if reply in self.accepted:
            return Correctness.CORRECT
        return Correctness.INCORRECT


@dataclass(frozen=True, slots=True)
class Entry:
    """
    A question paired with its answer.

    Iterates as ``(question, answer)`` so entries unpack like pairs.
    """

    question: Question
    answer: Answer

    @property
    def prompt(self) -> str:
        return self.question.prompt

    def __iter__(self) -> Iterator[Union[Question, Answer]]:
        yield self.question
        yield self.answer
