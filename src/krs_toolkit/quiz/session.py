"""
Module: quiz.session

Purpose:
    Scoring rules of the quiz loop, kept apart from terminal I/O.

    - A correct reply scores +1
    - An incorrect reply the learner overrides scores +1 and the reply is
      added to the accepted answers for the rest of the session
    - An incorrect reply that is not overridden scores -1

Key Classes:
    - QuizSession: Running score over a deck

Key Functions:
    - reveal_text(): "Correct answer(s) was/were ..." message
    - is_override(): Interpret the learner's y/N override reply

Used By:
    - quiz.runner: Terminal quiz loop
"""

from __future__ import annotations

import logging

from krs_toolkit.core.models import Answer, Correctness, Entry, QuestionFile

logger = logging.getLogger(__name__)


def is_override(reply: str) -> bool:
    """True when the override prompt reply starts with y/Y."""
    return reply.lower().startswith("y")


def reveal_text(answer: Answer) -> str:
    """
    Describe the accepted answers after a wrong reply.

    Answers are joined with "; " when any of them contains a comma,
    otherwise with ", ".

    Example:
        >>> reveal_text(Answer(["Paris"]))
        'Correct answer was Paris'
        >>> reveal_text(Answer(["1, 2", "3"]))
        'Correct answers were 1, 2; 3'
    """
    accepted = answer.accepted
    joiner = "; " if any("," in a for a in accepted) else ", "
    verb = " was" if len(accepted) == 1 else "s were"
    return f"Correct answer{verb} {joiner.join(accepted)}"


class QuizSession:
    """
    Score keeping for one quiz run over a deck.

    Attributes:
        deck: The deck being quizzed
        score: Running score, starts at 0 and may go negative
    """

    def __init__(self, deck: QuestionFile):
        self.deck = deck
        self.score = 0

    def submit(self, entry: Entry, reply: str) -> Correctness:
        """
        Evaluate a reply to ``entry``.

        A correct reply is scored immediately. An incorrect one is left
        for ``resolve_incorrect`` once the learner has answered the
        override prompt.
        """
        result = entry.answer.evaluate(reply.strip())
        if result is Correctness.CORRECT:
            self.score += 1
        return result

    def resolve_incorrect(self, entry: Entry, reply: str, override: bool) -> None:
        """Score an incorrect reply, accepting it from now on if overridden."""
        if override:
            self.score += 1
            entry.answer.accepted.append(reply.strip())
            logger.debug(f"Accepted override {reply.strip()!r} for {entry.prompt!r}")
        else:
            self.score -= 1
