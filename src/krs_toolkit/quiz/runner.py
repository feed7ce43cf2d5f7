"""
Module: quiz.runner

Purpose:
    Line-based terminal quiz loop over a parsed deck.

Key Functions:
    - run_quiz(): Show the header, then ask every entry until done

Dependencies:
    - quiz.session: Scoring rules
    - quiz.config: QuizConfig

Used By:
    - cli: krs-quiz command
"""

from __future__ import annotations

import itertools
import logging
import random
from typing import Callable

from krs_toolkit.core.models import Correctness, QuestionFile

from .config import QuizConfig
from .session import QuizSession, is_override, reveal_text

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

CONTINUE_PROMPT = "Press Enter to continue..."


def run_quiz(
    deck: QuestionFile,
    config: QuizConfig,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> int:
    """
    Run the quiz loop.

    Passes over the deck ``config.rounds`` times, or until input runs out
    (EOFError) when rounds is None. KeyboardInterrupt propagates to the
    caller.

    Args:
        deck: Parsed deck (shuffled in place when config.shuffle is set)
        config: Quiz configuration
        input_fn: Prompt-and-read function, ``input`` by default
        output_fn: Line output function, ``print`` by default

    Returns:
        Final score
    """
    if config.shuffle:
        deck.shuffle_entries(random.Random(config.seed))

    session = QuizSession(deck)

    if not deck.entries:
        logger.warning("Question file has no complete question/answer entries")
        return session.score

    try:
        output_fn(deck.comment_string() + "\n")
        input_fn(CONTINUE_PROMPT)

        passes = itertools.count() if config.rounds is None else range(config.rounds)
        for _ in passes:
            for entry in session.deck.entries:
                output_fn("Press Ctrl + C to exit")
                reply = input_fn(f"Score: {session.score} | {entry.prompt}\n> ")

                if session.submit(entry, reply) is Correctness.CORRECT:
                    output_fn("Correct!")
                else:
                    output_fn("Incorrect :(")
                    override = is_override(input_fn("Override, I am correct (y/N): "))
                    session.resolve_incorrect(entry, reply, override)
                    if override:
                        output_fn("Correct!")
                    else:
                        output_fn(reveal_text(entry.answer))

                input_fn(CONTINUE_PROMPT)
    except EOFError:
        logger.debug("Input closed, ending quiz")

    return session.score
