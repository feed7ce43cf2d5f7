"""
Module: quiz

Purpose:
    Interactive quiz over a parsed deck: scoring session, configuration
    and the terminal loop.
"""

from .config import QuizConfig
from .runner import run_quiz
from .session import QuizSession, is_override, reveal_text

__all__ = [
    "QuizConfig",
    "QuizSession",
    "run_quiz",
    "is_override",
    "reveal_text",
]
