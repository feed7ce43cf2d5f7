"""
Core Models Package

Deck data models shared by the parser and the quiz loop.
"""

from .cards import Answer, Correctness, Entry, Question
from .deck import QuestionFile

__all__ = [
    "Answer",
    "Correctness",
    "Entry",
    "Question",
    "QuestionFile",
]
