"""
krs Toolkit Core Package

Data models for parsed question decks.
"""

from .models import Answer, Correctness, Entry, Question, QuestionFile

__all__ = [
    "Answer",
    "Correctness",
    "Entry",
    "Question",
    "QuestionFile",
]
