"""
Module: quiz.config

Purpose:
    Configuration dataclass for a quiz run. Immutable configuration with
    validation on construction.

Key Classes:
    - QuizConfig: Where to load questions from and how to run the loop

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - cli: Built from command-line arguments
    - quiz.runner: Quiz loop
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_QUESTIONS_PATH = Path("questions.krs")


@dataclass(frozen=True)
class QuizConfig:
    """
    Configuration for a quiz run (immutable).

    Attributes:
        questions_path: Question file to load
        shuffle: Whether to shuffle entries before the first pass
        seed: Random seed for a reproducible shuffle (None = unseeded)
        rounds: Number of passes over the deck (None = until interrupted)
        encoding: Text encoding of the question file

    Example:
        >>> config = QuizConfig(questions_path=Path("capitals.krs"), rounds=1)
        >>> config.shuffle
        True
    """

    questions_path: Path = DEFAULT_QUESTIONS_PATH
    shuffle: bool = True
    seed: Optional[int] = None
    rounds: Optional[int] = None
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.rounds is not None and self.rounds <= 0:
            raise ValueError(f"rounds must be positive: {self.rounds}")
        if not self.encoding:
            raise ValueError("encoding must not be empty")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> QuizConfig:
        """Build a config from parsed command-line arguments."""
        return cls(
            questions_path=Path(args.path),
            shuffle=not args.no_shuffle,
            seed=args.seed,
            rounds=args.rounds,
            encoding=args.encoding,
        )
