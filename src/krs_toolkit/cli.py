"""Command-line entry point: load a .krs question file and run the quiz."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from krs_toolkit import __version__
from krs_toolkit.parsing import DeckError, load_question_file
from krs_toolkit.quiz import QuizConfig, run_quiz
from krs_toolkit.quiz.config import DEFAULT_QUESTIONS_PATH

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="krs-quiz", description="Quiz yourself on a .krs question file")
    parser.add_argument("path", nargs="?", default=str(DEFAULT_QUESTIONS_PATH), help="Question file (default: %(default)s)")
    parser.add_argument("--no-shuffle", action="store_true", help="Ask questions in file order")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the shuffle")
    parser.add_argument("--rounds", type=int, default=None, help="Passes over the deck (default: until Ctrl+C)")
    parser.add_argument("--encoding", default="utf-8", help="File encoding (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(message)s")

    try:
        config = QuizConfig.from_args(args)
    except ValueError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1

    try:
        deck = load_question_file(config.questions_path, encoding=config.encoding)
    except DeckError as e:
        print(f"[error] could not load question file: {e}", file=sys.stderr)
        return 1

    logger.debug(f"Loaded {len(deck)} entries from {config.questions_path}")

    try:
        score = run_quiz(deck, config)
    except KeyboardInterrupt:
        print()
        return 0

    print(f"Final score: {score}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
