"""
Module: parsing.answers

Purpose:
    Split the payload of an answer line into its accepted answers.

    Answers are separated by ", ". A backslash escapes the next delimiter
    occurrence so it stays in the answer text:

        Paris, London   -> ["Paris", "London"]
        1\\, 2, 3        -> ["1, 2", "3"]

Key Functions:
    - split_answers(): Escape-aware delimiter splitting

Algorithm:
    Scan graphemes left to right, keeping a buffer and an escape flag.
    A backslash toggles the flag and is dropped when it switches escaping on.
    Before each grapheme is appended, a buffer ending in the delimiter is
    either split off (escape off) or kept literally (escape on, which also
    clears the flag). Whatever is left after the scan is the last answer.

Dependencies:
    - parsing.graphemes: Grapheme iteration

Used By:
    - parsing.lines: Answer line classification
"""

from __future__ import annotations

from typing import List

from .graphemes import iter_graphemes

DELIMITER = ", "
ESCAPE = "\\"


def split_answers(text: str) -> List[str]:
    """
    Split an answer payload into accepted answers.

    Never fails and never returns an empty list: text without a delimiter
    (including empty text) gives exactly one answer.

    Note:
        The escape flag is a plain toggle. A lone backslash that is not
        followed by a delimiter still flips the flag and is dropped, and a
        delimiter at the very end of the text is never split off.

    Args:
        text: Answer line content after the "A: " tag

    Returns:
        Accepted answers in authored order, duplicates kept

    Example:
        >>> split_answers("A, B, C")
        ['A', 'B', 'C']
        >>> split_answers("A\\\\, B")
        ['A, B']
        >>> split_answers("")
        ['']
    """
    accepted: List[str] = []
    buffer = ""
    escape = False

    for grapheme in iter_graphemes(text):
        if grapheme.endswith(ESCAPE):
            escape = not escape
            # escaping just switched on, drop the backslash
            if escape:
                continue

        if buffer.endswith(DELIMITER):
            if escape:
                escape = False
            else:
                accepted.append(buffer[:-len(DELIMITER)])
                buffer = ""

        buffer += grapheme

    accepted.append(buffer)
    return accepted
