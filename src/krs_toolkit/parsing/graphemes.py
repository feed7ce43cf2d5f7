"""
Module: parsing.graphemes

Purpose:
    Split text into user-perceived characters (extended grapheme clusters)
    so that answer splitting never cuts through a combining sequence.

Key Functions:
    - iter_graphemes(): Yield grapheme clusters of a string

Dependencies:
    - regex: Unicode \\X grapheme cluster matching

Used By:
    - parsing.answers: Answer splitting
"""

from __future__ import annotations

from typing import Iterator

import regex

_GRAPHEME = regex.compile(r"\X")


def iter_graphemes(text: str) -> Iterator[str]:
    """
    Yield the extended grapheme clusters of ``text`` in order.

    Example:
        >>> list(iter_graphemes("e\\u0301a"))
        ['é', 'a']
    """
    for match in _GRAPHEME.finditer(text):
        yield match.group()
