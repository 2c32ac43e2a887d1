"""Rebuild expression text from tokens, optionally with one parenthesis pair.

Rendering is reconstructive: tokens are joined by single spaces, so the
original source spacing is not preserved.
"""

from __future__ import annotations

from typing import Sequence

from parensearch.models import Token


def render_tokens(tokens: Sequence[Token]) -> str:
    """``[1, +, 2]`` → ``"1 + 2"``."""
    return " ".join(t.literal for t in tokens)


def insert_parentheses(tokens: Sequence[Token], start: int, end: int) -> str:
    """Render tokens with ``(`` glued to tokens[start] and ``)`` glued to tokens[end].

    Example: range (1, 3) over ``1 + 2 * 3`` gives ``"1 (+ 2 *) 3"``.
    """
    pieces = []
    for i, token in enumerate(tokens):
        piece = token.literal
        if i == start:
            piece = "(" + piece
        if i == end:
            piece = piece + ")"
        pieces.append(piece)
    return " ".join(pieces)
