"""Split a whitespace-separated expression into tokens.

Pieces that are neither a signed integer nor `+` / `*` are dropped with a
warning, unless strict mode is on.
"""

from __future__ import annotations

import logging
import re

from parensearch.errors import TokenizeError
from parensearch.models import Token

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Numbers must fit a signed 64-bit integer; anything wider is not a number.
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _parse_int(piece: str) -> int | None:
    if not _INTEGER_RE.fullmatch(piece):
        return None
    value = int(piece)
    if not _I64_MIN <= value <= _I64_MAX:
        return None
    return value


def tokenize(source: str, strict: bool = False) -> list[Token]:
    """Tokenize an expression like ``"1 + 2 * 3"``.

    Args:
        source: Expression with whitespace between every number and operator.
        strict: Raise TokenizeError on an unrecognized piece instead of
            dropping it.

    Returns:
        Tokens in source order.
    """
    tokens: list[Token] = []
    for position, piece in enumerate(source.split()):
        value = _parse_int(piece)
        if value is not None:
            tokens.append(Token.number(value))
        elif piece == "+":
            tokens.append(Token.plus())
        elif piece == "*":
            tokens.append(Token.mul())
        elif strict:
            raise TokenizeError(piece, position)
        else:
            logger.warning("Dropping unrecognized token %r at piece %d", piece, position)
    return tokens
