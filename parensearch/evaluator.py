"""Evaluate a flat token sequence with `*` binding tighter than `+`.

The walk keeps a list of finished terms and the product of the term in
progress, switching between expecting a number and expecting an operator:

    NUMBER    + Number  → start the product, expect OPERATOR
    OPERATOR  + Plus    → close the product into the terms, expect NUMBER
    OPERATOR  + Mul     → multiply in the following Number (look-ahead), stay
    anything else       → malformed

The value is the sum of all terms. A sequence that ends while expecting a
number (trailing operator) is malformed.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from parensearch.errors import EvaluationError
from parensearch.models import ErrorKind, Expectation, Token, TokenKind

logger = logging.getLogger(__name__)


def evaluate_strict(tokens: Sequence[Token]) -> int:
    """Evaluate tokens, raising EvaluationError if the sequence is malformed."""
    if not tokens:
        raise EvaluationError(ErrorKind.EMPTY, 0, "empty expression")

    terms: list[int] = []
    product: Optional[int] = None
    expectation = Expectation.NUMBER
    i = 0

    while i < len(tokens):
        token = tokens[i]

        if expectation == Expectation.NUMBER:
            if not token.is_number:
                raise EvaluationError(ErrorKind.UNEXPECTED_OPERATOR, i)
            if product is not None:
                raise EvaluationError(ErrorKind.ADJACENT_NUMBERS, i)
            product = token.value
            expectation = Expectation.OPERATOR
            i += 1

        elif token.kind == TokenKind.PLUS:
            if product is None:
                raise EvaluationError(ErrorKind.UNEXPECTED_OPERATOR, i)
            terms.append(product)
            product = None
            expectation = Expectation.NUMBER
            i += 1

        elif token.kind == TokenKind.MUL:
            if product is None:
                raise EvaluationError(ErrorKind.UNEXPECTED_OPERATOR, i)
            if i + 1 >= len(tokens) or not tokens[i + 1].is_number:
                raise EvaluationError(ErrorKind.DANGLING_MULTIPLY, i)
            product *= tokens[i + 1].value
            i += 2

        else:
            # Number while expecting an operator
            raise EvaluationError(ErrorKind.ADJACENT_NUMBERS, i)

    if expectation == Expectation.NUMBER or product is None:
        raise EvaluationError(ErrorKind.TRAILING_OPERATOR, len(tokens) - 1)

    terms.append(product)
    return sum(terms)


def evaluate_expression(tokens: Sequence[Token]) -> Optional[int]:
    """Evaluate tokens, returning None for any malformed sequence."""
    try:
        return evaluate_strict(tokens)
    except EvaluationError as e:
        logger.debug("Sequence does not evaluate: %s", e)
        return None
