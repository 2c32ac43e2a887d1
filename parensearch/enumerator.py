"""Brute-force search over single-pair parenthesizations.

For every range start < end holding at least one number and one operator:
1. Evaluate the range on its own (skip if malformed)
2. Replace the range with a single Number holding that value
3. Evaluate the substituted sequence (skip if malformed)
4. Record the range if the value equals the target

O(n²) ranges, O(n) evaluation each. Fine for short expressions; for long ones
the prefix/suffix terms could be evaluated once and reused.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Sequence

from parensearch.evaluator import evaluate_expression
from parensearch.models import CandidateRange, Match, Token
from parensearch.renderer import insert_parentheses

logger = logging.getLogger(__name__)


def is_valid_subexpression(tokens: Sequence[Token], start: int, end: int) -> bool:
    """True if tokens[start..end] (inclusive) has at least one number and one operator."""
    if not 0 <= start < end < len(tokens):
        return False
    window = tokens[start:end + 1]
    return any(t.is_number for t in window) and any(t.is_operator for t in window)


def candidate_ranges(tokens: Sequence[Token]) -> Iterator[CandidateRange]:
    """Yield every valid range, ordered by start then end."""
    for start in range(len(tokens)):
        for end in range(start + 1, len(tokens)):
            if is_valid_subexpression(tokens, start, end):
                yield CandidateRange(start, end)


def substitute(tokens: Sequence[Token], start: int, end: int, value: int) -> list[Token]:
    """Replace tokens[start..end] with a single Number token."""
    return [*tokens[:start], Token.number(value), *tokens[end + 1:]]


def evaluate_with_parentheses(tokens: Sequence[Token], start: int, end: int) -> Optional[int]:
    """Value of the expression with tokens[start..end] parenthesized, or None."""
    inner = evaluate_expression(tokens[start:end + 1])
    if inner is None:
        return None
    return evaluate_expression(substitute(tokens, start, end, inner))


def search(tokens: Sequence[Token], target: int) -> list[Match]:
    """Find every parenthesized range that evaluates to target.

    Returns matches in range order (start, then end).
    """
    matches: list[Match] = []
    for candidate in candidate_ranges(tokens):
        start, end = candidate.start, candidate.end
        inner = evaluate_expression(tokens[start:end + 1])
        if inner is None:
            logger.debug("Skipping (%d, %d): sub-expression does not evaluate", start, end)
            continue
        value = evaluate_expression(substitute(tokens, start, end, inner))
        if value is None:
            logger.debug("Skipping (%d, %d): substituted expression does not evaluate", start, end)
            continue
        if value == target:
            rendered = insert_parentheses(tokens, start, end)
            logger.debug("Match (%d, %d): %s", start, end, rendered)
            matches.append(Match(start=start, end=end, inner_value=inner, rendered=rendered))
    return matches


def find_parenthesizations(tokens: Sequence[Token], target: int) -> set[str]:
    """Rendered expressions (one parenthesis pair each) that evaluate to target."""
    return {m.rendered for m in search(tokens, target)}
