"""Tests for candidate ranges, substitution and the parenthesization search."""

from parensearch.enumerator import (
    candidate_ranges,
    evaluate_with_parentheses,
    find_parenthesizations,
    is_valid_subexpression,
    search,
    substitute,
)
from parensearch.models import CandidateRange, Token
from parensearch.tokenizer import tokenize

FOUND_479 = "1 + 2 * (3 + 4 * 5 + 6) * 7 + 8 * 9"


# --- Candidate ranges ---

def test_valid_subexpression_needs_number_and_operator():
    tokens = [Token.number(1), Token.plus(), Token.plus(), Token.number(2)]
    assert is_valid_subexpression(tokens, 0, 1)
    assert not is_valid_subexpression(tokens, 1, 2)  # operators only


def test_single_token_range_rejected(small_tokens):
    assert not is_valid_subexpression(small_tokens, 2, 2)
    assert not is_valid_subexpression(small_tokens, 3, 1)


def test_out_of_bounds_range_rejected(small_tokens):
    assert not is_valid_subexpression(small_tokens, 3, 5)
    assert not is_valid_subexpression(small_tokens, -1, 2)


def test_number_only_range_rejected():
    tokens = [Token.number(1), Token.number(2), Token.plus(), Token.number(3)]
    assert not is_valid_subexpression(tokens, 0, 1)


def test_candidate_ranges_small(small_tokens):
    ranges = list(candidate_ranges(small_tokens))
    # Alternating tokens: every pair start < end qualifies
    assert len(ranges) == 10
    assert ranges[0] == CandidateRange(0, 1)
    assert ranges[-1] == CandidateRange(3, 4)


def test_every_candidate_satisfies_range_invariant(default_tokens):
    for r in candidate_ranges(default_tokens):
        window = default_tokens[r.start:r.end + 1]
        assert 0 <= r.start < r.end < len(default_tokens)
        assert any(t.is_number for t in window)
        assert any(t.is_operator for t in window)


# --- Substitution and evaluation ---

def test_substitute(small_tokens):
    assert substitute(small_tokens, 0, 2, 3) == [Token.number(3), Token.mul(), Token.number(3)]


def test_evaluate_with_parentheses(small_tokens):
    assert evaluate_with_parentheses(small_tokens, 0, 2) == 9   # (1 + 2) * 3
    assert evaluate_with_parentheses(small_tokens, 2, 4) == 7   # 1 + (2 * 3)
    assert evaluate_with_parentheses(small_tokens, 0, 4) == 7   # (1 + 2 * 3)


def test_malformed_inner_range_skipped(small_tokens):
    assert evaluate_with_parentheses(small_tokens, 1, 3) is None  # (+ 2 *)
    assert evaluate_with_parentheses(small_tokens, 0, 1) is None  # (1 +)


# --- Search ---

def test_default_expression_reaches_479(default_tokens):
    results = find_parenthesizations(default_tokens, 479)
    assert FOUND_479 in results


def test_match_carries_range_and_inner_value(default_tokens):
    matches = {m.rendered: m for m in search(default_tokens, 479)}
    m = matches[FOUND_479]
    assert (m.start, m.end) == (4, 10)
    assert m.inner_value == 29


def test_every_match_evaluates_to_target(default_tokens):
    for m in search(default_tokens, 479):
        assert evaluate_with_parentheses(default_tokens, m.start, m.end) == 479
        assert is_valid_subexpression(default_tokens, m.start, m.end)


def test_unreachable_target(default_tokens):
    assert find_parenthesizations(default_tokens, 0) == set()


def test_search_is_deterministic(default_tokens):
    first = sorted(find_parenthesizations(default_tokens, 479))
    second = sorted(find_parenthesizations(default_tokens, 479))
    assert first == second


def test_small_expression_targets(small_tokens):
    assert find_parenthesizations(small_tokens, 9) == {"(1 + 2) * 3"}
    assert find_parenthesizations(small_tokens, 7) == {"1 + (2 * 3)", "(1 + 2 * 3)"}


def test_empty_and_short_inputs():
    assert find_parenthesizations([], 1) == set()
    assert find_parenthesizations(tokenize("5"), 5) == set()
