"""Tests for expression rendering."""

from parensearch.renderer import insert_parentheses, render_tokens
from parensearch.tokenizer import tokenize


def test_render_tokens(small_tokens):
    assert render_tokens(small_tokens) == "1 + 2 * 3"


def test_render_normalizes_spacing():
    assert render_tokens(tokenize("1   +\t2")) == "1 + 2"


def test_parentheses_glued_to_bounded_tokens(small_tokens):
    assert insert_parentheses(small_tokens, 1, 3) == "1 (+ 2 *) 3"


def test_parentheses_at_edges(small_tokens):
    assert insert_parentheses(small_tokens, 0, 2) == "(1 + 2) * 3"
    assert insert_parentheses(small_tokens, 2, 4) == "1 + (2 * 3)"
    assert insert_parentheses(small_tokens, 0, 4) == "(1 + 2 * 3)"


def test_negative_number_literal():
    assert insert_parentheses(tokenize("-1 * 2"), 0, 2) == "(-1 * 2)"
