import sys
from pathlib import Path

import pytest

# Allow running the suite from a checkout without installing
ROOT = Path(__file__).resolve().parent.parent
if ROOT.as_posix() not in sys.path:
    sys.path.insert(0, ROOT.as_posix())

from parensearch.config import DEFAULT_EXPRESSION  # noqa: E402
from parensearch.models import Token  # noqa: E402
from parensearch.tokenizer import tokenize  # noqa: E402


@pytest.fixture
def default_tokens() -> list[Token]:
    """Tokens of 1 + 2 * 3 + 4 * 5 + 6 * 7 + 8 * 9."""
    return tokenize(DEFAULT_EXPRESSION)


@pytest.fixture
def small_tokens() -> list[Token]:
    """Tokens of 1 + 2 * 3."""
    return [Token.number(1), Token.plus(), Token.number(2), Token.mul(), Token.number(3)]
