"""Search configuration.

Defaults are compiled in; PARENSEARCH_EXPRESSION and PARENSEARCH_TARGET
override them from the environment, and CLI options override both.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from parensearch.errors import ConfigError

DEFAULT_EXPRESSION = "1 + 2 * 3 + 4 * 5 + 6 * 7 + 8 * 9"
DEFAULT_TARGET = 479

EXPRESSION_ENV = "PARENSEARCH_EXPRESSION"
TARGET_ENV = "PARENSEARCH_TARGET"


@dataclass(frozen=True)
class SearchConfig:
    """Expression to search and the value it must reach."""

    expression: str = DEFAULT_EXPRESSION
    target: int = DEFAULT_TARGET


def load_config(
    env: Optional[Mapping[str, str]] = None,
    expression: Optional[str] = None,
    target: Optional[int] = None,
) -> SearchConfig:
    """Build a SearchConfig from defaults, environment and explicit overrides.

    Args:
        env: Environment mapping. Defaults to os.environ.
        expression: Explicit expression (e.g. from --expr); wins over env.
        target: Explicit target (e.g. from --target); wins over env.

    Raises:
        ConfigError: PARENSEARCH_TARGET is set but is not an integer.
    """
    env = os.environ if env is None else env

    if expression is None:
        expression = env.get(EXPRESSION_ENV, DEFAULT_EXPRESSION)

    if target is None:
        raw = env.get(TARGET_ENV)
        if raw is None or not raw.strip():
            target = DEFAULT_TARGET
        else:
            try:
                target = int(raw)
            except ValueError:
                raise ConfigError(f"{TARGET_ENV} must be an integer, got {raw!r}") from None

    return SearchConfig(expression=expression, target=target)
