"""Data models for parensearch.

Token, CandidateRange, Match, SearchReport — the value types that flow
through tokenizer → evaluator → enumerator → report.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class TokenKind(str, Enum):
    """Lexical token kinds."""

    NUMBER = "number"
    PLUS = "+"
    MUL = "*"


class Expectation(str, Enum):
    """What the evaluator expects to read next."""

    NUMBER = "number"
    OPERATOR = "operator"


class ErrorKind(str, Enum):
    """Why a source piece or token sequence was rejected."""

    EMPTY = "empty"
    UNKNOWN_TOKEN = "unknown-token"
    TRAILING_OPERATOR = "trailing-operator"
    ADJACENT_NUMBERS = "adjacent-numbers"
    DANGLING_MULTIPLY = "dangling-multiply"
    UNEXPECTED_OPERATOR = "unexpected-operator"


@dataclass(frozen=True)
class Token:
    """A single number or operator."""

    kind: TokenKind
    value: Optional[int] = None

    @classmethod
    def number(cls, value: int) -> Token:
        return cls(TokenKind.NUMBER, value)

    @classmethod
    def plus(cls) -> Token:
        return cls(TokenKind.PLUS)

    @classmethod
    def mul(cls) -> Token:
        return cls(TokenKind.MUL)

    @property
    def is_number(self) -> bool:
        return self.kind == TokenKind.NUMBER

    @property
    def is_operator(self) -> bool:
        return self.kind in (TokenKind.PLUS, TokenKind.MUL)

    @property
    def literal(self) -> str:
        """Text form used when rendering: decimal for numbers, symbol otherwise."""
        if self.kind == TokenKind.NUMBER:
            return str(self.value)
        return self.kind.value


@dataclass(frozen=True)
class CandidateRange:
    """Inclusive token indices of a sub-expression to parenthesize."""

    start: int
    end: int


@dataclass(frozen=True)
class Match:
    """A candidate range whose parenthesized expression hits the target."""

    start: int
    end: int
    inner_value: int
    rendered: str

    def to_dict(self) -> dict:
        return {
            "start": self.start,
            "end": self.end,
            "inner_value": self.inner_value,
            "rendered": self.rendered,
        }


@dataclass
class SearchReport:
    """Outcome of one search over an expression for a target value."""

    expression: str
    target: int
    base_value: Optional[int] = None
    candidates: int = 0
    matches: list[Match] = field(default_factory=list)

    @property
    def lines(self) -> list[str]:
        """Rendered matches, sorted lexicographically with duplicates removed."""
        return sorted({m.rendered for m in self.matches})

    @property
    def found(self) -> bool:
        return bool(self.matches)

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "expression": self.expression,
            "target": self.target,
            "base_value": self.base_value,
            "candidates": self.candidates,
            "matches": [m.to_dict() for m in self.matches],
            "lines": self.lines,
        }

    @classmethod
    def from_dict(cls, d: dict) -> SearchReport:
        """Deserialize from a JSON dict (as written by save())."""
        return cls(
            expression=d.get("expression", ""),
            target=d.get("target", 0),
            base_value=d.get("base_value"),
            candidates=d.get("candidates", 0),
            matches=[
                Match(
                    start=m.get("start", 0),
                    end=m.get("end", 0),
                    inner_value=m.get("inner_value", 0),
                    rendered=m.get("rendered", ""),
                )
                for m in d.get("matches", [])
            ],
        )

    def save(self, path: Path) -> None:
        """Write the report as JSON, creating parent directories."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")

    @classmethod
    def load(cls, path: Path) -> Optional[SearchReport]:
        """Load a report written by save(). Returns None if missing or unreadable."""
        if not path.exists():
            return None
        try:
            return cls.from_dict(json.loads(path.read_text(encoding="utf-8")))
        except (json.JSONDecodeError, OSError):
            return None
