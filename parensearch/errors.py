"""Exception types for parensearch."""

from __future__ import annotations

from parensearch.models import ErrorKind


class ParensearchError(Exception):
    """Base class for all parensearch errors."""


class ConfigError(ParensearchError, ValueError):
    """Invalid configuration value (e.g. a non-integer target)."""


class TokenizeError(ParensearchError, ValueError):
    """Source piece that is neither an integer nor a supported operator."""

    def __init__(self, piece: str, position: int):
        self.kind = ErrorKind.UNKNOWN_TOKEN
        self.piece = piece
        self.position = position
        super().__init__(f"Unrecognized token {piece!r} at piece {position}")


class EvaluationError(ParensearchError, ValueError):
    """Malformed token sequence."""

    def __init__(self, kind: ErrorKind, index: int, message: str = ""):
        self.kind = kind
        self.index = index
        super().__init__(message or f"{kind.value} at token {index}")
