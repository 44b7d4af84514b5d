"""Custom exceptions for blackboard-py."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class BlackboardError(Exception):
    """Base exception class for all blackboard-py errors."""


class InvalidShapeRecordError(BlackboardError):
    """Raised when a line of text is not a valid shape record.

    The loader catches this for every bad line and moves on, so it never
    reaches the board.

    Attributes:
        line: The offending line, without its trailing newline.
        reason: Why the line was rejected.
    """

    def __init__(self, line: str, reason: str) -> None:
        """Initialize the exception with the rejected line.

        Args:
            line: The offending line.
            reason: Why the line was rejected.
        """
        self.line = line
        self.reason = reason
        super().__init__(f"Invalid shape record {line!r}: {reason}")


class ShapeFileError(BlackboardError):
    """Raised when a shape record file cannot be opened or read.

    Attributes:
        path: The path that could not be read.
    """

    def __init__(self, path: str | Path, reason: str = "could not be read") -> None:
        """Initialize the exception with the failing path.

        Args:
            path: The path that could not be read.
            reason: Short description of the failure.
        """
        self.path = path
        super().__init__(f"Shape file {path} {reason}")


class UnknownShapeKindError(InvalidShapeRecordError):
    """Raised when a shape record names a kind that cannot be drawn.

    Attributes:
        kind: The unrecognized kind token.
    """

    def __init__(self, line: str, kind: str) -> None:
        """Initialize the exception with the unknown kind.

        Args:
            line: The offending line.
            kind: The unrecognized kind token.
        """
        self.kind = kind
        super().__init__(line, f"unknown shape kind {kind!r}")
