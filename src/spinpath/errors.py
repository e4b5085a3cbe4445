"""Typed errors raised by spinpath."""

from __future__ import annotations


class SpinPathError(Exception):
    """Base error for the project."""


class DomainError(SpinPathError, ValueError):
    """A geometric computation is undefined for the given input."""


class ArgumentError(SpinPathError, ValueError):
    """An argument violates a documented precondition."""


class PointsFormatError(ArgumentError):
    """A point source contains a malformed record."""

    def __init__(self, message: str, line_no: int | None = None) -> None:
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no


class SpinPathIOError(SpinPathError, OSError):
    """Reading points or writing a document failed."""


__all__ = [
    "SpinPathError",
    "DomainError",
    "ArgumentError",
    "PointsFormatError",
    "SpinPathIOError",
]
