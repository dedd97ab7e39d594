"""Shared error types and codes."""

from __future__ import annotations


class ErrorCode:
    INVALID_ARGUMENT = "invalid_argument"
    MISSING_SECRET = "missing_secret"


class PresignerError(Exception):
    """Base error with a machine-readable code."""

    def __init__(self, message: str, code: str = ErrorCode.INVALID_ARGUMENT) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class InvalidArgument(PresignerError, ValueError):
    """Input rejected before hashing."""

    pass
