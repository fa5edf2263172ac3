"""Error types for partial operations on Maybe."""

from __future__ import annotations


class UnrecoverablePreconditionViolation(Exception):
    """Raised when a partial operation is called outside its domain.

    This signals a programming error and is never caught inside perhaps.
    The offending value is kept for debugging purposes.
    """

    def __init__(self, message: str, value: object) -> None:
        self.value = value
        super().__init__(message)

    def __repr__(self) -> str:
        return f"UnrecoverablePreconditionViolation({super().__repr__()}, value={self.value!r})"
