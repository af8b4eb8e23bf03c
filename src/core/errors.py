"""Drill error types.

Services raise these; the CLI layer turns them into a red message on stderr
and the exit status carried by the error.
"""

from __future__ import annotations


class DrillError(Exception):
    """Base error for every drill failure that should end the process."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class UsageError(DrillError):
    """Missing or malformed arguments."""


class PathNotFoundError(DrillError):
    """The file or directory a drill needs does not exist."""

    def __init__(self, message: str, *, path: str = "", exit_code: int = 1) -> None:
        super().__init__(message, exit_code=exit_code)
        self.path = path


class InvalidNumberError(UsageError):
    """A value does not look like a shell integer."""

    def __init__(self, value: str, *, exit_code: int = 1) -> None:
        super().__init__(f"'{value}' is not a valid integer", exit_code=exit_code)
        self.value = value
