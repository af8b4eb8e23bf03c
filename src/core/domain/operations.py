"""Enumerations shared by the CLI and the services.

Keeping them in the domain layer lets both layers use a single source of
truth for choices that appear in option parsing and in service logic.
"""

from __future__ import annotations

from enum import Enum


class ArithmeticOp(str, Enum):
    """Integer operations offered by the calculator drill."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    @classmethod
    def from_menu(cls, choice: str) -> "ArithmeticOp | None":
        """Map the numbered menu entry (1-4) to an operation."""

        mapping = {"1": cls.ADD, "2": cls.SUBTRACT, "3": cls.MULTIPLY, "4": cls.DIVIDE}
        return mapping.get(choice.strip())


class TextOp(str, Enum):
    """String transformations."""

    UPPER = "upper"
    LOWER = "lower"
    REVERSE = "reverse"
    COUNT = "count"

    @classmethod
    def from_menu(cls, choice: str) -> "TextOp | None":
        mapping = {"1": cls.UPPER, "2": cls.LOWER, "3": cls.REVERSE, "4": cls.COUNT}
        return mapping.get(choice.strip())


class PathKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"
    MISSING = "missing"

    def label(self) -> str:
        """Human readable label used in drill output."""

        return {
            PathKind.FILE: "a regular file",
            PathKind.DIRECTORY: "a directory",
            PathKind.SYMLINK: "a symbolic link",
            PathKind.OTHER: "not a regular file, directory, or symlink",
            PathKind.MISSING: "missing",
        }[self]


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"
