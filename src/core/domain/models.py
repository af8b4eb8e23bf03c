"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation plus self-documenting fields, without coupling the core to I/O.
- Drill results serialise to JSON for free (`model_dump(mode="json")`).

Note:
- These models describe *what* a drill found, not *how* it was printed.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from core.domain.operations import PathKind


class PermissionScan(BaseModel):
    """Regular files of one directory, partitioned by write permission.

    Invariants:
    - `writable` and `not_writable` never share an entry.
    - Together they hold every regular file directly inside `directory`
      (directories and symlinks are never listed).
    """

    model_config = ConfigDict(frozen=True)

    directory: Path = Field(..., description="Directory that was scanned.")
    writable: list[Path] = Field(
        default_factory=list,
        description="Regular files the invoking user can write to.",
    )
    not_writable: list[Path] = Field(
        default_factory=list,
        description="Regular files the invoking user cannot write to.",
    )

    @model_validator(mode="after")
    def _lists_are_disjoint(self) -> "PermissionScan":
        overlap = set(self.writable) & set(self.not_writable)
        if overlap:
            raise ValueError(f"files listed as both writable and not writable: {sorted(overlap)}")
        return self

    @property
    def total(self) -> int:
        return len(self.writable) + len(self.not_writable)


class FileCheck(BaseModel):
    """Outcome of the exists/readable/non-empty validation."""

    path: Path
    exists: bool = False
    readable: bool = False
    empty: bool = False

    @property
    def ok(self) -> bool:
        return self.exists and self.readable and not self.empty

    def describe(self) -> str:
        name = str(self.path)
        if not self.exists:
            return f"File '{name}' does not exist."
        if self.empty:
            return f"File '{name}' exists but is empty."
        if not self.readable:
            return f"File '{name}' exists but is not readable."
        return f"File '{name}' exists, is readable, and not empty."


class AccessReport(BaseModel):
    path: Path
    readable: bool = False
    writable: bool = False

    def describe(self) -> str:
        name = str(self.path)
        if self.readable and self.writable:
            return f"{name} is both readable and writable"
        if self.readable:
            return f"The file {name} is only readable not writable"
        if self.writable:
            return f"The file {name} is only writable not readable"
        return f"The file {name} is neither readable nor writable"


class PathInfo(BaseModel):
    path: Path
    kind: PathKind

    def describe(self) -> str:
        if self.kind is PathKind.MISSING:
            return f"'{self.path}' does not exist."
        return f"'{self.path}' is {self.kind.label()}."


class ModeChange(BaseModel):
    """`ls -l` style mode strings around a `chmod +x`."""

    path: Path
    before: str = Field(..., min_length=10, max_length=10)
    after: str = Field(..., min_length=10, max_length=10)


class EnvironmentReport(BaseModel):
    user: str
    uid: int | None = None
    gid: int | None = None
    home: str = ""
    path: str = ""
    app_env: str = Field(..., min_length=1)


class CommandOutcome(BaseModel):
    """Result of running an external command (script or deploy step)."""

    command: list[str] = Field(default_factory=list)
    exit_code: int

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


class NameParts(BaseModel):
    first: str = ""
    last: str = ""

    def greeting(self) -> str:
        return f'Welcome "{self.first} {self.last}"'


class ArithSummary(BaseModel):
    """Sum/difference of two integer arguments, plus the raw arguments."""

    first: int
    second: int
    total: int
    difference: int
    arguments: list[str] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.arguments)


class LoginResult(BaseModel):
    granted: bool
    attempts: int = Field(..., ge=1)
