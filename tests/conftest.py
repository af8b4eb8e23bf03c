"""
Pytest configuration and fixtures for shell-drills tests.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from typer.testing import CliRunner


class FakeProbe:
    """Access probe driven by explicit deny lists instead of the kernel.

    Needed because root passes every `os.access` check.
    """

    def __init__(self, *, unreadable: set[str] | None = None, unwritable: set[str] | None = None) -> None:
        self.unreadable = unreadable or set()
        self.unwritable = unwritable or set()

    def is_readable(self, path: Path) -> bool:
        return Path(path).name not in self.unreadable

    def is_writable(self, path: Path) -> bool:
        return Path(path).name not in self.unwritable


@pytest.fixture(autouse=True)
def isolated_workdir(tmp_path, monkeypatch):
    """Run every test from an empty directory with no DRILLS_* overrides."""

    for key in list(os.environ):
        if key.startswith("DRILLS_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def fake_probe():
    return FakeProbe


@pytest.fixture
def mixed_dir(tmp_path) -> Path:
    """Directory with regular files, a sub-directory and symlinks."""

    root = tmp_path / "mixed"
    root.mkdir()
    for name in ("alpha.txt", "beta.txt", "gamma.sh", ".hidden"):
        (root / name).write_text(name, encoding="utf-8")
    (root / "subdir").mkdir()
    (root / "subdir" / "nested.txt").write_text("nested", encoding="utf-8")
    (root / "link-to-alpha").symlink_to(root / "alpha.txt")
    (root / "dangling").symlink_to(root / "missing-target")
    return root
