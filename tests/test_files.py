"""Tests for the filesystem drills."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest
from pydantic import ValidationError

from core.domain.models import PermissionScan
from core.domain.operations import PathKind
from core.errors import DrillError, PathNotFoundError, UsageError
from core.services import files as files_service


class TestScanPermissions:
    def test_partitions_regular_files_exactly(self, mixed_dir, fake_probe):
        probe = fake_probe(unwritable={"beta.txt", ".hidden"})

        scan = files_service.scan_permissions(mixed_dir, probe)

        writable = {p.name for p in scan.writable}
        not_writable = {p.name for p in scan.not_writable}
        assert writable == {"alpha.txt", "gamma.sh"}
        assert not_writable == {"beta.txt", ".hidden"}
        assert writable.isdisjoint(not_writable)
        assert scan.total == 4

    def test_excludes_directories_and_symlinks(self, mixed_dir, fake_probe):
        scan = files_service.scan_permissions(mixed_dir, fake_probe())

        listed = {p.name for p in scan.writable + scan.not_writable}
        assert "subdir" not in listed
        assert "link-to-alpha" not in listed
        assert "dangling" not in listed
        assert "nested.txt" not in listed

    def test_empty_directory_gives_empty_lists(self, tmp_path, fake_probe):
        empty = tmp_path / "empty"
        empty.mkdir()

        scan = files_service.scan_permissions(empty, fake_probe())

        assert scan.writable == []
        assert scan.not_writable == []

    def test_missing_directory_raises(self, tmp_path, fake_probe):
        with pytest.raises(PathNotFoundError) as exc_info:
            files_service.scan_permissions(tmp_path / "nope", fake_probe())
        assert exc_info.value.exit_code == 1
        assert exc_info.value.message == "Directory not found"

    def test_file_instead_of_directory_raises(self, tmp_path, fake_probe):
        regular = tmp_path / "file.txt"
        regular.write_text("x", encoding="utf-8")
        with pytest.raises(PathNotFoundError):
            files_service.scan_permissions(regular, fake_probe())

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_blank_argument_is_usage_error(self, value, fake_probe):
        with pytest.raises(UsageError):
            files_service.scan_permissions(value, fake_probe())

    def test_entries_are_sorted_by_name(self, mixed_dir, fake_probe):
        scan = files_service.scan_permissions(mixed_dir, fake_probe())
        names = [p.name for p in scan.writable]
        assert names == sorted(names)

    def test_model_rejects_overlapping_lists(self, tmp_path):
        shared = tmp_path / "a.txt"
        with pytest.raises(ValidationError):
            PermissionScan(directory=tmp_path, writable=[shared], not_writable=[shared])


class TestCheckFile:
    def test_readable_non_empty(self, tmp_path, fake_probe):
        target = tmp_path / "data.txt"
        target.write_text("content", encoding="utf-8")

        result = files_service.check_file(target, fake_probe())

        assert result.ok
        assert result.describe() == f"File '{target}' exists, is readable, and not empty."

    def test_empty_file(self, tmp_path, fake_probe):
        target = tmp_path / "empty.txt"
        target.touch()

        result = files_service.check_file(target, fake_probe())

        assert not result.ok
        assert "exists but is empty" in result.describe()

    def test_unreadable_file(self, tmp_path, fake_probe):
        target = tmp_path / "secret.txt"
        target.write_text("x", encoding="utf-8")

        result = files_service.check_file(target, fake_probe(unreadable={"secret.txt"}))

        assert "exists but is not readable" in result.describe()

    def test_missing_file(self, tmp_path, fake_probe):
        result = files_service.check_file(tmp_path / "ghost.txt", fake_probe())
        assert not result.exists
        assert "does not exist" in result.describe()


class TestClassifyPath:
    def test_kinds(self, mixed_dir):
        assert files_service.classify_path(mixed_dir / "alpha.txt").kind is PathKind.FILE
        assert files_service.classify_path(mixed_dir / "subdir").kind is PathKind.DIRECTORY
        assert files_service.classify_path(mixed_dir / "dangling").kind is PathKind.SYMLINK
        assert files_service.classify_path(mixed_dir / "nothing").kind is PathKind.MISSING

    def test_symlink_to_file_follows_link(self, mixed_dir):
        assert files_service.classify_path(mixed_dir / "link-to-alpha").kind is PathKind.FILE

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="needs mkfifo")
    def test_fifo_is_other(self, tmp_path):
        fifo = tmp_path / "pipe"
        os.mkfifo(fifo)
        info = files_service.classify_path(fifo)
        assert info.kind is PathKind.OTHER
        assert "not a regular file, directory, or symlink" in info.describe()


def test_check_access_messages(tmp_path, fake_probe):
    target = tmp_path / "f.txt"
    target.write_text("x", encoding="utf-8")

    both = files_service.check_access(target, fake_probe())
    read_only = files_service.check_access(target, fake_probe(unwritable={"f.txt"}))
    write_only = files_service.check_access(target, fake_probe(unreadable={"f.txt"}))
    neither = files_service.check_access(target, fake_probe(unreadable={"f.txt"}, unwritable={"f.txt"}))

    assert both.describe() == f"{target} is both readable and writable"
    assert "only readable" in read_only.describe()
    assert "only writable" in write_only.describe()
    assert "neither readable nor writable" in neither.describe()


def test_count_files_counts_links_to_files(mixed_dir):
    # alpha, beta, gamma, .hidden and the link to alpha
    assert files_service.count_files(mixed_dir) == 5


def test_count_files_missing_directory(tmp_path):
    with pytest.raises(PathNotFoundError):
        files_service.count_files(tmp_path / "missing")


def test_make_directory(tmp_path):
    target = tmp_path / "new"
    assert files_service.make_directory(target) is True
    assert target.is_dir()
    assert files_service.make_directory(target) is False


def test_make_executable_adds_x_where_readable(tmp_path):
    script = tmp_path / "run.sh"
    script.write_text("#!/bin/sh\n", encoding="utf-8")
    script.chmod(0o644)

    change = files_service.make_executable(script)

    assert change.before == "-rw-r--r--"
    assert change.after == "-rwxr-xr-x"
    assert stat.S_IMODE(script.stat().st_mode) == 0o755


def test_make_executable_missing_file(tmp_path):
    with pytest.raises(PathNotFoundError):
        files_service.make_executable(Path(tmp_path / "nope.sh"))


def _deny_listing(monkeypatch, denied: Path) -> None:
    original = Path.iterdir

    def iterdir(self):
        if self == denied:
            raise PermissionError(13, "Permission denied", str(self))
        return original(self)

    monkeypatch.setattr(Path, "iterdir", iterdir)


class TestUnreadableDirectory:
    def test_scan_permissions_reports_drill_error(self, mixed_dir, fake_probe, monkeypatch):
        _deny_listing(monkeypatch, mixed_dir)

        with pytest.raises(DrillError) as exc_info:
            files_service.scan_permissions(mixed_dir, fake_probe())

        assert exc_info.value.exit_code == 1
        assert exc_info.value.message == f"Cannot read directory '{mixed_dir}': Permission denied"

    def test_count_files_reports_drill_error(self, mixed_dir, monkeypatch):
        _deny_listing(monkeypatch, mixed_dir)

        with pytest.raises(DrillError, match="Cannot read directory"):
            files_service.count_files(mixed_dir)


@pytest.mark.parametrize("value", ["", "   ", None])
def test_check_access_requires_a_name(value, fake_probe):
    with pytest.raises(UsageError, match="a filename is required"):
        files_service.check_access(value, fake_probe())
