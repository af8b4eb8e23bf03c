"""Filesystem drills.

Every function here is side-effect free apart from the filesystem call it
exists to demonstrate; printing is left to the CLI layer.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path

import structlog

from core.domain.models import AccessReport, FileCheck, ModeChange, PathInfo, PermissionScan
from core.domain.operations import PathKind
from core.errors import DrillError, PathNotFoundError, UsageError
from core.interfaces.access import AccessProbe

logger = structlog.get_logger(__name__)


def _require_directory(directory: str | Path | None) -> Path:
    if directory is None or str(directory).strip() == "":
        raise UsageError("a directory argument is required")
    path = Path(directory)
    if not path.is_dir():
        raise PathNotFoundError("Directory not found", path=str(path))
    return path


def _list_entries(root: Path) -> list[Path]:
    """Direct children of `root`, sorted by name; unreadable dirs end the drill."""

    try:
        return sorted(root.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        logger.info("files.list_failed", directory=str(root), error=str(exc))
        raise DrillError(f"Cannot read directory '{root}': {exc.strerror or exc}") from exc


def _is_plain_file(entry: Path) -> bool:
    """Regular file that is not itself a symlink."""

    try:
        mode = entry.lstat().st_mode
    except OSError:
        return False
    return stat.S_ISREG(mode)


def scan_permissions(directory: str | Path | None, probe: AccessProbe) -> PermissionScan:
    """Partition the regular files of `directory` by write permission.

    Only direct children are considered. Sub-directories and symlinks
    (even those pointing at regular files) are left out of both lists.
    """

    root = _require_directory(directory)

    writable: list[Path] = []
    not_writable: list[Path] = []
    for entry in _list_entries(root):
        if not _is_plain_file(entry):
            continue
        if probe.is_writable(entry):
            writable.append(entry)
        else:
            not_writable.append(entry)

    logger.info(
        "files.scan_permissions",
        directory=str(root),
        writable=len(writable),
        not_writable=len(not_writable),
    )
    return PermissionScan(directory=root, writable=writable, not_writable=not_writable)


def check_file(path: str | Path | None, probe: AccessProbe) -> FileCheck:
    if path is None or str(path).strip() == "":
        raise UsageError("a filename argument is required")

    target = Path(path)
    if not target.is_file():
        return FileCheck(path=target)

    return FileCheck(
        path=target,
        exists=True,
        readable=probe.is_readable(target),
        empty=target.stat().st_size == 0,
    )


def classify_path(path: str | Path | None) -> PathInfo:
    """Classify a path the way `[ -f ]`, `[ -d ]` and `[ -L ]` would, in that order.

    `-f` and `-d` follow symlinks, so a link only reports as `symlink` when
    its target is missing or is neither a file nor a directory.
    """

    if path is None or str(path).strip() == "":
        raise UsageError("a path argument is required")

    target = Path(path)
    if target.is_file():
        kind = PathKind.FILE
    elif target.is_dir():
        kind = PathKind.DIRECTORY
    elif target.is_symlink():
        kind = PathKind.SYMLINK
    elif os.path.lexists(target):
        kind = PathKind.OTHER
    else:
        kind = PathKind.MISSING

    logger.debug("files.classify_path", path=str(target), kind=kind.value)
    return PathInfo(path=target, kind=kind)


def check_access(path: str | Path | None, probe: AccessProbe) -> AccessReport:
    if path is None or str(path).strip() == "":
        raise UsageError("a filename is required")
    target = Path(path)
    return AccessReport(
        path=target,
        readable=probe.is_readable(target),
        writable=probe.is_writable(target),
    )


def count_files(directory: str | Path | None) -> int:
    """Count regular files (symlinks to files included, like `-f`) in `directory`."""

    root = _require_directory(directory)
    count = sum(1 for entry in _list_entries(root) if entry.is_file())
    logger.info("files.count_files", directory=str(root), count=count)
    return count


def make_directory(path: str | Path | None) -> bool:
    """Create a single directory; False when `mkdir` would have failed."""

    if path is None or str(path).strip() == "":
        raise UsageError("a directory name is required")
    try:
        Path(path).mkdir()
    except OSError as exc:
        logger.info("files.mkdir_failed", path=str(path), error=str(exc))
        return False
    return True


def _mode_string(path: Path) -> str:
    return stat.filemode(path.stat().st_mode)


def make_executable(path: str | Path | None) -> ModeChange:
    """`chmod +x`: add an execute bit for every class that can read."""

    if path is None or str(path).strip() == "":
        raise UsageError("a filename argument is required")

    target = Path(path)
    if not target.exists():
        raise PathNotFoundError(f"File '{target}' does not exist.", path=str(target))

    before = _mode_string(target)
    mode = stat.S_IMODE(target.stat().st_mode)
    # Read bits sit two positions above the matching execute bits.
    mode |= (mode & 0o444) >> 2
    target.chmod(mode)
    after = _mode_string(target)

    logger.info("files.make_executable", path=str(target), before=before, after=after)
    return ModeChange(path=target, before=before, after=after)
