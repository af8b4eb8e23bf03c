"""Access probe backed by the operating system.

Uses `os.access` with the real uid/gid, the same answer the shell's
`-r`/`-w` tests give.
"""

from __future__ import annotations

import os
from pathlib import Path


class OsAccessProbe:
    """`AccessProbe` implementation that asks the kernel."""

    def is_readable(self, path: Path) -> bool:
        return os.access(path, os.R_OK)

    def is_writable(self, path: Path) -> bool:
        return os.access(path, os.W_OK)
