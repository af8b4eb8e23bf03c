"""Access-check contracts.

Why Protocol:
- Structural contract (duck typing) without a rigid base class.
- Services ask "can I read/write this?" through it, so tests can simulate
  permission layouts that the OS would not enforce (e.g. when running as root).
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class AccessProbe(Protocol):
    """Minimal contract for permission checks on a single path."""

    def is_readable(self, path: Path) -> bool:
        ...

    def is_writable(self, path: Path) -> bool:
        ...
