"""Wrapper around `subprocess` for drills that launch other programs.

Why a wrapper:
- One place that decides how commands are split and how exit codes are read.
- Tests can swap `run_command` for a stub without touching the services.
"""

from __future__ import annotations

import errno
import shlex
import subprocess

import structlog

from core.domain.models import CommandOutcome
from core.errors import UsageError

logger = structlog.get_logger(__name__)

FALLBACK_SHELL = "/bin/sh"


def split_command(command: str) -> list[str]:
    """Split a command line like the shell would; malformed quoting is a usage error."""

    try:
        argv = shlex.split(command)
    except ValueError as exc:
        raise UsageError(f"Invalid command {command!r}: {exc}") from exc
    if not argv:
        raise UsageError("Command is empty")
    return argv


def _shell_status(returncode: int) -> int:
    """Killed by signal N reads as 128+N, as in `$?`."""

    return 128 - returncode if returncode < 0 else returncode


def run_command(argv: list[str]) -> CommandOutcome:
    """Run `argv`, inheriting stdio, and return its exit status.

    A missing or non-executable program maps to the shell's 127/126 codes
    instead of raising. A file without a shebang is handed to `/bin/sh`,
    which is what bash does on ENOEXEC.
    """

    logger.debug("command.start", argv=argv)
    try:
        completed = subprocess.run(argv, check=False)
    except FileNotFoundError:
        logger.info("command.not_found", argv=argv)
        return CommandOutcome(command=argv, exit_code=127)
    except PermissionError:
        logger.info("command.not_executable", argv=argv)
        return CommandOutcome(command=argv, exit_code=126)
    except OSError as exc:
        if exc.errno == errno.ENOEXEC:
            logger.info("command.no_shebang", argv=argv, shell=FALLBACK_SHELL)
            return run_command([FALLBACK_SHELL, *argv])
        logger.warning("command.os_error", argv=argv, error=str(exc))
        return CommandOutcome(command=argv, exit_code=126)

    exit_code = _shell_status(completed.returncode)
    logger.debug("command.finished", argv=argv, exit_code=exit_code)
    return CommandOutcome(command=argv, exit_code=exit_code)
