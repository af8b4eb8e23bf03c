"""Process and environment drills.

The CLI owns prompting and printing. Functions here take callables for
anything interactive (`ask_password`, `on_failure`) so the same flow can be
driven from tests or the interactive menu.
"""

from __future__ import annotations

import getpass
import os
from pathlib import Path
from typing import Callable

import structlog

from adapters.process_runner import run_command, split_command
from core.config import AppSettings
from core.domain.models import CommandOutcome, EnvironmentReport, LoginResult
from core.errors import PathNotFoundError, UsageError

logger = structlog.get_logger(__name__)


def environment_report(settings: AppSettings | None = None) -> EnvironmentReport:
    """Collect user/env details and export APP_ENV into this process."""

    settings = settings or AppSettings()
    os.environ["APP_ENV"] = settings.app_env

    uid = os.getuid() if hasattr(os, "getuid") else None
    gid = os.getgid() if hasattr(os, "getgid") else None
    return EnvironmentReport(
        user=getpass.getuser(),
        uid=uid,
        gid=gid,
        home=os.environ.get("HOME", str(Path.home())),
        path=os.environ.get("PATH", ""),
        app_env=os.environ["APP_ENV"],
    )


def login(
    ask_password: Callable[[], str],
    settings: AppSettings | None = None,
    *,
    on_failure: Callable[[int], None] | None = None,
) -> LoginResult:
    """Ask for the password up to `login_max_attempts` times."""

    settings = settings or AppSettings()
    for attempt in range(1, settings.login_max_attempts + 1):
        if ask_password() == settings.login_password:
            logger.info("system.login_granted", attempt=attempt)
            return LoginResult(granted=True, attempts=attempt)
        if on_failure is not None:
            on_failure(attempt)

    logger.warning("system.login_locked", attempts=settings.login_max_attempts)
    return LoginResult(granted=False, attempts=settings.login_max_attempts)


def run_if_exists(script: str | Path | None) -> CommandOutcome:
    if script is None or str(script).strip() == "":
        raise UsageError("a script path is required")

    target = Path(script)
    if not target.is_file():
        raise PathNotFoundError("file not found", path=str(target))

    # Absolute path: a bare name must not be looked up on PATH.
    return run_command([str(target.resolve())])


def deploy(
    settings: AppSettings | None = None,
    *,
    config_file: Path | None = None,
) -> CommandOutcome:
    settings = settings or AppSettings()
    config_path = config_file or settings.deploy_config_file
    if not config_path.is_file():
        raise PathNotFoundError("config file missing!", path=str(config_path))

    logger.info(
        "system.deploy",
        service=settings.deploy_service_name,
        command=settings.deploy_command,
    )
    return run_command(split_command(settings.deploy_command))
