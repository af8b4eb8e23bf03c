"""Root Typer application.

Sub-apps live in their own modules and are only wired together here, the
same way `doctor` is registered.
"""

from __future__ import annotations

from typing import Optional

import typer

from cli import doctor, files, numbers, system, text
from cli.common import console
from cli.menu import menu
from core import __version__
from core.config import AppSettings
from core.domain.operations import LogFormat
from core.logging_config import configure_logging

app = typer.Typer(
    name="drills",
    help="Shell-scripting course drills: files, numbers, strings and processes.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

app.add_typer(files.app, name="files")
app.add_typer(numbers.app, name="numbers")
app.add_typer(text.app, name="text")
app.add_typer(system.app, name="system")
app.add_typer(doctor.app, name="doctor")
app.command(name="menu")(menu)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"shell-drills, version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level (defaults to DRILLS_LOG_LEVEL)."),
    log_format: Optional[LogFormat] = typer.Option(None, "--log-format", help="Log renderer."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors."),
) -> None:
    """Shell-scripting course drills."""

    settings = AppSettings()
    level = "ERROR" if quiet else (log_level or settings.log_level)
    configure_logging(level=level, fmt=log_format or settings.log_format, force=True)


def run() -> None:
    app()
