"""Doctor command for environment diagnostics."""

from __future__ import annotations

import platform
import shutil
import sys

import typer
from rich.table import Table

from cli.common import console
from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")


def _check_shell() -> tuple[bool, str]:
    bash = shutil.which("bash")
    if bash is None:
        return False, "bash not found on PATH"
    return True, bash


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="shell-drills Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Python", "OK", f"{platform.python_version()} ({sys.executable})")

    ok_shell, detail_shell = _check_shell()
    table.add_row("bash", "OK" if ok_shell else "FAIL", detail_shell)

    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row("Log level", "OK", f"{settings.log_level} ({settings.log_format.value})")
    table.add_row("Login attempts", "OK", str(settings.login_max_attempts))

    console.print(table)

    if not ok_shell:
        console.print("\n[yellow]Note:[/yellow] `system run` and `system deploy` need a POSIX shell to run scripts.")
        raise typer.Exit(1)


@app.command()
def configure() -> None:
    """Interactive setup (stores values in the user config .env)."""

    settings = AppSettings()
    password = typer.prompt(
        "Login password",
        default=settings.login_password,
        hide_input=True,
        show_default=False,
    ).strip()
    app_env = typer.prompt("App environment", default=settings.app_env, show_default=True).strip()

    if not password or not app_env:
        raise typer.BadParameter("password and app environment are required")

    env_path = write_user_env_vars(
        {
            "DRILLS_LOGIN_PASSWORD": password,
            "DRILLS_APP_ENV": app_env,
        }
    )

    console.print(f"[green]Saved config to:[/green] {env_path}")
