"""Process and environment drill commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from cli.common import console, drill_errors, echo
from cli.ui_components import build_environment_panel
from core.config import AppSettings
from core.services import system as system_service

app = typer.Typer(no_args_is_help=True, help="Process and environment drills.")


@app.command()
def env(
    panel: bool = typer.Option(False, "--panel", help="Render as a Rich panel."),
) -> None:
    """Show the current user, HOME, PATH and the exported APP_ENV."""

    settings = AppSettings()
    report = system_service.environment_report(settings)
    if panel:
        console.print(build_environment_panel(report))
        return

    echo("Gathering environment details...")
    echo(f"Current User: {report.user}")
    if report.uid is not None:
        echo(f"User Details: uid={report.uid} gid={report.gid}")
    echo()
    echo(f"HOME directory: {report.home}")
    echo(f"PATH variable  : {report.path}")
    echo()
    echo(f"Custom variable exported: APP_ENV={report.app_env}")
    echo(f'Running in "{report.app_env}" environment')


@app.command()
def login() -> None:
    """Three tries to enter the right password."""

    settings = AppSettings()
    result = system_service.login(
        lambda: typer.prompt("Enter password", hide_input=True),
        settings,
        on_failure=lambda _attempt: echo("Wrong password"),
    )
    if result.granted:
        echo("Access Granted")
        return
    echo(f"Account locked due to {result.attempts} failed attempts")
    raise typer.Exit(1)


@app.command()
def run(script: str = typer.Argument(..., help="Script to run if it exists.")) -> None:
    """Run a script only if it exists, then report how it went."""

    echo(f"checking if {script} exists or not")
    with drill_errors():
        outcome = system_service.run_if_exists(script)

    name = Path(script).name
    if outcome.succeeded:
        echo(f"{name} ran successful")
    else:
        echo(f"{name} failed to run")
    echo(f"script finished with exit code: {outcome.exit_code}")
    raise typer.Exit(outcome.exit_code)


@app.command()
def deploy(
    config: Optional[Path] = typer.Option(None, "--config", help="Config file that must exist (defaults to DRILLS_DEPLOY_CONFIG_FILE)."),
) -> None:
    """Simulated deployment guarded by a config file check."""

    settings = AppSettings()
    config_path = config or settings.deploy_config_file

    echo("Starting the deployment")
    echo()
    with drill_errors():
        if config_path.is_file():
            echo(f"{config_path} found reading it")
            echo(f'Deploying "{settings.deploy_service_name}"')
        outcome = system_service.deploy(settings, config_file=config_path)

    echo("Deployment success" if outcome.succeeded else "Deployment failed")
    echo(f"Last exit code: {outcome.exit_code}")
    echo("Deployment script completed")
    raise typer.Exit(outcome.exit_code)
