"""Filesystem drill commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from adapters.fs_access import OsAccessProbe
from adapters.json_exporter import dump_result_json, export_result_json
from cli.common import console, drill_errors, echo
from cli.ui_components import build_permissions_table
from core.domain.operations import PathKind
from core.interfaces.access import AccessProbe
from core.services import files as files_service

app = typer.Typer(no_args_is_help=True, help="File and directory drills.")


def get_probe() -> AccessProbe:
    return OsAccessProbe()


@app.command()
def perms(
    directory: str = typer.Argument(..., help="Directory to scan."),
    as_json: bool = typer.Option(False, "--json", help="Print the scan as JSON."),
    as_table: bool = typer.Option(False, "--table", help="Print a Rich table."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write the scan as JSON to this file."),
) -> None:
    """List regular files you can write to, then those you cannot."""

    with drill_errors():
        scan = files_service.scan_permissions(directory, get_probe())

    if output is not None:
        export_result_json(result=scan, output_path=output)

    if as_json:
        console.out(dump_result_json(scan), end="")
        return
    if as_table:
        console.print(build_permissions_table(scan))
        return

    echo("Files with write permission:")
    for path in scan.writable:
        echo(str(path))
    echo("Files without write permission:")
    for path in scan.not_writable:
        echo(str(path))


@app.command()
def check(filename: str = typer.Argument(..., help="File to validate.")) -> None:
    """Check that a file exists, is readable and is not empty."""

    with drill_errors():
        result = files_service.check_file(filename, get_probe())
    echo(result.describe())
    if not result.exists:
        raise typer.Exit(1)


@app.command(name="type")
def type_(path: str = typer.Argument(..., help="Path to classify.")) -> None:
    """Report whether a path is a regular file, directory or symlink."""

    with drill_errors():
        info = files_service.classify_path(path)
    echo(info.describe())
    if info.kind is PathKind.MISSING:
        raise typer.Exit(1)


@app.command(name="what-is")
def what_is(
    path: Optional[str] = typer.Option(None, "--path", help="Skip the prompt and check this path."),
) -> None:
    """Prompt for a name and say whether it is a file or a directory."""

    name = path if path is not None else typer.prompt("Enter file or dir name to find what it is file or dir")
    with drill_errors():
        info = files_service.classify_path(name)

    if info.kind is PathKind.FILE:
        echo(f"{name} is a file")
    elif info.kind is PathKind.DIRECTORY:
        echo(f"{name} is a dir")
    elif info.kind is PathKind.MISSING:
        echo("It does not exist")
        raise typer.Exit(1)
    else:
        echo(f"{name} exists but it is not a file or dir, it is something else")


@app.command()
def access(
    path: Optional[str] = typer.Option(None, "--path", help="Skip the prompt and check this file."),
) -> None:
    """Prompt for a file and report whether it is readable and writable."""

    name = path if path is not None else typer.prompt("Enter a file name to check if its readable and writable")
    with drill_errors():
        report = files_service.check_access(name, get_probe())
    echo(report.describe())


@app.command()
def count(directory: str = typer.Argument(..., help="Directory to count files in.")) -> None:
    """Count the regular files directly inside a directory."""

    with drill_errors():
        total = files_service.count_files(directory)
    echo(f"Total files: {total}")


@app.command(name="mkdir")
def mkdir_(
    directory: Optional[str] = typer.Option(None, "--name", help="Skip the prompt and create this directory."),
) -> None:
    """Create a directory and report success or failure in one go."""

    name = directory if directory is not None else typer.prompt("Enter directory name to create")
    with drill_errors():
        created = files_service.make_directory(name)
    if created:
        echo(f"Directory '{name}' created successfully")
    else:
        echo(f"Failed to create directory '{name}'")
        raise typer.Exit(1)


@app.command(name="chmod-x")
def chmod_x(filename: str = typer.Argument(..., help="File to make executable.")) -> None:
    """Show a file's mode before and after setting execute permission."""

    with drill_errors():
        change = files_service.make_executable(filename)
    echo("Before changing permission:")
    echo(f"{change.before} {change.path}")
    echo("After setting execute permission:")
    echo(f"{change.after} {change.path}")

