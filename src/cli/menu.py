"""Interactive menu that dispatches to the individual drills.

The menu only gathers input; each branch reuses the same command function
the non-interactive CLI exposes.
"""

from __future__ import annotations

import typer

from cli import files as files_cli
from cli import numbers as numbers_cli
from cli import text as text_cli
from cli.common import console, echo
from cli.ui_components import print_banner
from core.domain.operations import ArithmeticOp, TextOp
from core.services import numbers as numbers_service

EXIT_OPTION_CODE = 2


def _arithmetic() -> None:
    raw = typer.prompt("Enter two numbers with space separated")
    values = raw.split()
    values += [""] * (2 - len(values))

    for position, value in enumerate(values[:2]):
        if not numbers_service.is_integer(value):
            echo("Enter valid number (0-9)")
            raise typer.Exit(3 + position)
        echo(f"{value} is a valid number")

    echo("Select an operation to perform")
    echo("1 - add")
    echo("2 - subtract")
    echo("3 - Multiply")
    echo("4 - Divide")
    op = ArithmeticOp.from_menu(typer.prompt("Enter an option"))
    if op is None:
        echo("Invalid choice")
        raise typer.Exit(1)

    numbers_cli.calc(first=values[0], second=values[1], op=op)


def _strings() -> None:
    value = typer.prompt("Enter a string")
    echo("Select an option")
    echo("1 - Convert to UPPERCASE")
    echo("2 - Convert to lowercase")
    echo("3 - Reverse the string")
    echo("4 - Count number of characters")
    op = TextOp.from_menu(typer.prompt("Select any of the task (1-4)"))
    if op is None:
        echo("Invalid choice")
        raise typer.Exit(1)
    text_cli.transform(op=op, text=value)


def menu(
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Show the welcome banner."),
) -> None:
    """Pick a drill from a numbered menu."""

    if banner:
        print_banner(console)

    echo("Select any of the operation to perform")
    echo("1 - check if the given input is file or dir")
    echo("2 - Perform arithmetic on two numbers")
    echo("3 - String operations")
    echo("4 - Print all even numbers up to N")
    echo("5 - Exit")

    option = typer.prompt("Enter the option (1-5)").strip()

    if option == "1":
        files_cli.what_is(path=typer.prompt("Enter the path"))
    elif option == "2":
        _arithmetic()
    elif option == "3":
        _strings()
    elif option == "4":
        numbers_cli.evens(number=typer.prompt("Enter positive number").strip())
    elif option == "5":
        echo("Good Bye")
        raise typer.Exit(EXIT_OPTION_CODE)
    else:
        echo("Invalid choice")
        raise typer.Exit(1)
