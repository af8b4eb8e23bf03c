"""String drill commands."""

from __future__ import annotations

from typing import Optional

import typer

from cli.common import echo
from core.domain.operations import TextOp
from core.services import text as text_service

app = typer.Typer(no_args_is_help=True, help="String drills.")


@app.command()
def transform(
    op: TextOp = typer.Argument(..., case_sensitive=False, help="upper, lower, reverse or count."),
    text: Optional[str] = typer.Option(None, "--text", help="Skip the prompt and use this string."),
) -> None:
    """Uppercase, lowercase, reverse or count the bytes of a string."""

    value = text if text is not None else typer.prompt("Enter a string")
    result = text_service.transform(value, op)
    if op is TextOp.UPPER:
        echo(f"converted to UPPERCASE {result}")
    elif op is TextOp.LOWER:
        echo(f"converted to lowercase {result}")
    else:
        echo(result)


@app.command()
def palindrome(text: str = typer.Argument(..., help="Word or phrase to test.")) -> None:
    """Exit 0 when TEXT reads the same backwards, 1 otherwise."""

    if text_service.is_palindrome(text):
        echo(f"'{text}' is a palindrome")
        return
    echo(f"'{text}' is not a palindrome")
    raise typer.Exit(1)


@app.command()
def name(
    fullname: Optional[str] = typer.Option(None, "--fullname", help="Skip the prompt."),
) -> None:
    """Split a full name into first and last name and greet."""

    value = fullname if fullname is not None else typer.prompt("Enter your first and last name")
    parts = text_service.split_name(value)
    echo()
    echo(f"First Name : {parts.first}")
    echo(f"Last Name  : {parts.last}")
    echo()
    echo(parts.greeting())


@app.command()
def quotes(
    text: Optional[str] = typer.Option(None, "--text", help="Skip the prompt."),
    literal: bool = typer.Option(False, "--literal", help="Show double vs single quotes and backslash escapes instead."),
    name: str = typer.Option("jagga", "--name", help="Value of $name in the --literal view."),
) -> None:
    """Show how quoting preserves whitespace that word splitting collapses."""

    if literal:
        for line in text_service.quoting_demo(name):
            echo(line)
        return

    value = text if text is not None else typer.prompt(
        "Enter your favorite fruit combination (e.g., Apple Mango)"
    )
    echo(f"Without quotes: {text_service.unquoted(value)}")
    echo(f'With quotes: "{value}"')
