"""Integer drill commands.

Numbers are taken as strings and validated by the service, so a bad value
gets the drill's own message and exit status instead of Click's.
"""

from __future__ import annotations

from typing import List, Optional

import typer

from cli.common import drill_errors, echo
from core.config import AppSettings
from core.domain.operations import ArithmeticOp
from core.services import numbers as numbers_service

# Lets "-5" through as a value rather than an unknown option.
_NUMERIC_ARGS = {"ignore_unknown_options": True}

app = typer.Typer(no_args_is_help=True, help="Integer drills.")


@app.command(context_settings=_NUMERIC_ARGS)
def sign(number: str = typer.Argument(..., help="Integer to classify.")) -> None:
    """Say whether a number is positive, negative or zero."""

    with drill_errors():
        value = numbers_service.parse_int(number)
    echo(numbers_service.sign(value))


@app.command(context_settings=_NUMERIC_ARGS)
def validate(args: Optional[List[str]] = typer.Argument(None, help="Exactly two integers.")) -> None:
    """Validate two integer arguments (exit 3 count, 1 first, 2 second)."""

    with drill_errors():
        numbers_service.validate_pair(args or [])
    echo("Both numbers are valid")


@app.command(context_settings=_NUMERIC_ARGS)
def arith(args: Optional[List[str]] = typer.Argument(None, help="Exactly two integers.")) -> None:
    """Print the sum and difference of two numbers plus the argument summary."""

    echo("Argument processing started...")
    with drill_errors():
        summary = numbers_service.arith(args or [])

    echo()
    echo(f"You passed: {summary.first} and {summary.second}")
    echo()
    echo(f"Sum        : {summary.total}")
    echo(f"Difference : {summary.difference}")
    echo()
    echo(f"All arguments: {' '.join(summary.arguments)}")
    echo(f"Total count  : {summary.count}")


@app.command(context_settings=_NUMERIC_ARGS)
def calc(
    first: str = typer.Argument(..., help="First integer."),
    second: str = typer.Argument(..., help="Second integer."),
    op: ArithmeticOp = typer.Option(ArithmeticOp.ADD, "--op", case_sensitive=False, help="Operation to apply."),
) -> None:
    """Integer calculator; division truncates toward zero."""

    with drill_errors():
        a = numbers_service.parse_int(first, exit_code=3)
        b = numbers_service.parse_int(second, exit_code=4)
        result = numbers_service.calculate(a, b, op)
    echo(f"Answer: {result}")


@app.command(context_settings=_NUMERIC_ARGS)
def compare(
    first: Optional[str] = typer.Option(None, "--first", help="First number."),
    second: Optional[str] = typer.Option(None, "--second", help="Second number."),
    choice: Optional[str] = typer.Option(None, "--choice", help="1: first > second, 2: second > first, 3: equal."),
) -> None:
    """Compare two numbers according to a menu choice."""

    first = first if first is not None else typer.prompt("Enter first number")
    second = second if second is not None else typer.prompt("Enter second number")
    if choice is None:
        echo("Choose the number:")
        echo("1 - check if first number is greater than second")
        echo("2 - check if second is greater than the first")
        echo("3 - check if first and second are equal")
        choice = typer.prompt("Enter the number")

    with drill_errors():
        a = numbers_service.parse_int(first)
        b = numbers_service.parse_int(second)
        echo(numbers_service.compare(a, b, choice))


@app.command(context_settings=_NUMERIC_ARGS)
def evens(number: str = typer.Argument(..., help="Positive upper bound.")) -> None:
    """Print every even number from 2 up to N."""

    with drill_errors():
        values = numbers_service.evens(number)
    echo(f"{number} is valid")
    for value in values:
        echo(f"Number: {value}")


@app.command()
def fizzbuzz(
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Upper bound (defaults to DRILLS_FIZZBUZZ_LIMIT)."),
) -> None:
    """FizzBuzz on a single line."""

    limit = limit if limit is not None else AppSettings().fizzbuzz_limit
    with drill_errors():
        echo(" ".join(numbers_service.fizzbuzz(limit)))


@app.command(context_settings=_NUMERIC_ARGS)
def primes(limit: int = typer.Argument(..., help="Largest candidate.")) -> None:
    """Print the primes up to LIMIT (sieve of Eratosthenes)."""

    with drill_errors():
        found = numbers_service.primes(limit)
    echo(" ".join(str(p) for p in found))
