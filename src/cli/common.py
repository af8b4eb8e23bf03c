"""Shared CLI plumbing: consoles, plain output and error mapping."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import typer
from rich.console import Console
from rich.markup import escape

from core.errors import DrillError

# soft_wrap keeps long paths on one line when stdout is not a terminal.
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def echo(text: str = "") -> None:
    """Print drill output verbatim (no markup, no highlighting)."""

    console.print(text, markup=False, highlight=False, emoji=False)


@contextmanager
def drill_errors() -> Iterator[None]:
    """Turn a `DrillError` into a red stderr message and its exit status."""

    try:
        yield
    except DrillError as exc:
        err_console.print(f"[red]{escape(exc.message)}[/red]", highlight=False)
        raise typer.Exit(exc.exit_code) from exc
