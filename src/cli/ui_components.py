"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets several commands reuse the same tables and panels.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import EnvironmentReport, PermissionScan


def print_banner(console: Console) -> None:
    """Welcome banner for the interactive menu.

    Why here:
    - Avoids circular imports (main <-> menu).
    - Non-interactive commands never show it, so their stdout stays scriptable.
    """

    title = Text("shell-drills", style="bold cyan")
    subtitle = Text("Variables • Conditionals • Loops • Files", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_permissions_table(scan: PermissionScan) -> Table:
    """Table view of a permission scan (used with `--table`)."""

    table = Table(title=f"Write permission in {scan.directory}")
    table.add_column("File", style="white")
    table.add_column("Writable", style="green", no_wrap=True)
    for path in scan.writable:
        table.add_row(path.name, "yes")
    for path in scan.not_writable:
        table.add_row(path.name, "[red]no[/red]")
    return table


def build_environment_panel(report: EnvironmentReport) -> Panel:
    body = Text()
    body.append(f"Current User: {report.user}\n")
    if report.uid is not None:
        body.append(f"User Details: uid={report.uid} gid={report.gid}\n")
    body.append(f"HOME directory: {report.home}\n")
    body.append(f"PATH variable : {report.path}\n", style="dim")
    body.append(f"Custom variable exported: APP_ENV={report.app_env}")
    return Panel(body, title=Text("Environment", style="bold yellow"), border_style="yellow")
