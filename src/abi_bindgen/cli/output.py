"""Rich console output for the abi-bindgen CLI.

Colored status lines and the end-of-run summary. Colors are disabled by
the NO_COLOR environment variable or the --no-color flag.
"""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from abi_bindgen.models import GenerationReport, TargetStatus

# Rich respects NO_COLOR on its own; this also covers force_terminal
_force_no_color = os.environ.get("NO_COLOR") is not None


def create_console(no_color: bool = False) -> Console:
    """Create a Rich Console with the requested color settings.

    Args:
        no_color: If True, disable colored output. NO_COLOR is also honored.

    Returns:
        Configured Console instance.
    """
    force_terminal = None
    if no_color or _force_no_color:
        force_terminal = False
    return Console(force_terminal=force_terminal, no_color=no_color or _force_no_color)


console = create_console()


def success(message: str, **kwargs: Any) -> None:
    """Print a success message with a green checkmark.

    Example:
        >>> success("Generated abis/TokenFactoryAbi.ts")
        ✓ Generated abis/TokenFactoryAbi.ts
    """
    console.print(f"[green]✓[/green] {message}", **kwargs)


def error(message: str, **kwargs: Any) -> None:
    """Print an error message with a red X."""
    console.print(f"[red]✗[/red] {message}", **kwargs)


def warning(message: str, **kwargs: Any) -> None:
    """Print a warning message with a yellow triangle."""
    console.print(f"[yellow]⚠[/yellow] {message}", **kwargs)


def info(message: str, **kwargs: Any) -> None:
    """Print an informational message."""
    console.print(message, **kwargs)


def set_no_color(no_color: bool) -> None:
    """Replace the module console, enabling or disabling colors."""
    global console
    console = create_console(no_color=no_color)


def print_report(report: GenerationReport) -> None:
    """Print the per-target table, guidance for failures, and import hints.

    Args:
        report: Result of a generation run.
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("Status", justify="center", width=6)
    table.add_column("Target", min_width=14)
    table.add_column("Binding", min_width=20)
    table.add_column("Source", min_width=30)

    for result in report.results:
        if result.status == TargetStatus.GENERATED:
            status = Text("✓", style="green")
            source = Text(result.source or "-")
        else:
            status = Text("✗", style="red")
            source = Text("no usable artifact", style="dim")
        table.add_row(status, Text(result.name), Text(result.output), source)

    console.print(table)

    for result in report.results:
        if result.generated:
            continue
        error(f"Could not find a {escape(result.name)} artifact. Tried:")
        for attempt in result.attempts:
            info(f"    {escape(attempt.path)} [dim]({attempt.outcome.value})[/dim]", markup=True)
        if result.hint:
            warning(escape(result.hint))

    info("")
    info("[bold]=== ABI Generation Complete ===[/bold]")
    info("Generated files should be available in:")
    for result in report.results:
        info(f"- {report.output_dir}/{result.output}", markup=False)

    imports = [r for r in report.results if r.output.endswith(".ts")]
    if imports:
        info("")
        info("You can now import these ABIs in your frontend/backend:")
        bindings_dir = PurePath(report.output_dir).name
        for result in imports:
            name = result.output.removesuffix(".ts")
            info(f"import {{ {name} }} from './{bindings_dir}/{name}';", markup=False)
