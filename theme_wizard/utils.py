"""Shared console helpers for the theme wizard.

All operator-facing output goes through the single Rich ``console`` defined
here: coloured status lines, step headers, the step progress indicator and
key/value summary tables.
"""

from __future__ import annotations

from rich.console import Console
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from theme_wizard.catalog import STEP_LABELS, TOTAL_STEPS

console = Console()

STEP_COLORS: dict[int, str] = {
    1: "bright_cyan",
    2: "bright_green",
    3: "bright_yellow",
    4: "bright_magenta",
    5: "bright_red",
    6: "bright_blue",
}


def print_step_header(step: int, target: Console | None = None) -> None:
    """Print a full-width rule naming the current wizard step.

    Args:
        step: Step number (1-6).
        target: Console to print on. Defaults to the shared console.
    """
    out = target or console
    color = STEP_COLORS.get(step, "white")
    label = STEP_LABELS[step - 1] if 1 <= step <= TOTAL_STEPS else "?"
    out.print()
    out.print(
        Rule(
            f"[bold {color}] Etapa {step} de {TOTAL_STEPS}: {label} [/bold {color}]",
            style=color,
        )
    )
    out.print()


def render_step_indicator(current_step: int) -> Text:
    """Build the one-line progress bar shown above every step.

    Finished steps show a check mark, the active one is highlighted and the
    pending ones are dimmed.
    """
    text = Text()
    for number, label in enumerate(STEP_LABELS, start=1):
        if number < current_step:
            text.append(f" ✓ {label} ", style="bold green")
        elif number == current_step:
            text.append(f" {number} {label} ", style="bold reverse cyan")
        else:
            text.append(f" {number} {label} ", style="dim")
        if number < len(STEP_LABELS):
            text.append("─", style="dim")
    return text


def print_summary_table(
    data: dict[str, str],
    title: str = "Summary",
    target: Console | None = None,
) -> None:
    """Print a two-column key/value summary table."""
    out = target or console
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    out.print(table)
    out.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
