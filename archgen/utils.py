"""Console and logging helpers for the archgen CLI.

All terminal output goes through the shared Rich ``console``; the scaffolding
core never prints.  Logging from the core is routed to the console through a
``RichHandler`` installed by :func:`setup_logging`.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

console = Console()

LOGGER_NAME = "archgen"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single ``RichHandler`` to the ``archgen`` logger.

    Safe to call repeatedly; subsequent calls only adjust the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.WARNING
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)
    return logger


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    console.print(table)
    console.print()


def print_preview(architecture: str, tree: str) -> None:
    """Print a template preview inside a titled panel."""
    console.print()
    console.print(
        Panel(
            Text(tree),
            title=f"[bold]Project structure preview ({architecture})[/bold]",
            title_align="left",
            border_style="cyan",
            expand=False,
        )
    )


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(Text(message, style="bold green"))


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(Text.assemble(("Error: ", "bold red"), message))


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(Text.assemble(("Warning: ", "bold yellow"), message))
