"""Interactive choice resolution for the CLI.

Selecting one option from a list is modelled as a chain of strategies tried
in priority order:

1. ``FzfStrategy`` -- pipes the options into an external ``fzf`` process,
   only when stdout is a terminal and the binary is on ``PATH``.
2. ``NumericMenuStrategy`` -- prints a numbered menu and reads a number.

A strategy that cannot produce a valid choice raises ``SelectionError`` and
the next one is tried.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence

from rich.console import Console
from rich.prompt import IntPrompt

from .config import Config
from .utils import console as default_console

logger = logging.getLogger(__name__)


class SelectionError(Exception):
    """Raised when a strategy cannot resolve a choice."""


class SelectionStrategy(ABC):
    """Resolves one choice from an enumerated list."""

    name: str = "strategy"

    @abstractmethod
    def select(self, options: Sequence[str]) -> str:
        """Return one element of *options* or raise ``SelectionError``."""


class FzfStrategy(SelectionStrategy):
    name = "fzf"

    def __init__(self, command: str = "fzf") -> None:
        self.command = command

    def available(self) -> bool:
        return sys.stdout.isatty() and shutil.which(self.command) is not None

    def select(self, options: Sequence[str]) -> str:
        if not self.available():
            raise SelectionError(f"{self.command} is not available in this terminal")
        executable = shutil.which(self.command) or self.command
        try:
            proc = subprocess.run(
                [executable, "--ansi"],
                input="".join(f"{o}\n" for o in options),
                stdout=subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise SelectionError(f"failed to run {self.command}: {exc}") from exc
        if proc.returncode != 0:
            raise SelectionError(f"{self.command} exited with status {proc.returncode}")
        choice = proc.stdout.strip()
        if choice not in options:
            raise SelectionError(f"{self.command} returned an unknown option: {choice!r}")
        return choice


class NumericMenuStrategy(SelectionStrategy):
    name = "menu"

    def __init__(self, console: Console | None = None, prompt: str = "Select by number") -> None:
        self.console = console or default_console
        self.prompt = prompt

    def select(self, options: Sequence[str]) -> str:
        if not options:
            raise SelectionError("nothing to select from")
        self.console.print()
        for index, option in enumerate(options, start=1):
            self.console.print(f"{index:2d}) {option}", highlight=False, markup=False)
        while True:
            try:
                number = IntPrompt.ask(self.prompt, console=self.console)
            except EOFError as exc:
                raise SelectionError("input closed before a selection was made") from exc
            if 1 <= number <= len(options):
                return options[number - 1]
            self.console.print(f"Invalid selection. Enter 1-{len(options)}.")


def build_strategies(config: Config, *, no_fuzzy: bool = False) -> list[SelectionStrategy]:
    """Return the strategy chain for *config*, fuzzy first unless disabled."""
    strategies: list[SelectionStrategy] = []
    if config.use_fuzzy and not no_fuzzy:
        strategies.append(FzfStrategy(config.fzf_command))
    strategies.append(NumericMenuStrategy(prompt="Select architecture by number"))
    return strategies


def select_choice(options: Sequence[str], strategies: Sequence[SelectionStrategy]) -> str:
    """Try each strategy in order and return the first successful choice.

    Raises:
        SelectionError: If every strategy failed.
    """
    for strategy in strategies:
        try:
            return strategy.select(options)
        except SelectionError as exc:
            logger.debug("Selection strategy %s failed: %s", strategy.name, exc)
    raise SelectionError("no selection strategy produced a choice")
