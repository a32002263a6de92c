"""Terminal prompts shared by the wizard steps."""

from __future__ import annotations

from typing import Callable, Optional

from loguru import logger
from rich.console import Console

Reader = Callable[[str], str]

YES = "y"
NO = "n"


class Prompter:
    """Reads answers from the terminal and prints colored feedback.

    *reader* receives the prompt text and returns one line without the trailing
    newline. It defaults to ``console.input`` with markup disabled, so bracketed
    defaults such as ``[y]`` are shown verbatim. A closed input stream raises
    EOFError, which is left to propagate.
    """

    def __init__(self, console: Optional[Console] = None, reader: Optional[Reader] = None) -> None:
        self.console = console or Console(highlight=False)
        self._reader = reader or self._terminal_input

    def _terminal_input(self, prompt: str) -> str:
        return self.console.input(prompt, markup=False)

    def ask(self, message: str) -> str:
        return self._reader(f"{message} ")

    def confirm(self, message: str) -> bool:
        """Ask a yes/no question. Empty input means yes; only 'y' and 'n' are accepted."""
        while True:
            answer = self.ask(f"{message} (y/n) [y]:")
            if answer.strip() == "":
                return True
            if answer == YES:
                return True
            if answer == NO:
                return False
            logger.debug(f"Unrecognised confirmation answer {answer!r}")
            self.warn("Please answer 'y' or 'n' (or press Enter for yes).")

    # ── Output ────────────────────────────────────────────────────────────────

    def info(self, message: str) -> None:
        self.console.print(message, markup=False)

    def success(self, message: str) -> None:
        self.console.print(message, style="green", markup=False)

    def warn(self, message: str) -> None:
        self.console.print(message, style="yellow", markup=False)

    def error(self, message: str) -> None:
        self.console.print(message, style="red", markup=False)

    def banner(self, message: str) -> None:
        self.console.rule(message, style="green")
