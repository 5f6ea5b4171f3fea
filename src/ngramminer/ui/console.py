"""Console input/output utilities for ngram-miner."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from ..model import Step
from ..validation import ValidationError

NUMBER_ERROR = "Number could not be read. Try again."
WORD_ERROR = "String can not have spaces. Try again."


class InputExhausted(EOFError):
    """Raised when the input runs out while a value is expected."""


class Console:
    """Centralized prompts and output formatting."""

    def __init__(
        self,
        debug: bool = False,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        """
        Initialize console.

        Args:
            debug: If True, show debug lines and stack traces
            stdin: Stream to read answers from (defaults to sys.stdin)
            stdout: Stream for prompts and results (defaults to sys.stdout)
            stderr: Stream for errors (defaults to sys.stderr)
        """
        self.debug = debug
        self._stdin = stdin
        self._stdout = stdout
        self._stderr = stderr

    # Resolved lazily so click's CliRunner can swap the std streams.
    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    # -----------------------------------------------------------------
    # Input
    # -----------------------------------------------------------------

    def _read_line(self) -> str:
        line = self.stdin.readline()
        if line == "":
            raise InputExhausted("No more input to read.")
        return line.rstrip("\r\n")

    def read_integer(self) -> int:
        """Read lines until one holds an integer."""
        while True:
            line = self._read_line()
            try:
                return int(line.strip())
            except ValueError:
                self.print_info(NUMBER_ERROR)

    def read_decimal(self) -> float:
        """Read lines until one holds a decimal number."""
        while True:
            line = self._read_line()
            try:
                return float(line.strip())
            except ValueError:
                self.print_info(NUMBER_ERROR)

    def read_word(self) -> str:
        """Read lines until one holds a single word (no inner whitespace)."""
        while True:
            line = self._read_line().strip()
            if len(line.split()) == 1:
                return line
            self.print_info(WORD_ERROR)

    def select_option(self, title: str, options: Sequence[str], columns: int = 1) -> str:
        """
        Print a numbered menu and return the chosen option.

        Args:
            title: Line printed above the options
            options: Choices, shown in the given order
            columns: Options printed per row

        Raises:
            ValidationError: If the number is not one of the options
        """
        self.print_info(title)
        for i, option in enumerate(options):
            entry = f"\t{i + 1}. {option}"
            if columns == 1:
                self.print_info(entry)
            else:
                self.stdout.write(entry)
                if i % columns == columns - 1:
                    self.print_info("")
        if columns > 1 and len(options) % columns:
            self.print_info("")

        self.print_info("")
        self.print_info("Insert number option:")
        opt = self.read_integer()
        if opt < 1 or opt > len(options):
            raise ValidationError(
                kind="menu_option",
                message="Incorrect option.",
                details={"option": opt, "choices": len(options)},
            )
        return options[opt - 1]

    def ask(self, question: str) -> None:
        """Print a question preceded by a blank line."""
        self.print_info("")
        self.print_info(question)

    # -----------------------------------------------------------------
    # Output
    # -----------------------------------------------------------------

    def print_header(self, title: str) -> None:
        """Print a section header."""
        self.print_info(f"\n{title}")
        self.print_info("-" * len(title))

    def print_plan(self, steps: Sequence[Step]) -> None:
        """Print the ordered steps of a job flow."""
        self.print_header(f"PLAN ({len(steps)} steps)")
        for step in steps:
            self.print_info(f"{step.name}: {step.script}")
            for key, value in step.args:
                self.print_info(f"    {key}={value}")

    def print_job_launched(self, job_flow_id: str) -> None:
        self.print_info("")
        self.print_info("Launching job with id:")
        self.print_info(job_flow_id)
        self.print_info("")

    def print_error(
        self,
        title: str,
        message: str,
        details: Optional[list[str]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        """
        Print structured error message.

        Args:
            title: Error title
            message: Main error message
            details: Optional list of detail lines
            suggestion: Optional suggestion for user
        """
        print(f"\nERROR: {title}", file=self.stderr)
        print(f"{message}", file=self.stderr)
        if details:
            for detail in details:
                print(f"  {detail}", file=self.stderr)
        if suggestion:
            print(f"\n{suggestion}", file=self.stderr)

    def print_exception(self, exc: BaseException) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exception(type(exc), exc, exc.__traceback__, file=self.stderr)
        else:
            print(f"Error: {exc}", file=self.stderr)

    def print_info(self, message: str) -> None:
        """Print informational message."""
        print(message, file=self.stdout)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            print(f"[DEBUG] {message}", file=self.stderr)


# Global console instance (will be initialized by CLI)
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
