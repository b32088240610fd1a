"""Console output and the interactive overwrite prompt.

ConsoleLogger renders status lines in two modes: decorated (colour and
emoji) when stdout is a terminal, plain prefixed text otherwise. It also
owns the overwrite confirmation prompt, which reads single keypresses in
raw terminal mode.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Callable

import typer
from pydantic import ValidationError
from rich.console import Console

from vscodeconfigurator.errors import ConfiguratorError, ErrorKind, QuitRequested

# ANSI sequences for the prompt: save cursor, restore cursor, clear to end of screen
_SAVE_CURSOR = "\x1b7"
_RESTORE_CURSOR = "\x1b8"
_CLEAR_BELOW = "\x1b[J"


class OutputEmoji(str, Enum):
    """Emoji used to decorate terminal output."""

    ROCKET = "\U0001f680"
    DOCUMENT = "\U0001f4c4"
    CHECK_MARK = "✅"
    ORANGE_CIRCLE = "\U0001f7e0"
    FOLDER = "\U0001f4c1"
    PACKAGE = "\U0001f4e6"
    PARTY = "\U0001f973"
    HAND = "✋"
    STOP = "\U0001f6d1"
    SIREN = "\U0001f6a8"

    def __str__(self) -> str:
        return self.value


class PromptState(Enum):
    """States of the overwrite confirmation prompt."""

    PROMPTING = "prompting"
    CONFIRMED = "confirmed"
    DECLINED = "declined"
    QUIT = "quit"


# Keypress -> next prompt state; anything else stays in PROMPTING
_PROMPT_TRANSITIONS: dict[str, PromptState] = {
    "y": PromptState.CONFIRMED,
    "n": PromptState.DECLINED,
    "q": PromptState.QUIT,
}


def describe_error(error: BaseException) -> tuple[str, str | None]:
    """Classify an exception for the error banner.

    Returns:
        Tuple of (error type label, optional kind detail).
    """
    if isinstance(error, ConfiguratorError):
        return "Internal error", error.kind.value
    if isinstance(error, typer.TyperException):
        return "CLI Argument Parser error", None
    if isinstance(error, json.JSONDecodeError):
        return "JSON parsing error", "Syntax error"
    if isinstance(error, ValidationError):
        return "JSON parsing error", "Data error"
    if isinstance(error, OSError):
        return "I/O error", type(error).__name__
    return "Unknown error", None


def _error_message(error: BaseException) -> str:
    if isinstance(error, typer.TyperException):
        return error.format_message()
    return str(error)


class ConsoleLogger:
    """Writes categorized status lines and asks overwrite questions.

    Args:
        console: Rich Console for regular output. Defaults to stdout.
        error_console: Rich Console for plain-mode error banners.
            Defaults to stderr.
        read_key: Callable returning a single keypress. Defaults to
            typer.getchar, which switches the terminal to raw mode for
            the duration of each read.
    """

    def __init__(
        self,
        console: Console | None = None,
        error_console: Console | None = None,
        read_key: Callable[[], str] | None = None,
    ) -> None:
        self.console = console or Console(highlight=False, emoji=False)
        self.error_console = error_console or Console(stderr=True, highlight=False, emoji=False)
        self._read_key = read_key or typer.getchar
        self._pending_operation: str | None = None

    @property
    def is_interactive(self) -> bool:
        """True when stdout is an interactive terminal."""
        return self.console.is_terminal

    def _write(self, text: str, style: str | None = None) -> None:
        self.console.print(text, style=style, end="", markup=False, soft_wrap=True)

    def _write_control(self, sequence: str) -> None:
        self.console.file.write(sequence)
        self.console.file.flush()

    # ------------------------------------------------------------------
    # Leveled messages
    # ------------------------------------------------------------------

    def write_info(self, message: str) -> None:
        """Write an informational message."""
        if not self.is_interactive:
            self._write(f"[Info] - {message}")
            return
        self._write(message, style="cyan")

    def write_success(self, message: str) -> None:
        """Write a success message."""
        if not self.is_interactive:
            self._write(message)
            return
        self._write(message, style="green")

    def write_warning(self, message: str) -> None:
        """Write a warning message."""
        if not self.is_interactive:
            self._write(f"[Warning] - {message}")
            return
        self._write(message, style="yellow")

    def write_error(self, message: str) -> None:
        """Write an error message."""
        if not self.is_interactive:
            self._write(f"[Error] - {message}")
            return
        self._write(message, style="red")

    def write_error_extended(self, error: BaseException) -> None:
        """Write an error banner describing an exception.

        Terminal mode prints a coloured banner with the error type and
        kind to stdout. Plain mode prints a single prefixed line to stderr.
        """
        error_type, error_kind = describe_error(error)
        message = _error_message(error)

        if not self.is_interactive:
            if error_kind is not None:
                line = f"[Error] - {error_type} (Kind: {error_kind}): {message}"
            else:
                line = f"[Error] - {error_type}: {message}"
            self.error_console.print(line, markup=False, soft_wrap=True)
            return

        self._write("\n\n")
        self._write(f"{OutputEmoji.SIREN} Error ", style="bold white on red")
        self._write(f" {error_type} ", style="bold red on grey50")
        if error_kind is not None:
            self._write(f" Kind: {error_kind} ", style="bold red on black")
        self._write(f"\n\n{message}\n", style="red")

    # ------------------------------------------------------------------
    # Operation lines
    # ------------------------------------------------------------------

    def write_operation_category(self, name: str) -> None:
        """Write a category header, e.g. '🚀 Git'."""
        if not self.is_interactive:
            self.write_info(f"{name}\n")
            return
        self.write_info(f"\n{OutputEmoji.ROCKET} {name}\n")

    def write_operation_log(self, message: str, emoji: OutputEmoji) -> None:
        """Start an operation line, e.g. '- 📄 Copying ...'.

        In terminal mode the label is printed immediately and the result
        is appended to the same line. In plain mode the label is held
        until the result is known so each operation is one complete line.
        """
        if not self.is_interactive:
            self._pending_operation = message
            return
        self.write_info(f"- {emoji} {message} ")

    def write_operation_success_log(self) -> None:
        """Finish the current operation line with 'Done!'."""
        if not self.is_interactive:
            self.write_info(f"{self._take_pending_operation()}Done!\n")
            return
        self.write_success(f"Done! {OutputEmoji.CHECK_MARK}\n")

    def write_operation_skipped_log(self) -> None:
        """Finish the current operation line with 'Already exists'."""
        if not self.is_interactive:
            self.write_warning(f"{self._take_pending_operation()}Already exists\n")
            return
        self.write_warning(f"Already exists {OutputEmoji.ORANGE_CIRCLE}\n")

    def write_project_initialized_log(self) -> None:
        if not self.is_interactive:
            self.write_info("VSCode project initialized!\n")
            return
        self.write_info(f"\n{OutputEmoji.PARTY} VSCode project initialized!\n")

    def _take_pending_operation(self) -> str:
        pending = self._pending_operation
        self._pending_operation = None
        return f"{pending} " if pending else ""

    # ------------------------------------------------------------------
    # Overwrite prompt
    # ------------------------------------------------------------------

    def ask_for_overwrite(self) -> bool:
        """Ask whether an existing file should be overwritten.

        Reads single keypresses: 'y' confirms, 'n' declines, 'q' quits.
        Any other key re-prompts with an 'invalid input' notice. The
        prompt text is cleared before returning.

        Returns:
            True if the user confirmed, False if they declined.

        Raises:
            ConfiguratorError: If stdout is not an interactive terminal.
            QuitRequested: If the user pressed 'q'.
        """
        if not self.is_interactive:
            raise ConfiguratorError(
                "Cannot ask for overwrite in a non-interactive session. "
                "Use --force to overwrite existing files.",
                ErrorKind.PROMPT_UNAVAILABLE,
            )

        self._write_control(_SAVE_CURSOR)
        self._write_prompt()

        state = PromptState.PROMPTING
        while state is PromptState.PROMPTING:
            key = self._read_key()
            state = _PROMPT_TRANSITIONS.get(key.lower(), PromptState.PROMPTING)
            if state is PromptState.PROMPTING:
                self._write_control(_RESTORE_CURSOR + _CLEAR_BELOW + _SAVE_CURSOR)
                self._write_prompt(invalid=True)

        if state is PromptState.QUIT:
            self._write(f"\n\n{OutputEmoji.STOP} Quitting...\n", style="red")
            raise QuitRequested()

        self._write_control(_RESTORE_CURSOR + _CLEAR_BELOW)
        return state is PromptState.CONFIRMED

    def _write_prompt(self, invalid: bool = False) -> None:
        if invalid:
            self._write(f"{OutputEmoji.STOP} Invalid input. ", style="red")
        self._write(f"{OutputEmoji.HAND} Overwrite? ([y]es/[n]o/[q]uit) ", style="yellow")

    def release(self) -> None:
        """Flush both output streams."""
        self.console.file.flush()
        self.error_console.file.flush()
