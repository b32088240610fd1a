"""Error types raised by configurator commands.

Every failure that should stop a command is raised as a
ConfiguratorError carrying an ErrorKind, which the CLI entry
point renders in its error banner.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """The kind of error that stopped a command."""

    NO_SUBCOMMAND_PROVIDED = "NoSubcommandProvided"
    UNABLE_TO_PARSE_SOLUTION_NAME = "UnableToParseSolutionName"
    FILE_PATH_DOES_NOT_EXIST = "FilePathDoesNotExist"
    UNSUPPORTED_OPERATING_SYSTEM = "UnsupportedOperatingSystem"
    OUTPUT_DIRECTORY_DOES_NOT_EXIST = "OutputDirectoryDoesNotExist"
    EXTERNAL_PROCESS_FAILED = "ExternalProcessFailed"
    PROMPT_UNAVAILABLE = "PromptUnavailable"
    MALFORMED_EDITOR_FILE = "MalformedEditorFile"
    INVALID_CONFIG_FILE = "InvalidConfigFile"
    UNKNOWN_ERROR = "UnknownError"


class ConfiguratorError(Exception):
    """Raised when a configurator command cannot continue."""

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.UNKNOWN_ERROR) -> None:
        self.message = message
        self.kind = kind
        super().__init__(message)


class ExternalProcessError(ConfiguratorError):
    """Raised when a toolchain process exits with a non-zero status.

    Attributes:
        program: Name of the executable that was run.
        arguments: Arguments passed to the executable.
        returncode: Exit status of the child process.
        stderr: Captured standard error output, stripped.
    """

    def __init__(
        self,
        program: str,
        args: list[str],
        returncode: int,
        stderr: str = "",
    ) -> None:
        self.program = program
        self.arguments = list(args)
        self.returncode = returncode
        self.stderr = stderr.strip()

        command = " ".join([program, *args])
        message = f"'{command}' exited with status {returncode}."
        if self.stderr:
            message += f"\n{self.stderr}"
        super().__init__(message, ErrorKind.EXTERNAL_PROCESS_FAILED)


class QuitRequested(Exception):
    """Raised when the user chooses to quit at an overwrite prompt."""
