"""tasks.json edits for Rust workspaces."""

from __future__ import annotations

from pathlib import Path

from vscodeconfigurator.console import ConsoleLogger, OutputEmoji
from vscodeconfigurator.vscode_ops.documents import VSCodeTasksFile

PACKAGE_INPUT_ID = "packageName"


def add_package_to_tasks(
    output_directory: Path,
    package_name: str,
    package_friendly_name: str,
    logger: ConsoleLogger,
) -> None:
    """Offer a package in the tasks.json package picker.

    Not idempotent: running it twice adds the package twice.
    """
    logger.write_operation_log("Adding package to tasks.json...", OutputEmoji.DOCUMENT)

    tasks = VSCodeTasksFile.load(output_directory / ".vscode" / "tasks.json")
    tasks.add_input_option([PACKAGE_INPUT_ID], label=package_friendly_name, value=package_name)
    tasks.write()

    logger.write_operation_success_log()
