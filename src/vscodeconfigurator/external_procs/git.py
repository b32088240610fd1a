"""Git repository initialization."""

from __future__ import annotations

from pathlib import Path

from vscodeconfigurator.console import ConsoleLogger, OutputEmoji
from vscodeconfigurator.external_procs.runner import run_process


def initialize_git_repo(
    output_directory: Path,
    logger: ConsoleLogger,
    check: bool = True,
) -> None:
    """Run 'git init' in the output directory.

    Re-running on an existing repository is harmless, so no overwrite
    question is asked.
    """
    logger.write_operation_log("Initializing Git repository...", OutputEmoji.PACKAGE)

    run_process("git", ["init"], cwd=output_directory, check=check)

    logger.write_operation_success_log()
