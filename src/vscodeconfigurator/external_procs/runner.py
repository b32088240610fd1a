"""Synchronous external process invocation.

All toolchain calls go through run_process() so exit status handling
and diagnostic logging live in one place.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from vscodeconfigurator.errors import ExternalProcessError

logger = logging.getLogger(__name__)


def run_process(
    program: str,
    args: list[str],
    cwd: Path | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Run an external program to completion and capture its output.

    Args:
        program: Executable name, resolved on PATH.
        args: Fixed argument list.
        cwd: Working directory for the child process.
        check: If True, a non-zero exit status raises ExternalProcessError.

    Returns:
        The completed process with captured stdout and stderr.

    Raises:
        ExternalProcessError: If check is True and the process failed.
        FileNotFoundError: If the program is not installed.
    """
    logger.debug("Running %s %s (cwd=%s)", program, " ".join(args), cwd)

    completed = subprocess.run(
        [program, *args],
        cwd=str(cwd) if cwd is not None else None,
        capture_output=True,
        text=True,
    )

    logger.debug("%s exited with status %d", program, completed.returncode)
    if completed.stderr:
        logger.debug("%s stderr: %s", program, completed.stderr.strip())

    if check and completed.returncode != 0:
        raise ExternalProcessError(program, args, completed.returncode, completed.stderr)

    return completed
