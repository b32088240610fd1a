"""Output directory resolution.

Normalizes a user-supplied directory into an absolute path with the
home directory expanded and trailing separators removed.
"""

from __future__ import annotations

import os
from pathlib import Path

from vscodeconfigurator.errors import ConfiguratorError, ErrorKind

# Home directory variable per OS family
_HOME_ENV_VARS: dict[str, str] = {
    "nt": "USERPROFILE",
    "posix": "HOME",
}


def home_directory() -> Path:
    """Return the home directory from the platform's environment variable.

    Raises:
        ConfiguratorError: If the OS family is unknown or its home
            variable is not defined.
    """
    env_key = _HOME_ENV_VARS.get(os.name)
    home = os.environ.get(env_key) if env_key else None
    if not home:
        raise ConfiguratorError(
            "The operating system is not supported.",
            ErrorKind.UNSUPPORTED_OPERATING_SYSTEM,
        )
    return Path(home)


def normalize_path(raw: str | os.PathLike[str]) -> Path:
    """Expand a leading '~', drop trailing separators and make absolute.

    Args:
        raw: The path as typed by the user.

    Returns:
        The absolute, normalized path. Nothing is created on disk.
    """
    text = os.fspath(raw)

    if text.startswith("~"):
        remainder = text[1:].lstrip("/\\")
        text = str(home_directory() / remainder) if remainder else str(home_directory())

    stripped = text.rstrip("/\\")
    if not stripped:
        # The filesystem root itself
        stripped = text[:1]

    return Path(os.path.abspath(stripped))


def resolve_output_directory(
    raw: str | os.PathLike[str] | None,
    create: bool = True,
) -> Path:
    """Resolve the output directory for a command.

    Args:
        raw: User-supplied directory. None means the current directory.
        create: If True, create the directory (and parents) when missing.
            If False, a missing directory is an error.

    Returns:
        The absolute output directory.

    Raises:
        ConfiguratorError: If create is False and the directory does not exist.
        OSError: If the directory cannot be created.
    """
    directory = normalize_path(raw) if raw is not None else Path.cwd()

    if not directory.exists():
        if not create:
            raise ConfiguratorError(
                "The specified output directory does not exist.",
                ErrorKind.OUTPUT_DIRECTORY_DOES_NOT_EXIST,
            )
        directory.mkdir(parents=True)

    return directory
