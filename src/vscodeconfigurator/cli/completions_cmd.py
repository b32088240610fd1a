"""`vscodeconfigurator completions` -- print a shell completion script."""

from __future__ import annotations

from enum import Enum

import typer
from typer.completion import get_completion_script

PROG_NAME = "vscodeconfigurator"
COMPLETE_VAR = "_VSCODECONFIGURATOR_COMPLETE"


class CompletionShell(str, Enum):
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"
    POWERSHELL = "powershell"
    PWSH = "pwsh"


def completions(
    shell: CompletionShell = typer.Argument(
        ..., help="The shell to generate completions for."
    ),
) -> None:
    """Generate completion scripts for the shell of your choice."""
    script = get_completion_script(
        prog_name=PROG_NAME, complete_var=COMPLETE_VAR, shell=shell.value
    )
    typer.echo(script)
