"""`vscodeconfigurator csharp` commands."""

from __future__ import annotations

from typing import Optional

import typer

from vscodeconfigurator.cli.state import get_state
from vscodeconfigurator.errors import ConfiguratorError, ErrorKind
from vscodeconfigurator.lang_options import CsharpLspOption
from vscodeconfigurator.scaffold.csharp import (
    CsharpAddArgs,
    CsharpInitArgs,
    add_csharp_project,
    init_csharp_project,
)

csharp_app = typer.Typer(
    name="csharp",
    help="Commands for creating and managing C# projects.",
)


@csharp_app.callback(invoke_without_command=True)
def csharp(ctx: typer.Context) -> None:
    """Commands for creating and managing C# projects."""
    if ctx.invoked_subcommand is None:
        raise ConfiguratorError("No subcommand provided.", ErrorKind.NO_SUBCOMMAND_PROVIDED)


@csharp_app.command()
def init(
    ctx: typer.Context,
    output_directory: Optional[str] = typer.Option(
        None,
        "--output-directory",
        "-o",
        help="The output directory for the new project. Defaults to the current directory.",
    ),
    solution_name: Optional[str] = typer.Option(
        None,
        "--solution-name",
        "-n",
        help="The name of the solution file. Defaults to the output directory's name.",
    ),
    add_gitversion: bool = typer.Option(
        False, "--add-gitversion", help="Add GitVersion to the project."
    ),
    add_nuget_config: bool = typer.Option(
        False, "--add-nuget-config", help="Add a NuGet configuration file to the project."
    ),
    enable_centrally_managed_packages: bool = typer.Option(
        False,
        "--enable-centrally-managed-packages",
        help="Enable centrally managed packages.",
    ),
    csharp_lsp: CsharpLspOption = typer.Option(
        CsharpLspOption.CSHARP_LSP, "--csharp-lsp", help="The C# language server to use."
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite existing files without asking."
    ),
) -> None:
    """Initialize a new C# project."""
    state = get_state(ctx)
    args = CsharpInitArgs(
        output_directory=output_directory,
        solution_name=solution_name,
        add_gitversion=add_gitversion,
        add_nuget_config=add_nuget_config,
        enable_centrally_managed_packages=enable_centrally_managed_packages,
        csharp_lsp=csharp_lsp,
        force=force,
    )
    init_csharp_project(args, state.logger, state.config)


@csharp_app.command()
def add(
    ctx: typer.Context,
    project_path: str = typer.Option(..., "--project-path", help="The path to the project."),
    solution_file_path: Optional[str] = typer.Option(
        None,
        "--solution-file-path",
        help="The solution file to add the project to. Defaults to the solution in the current directory.",
    ),
    project_friendly_name: Optional[str] = typer.Option(
        None,
        "--project-friendly-name",
        help="The name shown in the VS Code task pickers. Defaults to the project file's name.",
    ),
    is_runnable: bool = typer.Option(False, "--is-runnable", help="The project can be run."),
    is_watchable: bool = typer.Option(False, "--is-watchable", help="The project can be watched."),
) -> None:
    """Add a new project to a C# solution."""
    state = get_state(ctx)
    args = CsharpAddArgs(
        project_path=project_path,
        solution_file_path=solution_file_path,
        project_friendly_name=project_friendly_name,
        is_runnable=is_runnable,
        is_watchable=is_watchable,
    )
    add_csharp_project(args, state.logger, state.config)
