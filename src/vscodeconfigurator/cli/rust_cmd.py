"""`vscodeconfigurator rust` commands."""

from __future__ import annotations

from typing import Optional

import typer

from vscodeconfigurator.cli.state import get_state
from vscodeconfigurator.errors import ConfiguratorError, ErrorKind
from vscodeconfigurator.lang_options import CargoPackageTemplateOption
from vscodeconfigurator.scaffold.rust import (
    RustAddArgs,
    RustInitArgs,
    add_rust_package,
    init_rust_project,
)

rust_app = typer.Typer(
    name="rust",
    help="Commands for creating and managing Rust projects.",
)


@rust_app.callback(invoke_without_command=True)
def rust(ctx: typer.Context) -> None:
    """Commands for creating and managing Rust projects."""
    if ctx.invoked_subcommand is None:
        raise ConfiguratorError("No subcommand provided.", ErrorKind.NO_SUBCOMMAND_PROVIDED)


@rust_app.command()
def init(
    ctx: typer.Context,
    output_directory: Optional[str] = typer.Option(
        None,
        "--output-directory",
        "-o",
        help="The output directory for the new project. Defaults to the current directory.",
    ),
    base_package_name: str = typer.Option(
        ..., "--base-package-name", "-n", help="The name of the base package."
    ),
    base_package_template: CargoPackageTemplateOption = typer.Option(
        CargoPackageTemplateOption.LIBRARY,
        "--base-package-template",
        help="The type of Cargo package to create.",
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite existing files without asking."
    ),
) -> None:
    """Initialize a new Rust project."""
    state = get_state(ctx)
    args = RustInitArgs(
        base_package_name=base_package_name,
        output_directory=output_directory,
        base_package_template=base_package_template,
        force=force,
    )
    init_rust_project(args, state.logger, state.config)


@rust_app.command()
def add(
    ctx: typer.Context,
    output_directory: Optional[str] = typer.Option(
        None,
        "--output-directory",
        "-o",
        help="The workspace directory. Defaults to the current directory.",
    ),
    package_name: str = typer.Option(..., "--package-name", help="The name of the package."),
    package_friendly_name: Optional[str] = typer.Option(
        None,
        "--package-friendly-name",
        help="The name shown in the VS Code task picker. Defaults to the package name.",
    ),
) -> None:
    """Add a new package to a Rust project."""
    state = get_state(ctx)
    args = RustAddArgs(
        package_name=package_name,
        output_directory=output_directory,
        package_friendly_name=package_friendly_name,
    )
    add_rust_package(args, state.logger)
