"""Cargo package initialization."""

from __future__ import annotations

from pathlib import Path

from vscodeconfigurator.console import ConsoleLogger, OutputEmoji
from vscodeconfigurator.external_procs.runner import run_process
from vscodeconfigurator.lang_options import CargoPackageTemplateOption
from vscodeconfigurator.template_ops import prepare_destination

_TEMPLATE_FLAGS: dict[CargoPackageTemplateOption, str] = {
    CargoPackageTemplateOption.BINARY: "--bin",
    CargoPackageTemplateOption.LIBRARY: "--lib",
}


def initialize_package(
    output_directory: Path,
    package_name: str,
    package_template: CargoPackageTemplateOption,
    force: bool,
    logger: ConsoleLogger,
    edition: str = "2021",
    check: bool = True,
) -> None:
    """Create a Cargo package in a sub-directory of the workspace.

    An existing package directory is subject to the overwrite policy and
    is removed entirely before 'cargo init' runs.

    Args:
        output_directory: Workspace root.
        package_name: Name of the package and of its directory.
        package_template: Binary or library package.
        force: Overwrite without asking.
        logger: Console for status output and prompts.
        edition: Rust edition passed to cargo.
        check: Treat a non-zero cargo exit status as an error.
    """
    logger.write_operation_log(
        f"Initializing package for '{package_name}'...", OutputEmoji.PACKAGE
    )

    package_directory = output_directory / package_name
    if not prepare_destination(package_directory, force, logger):
        return

    cargo_args = [
        "init",
        _TEMPLATE_FLAGS[package_template],
        "--edition",
        edition,
        str(package_directory),
    ]
    run_process("cargo", cargo_args, cwd=output_directory, check=check)

    logger.write_operation_success_log()
