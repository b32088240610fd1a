"""Wrappers around the dotnet CLI.

Most helpers generate a file in the project root with a 'dotnet new'
template. Each generated file is subject to the overwrite policy before
dotnet runs, since dotnet refuses to replace existing files.
"""

from __future__ import annotations

from pathlib import Path

from vscodeconfigurator.console import ConsoleLogger, OutputEmoji
from vscodeconfigurator.external_procs.runner import run_process
from vscodeconfigurator.template_ops import prepare_destination


def _generate_root_file(
    output_directory: Path,
    output_file_name: str,
    dotnet_args: list[str],
    force: bool,
    logger: ConsoleLogger,
    check: bool,
) -> None:
    logger.write_operation_log(
        f"Adding '{output_file_name}' to project root...", OutputEmoji.DOCUMENT
    )

    if not prepare_destination(output_directory / output_file_name, force, logger):
        return

    run_process("dotnet", dotnet_args, cwd=output_directory, check=check)

    logger.write_operation_success_log()


def add_dotnet_globaljson(
    output_directory: Path,
    force: bool,
    logger: ConsoleLogger,
    roll_forward: str = "latestMinor",
    check: bool = True,
) -> None:
    """Add a 'global.json' pinning the SDK with the given roll-forward policy."""
    _generate_root_file(
        output_directory,
        "global.json",
        ["new", "globaljson", "--roll-forward", roll_forward],
        force,
        logger,
        check,
    )


def add_dotnet_gitignore(
    output_directory: Path,
    force: bool,
    logger: ConsoleLogger,
    check: bool = True,
) -> None:
    """Add the .NET '.gitignore' to the project root."""
    _generate_root_file(
        output_directory, ".gitignore", ["new", "gitignore"], force, logger, check
    )


def initialize_dotnet_solution(
    output_directory: Path,
    solution_name: str,
    force: bool,
    logger: ConsoleLogger,
    check: bool = True,
) -> None:
    """Create '<solution_name>.sln' in the project root."""
    logger.write_operation_log(
        f"Initializing .NET solution '{solution_name}.sln'...", OutputEmoji.PACKAGE
    )

    if not prepare_destination(output_directory / f"{solution_name}.sln", force, logger):
        return

    run_process(
        "dotnet",
        ["new", "sln", "--name", solution_name],
        cwd=output_directory,
        check=check,
    )

    logger.write_operation_success_log()


def add_dotnet_buildprops(
    output_directory: Path,
    force: bool,
    logger: ConsoleLogger,
    check: bool = True,
) -> None:
    """Add 'Directory.Build.props' using the artifacts output layout."""
    _generate_root_file(
        output_directory,
        "Directory.Build.props",
        ["new", "buildprops", "--use-artifacts"],
        force,
        logger,
        check,
    )


def add_dotnet_nugetconfig(
    output_directory: Path,
    force: bool,
    logger: ConsoleLogger,
    check: bool = True,
) -> None:
    _generate_root_file(
        output_directory, "NuGet.Config", ["new", "nugetconfig"], force, logger, check
    )


def add_dotnet_packagesprops(
    output_directory: Path,
    force: bool,
    logger: ConsoleLogger,
    check: bool = True,
) -> None:
    """Add 'Directory.Packages.props' to enable centrally managed packages."""
    _generate_root_file(
        output_directory,
        "Directory.Packages.props",
        ["new", "packagesprops"],
        force,
        logger,
        check,
    )


def initialize_dotnet_tool_manifest(
    output_directory: Path,
    logger: ConsoleLogger,
    check: bool = True,
) -> None:
    """Create '.config/dotnet-tools.json' unless it already exists."""
    config_directory = output_directory / ".config"
    config_directory.mkdir(exist_ok=True)

    if (config_directory / "dotnet-tools.json").exists():
        return

    logger.write_operation_log("Initializing .NET tool manifest...", OutputEmoji.PACKAGE)

    run_process("dotnet", ["new", "tool-manifest"], cwd=output_directory, check=check)

    logger.write_operation_success_log()


def add_dotnet_tool(
    output_directory: Path,
    tool_name: str,
    logger: ConsoleLogger,
    check: bool = True,
) -> None:
    """Install a local .NET tool, creating the tool manifest first if needed."""
    initialize_dotnet_tool_manifest(output_directory, logger, check=check)

    logger.write_operation_log(f"Adding .NET tool '{tool_name}'...", OutputEmoji.PACKAGE)

    run_process(
        "dotnet",
        ["tool", "install", tool_name, "--tool-manifest", ".config/dotnet-tools.json"],
        cwd=output_directory,
        check=check,
    )

    logger.write_operation_success_log()


def add_project_to_solution(
    solution_file_path: Path,
    project_path: Path,
    logger: ConsoleLogger,
    check: bool = True,
) -> None:
    """Register a project with a solution via 'dotnet sln add'."""
    solution_directory = solution_file_path.parent
    try:
        display_path = project_path.relative_to(solution_directory)
    except ValueError:
        display_path = project_path

    logger.write_operation_log(f"Adding '{display_path}' to solution...", OutputEmoji.DOCUMENT)

    run_process(
        "dotnet",
        ["sln", str(solution_file_path), "add", str(project_path)],
        cwd=solution_directory,
        check=check,
    )

    logger.write_operation_success_log()
