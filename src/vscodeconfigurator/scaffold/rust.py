"""Rust workspace scaffolding for `vscodeconfigurator rust`."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from vscodeconfigurator.config import ToolConfig
from vscodeconfigurator.console import ConsoleLogger
from vscodeconfigurator.external_procs import cargo, git
from vscodeconfigurator.lang_options import CargoPackageTemplateOption
from vscodeconfigurator.paths import resolve_output_directory
from vscodeconfigurator.template_ops import rust as rust_templates
from vscodeconfigurator.vscode_ops import rust as rust_vscode


@dataclass(frozen=True)
class RustInitArgs:
    """Arguments for `rust init`."""

    base_package_name: str
    output_directory: str | None = None
    base_package_template: CargoPackageTemplateOption = CargoPackageTemplateOption.LIBRARY
    force: bool = False


@dataclass(frozen=True)
class RustAddArgs:
    """Arguments for `rust add`."""

    package_name: str
    output_directory: str | None = None
    package_friendly_name: str | None = None


def init_rust_project(
    args: RustInitArgs,
    logger: ConsoleLogger,
    config: ToolConfig | None = None,
) -> Path:
    """Initialize a Cargo workspace with one package, pre-wired for VS Code.

    Creates the git repository and .gitignore, the workspace Cargo.toml,
    the base package, the VS Code settings and tasks, and the helper
    scripts in tools/.

    Args:
        args: Parsed command arguments.
        logger: Console for status output and overwrite prompts.
        config: Tool configuration. Defaults to ToolConfig().

    Returns:
        The absolute workspace directory.
    """
    config = config or ToolConfig()
    check = config.check_exit_codes
    templates_dir = config.templates_dir
    force = args.force

    output_directory = resolve_output_directory(args.output_directory)

    logger.write_operation_category("Git")
    git.initialize_git_repo(output_directory, logger, check=check)
    rust_templates.copy_gitignore(output_directory, force, logger, templates_dir)

    logger.write_operation_category("Cargo")
    rust_templates.copy_cargo_workspace_file(output_directory, force, logger, templates_dir)
    cargo.initialize_package(
        output_directory,
        args.base_package_name,
        args.base_package_template,
        force,
        logger,
        edition=config.cargo_edition,
        check=check,
    )

    logger.write_operation_category("VSCode")
    rust_templates.copy_vscode_settings(output_directory, force, logger, templates_dir)
    rust_templates.copy_vscode_tasks(
        output_directory, args.base_package_name, force, logger, templates_dir
    )

    logger.write_operation_category("Tools")
    rust_templates.copy_tool_scripts(output_directory, force, logger, templates_dir)

    logger.write_project_initialized_log()
    return output_directory


def add_rust_package(args: RustAddArgs, logger: ConsoleLogger) -> None:
    """Offer an existing workspace package in the VS Code tasks.

    Raises:
        ConfiguratorError: If the workspace directory does not exist.
    """
    output_directory = resolve_output_directory(args.output_directory, create=False)
    package_friendly_name = args.package_friendly_name or args.package_name

    logger.write_operation_category("Add package")
    rust_vscode.add_package_to_tasks(
        output_directory, args.package_name, package_friendly_name, logger
    )
