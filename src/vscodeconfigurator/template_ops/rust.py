"""Template copies for Rust workspaces."""

from __future__ import annotations

from pathlib import Path

from vscodeconfigurator.console import ConsoleLogger
from vscodeconfigurator.template_ops import TemplateFile, copy_template, ensure_directory

# Helper scripts copied into tools/: (template path, output file name)
_TOOL_SCRIPTS: list[tuple[str, str]] = [
    ("rust/Tools/Build-Package.ps1", "Build-Package.ps1"),
    ("rust/Tools/Clean-Package.ps1", "Clean-Package.ps1"),
]


def copy_gitignore(
    output_directory: Path,
    force: bool,
    logger: ConsoleLogger,
    templates_dir: str | None = None,
) -> None:
    template_file = TemplateFile.from_templates(
        "rust/Git/gitignore",
        output_directory / ".gitignore",
        templates_dir=templates_dir,
    )
    copy_template(template_file, "project root", force, logger)


def copy_cargo_workspace_file(
    output_directory: Path,
    force: bool,
    logger: ConsoleLogger,
    templates_dir: str | None = None,
) -> None:
    """Copy the workspace 'Cargo.toml' to the project root."""
    template_file = TemplateFile.from_templates(
        "rust/Cargo/Cargo.workspace.toml",
        output_directory / "Cargo.toml",
        templates_dir=templates_dir,
    )
    copy_template(template_file, "project root", force, logger)


def copy_vscode_settings(
    output_directory: Path,
    force: bool,
    logger: ConsoleLogger,
    templates_dir: str | None = None,
) -> None:
    vscode_directory = output_directory / ".vscode"
    ensure_directory(vscode_directory, logger)

    template_file = TemplateFile.from_templates(
        "rust/VSCode/settings.json",
        vscode_directory / "settings.json",
        templates_dir=templates_dir,
    )
    copy_template(template_file, "'.vscode' directory", force, logger)


def copy_vscode_tasks(
    output_directory: Path,
    package_name: str,
    force: bool,
    logger: ConsoleLogger,
    templates_dir: str | None = None,
) -> None:
    """Copy '.vscode/tasks.json' with the base package preselected."""
    vscode_directory = output_directory / ".vscode"
    ensure_directory(vscode_directory, logger)

    template_file = TemplateFile.from_templates(
        "rust/VSCode/tasks.json",
        vscode_directory / "tasks.json",
        replacements={"basePackageName": package_name},
        templates_dir=templates_dir,
    )
    copy_template(template_file, "'.vscode' directory", force, logger)


def copy_tool_scripts(
    output_directory: Path,
    force: bool,
    logger: ConsoleLogger,
    templates_dir: str | None = None,
) -> None:
    """Copy the PowerShell build and clean scripts into 'tools/'."""
    tools_directory = output_directory / "tools"
    ensure_directory(tools_directory, logger)

    for template_path, output_name in _TOOL_SCRIPTS:
        template_file = TemplateFile.from_templates(
            template_path,
            tools_directory / output_name,
            templates_dir=templates_dir,
        )
        copy_template(template_file, "tools dir", force, logger)
