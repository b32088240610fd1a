"""Template copies for C# projects."""

from __future__ import annotations

from pathlib import Path

from vscodeconfigurator.console import ConsoleLogger
from vscodeconfigurator.template_ops import TemplateFile, copy_template, ensure_directory


def copy_gitversion(
    output_directory: Path,
    force: bool,
    logger: ConsoleLogger,
    templates_dir: str | None = None,
) -> None:
    """Copy 'GitVersion.yml' to the project root."""
    template_file = TemplateFile.from_templates(
        "csharp/GitVersion/GitVersion.yml",
        output_directory / "GitVersion.yml",
        templates_dir=templates_dir,
    )
    copy_template(template_file, "project root", force, logger)


def copy_vscode_settings(
    output_directory: Path,
    solution_name: str,
    force: bool,
    logger: ConsoleLogger,
    templates_dir: str | None = None,
) -> None:
    """Copy '.vscode/settings.json' with the solution file name filled in."""
    vscode_directory = output_directory / ".vscode"
    ensure_directory(vscode_directory, logger)

    template_file = TemplateFile.from_templates(
        "csharp/VSCode/settings.json",
        vscode_directory / "settings.json",
        replacements={"solutionName": f"{solution_name}.sln"},
        templates_dir=templates_dir,
    )
    copy_template(template_file, "'.vscode' directory", force, logger)


def copy_vscode_tasks(
    output_directory: Path,
    solution_name: str,
    force: bool,
    logger: ConsoleLogger,
    templates_dir: str | None = None,
) -> None:
    """Copy '.vscode/tasks.json' with the solution file name filled in."""
    vscode_directory = output_directory / ".vscode"
    ensure_directory(vscode_directory, logger)

    template_file = TemplateFile.from_templates(
        "csharp/VSCode/tasks.json",
        vscode_directory / "tasks.json",
        replacements={"solutionName": f"{solution_name}.sln"},
        templates_dir=templates_dir,
    )
    copy_template(template_file, "'.vscode' directory", force, logger)
