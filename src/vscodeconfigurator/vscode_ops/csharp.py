"""settings.json and tasks.json edits for C# projects."""

from __future__ import annotations

from pathlib import Path

from vscodeconfigurator.console import ConsoleLogger, OutputEmoji
from vscodeconfigurator.lang_options import CsharpLspOption
from vscodeconfigurator.vscode_ops.documents import VSCodeSettingsFile, VSCodeTasksFile

# Input ids in the C# tasks.json template
PROJECT_INPUT_ID = "projectItem"
RUN_PROJECT_INPUT_ID = "runProject"
WATCH_PROJECT_INPUT_ID = "watchProject"

# LSP option -> (dotnet.server.useOmnisharp, dotnet.server.path)
_LSP_SETTINGS: dict[CsharpLspOption, tuple[bool, str]] = {
    CsharpLspOption.CSHARP_LSP: (False, ""),
    CsharpLspOption.OMNISHARP: (True, "latest"),
}


def update_csharp_lsp(
    output_directory: Path,
    csharp_lsp: CsharpLspOption,
    logger: ConsoleLogger,
) -> None:
    """Point the C# extension at the chosen language server."""
    logger.write_operation_log("Updating C# LSP option in settings.json...", OutputEmoji.DOCUMENT)

    settings = VSCodeSettingsFile.load(output_directory / ".vscode" / "settings.json")
    settings.use_omnisharp, settings.server_path = _LSP_SETTINGS[csharp_lsp]
    settings.write()

    logger.write_operation_success_log()


def project_option_value(solution_directory: Path, project_path: Path) -> str:
    """Return the tasks.json value for a project.

    Projects inside the solution directory are stored relative to it with
    forward slashes, so the value works with ${workspaceFolder} on every
    platform. Projects elsewhere keep their absolute path.
    """
    try:
        return project_path.relative_to(solution_directory).as_posix()
    except ValueError:
        return str(project_path)


def add_csharp_project_to_tasks(
    solution_directory: Path,
    project_path: Path,
    project_friendly_name: str,
    is_runnable: bool,
    is_watchable: bool,
    logger: ConsoleLogger,
) -> None:
    """Offer a new project in the tasks.json project pickers.

    The project is always added to the general project picker, and to
    the run and watch pickers when flagged as runnable or watchable.
    """
    logger.write_operation_log("Adding C# project to tasks.json...", OutputEmoji.DOCUMENT)

    input_ids = [PROJECT_INPUT_ID]
    if is_watchable:
        input_ids.append(WATCH_PROJECT_INPUT_ID)
    if is_runnable:
        input_ids.append(RUN_PROJECT_INPUT_ID)

    tasks = VSCodeTasksFile.load(solution_directory / ".vscode" / "tasks.json")
    tasks.add_input_option(
        input_ids,
        label=project_friendly_name,
        value=project_option_value(solution_directory, project_path),
    )
    tasks.write()

    logger.write_operation_success_log()
