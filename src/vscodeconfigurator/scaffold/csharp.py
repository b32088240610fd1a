"""C# project scaffolding for `vscodeconfigurator csharp`.

init runs a fixed checklist in a new or existing directory: SDK pinning,
git, the solution and its props files, optional GitVersion, and the
VS Code settings and tasks. add registers an existing project with a
solution and offers it in the tasks.json pickers.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from vscodeconfigurator.config import ToolConfig
from vscodeconfigurator.console import ConsoleLogger
from vscodeconfigurator.errors import ConfiguratorError, ErrorKind
from vscodeconfigurator.external_procs import dotnet, git
from vscodeconfigurator.lang_options import CsharpLspOption
from vscodeconfigurator.paths import normalize_path, resolve_output_directory
from vscodeconfigurator.template_ops import csharp as csharp_templates
from vscodeconfigurator.vscode_ops import csharp as csharp_vscode

SOLUTION_FILE_SUFFIXES = (".sln", ".slnx")
GITVERSION_TOOL = "GitVersion.Tool"


@dataclass(frozen=True)
class CsharpInitArgs:
    """Arguments for `csharp init`."""

    output_directory: str | None = None
    solution_name: str | None = None
    add_gitversion: bool = False
    add_nuget_config: bool = False
    enable_centrally_managed_packages: bool = False
    csharp_lsp: CsharpLspOption = CsharpLspOption.CSHARP_LSP
    force: bool = False


@dataclass(frozen=True)
class CsharpAddArgs:
    """Arguments for `csharp add`."""

    project_path: str
    solution_file_path: str | None = None
    project_friendly_name: str | None = None
    is_runnable: bool = False
    is_watchable: bool = False


def resolve_solution_name(output_directory: Path, solution_name: str | None) -> str:
    """Return the solution name, defaulting to the output directory's name.

    Raises:
        ConfiguratorError: If no name is given and the directory has none
            (e.g. the filesystem root).
    """
    name = solution_name if solution_name is not None else output_directory.name
    if not name.strip():
        raise ConfiguratorError(
            "The solution name could not be determined.",
            ErrorKind.UNABLE_TO_PARSE_SOLUTION_NAME,
        )
    return name


def find_solution_file(directory: Path) -> Path:
    """Return the first solution file in a directory.

    Raises:
        ConfiguratorError: If the directory contains no solution file.
    """
    candidates = sorted(
        item
        for item in directory.iterdir()
        if item.is_file() and item.suffix in SOLUTION_FILE_SUFFIXES
    )
    if not candidates:
        raise ConfiguratorError(
            "No solution file found in the current directory.",
            ErrorKind.FILE_PATH_DOES_NOT_EXIST,
        )
    return candidates[0]


def find_project_friendly_name(project_path: Path) -> str:
    """Return the project file's stem for a project directory or file.

    Raises:
        ConfiguratorError: If no '.csproj' file can be found.
    """
    if project_path.is_file() and project_path.suffix == ".csproj":
        return project_path.stem

    if project_path.is_dir():
        for item in sorted(project_path.iterdir()):
            if item.suffix == ".csproj":
                return item.stem

    raise ConfiguratorError(
        "No project file found in the project directory.",
        ErrorKind.FILE_PATH_DOES_NOT_EXIST,
    )


def init_csharp_project(
    args: CsharpInitArgs,
    logger: ConsoleLogger,
    config: ToolConfig | None = None,
) -> Path:
    """Initialize a C# solution pre-wired for VS Code.

    Args:
        args: Parsed command arguments.
        logger: Console for status output and overwrite prompts.
        config: Tool configuration. Defaults to ToolConfig().

    Returns:
        The absolute project directory.
    """
    config = config or ToolConfig()
    check = config.check_exit_codes
    templates_dir = config.templates_dir
    force = args.force

    output_directory = resolve_output_directory(args.output_directory)
    solution_name = resolve_solution_name(output_directory, args.solution_name)

    logger.write_operation_category("Basic")
    dotnet.add_dotnet_globaljson(
        output_directory,
        force,
        logger,
        roll_forward=config.globaljson_roll_forward,
        check=check,
    )

    logger.write_operation_category("Git")
    git.initialize_git_repo(output_directory, logger, check=check)
    dotnet.add_dotnet_gitignore(output_directory, force, logger, check=check)

    logger.write_operation_category(".NET")
    dotnet.initialize_dotnet_solution(output_directory, solution_name, force, logger, check=check)
    dotnet.add_dotnet_buildprops(output_directory, force, logger, check=check)

    if args.add_nuget_config:
        dotnet.add_dotnet_nugetconfig(output_directory, force, logger, check=check)

    if args.enable_centrally_managed_packages:
        dotnet.add_dotnet_packagesprops(output_directory, force, logger, check=check)

    if args.add_gitversion:
        logger.write_operation_category("GitVersion")
        dotnet.add_dotnet_tool(output_directory, GITVERSION_TOOL, logger, check=check)
        csharp_templates.copy_gitversion(output_directory, force, logger, templates_dir)

    logger.write_operation_category("VSCode")
    csharp_templates.copy_vscode_settings(
        output_directory, solution_name, force, logger, templates_dir
    )
    csharp_vscode.update_csharp_lsp(output_directory, args.csharp_lsp, logger)
    csharp_templates.copy_vscode_tasks(
        output_directory, solution_name, force, logger, templates_dir
    )

    logger.write_project_initialized_log()
    return output_directory


def add_csharp_project(
    args: CsharpAddArgs,
    logger: ConsoleLogger,
    config: ToolConfig | None = None,
) -> None:
    """Add an existing project to a solution and to the VS Code tasks.

    Raises:
        ConfiguratorError: If the solution or project cannot be found.
    """
    config = config or ToolConfig()

    if args.solution_file_path is None:
        solution_file_path = find_solution_file(Path.cwd())
    else:
        solution_file_path = normalize_path(args.solution_file_path)
        if not solution_file_path.exists():
            raise ConfiguratorError(
                f"The solution file path '{args.solution_file_path}' does not exist.",
                ErrorKind.FILE_PATH_DOES_NOT_EXIST,
            )

    project_path = normalize_path(args.project_path)
    if not project_path.exists():
        raise ConfiguratorError(
            f"The project path '{args.project_path}' does not exist.",
            ErrorKind.FILE_PATH_DOES_NOT_EXIST,
        )

    if args.project_friendly_name is not None:
        project_friendly_name = args.project_friendly_name
    else:
        project_friendly_name = find_project_friendly_name(project_path)

    logger.write_operation_category("Add project")
    dotnet.add_project_to_solution(
        solution_file_path, project_path, logger, check=config.check_exit_codes
    )
    csharp_vscode.add_csharp_project_to_tasks(
        solution_file_path.parent,
        project_path,
        project_friendly_name,
        args.is_runnable,
        args.is_watchable,
        logger,
    )
