"""Tests for the typed tasks.json / settings.json documents and their patchers."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from vscodeconfigurator.errors import ConfiguratorError, ErrorKind
from vscodeconfigurator.lang_options import CsharpLspOption
from vscodeconfigurator.template_ops import csharp as csharp_templates
from vscodeconfigurator.vscode_ops import VSCodeSettingsFile, VSCodeTasksFile
from vscodeconfigurator.vscode_ops import csharp as csharp_vscode
from vscodeconfigurator.vscode_ops import rust as rust_vscode

RUST_TASKS = {
    "version": "2.0.0",
    "tasks": [{"label": "Build package", "command": "pwsh"}],
    "inputs": [
        {
            "id": "packageName",
            "description": "Select a package.",
            "type": "pickString",
            "options": [{"label": "core", "value": "core"}],
        },
        {
            "id": "buildProfile",
            "type": "pickString",
            "default": "dev",
            "options": ["dev", "release"],
        },
    ],
}


def _write_tasks(directory: Path, document: dict) -> Path:
    vscode_directory = directory / ".vscode"
    vscode_directory.mkdir(parents=True, exist_ok=True)
    tasks_path = vscode_directory / "tasks.json"
    tasks_path.write_text(json.dumps(document, indent=2), encoding="utf-8")
    return tasks_path


def _options(tasks_path: Path, input_id: str) -> list:
    document = json.loads(tasks_path.read_text(encoding="utf-8"))
    return next(item for item in document["inputs"] if item["id"] == input_id)["options"]


class TestEditorDocument:
    """Load and write-back behaviour shared by all documents."""

    def test_round_trip_keeps_unknown_keys_and_order(self, tmp_path: Path) -> None:
        """Keys the model does not declare survive, in their original order."""
        document = {"inputs": [], "x-custom": {"a": 1}, "version": "2.0.0", "tasks": []}
        tasks_path = _write_tasks(tmp_path, document)

        tasks = VSCodeTasksFile.load(tasks_path)
        tasks.write()

        assert list(json.loads(tasks_path.read_text())) == ["inputs", "x-custom", "version", "tasks"]
        assert json.loads(tasks_path.read_text()) == document

    def test_nested_extra_keys_follow_declared_fields(self, tmp_path: Path) -> None:
        """Inside an input, extra keys are written after the declared ones."""
        document = {
            "version": "2.0.0",
            "tasks": [],
            "inputs": [{"x-note": "kept", "options": [], "id": "packageName"}],
        }
        tasks_path = _write_tasks(tmp_path, document)

        VSCodeTasksFile.load(tasks_path).write()

        written = json.loads(tasks_path.read_text())
        assert written == document
        assert list(written["inputs"][0]) == ["id", "options", "x-note"]

    def test_unset_optional_keys_are_not_added(self, tmp_path: Path) -> None:
        tasks_path = _write_tasks(tmp_path, RUST_TASKS)

        VSCodeTasksFile.load(tasks_path).write()

        assert json.loads(tasks_path.read_text()) == RUST_TASKS

    def test_invalid_json(self, tmp_path: Path) -> None:
        tasks_path = tmp_path / "tasks.json"
        tasks_path.write_text("{ not json")
        with pytest.raises(json.JSONDecodeError):
            VSCodeTasksFile.load(tasks_path)

    def test_missing_inputs_is_a_data_error(self, tmp_path: Path) -> None:
        tasks_path = _write_tasks(tmp_path, {"version": "2.0.0", "tasks": []})
        with pytest.raises(ValidationError):
            VSCodeTasksFile.load(tasks_path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            VSCodeTasksFile.load(tmp_path / "tasks.json")


class TestAddInputOption:
    """Tests for VSCodeTasksFile.add_input_option()."""

    def test_appends_option(self, tmp_path: Path) -> None:
        tasks = VSCodeTasksFile.load(_write_tasks(tmp_path, RUST_TASKS))
        tasks.add_input_option(["packageName"], label="Utils", value="utils")

        options = tasks.inputs[0].options
        assert [(o.label, o.value) for o in options] == [("core", "core"), ("Utils", "utils")]

    def test_unknown_id_changes_nothing(self, tmp_path: Path) -> None:
        """A missing input fails before any option is appended."""
        tasks = VSCodeTasksFile.load(_write_tasks(tmp_path, RUST_TASKS))

        with pytest.raises(ConfiguratorError) as exc_info:
            tasks.add_input_option(["packageName", "runProject"], label="x", value="x")

        assert exc_info.value.kind is ErrorKind.MALFORMED_EDITOR_FILE
        assert len(tasks.inputs[0].options) == 1

    def test_input_without_options(self, tmp_path: Path) -> None:
        document = {"version": "2.0.0", "tasks": [], "inputs": [{"id": "packageName", "type": "promptString"}]}
        tasks = VSCodeTasksFile.load(_write_tasks(tmp_path, document))

        with pytest.raises(ConfiguratorError) as exc_info:
            tasks.add_input_option(["packageName"], label="x", value="x")
        assert exc_info.value.kind is ErrorKind.MALFORMED_EDITOR_FILE

    def test_appends_to_every_listed_input(self, tmp_path: Path) -> None:
        """Each listed input gets one new option, including string-option inputs."""
        tasks = VSCodeTasksFile.load(_write_tasks(tmp_path, RUST_TASKS))

        tasks.add_input_option(["packageName", "buildProfile"], label="Utils", value="utils")

        assert len(tasks.inputs[0].options) == 2
        assert tasks.inputs[1].options[:2] == ["dev", "release"]
        assert (tasks.inputs[1].options[2].label, tasks.inputs[1].options[2].value) == (
            "Utils",
            "utils",
        )

    def test_failure_on_later_input_changes_nothing(self, tmp_path: Path) -> None:
        """An input without options, listed last, leaves earlier inputs untouched."""
        document = {
            "version": "2.0.0",
            "tasks": [],
            "inputs": [
                {"id": "packageName", "options": [{"label": "core", "value": "core"}]},
                {"id": "profile", "type": "promptString"},
            ],
        }
        tasks_path = _write_tasks(tmp_path, document)
        tasks = VSCodeTasksFile.load(tasks_path)

        with pytest.raises(ConfiguratorError):
            tasks.add_input_option(["packageName", "profile"], label="x", value="x")

        assert len(tasks.inputs[0].options) == 1


class TestRustTasksPatch:
    """Tests for rust add_package_to_tasks()."""

    def test_adds_package(self, tmp_path: Path, plain_logger) -> None:
        logger, out, _ = plain_logger
        tasks_path = _write_tasks(tmp_path, RUST_TASKS)

        rust_vscode.add_package_to_tasks(tmp_path, "utils", "Utilities", logger)

        assert _options(tasks_path, "packageName") == [
            {"label": "core", "value": "core"},
            {"label": "Utilities", "value": "utils"},
        ]
        assert _options(tasks_path, "buildProfile") == ["dev", "release"]
        assert out.getvalue() == "[Info] - Adding package to tasks.json... Done!\n"

    def test_adding_twice_duplicates(self, tmp_path: Path, plain_logger) -> None:
        """The patch is not idempotent."""
        logger, _, _ = plain_logger
        tasks_path = _write_tasks(tmp_path, RUST_TASKS)

        rust_vscode.add_package_to_tasks(tmp_path, "utils", "utils", logger)
        rust_vscode.add_package_to_tasks(tmp_path, "utils", "utils", logger)

        assert _options(tasks_path, "packageName").count({"label": "utils", "value": "utils"}) == 2


class TestCsharpPatches:
    """Tests for the C# settings and tasks patchers."""

    def test_lsp_omnisharp(self, tmp_path: Path, plain_logger) -> None:
        logger, _, _ = plain_logger
        csharp_templates.copy_vscode_settings(tmp_path, "MyApp", False, logger)

        csharp_vscode.update_csharp_lsp(tmp_path, CsharpLspOption.OMNISHARP, logger)

        settings = json.loads((tmp_path / ".vscode" / "settings.json").read_text())
        assert settings["dotnet.server.useOmnisharp"] is True
        assert settings["dotnet.server.path"] == "latest"
        assert settings["dotnet.defaultSolution"] == "MyApp.sln"

    def test_lsp_csharp_lsp_adds_missing_keys(self, tmp_path: Path, plain_logger) -> None:
        """Settings without the LSP keys get them appended."""
        logger, _, _ = plain_logger
        settings_path = tmp_path / ".vscode" / "settings.json"
        settings_path.parent.mkdir()
        settings_path.write_text('{"editor.formatOnSave": true}')

        csharp_vscode.update_csharp_lsp(tmp_path, CsharpLspOption.CSHARP_LSP, logger)

        assert json.loads(settings_path.read_text()) == {
            "editor.formatOnSave": True,
            "dotnet.server.useOmnisharp": False,
            "dotnet.server.path": "",
        }

    def test_settings_model_aliases(self) -> None:
        settings = VSCodeSettingsFile.model_validate({"dotnet.server.useOmnisharp": True})
        assert settings.use_omnisharp is True
        assert settings.server_path is None

    def test_project_option_value(self, tmp_path: Path) -> None:
        assert csharp_vscode.project_option_value(tmp_path, tmp_path / "src" / "Lib") == "src/Lib"
        outside = tmp_path.parent / "elsewhere"
        assert csharp_vscode.project_option_value(tmp_path, outside) == str(outside)

    @pytest.mark.parametrize(
        ("is_runnable", "is_watchable", "expected_ids"),
        [
            (False, False, {"projectItem"}),
            (True, False, {"projectItem", "runProject"}),
            (False, True, {"projectItem", "watchProject"}),
            (True, True, {"projectItem", "runProject", "watchProject"}),
        ],
    )
    def test_project_pickers(
        self, tmp_path: Path, plain_logger, is_runnable, is_watchable, expected_ids
    ) -> None:
        """The project lands in the general picker plus the flagged ones."""
        logger, _, _ = plain_logger
        csharp_templates.copy_vscode_tasks(tmp_path, "MyApp", False, logger)
        tasks_path = tmp_path / ".vscode" / "tasks.json"

        csharp_vscode.add_csharp_project_to_tasks(
            tmp_path, tmp_path / "src" / "Api", "Api", is_runnable, is_watchable, logger
        )

        entry = {"label": "Api", "value": "src/Api"}
        found = {
            input_id
            for input_id in ("projectItem", "runProject", "watchProject")
            if entry in _options(tasks_path, input_id)
        }
        assert found == expected_ids
