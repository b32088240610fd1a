"""Typed models for the VS Code workspace files the configurator edits.

tasks.json and settings.json are loaded into pydantic records. Only the
keys the configurator touches are declared; every other key is kept as
an extra field and written back unchanged. Top-level keys keep the order
they were loaded in; inside nested objects such as task inputs the
declared fields come first, followed by the extra keys.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, TypeVar

from pydantic import BaseModel, Field, PrivateAttr

from vscodeconfigurator.errors import ConfiguratorError, ErrorKind

_D = TypeVar("_D", bound="EditorDocument")


class EditorDocument(BaseModel):
    """Base class for a JSON document loaded from and written back to disk."""

    model_config = {"extra": "allow", "populate_by_name": True}

    _file_path: Path | None = PrivateAttr(default=None)
    _key_order: list[str] = PrivateAttr(default_factory=list)

    @classmethod
    def load(cls: type[_D], file_path: Path) -> _D:
        """Load and validate a document.

        Raises:
            FileNotFoundError: If the file does not exist.
            json.JSONDecodeError: If the file is not valid JSON.
            pydantic.ValidationError: If the JSON has the wrong shape.
        """
        raw = json.loads(file_path.read_text(encoding="utf-8"))
        document = cls.model_validate(raw)
        document._file_path = file_path
        document._key_order = list(raw)
        return document

    @property
    def file_path(self) -> Path | None:
        return self._file_path

    def to_json(self) -> str:
        """Serialize the document, keeping the key order it was loaded with."""
        data = self.model_dump(mode="json", by_alias=True, exclude_unset=True)
        ordered = {key: data[key] for key in self._key_order if key in data}
        ordered.update((key, value) for key, value in data.items() if key not in ordered)
        return json.dumps(ordered, indent=2, ensure_ascii=False) + "\n"

    def write(self, file_path: Path | None = None) -> None:
        """Write the whole document back, replacing the file's content."""
        target = file_path or self._file_path
        if target is None:
            raise ValueError("No file path to write the document to.")
        target.write_text(self.to_json(), encoding="utf-8")


class TaskInputOption(BaseModel):
    """A selectable {label, value} entry of a pickString input."""

    model_config = {"extra": "allow"}

    label: str
    value: str


class TaskInput(BaseModel):
    """An entry of the 'inputs' array in tasks.json."""

    model_config = {"extra": "allow"}

    id: str
    description: str | None = None
    type: str | None = None
    default: str | None = None
    options: list[TaskInputOption | str] | None = None


class VSCodeTasksFile(EditorDocument):
    """.vscode/tasks.json"""

    version: str = "2.0.0"
    tasks: list[dict[str, Any]] = Field(default_factory=list)
    inputs: list[TaskInput]

    def add_input_option(self, input_ids: Iterable[str], label: str, value: str) -> None:
        """Append a {label, value} option to every input with a matching id.

        Every id in input_ids must name an input that has an 'options'
        array. The shape is checked for all ids before anything is
        appended, so a failure leaves the document unchanged.

        Raises:
            ConfiguratorError: If an input is missing or has no options.
        """
        targets: list[list[TaskInputOption | str]] = []
        for input_id in input_ids:
            items = [item for item in self.inputs if item.id == input_id]
            if not items:
                raise ConfiguratorError(
                    f"The tasks file has no input with the id '{input_id}'.",
                    ErrorKind.MALFORMED_EDITOR_FILE,
                )
            for item in items:
                if item.options is None:
                    raise ConfiguratorError(
                        f"The input '{input_id}' in the tasks file has no 'options' array.",
                        ErrorKind.MALFORMED_EDITOR_FILE,
                    )
                targets.append(item.options)

        for options in targets:
            options.append(TaskInputOption(label=label, value=value))


class VSCodeSettingsFile(EditorDocument):
    """.vscode/settings.json"""

    use_omnisharp: bool | None = Field(default=None, alias="dotnet.server.useOmnisharp")
    server_path: str | None = Field(default=None, alias="dotnet.server.path")
