"""Edits to existing VS Code workspace files."""

from vscodeconfigurator.vscode_ops.documents import (
    EditorDocument,
    TaskInput,
    TaskInputOption,
    VSCodeSettingsFile,
    VSCodeTasksFile,
)

__all__ = [
    "EditorDocument",
    "TaskInput",
    "TaskInputOption",
    "VSCodeSettingsFile",
    "VSCodeTasksFile",
]
