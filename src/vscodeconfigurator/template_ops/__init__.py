"""Template materialization with the shared overwrite policy.

Templates are bundled in the package's templates/ directory (or a
configured override) and copied verbatim or with {{token}} substitution.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path

from vscodeconfigurator.console import ConsoleLogger, OutputEmoji


def get_templates_dir(override: str | None = None) -> Path:
    """Return the templates directory, bundled with the package by default."""
    if override:
        return Path(override).expanduser()
    return Path(__file__).resolve().parent.parent / "templates"


def prepare_destination(path: Path, force: bool, logger: ConsoleLogger) -> bool:
    """Apply the overwrite policy to a destination path.

    If the path exists and force is not set, the user is asked whether
    to overwrite. A declined answer leaves the path untouched and
    finishes the current operation line with 'Already exists'.

    Args:
        path: File or directory about to be (re)created.
        force: Overwrite without asking.
        logger: Console used for the prompt and the skip notice.

    Returns:
        True if the caller should (re)create the path, False to skip.
    """
    if not path.exists():
        return True

    if not force and not logger.ask_for_overwrite():
        logger.write_operation_skipped_log()
        return False

    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()
    return True


def ensure_directory(directory: Path, logger: ConsoleLogger) -> None:
    """Create a project sub-directory (e.g. '.vscode', 'tools') if missing."""
    if directory.exists():
        return

    logger.write_operation_log(f"Creating '{directory.name}' directory...", OutputEmoji.FOLDER)
    directory.mkdir(parents=True)
    logger.write_operation_success_log()


@dataclass
class TemplateFile:
    """A bundled template paired with the destination it materializes to.

    Attributes:
        template_path: Absolute path of the source template.
        output_path: Absolute path of the file to write.
        replacements: Literal '{{token}}' -> value substitutions. Empty
            means the template is copied byte for byte.
    """

    template_path: Path
    output_path: Path
    replacements: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_templates(
        cls,
        relative_template_path: str,
        output_path: Path,
        replacements: dict[str, str] | None = None,
        templates_dir: str | None = None,
    ) -> TemplateFile:
        """Build a TemplateFile from a path relative to the templates dir."""
        return cls(
            template_path=get_templates_dir(templates_dir) / relative_template_path,
            output_path=output_path,
            replacements=dict(replacements or {}),
        )

    @property
    def output_file_name(self) -> str:
        return self.output_path.name

    def render(self) -> bytes:
        """Return the materialized content of the template."""
        if not self.replacements:
            return self.template_path.read_bytes()

        content = self.template_path.read_text(encoding="utf-8")
        for token, value in self.replacements.items():
            content = content.replace("{{" + token + "}}", value)
        return content.encode("utf-8")

    def write(self) -> None:
        """Write the rendered template, replacing any existing file."""
        content = self.render()
        if self.output_path.exists():
            self.output_path.unlink()
        self.output_path.write_bytes(content)


def copy_template(
    template_file: TemplateFile,
    destination_label: str,
    force: bool,
    logger: ConsoleLogger,
) -> bool:
    """Materialize a template, honouring the overwrite policy.

    Args:
        template_file: The template and its destination.
        destination_label: Where the file goes, for the status line
            (e.g. "project root", "'.vscode' directory").
        force: Overwrite without asking.
        logger: Console for status output and prompts.

    Returns:
        True if the file was written, False if the user kept the existing one.
    """
    logger.write_operation_log(
        f"Copying '{template_file.output_file_name}' to {destination_label}...",
        OutputEmoji.DOCUMENT,
    )

    if not prepare_destination(template_file.output_path, force, logger):
        return False

    template_file.write()
    logger.write_operation_success_log()
    return True
