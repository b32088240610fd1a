"""Shared fixtures for vscodeconfigurator tests."""

from __future__ import annotations

import subprocess
from io import StringIO
from pathlib import Path
from typing import Callable, Iterator

import pytest
from rich.console import Console

from vscodeconfigurator.config import CONFIG_ENV_VAR
from vscodeconfigurator.console import ConsoleLogger


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point the config loader at a file that does not exist."""
    config_dir = tmp_path_factory.mktemp("config")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_dir / "config.yaml"))


def make_logger(interactive: bool, keys: str = "") -> tuple[ConsoleLogger, StringIO, StringIO]:
    """Build a ConsoleLogger writing into StringIO buffers.

    Args:
        interactive: Whether the console reports itself as a terminal.
        keys: Keypresses returned, in order, by the key reader.
    """
    out = StringIO()
    err = StringIO()
    pending = iter(keys)
    logger = ConsoleLogger(
        console=Console(file=out, force_terminal=interactive, width=120, highlight=False, emoji=False),
        error_console=Console(file=err, force_terminal=False, width=120, highlight=False),
        read_key=lambda: next(pending),
    )
    return logger, out, err


@pytest.fixture
def plain_logger() -> tuple[ConsoleLogger, StringIO, StringIO]:
    return make_logger(interactive=False)


class FakeToolchain:
    """Records toolchain invocations and fakes their side effects on disk."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, list[str], Path | None]] = []

    def __call__(
        self,
        program: str,
        args: list[str],
        cwd: Path | None = None,
        check: bool = True,
    ) -> subprocess.CompletedProcess[str]:
        self.calls.append((program, list(args), cwd))
        self._apply(program, args, cwd)
        return subprocess.CompletedProcess([program, *args], 0, stdout="", stderr="")

    def _apply(self, program: str, args: list[str], cwd: Path | None) -> None:
        if program == "git" and args[:1] == ["init"] and cwd is not None:
            (cwd / ".git").mkdir(exist_ok=True)
        elif program == "cargo" and args[:1] == ["init"]:
            package_directory = Path(args[-1])
            (package_directory / "src").mkdir(parents=True, exist_ok=True)
            (package_directory / "Cargo.toml").write_text(
                f'[package]\nname = "{package_directory.name}"\n', encoding="utf-8"
            )
        elif program == "dotnet" and cwd is not None:
            self._apply_dotnet(args, cwd)

    def _apply_dotnet(self, args: list[str], cwd: Path) -> None:
        generated = {
            "globaljson": "global.json",
            "gitignore": ".gitignore",
            "buildprops": "Directory.Build.props",
            "nugetconfig": "NuGet.Config",
            "packagesprops": "Directory.Packages.props",
            "tool-manifest": ".config/dotnet-tools.json",
        }
        if args[:1] != ["new"]:
            return
        if args[1] == "sln":
            (cwd / f"{args[args.index('--name') + 1]}.sln").write_text("", encoding="utf-8")
        elif args[1] in generated:
            target = cwd / generated[args[1]]
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text("{}", encoding="utf-8")

    def commands(self) -> list[list[str]]:
        return [[program, *args] for program, args, _ in self.calls]


@pytest.fixture
def fake_toolchain(monkeypatch: pytest.MonkeyPatch) -> Iterator[FakeToolchain]:
    """Replace run_process in every toolchain wrapper with a FakeToolchain."""
    fake = FakeToolchain()
    for module in ("git", "cargo", "dotnet"):
        monkeypatch.setattr(f"vscodeconfigurator.external_procs.{module}.run_process", fake)
    yield fake


@pytest.fixture
def make_console_logger() -> Callable[..., tuple[ConsoleLogger, StringIO, StringIO]]:
    """Factory for loggers writing into StringIO buffers."""
    return make_logger
