"""Per-invocation state shared by all commands through the typer context."""

from __future__ import annotations

from dataclasses import dataclass, field

import typer

from vscodeconfigurator.config import ToolConfig
from vscodeconfigurator.console import ConsoleLogger


@dataclass
class AppState:
    """The console and configuration owned by one CLI invocation."""

    logger: ConsoleLogger = field(default_factory=ConsoleLogger)
    config: ToolConfig = field(default_factory=ToolConfig)


def get_state(ctx: typer.Context) -> AppState:
    """Return the AppState of the invocation, creating it if needed."""
    return ctx.ensure_object(AppState)
