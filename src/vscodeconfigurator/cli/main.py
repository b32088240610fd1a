"""VSCode Configurator CLI entry point."""

from __future__ import annotations

import logging
import sys

import typer

from vscodeconfigurator import __version__
from vscodeconfigurator.cli.completions_cmd import completions
from vscodeconfigurator.cli.csharp_cmd import csharp_app
from vscodeconfigurator.cli.rust_cmd import rust_app
from vscodeconfigurator.cli.state import AppState, get_state
from vscodeconfigurator.config import load_tool_config
from vscodeconfigurator.errors import QuitRequested

app = typer.Typer(
    name="vscodeconfigurator",
    help="Quickly bootstrap and manage projects for VSCode.",
)

# Register subcommands
app.add_typer(csharp_app, name="csharp")
app.add_typer(rust_app, name="rust")
app.command()(completions)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"vscodeconfigurator {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def root(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log external commands to stderr."
    ),
) -> None:
    """Quickly bootstrap and manage projects for VSCode."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    state = get_state(ctx)
    state.config = load_tool_config()


def main() -> None:
    """Run the CLI and render any failure as an error banner (exit status 1)."""
    state = AppState()
    try:
        exit_code = app(standalone_mode=False, obj=state)
    except QuitRequested:
        exit_code = 1
    except typer.Abort:
        state.logger.write_error("Aborted!\n")
        exit_code = 1
    except Exception as exc:
        state.logger.write_error_extended(exc)
        exit_code = 1
    finally:
        state.logger.release()

    sys.exit(exit_code or 0)
