"""Wrappers around the git, cargo, and dotnet command-line tools."""

from vscodeconfigurator.external_procs.runner import run_process

__all__ = ["run_process"]
