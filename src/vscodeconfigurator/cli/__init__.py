"""Command-line interface for VSCode Configurator."""
