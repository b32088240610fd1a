"""VSCode Configurator - bootstrap and manage C# and Rust projects for VS Code."""

__version__ = "0.1.0"
