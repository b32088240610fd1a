"""Language-specific option values accepted on the command line."""

from __future__ import annotations

from enum import Enum


class CsharpLspOption(str, Enum):
    """The C# language server to configure."""

    # Language server shipped with the C# extension for VS Code
    CSHARP_LSP = "CsharpLsp"
    # The standalone OmniSharp language server
    OMNISHARP = "OmniSharp"


class CargoPackageTemplateOption(str, Enum):
    """The type of Cargo package to create."""

    BINARY = "Binary"
    LIBRARY = "Library"
