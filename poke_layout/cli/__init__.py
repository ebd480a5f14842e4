"""Command line interface for the layout style engine.

Modules:
    main: click command group (kinds, sanitize, signature, render)
    errors: Structured error types with recovery suggestions
"""

from .errors import (
    CLIError,
    ConfigError,
    ErrorCategory,
    InvalidInputError,
    LayoutFileError,
    to_cli_error,
)

__all__ = [
    "CLIError",
    "ConfigError",
    "ErrorCategory",
    "InvalidInputError",
    "LayoutFileError",
    "to_cli_error",
]
