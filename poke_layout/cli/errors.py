"""Structured error types for the CLI with recovery suggestions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..errors import (
    ConfigurationError,
    UnknownElementKindError,
    UnsafeStyleValueError,
)


class ErrorCategory(Enum):
    """Categories of CLI errors for organization and handling."""

    CONFIGURATION = "configuration"  # Invalid config file or env
    FILE_SYSTEM = "file_system"  # Missing or unreadable layout file
    VALIDATION = "validation"  # Invalid arguments or layout content
    RUNTIME = "runtime"  # Unexpected errors


@dataclass
class CLIError(Exception):
    """Base class for structured CLI errors with recovery suggestions.

    Attributes:
        category: Error category for grouping.
        message: Human-readable error message.
        suggestion: Optional actionable recovery suggestion.
        details: Optional additional details dict.
        exit_code: Exit code to use when this error causes termination.
    """

    category: ErrorCategory
    message: str
    suggestion: str | None = None
    details: dict[str, Any] | None = field(default_factory=dict)
    exit_code: int = 1

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def format(self, use_color: bool = True) -> str:
        """Format the error for display, with suggestion and details."""
        red = "\033[91m" if use_color else ""
        cyan = "\033[96m" if use_color else ""
        dim = "\033[2m" if use_color else ""
        reset = "\033[0m" if use_color else ""

        lines = [f"{red}Error:{reset} {self.message}"]

        if self.suggestion:
            lines.append(f"{cyan}Suggestion:{reset} {self.suggestion}")

        if self.details:
            for key, value in self.details.items():
                lines.append(f"{dim}  {key}: {value}{reset}")

        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format(use_color=False)


class InvalidInputError(CLIError):
    """Error for invalid CLI arguments or layout content."""

    def __init__(self, message: str, suggestion: str | None = None):
        super().__init__(
            category=ErrorCategory.VALIDATION,
            message=message,
            suggestion=suggestion or "Check the command syntax with --help",
            exit_code=2,
        )


class LayoutFileError(CLIError):
    """Error reading or parsing a layout description file."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            category=ErrorCategory.FILE_SYSTEM,
            message=f"Cannot load layout file {path}: {reason}",
            suggestion='Layout files are JSON: {"elements": [{"kind": "box", "inputs": {}}]}',
            details={"path": path},
            exit_code=1,
        )


class ConfigError(CLIError):
    """Invalid style engine configuration."""

    def __init__(self, message: str):
        super().__init__(
            category=ErrorCategory.CONFIGURATION,
            message=message,
            suggestion="Fix poke-layout.config.json or the POKE_LAYOUT_* variables",
            exit_code=1,
        )


def to_cli_error(error: Exception) -> CLIError:
    """Translate library errors into structured CLI errors."""
    if isinstance(error, CLIError):
        return error
    if isinstance(error, UnknownElementKindError):
        return InvalidInputError(
            str(error), suggestion="Run 'poke-layout kinds' to list element kinds"
        )
    if isinstance(error, UnsafeStyleValueError):
        return InvalidInputError(
            str(error),
            suggestion="Remove the characters or disable strict sanitization",
        )
    if isinstance(error, ConfigurationError):
        return ConfigError(str(error))
    if isinstance(error, TypeError):
        return InvalidInputError(str(error))
    return CLIError(category=ErrorCategory.RUNTIME, message=str(error))
