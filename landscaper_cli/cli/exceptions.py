# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""CLI-specific exception hierarchy.

Every error raised by a command derives from CLIError so the entry point
can report it uniformly and exit with the error's code.
"""

from rich.markup import escape

from .constants import ExitCode


class CLIError(Exception):
    """Base exception for all CLI-related errors.

    Attributes:
        message: Main error message
        details: Optional list of additional detail lines
        exit_code: Suggested exit code for this error type (class attribute)
    """

    exit_code: int = ExitCode.ERROR

    def __init__(self, message: str, details: list[str] | None = None):
        """Initialize CLI error.

        Args:
            message: Main error message
            details: Optional list of detail lines for user guidance
        """
        self.message = message
        self.details = details or []
        super().__init__(message)

    def format_for_console(self) -> str:
        """Format error message for console output.

        Returns:
            Formatted error message with details
        """
        lines = [f"[red]Error:[/red] {escape(self.message)}"]
        if self.details:
            lines.append("")
            for detail in self.details:
                lines.append(f"  • {escape(detail)}")
        return "\n".join(lines)


class ConfigurationError(CLIError):
    """Configuration-related errors.

    Raised when there are issues loading or validating configuration files.
    """

    exit_code = ExitCode.CONFIG


class BlueprintError(CLIError):
    """Base class for errors while editing a blueprint directory."""

    exit_code = ExitCode.ERROR


class LoadError(BlueprintError):
    """Blueprint file is missing, unreadable or malformed."""


class DuplicateExecutionError(BlueprintError):
    """The blueprint already declares a deploy execution with the requested name."""


class PathConflictError(BlueprintError):
    """A directory occupies the path of the companion deploy execution file."""


class WriteError(BlueprintError):
    """Creating the companion file or persisting the blueprint failed."""
