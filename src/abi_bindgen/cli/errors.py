"""CLI error handling for abi-bindgen.

Wraps library exceptions into click exceptions with user-friendly
messages and exit codes.
"""

from __future__ import annotations

from typing import NoReturn

import click
from rich.markup import escape

from abi_bindgen.cli.output import error
from abi_bindgen.errors import ConfigurationError

# Exit codes following sysexits.h convention
EXIT_SUCCESS = 0
EXIT_USER_ERROR = 1  # Invalid configuration
EXIT_SYSTEM_ERROR = 2  # Missing root or config file


class CLIError(click.ClickException):
    """CLI-specific exception with exit code support.

    Attributes:
        message: User-facing error message.
        exit_code: Exit code for the CLI (default: 1).
    """

    def __init__(self, message: str, exit_code: int = EXIT_USER_ERROR) -> None:
        super().__init__(message)
        self.exit_code = exit_code

    def show(self, file: object = None) -> None:
        """Display the error message using Rich formatting."""
        error(escape(self.format_message()))


def handle_configuration_error(err: ConfigurationError) -> NoReturn:
    """Turn a configuration error into a CLI failure.

    Raises:
        CLIError: Always, with EXIT_USER_ERROR.
    """
    raise CLIError(err.user_message) from err


def handle_file_not_found(path: str, kind: str, suggestion: str) -> NoReturn:
    """Report a missing input path with a suggestion.

    Args:
        path: Path that does not exist.
        kind: What the path was expected to be (e.g. "Project root").
        suggestion: Follow-up advice for the user.

    Raises:
        CLIError: Always, with EXIT_SYSTEM_ERROR.
    """
    raise CLIError(f"{kind} not found: {path}\n\n{suggestion}", exit_code=EXIT_SYSTEM_ERROR)
