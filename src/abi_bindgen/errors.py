"""Exception hierarchy for abi-bindgen.

This module defines the exception classes raised while turning compiled
contract artifacts into ABI bindings:
- BindgenError: Base exception for all abi-bindgen errors
- ArtifactNotFoundError: The artifact path does not exist
- ArtifactParseError: The artifact is not a valid JSON document
- MissingAbiError: The artifact has no usable "abi" field
- BindingNameError: The output name cannot become a binding
- BindingWriteError: The binding file could not be written
- ConfigurationError: The targets configuration file is invalid

User-facing messages are safe to display. Technical details (parser
messages, OS errors) are logged via structlog and kept off the console.
"""

from __future__ import annotations

import structlog

logger = structlog.get_logger(__name__)


class BindgenError(Exception):
    """Base exception for abi-bindgen.

    Args:
        user_message: Message to display to the user.
        internal_details: Optional technical details. Logged, never displayed.

    Example:
        >>> raise BindgenError(
        ...     "Artifact could not be read",
        ...     internal_details="Expecting value: line 1 column 1 (char 0)",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details

        if internal_details:
            logger.error(
                "bindgen_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class ArtifactError(BindgenError):
    """Base class for errors tied to a specific artifact file.

    Attributes:
        path: Path of the artifact that failed.
    """

    def __init__(
        self,
        user_message: str,
        *,
        path: str,
        internal_details: str | None = None,
    ) -> None:
        super().__init__(user_message, internal_details=internal_details)
        self.path = path


class ArtifactNotFoundError(ArtifactError):
    """Raised when an artifact path does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Artifact not found: {path}", path=path)


class ArtifactParseError(ArtifactError):
    """Raised when an artifact cannot be read or is not valid JSON.

    Non-JSON files at an artifact location (for example a ``.sol`` source
    file where a compiled artifact was expected) also end up here.
    """

    def __init__(
        self,
        path: str,
        *,
        reason: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        message = f"Artifact is not a valid JSON document: {path}"
        if reason:
            message = f"Artifact is not a valid JSON document ({reason}): {path}"
        super().__init__(message, path=path, internal_details=internal_details)
        self.reason = reason


class MissingAbiError(ArtifactError):
    """Raised when an artifact has no "abi" array.

    Example:
        >>> raise MissingAbiError("out/Foo.sol/Foo.json")
        # User sees: 'Artifact does not contain an "abi" property: out/Foo.sol/Foo.json'
    """

    def __init__(self, path: str, *, reason: str | None = None) -> None:
        message = f'Artifact does not contain an "abi" property: {path}'
        if reason:
            message = f'Artifact "abi" property is invalid ({reason}): {path}'
        super().__init__(message, path=path)
        self.reason = reason


class BindingNameError(BindgenError):
    """Raised when an output name cannot be turned into a binding.

    Covers unsupported file suffixes and constant names that are not valid
    identifiers in the target language.

    Attributes:
        output_name: The rejected output file name.
    """

    def __init__(self, output_name: str, reason: str) -> None:
        super().__init__(f"Cannot generate binding '{output_name}': {reason}")
        self.output_name = output_name
        self.reason = reason


class BindingWriteError(BindgenError):
    """Raised when the output directory or binding file cannot be written.

    Attributes:
        path: Destination that failed.
    """

    def __init__(self, path: str, *, internal_details: str | None = None) -> None:
        super().__init__(
            f"Cannot write binding: {path}",
            internal_details=internal_details,
        )
        self.path = path


class ConfigurationError(BindgenError):
    """Raised when a targets configuration file cannot be loaded.

    Attributes:
        file_path: Path to the configuration file (if known).
        field_path: Dot-separated path to the invalid field (if known).
    """

    def __init__(
        self,
        user_message: str,
        *,
        file_path: str | None = None,
        field_path: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        context_parts: list[str] = []
        if file_path:
            context_parts.append(f"in {file_path}")
        if field_path:
            context_parts.append(f"field '{field_path}'")

        if context_parts:
            full_message = f"{user_message} ({', '.join(context_parts)})"
        else:
            full_message = user_message

        super().__init__(full_message, internal_details=internal_details)
        self.file_path = file_path
        self.field_path = field_path
