"""Centralized exception hierarchy for anki-table.

This module defines the errors that can occur while turning a CSV file into
a cloze-annotated HTML table. All custom exceptions inherit from
AnkiTableError, making it easy to catch every conversion error at once.

Exception Hierarchy:
    AnkiTableError (base)
     ConfigurationError - Configuration loading/validation errors
     ValidationError - Input table errors
        ParserError - Delimited text parsing errors
           MalformedInputError - Unterminated quote or dangling escape
        ColumnCountMismatchError - Rows with differing cell counts
        EmptyTableError - No header record to render
     InvalidArgumentError - A transform received no value
     ConversionError - File-level conversion errors
        InputPathError - Missing or unusable input path
        OutputWriteError - Output document could not be written

Usage Examples:
    # Catch all conversion errors
    try:
        convert_file(csv_path, html_path)
    except AnkiTableError as e:
        logger.error("conversion_failed", **e.to_dict())

    # Use structured error codes
    from anki_table.error_codes import ErrorCode

    raise ColumnCountMismatchError(
        "Row 3 has 2 cells, expected 3",
        row_number=3,
        expected=3,
        actual=2,
        error_code=ErrorCode.TBL_COLUMN_MISMATCH.value,
    )
"""

from typing import Any


class AnkiTableError(Exception):
    """Base exception for all anki-table errors.

    Attributes:
        message: Human-readable error message
        suggestion: Optional suggestion for resolving the error
        error_code: Structured error code for machine-readable handling
        context: Additional context for debugging (e.g., file paths, row numbers)
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            suggestion: Optional suggestion for resolving the error
            error_code: Structured error code (e.g., "TBL-COLS-001")
            context: Additional context for debugging
        """
        self.message = message
        self.suggestion = suggestion
        self.error_code = error_code
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with error code and suggestion if available."""
        parts = []
        if self.error_code:
            parts.append(f"[{self.error_code}] {self.message}")
        else:
            parts.append(self.message)
        if self.suggestion:
            parts.append(f"\nSuggestion: {self.suggestion}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logging.

        Returns:
            Dictionary with error details
        """
        return {
            "message": self.message,
            "error_code": self.error_code,
            "suggestion": self.suggestion,
            "context": self.context,
            "type": type(self).__name__,
        }


# Configuration Errors


class ConfigurationError(AnkiTableError):
    """Configuration loading or validation errors.

    Raised when:
    - Config file is missing or malformed
    - Configuration values fail validation
    """


# Validation Errors


class ValidationError(AnkiTableError):
    """Input table validation errors.

    Base class for errors about the content of a single input file.
    """


class ParserError(ValidationError):
    """Delimited text parsing errors."""


class MalformedInputError(ParserError):
    """The raw text is not valid delimited input.

    Raised when:
    - A quoted field is still open at end of input
    - The input ends with a dangling escape character
    - The CSV reader rejects the text (e.g. characters after a closing quote)

    Attributes:
        line_number: 1-based line where parsing stopped, when known
    """

    def __init__(
        self,
        message: str,
        *,
        line_number: int | None = None,
        suggestion: str | None = None,
        error_code: str | None = None,
    ):
        self.line_number = line_number
        super().__init__(
            message,
            suggestion,
            error_code,
            context={"line_number": line_number},
        )


class ColumnCountMismatchError(ValidationError):
    """A record's cell count differs from the header's.

    Attributes:
        row_number: 1-based position of the offending record (header is row 1)
        expected: Cell count of the header record
        actual: Cell count of the offending record
    """

    def __init__(
        self,
        message: str,
        *,
        row_number: int,
        expected: int,
        actual: int,
        suggestion: str | None = None,
        error_code: str | None = None,
    ):
        """Initialize column count mismatch error.

        Args:
            message: Human-readable error message
            row_number: 1-based position of the offending record
            expected: Cell count of the header record
            actual: Cell count of the offending record
            suggestion: Optional suggestion for resolving the error
            error_code: Structured error code
        """
        self.row_number = row_number
        self.expected = expected
        self.actual = actual
        super().__init__(
            message,
            suggestion,
            error_code,
            context={"row_number": row_number, "expected": expected, "actual": actual},
        )


class EmptyTableError(ValidationError):
    """The table has no header record, so there is nothing to render."""


# Contract Errors


class InvalidArgumentError(AnkiTableError, TypeError, ValueError):
    """A string transform was called without a value.

    This is a programming error, not a user-facing one. It also subclasses
    TypeError and ValueError so generic handlers still catch it.
    """


# Conversion Errors


class ConversionError(AnkiTableError):
    """File-level conversion errors.

    Base class for errors raised around the core pipeline while reading
    inputs and writing outputs.
    """


class InputPathError(ConversionError):
    """Input file or directory is missing or of the wrong kind.

    Raised when:
    - The CSV file does not exist
    - A batch directory does not exist or is not a directory
    """


class OutputWriteError(ConversionError):
    """The output document could not be written."""
