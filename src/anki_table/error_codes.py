"""Structured error codes for machine-readable error handling.

Error codes follow the format: {DOMAIN}-{CATEGORY}-{NUMBER}

Error Domains:
    PRS - Parsing errors (quoting, escapes)
    TBL - Table structure errors
    ARG - Contract violations in the string transforms
    IO  - Input/output path errors
    CFG - Configuration errors

Usage:
    from anki_table.error_codes import ErrorCode

    logger.error(
        "conversion_failed",
        error_code=ErrorCode.TBL_COLUMN_MISMATCH.value,
        row_number=3,
    )
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Structured error codes for machine-readable handling.

    All error codes inherit from str for JSON serialization compatibility.
    """

    # =========================================================================
    # Parsing Errors (PRS-xxx-xxx)
    # =========================================================================
    PRS_UNTERMINATED_QUOTE = "PRS-QUOTE-001"
    """A quoted field was still open at end of input."""

    PRS_DANGLING_ESCAPE = "PRS-ESC-001"
    """The input ended directly after an escape character."""

    PRS_INVALID_CSV = "PRS-CSV-001"
    """The CSV reader rejected the input."""

    # =========================================================================
    # Table Errors (TBL-xxx-xxx)
    # =========================================================================
    TBL_COLUMN_MISMATCH = "TBL-COLS-001"
    """A record's cell count differs from the header's."""

    TBL_EMPTY = "TBL-EMPTY-001"
    """The table has no header record."""

    # =========================================================================
    # Argument Errors (ARG-xxx-xxx)
    # =========================================================================
    ARG_NONE = "ARG-NONE-001"
    """A transform received None instead of a string."""

    # =========================================================================
    # I/O Errors (IO-xxx-xxx)
    # =========================================================================
    IO_PATH_INVALID = "IO-PATH-001"
    """Input path is missing or of the wrong kind."""

    IO_WRITE_FAILED = "IO-WRITE-001"
    """Output document could not be written."""

    IO_DECODE_FAILED = "IO-DECODE-001"
    """Input file could not be decoded with the configured encoding."""

    # =========================================================================
    # Configuration Errors (CFG-xxx-xxx)
    # =========================================================================
    CFG_INVALID = "CFG-INVALID-001"
    """Configuration validation failed."""

    CFG_PARSE_FAILED = "CFG-PARSE-001"
    """Configuration file could not be parsed."""
