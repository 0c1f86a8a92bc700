"""
Migration Exceptions

Every step of an export or import run fails with exactly one of these
exceptions. They all extend MigratorError and are terminal for the run:
the CLI logs them and exits with a non-zero status.

Organized by category:
1. Configuration and Connection Errors
2. Export Errors (schema lookup, scan, decode, encode)
3. Import Errors (file read, parse, write)
"""

from typing import Any, Dict, Optional

from .base import MigratorError


# =============================================================================
# Configuration and Connection Errors
# =============================================================================

class ConfigError(MigratorError):
    """Raised when the backing store connection cannot be established.

    Used for:
    - Invalid DynamoDB or run configuration
    - boto3 session/client creation failures
    - Authentication/authorization and endpoint failures
    """


# =============================================================================
# Table Operation Errors
# =============================================================================

class TableOperationError(MigratorError):
    """Common parent for errors raised by a DynamoDB call against a table."""

    def __init__(
        self,
        message: str,
        table_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None,
        item_index: Optional[int] = None
    ):
        super().__init__(message, original_error, context, table_name=table_name, item_index=item_index)


class SchemaLookupError(TableOperationError):
    """Raised when DescribeTable fails (missing or inaccessible table)."""


class ScanError(TableOperationError):
    """Raised when any page of a full table scan fails.

    Items from pages that were already read are discarded.
    """


class WriteError(TableOperationError):
    """Raised when PutItem fails for an imported item.

    Items before ``item_index`` have already been written; nothing from
    ``item_index`` onward has been attempted past the failing write.
    """

    def __init__(
        self,
        message: str,
        table_name: Optional[str] = None,
        item_index: Optional[int] = None,
        original_error: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, table_name, original_error, context, item_index)


# =============================================================================
# Conversion Errors
# =============================================================================

class DecodeError(MigratorError):
    """Raised when a scanned attribute-value record cannot be decoded."""

    def __init__(self, message: str, item_index: Optional[int] = None, original_error: Optional[Exception] = None):
        super().__init__(message, original_error, item_index=item_index)


class EncodeError(MigratorError):
    """Raised when a value cannot be encoded.

    Used for:
    - Serializing the export document to JSON
    - Converting an imported item into DynamoDB attribute values
    """

    def __init__(self, message: str, item_index: Optional[int] = None, original_error: Optional[Exception] = None):
        super().__init__(message, original_error, item_index=item_index)


# =============================================================================
# Import File Errors
# =============================================================================

class FileReadError(MigratorError):
    """Raised when the import file is missing or unreadable."""

    def __init__(self, path: str, original_error: Optional[Exception] = None):
        self.path = path
        message = f"Failed to read import file '{path}': {original_error}"
        super().__init__(message, original_error, {'path': path})


class ParseError(MigratorError):
    """Raised when the import file is not a valid export document."""

    def __init__(self, message: str, path: Optional[str] = None, original_error: Optional[Exception] = None):
        self.path = path
        super().__init__(message, original_error, {'path': path} if path else None)
