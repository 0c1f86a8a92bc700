# Base exception class
from .base import MigratorError

# One exception per failing step of an export or import run
from .domain_exceptions import (
    ConfigError,
    DecodeError,
    EncodeError,
    FileReadError,
    ParseError,
    ScanError,
    SchemaLookupError,
    TableOperationError,
    WriteError,
)

__all__ = [
    # Base exception
    "MigratorError",

    # Domain exceptions (alphabetically ordered)
    "ConfigError",
    "DecodeError",
    "EncodeError",
    "FileReadError",
    "ParseError",
    "ScanError",
    "SchemaLookupError",
    "TableOperationError",
    "WriteError",
]
