"""
Table Import API

Write side of a migration: loads an export document and replays it into a
table with one unconditional PutItem per item.

Usage:
    from .commands import TableImportWriteApi

    write_api = TableImportWriteApi(config, "foo")
"""

from .commands import CONFIRM_PROMPT, TableImportWriteApi, read_document

__all__ = [
    "CONFIRM_PROMPT",
    "TableImportWriteApi",
    "read_document",
]
