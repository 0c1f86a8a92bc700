"""
Table Export API

Read side of a migration: key schema lookup plus a full paginated scan,
returned as an ExportDocument or its JSON text.

Usage:
    from .queries import TableExportReadApi

    read_api = TableExportReadApi(config, "foo")
"""

from .queries import TableExportReadApi

__all__ = [
    "TableExportReadApi",
]
