"""
Export/Import API handlers

Organized by direction, following Command Query Responsibility Segregation:

- table_export/: Read side (DescribeTable + Scan -> ExportDocument)
- table_import/: Write side (ExportDocument -> PutItem per item)
"""

from .table_export import TableExportReadApi
from .table_import import TableImportWriteApi

__all__ = [
    "TableExportReadApi",
    "TableImportWriteApi",
]
