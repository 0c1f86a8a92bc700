from .export_document import (
    ExportDocument,
    ImportResult,
    Item,
    KeySchema,
    TableSchema,
)

__all__ = [
    "ExportDocument",
    "ImportResult",
    "Item",
    "KeySchema",
    "TableSchema",
]
