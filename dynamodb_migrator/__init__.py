from .config import DynamoDBConfig, MigratorConfig
from .exceptions import (
    ConfigError,
    DecodeError,
    EncodeError,
    FileReadError,
    MigratorError,
    ParseError,
    ScanError,
    SchemaLookupError,
    WriteError,
)
from .models import (
    ExportDocument,
    ImportResult,
    KeySchema,
    TableSchema,
)
from .core import (
    # TableGateway architecture
    TableGateway,
    create_table_gateway,
)
from .handlers import (
    # Export/Import APIs
    TableExportReadApi,
    TableImportWriteApi,
)
from .prompt import AlwaysConfirm, Confirmer, TerminalConfirmer

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "DynamoDBConfig",
    "MigratorConfig",

    # Exceptions
    "ConfigError",
    "DecodeError",
    "EncodeError",
    "FileReadError",
    "MigratorError",
    "ParseError",
    "ScanError",
    "SchemaLookupError",
    "WriteError",

    # Models
    "ExportDocument",
    "ImportResult",
    "KeySchema",
    "TableSchema",

    # TableGateway architecture
    "TableGateway",
    "create_table_gateway",

    # Export/Import APIs
    "TableExportReadApi",
    "TableImportWriteApi",

    # Confirmation
    "AlwaysConfirm",
    "Confirmer",
    "TerminalConfirmer",
]
