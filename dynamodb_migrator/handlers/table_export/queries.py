"""
Table Export Read API

Read side of a migration: describes the table, scans every page and turns
the result into an ExportDocument.

DynamoDB Operations:
- DescribeTable for the key schema
- Scan (paginated) for the items

The whole table is held in memory; the document is only built once every
page has been read, so a failed page never yields a partial export.
"""

import logging
from typing import Optional

from ...config import DynamoDBConfig
from ...core import TableGateway, create_table_gateway
from ...models import ExportDocument
from ...utils import decode_items, dumps_document

logger = logging.getLogger(__name__)


class TableExportReadApi:
    """
    Read-only API that exports a single table.

    Example:
        api = TableExportReadApi(config, "foo")
        print(api.export_json())
    """

    def __init__(self, config: DynamoDBConfig, table_name: str, gateway: Optional[TableGateway] = None):
        """Initialize export API with configuration."""
        self.config = config
        self.table_name = table_name
        self.gateway = gateway or create_table_gateway(config, table_name)

    def export_table(self) -> ExportDocument:
        """
        Export the table's key schema and all of its items.

        Returns:
            ExportDocument with items in scan order; TableName is the name
            DescribeTable reports, also when the table was addressed by ARN

        Raises:
            SchemaLookupError: Table missing or inaccessible
            ScanError: A scan page failed
            DecodeError: A scanned record could not be decoded
        """
        schema = self.gateway.describe_schema()
        key_schema = schema.key_schema
        logger.info(
            f"Exporting {schema.table_name} (hash key: {key_schema.hash_key}, "
            f"range key: {key_schema.range_key or '-'})"
        )

        raw_items = self.gateway.scan_all()
        items = decode_items(raw_items)

        logger.info(f"Exported {len(items)} items from {schema.table_name}")
        return ExportDocument.for_table(schema, items)

    def export_json(self) -> str:
        """
        Export the table as a JSON string.

        Raises:
            EncodeError: The document could not be serialized
            (plus everything export_table raises)
        """
        return dumps_document(self.export_table())
