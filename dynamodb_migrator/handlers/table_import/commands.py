"""
Table Import Write API

Write side of a migration: replays every item of an export document into a
table, after the user confirms.

DynamoDB Operation: PutItem without ConditionExpression, one call per item,
in document order. Existing items with the same key are overwritten, so
importing the same document twice leaves the table as importing it once.

Failure semantics:
- Nothing is written before the confirmation
- The first failing item stops the run; earlier writes stay committed
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ...config import DynamoDBConfig
from ...core import TableGateway, create_table_gateway
from ...exceptions import FileReadError, ParseError
from ...models import ExportDocument, ImportResult
from ...prompt import Confirmer, TerminalConfirmer
from ...utils import encode_item, loads_document

logger = logging.getLogger(__name__)

CONFIRM_PROMPT = "This will import data into {table_name}! Do you want to continue?"


def read_document(path: Union[str, Path]) -> ExportDocument:
    """
    Load an export document from disk.

    Raises:
        FileReadError: File missing or unreadable
        ParseError: File is not a valid export document
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise FileReadError(str(path), e) from e

    try:
        text = raw.decode('utf-8')
    except UnicodeDecodeError as e:
        raise ParseError(f"Export document is not valid UTF-8: {e}", str(path), e) from e

    return loads_document(text, str(path))


class TableImportWriteApi:
    """
    Write API that imports an export document into a single table.

    Example:
        api = TableImportWriteApi(config, "foo", confirmer=TerminalConfirmer())
        result = api.import_file("/path/to/file.json")
    """

    def __init__(
        self,
        config: DynamoDBConfig,
        table_name: str,
        confirmer: Optional[Confirmer] = None,
        gateway: Optional[TableGateway] = None
    ):
        """Initialize import API with configuration."""
        self.config = config
        self.table_name = table_name
        self.confirmer = confirmer or TerminalConfirmer()
        self.gateway = gateway or create_table_gateway(config, table_name)

    def import_file(self, path: Union[str, Path]) -> ImportResult:
        """
        Read an export document from disk and import it.

        Raises:
            FileReadError, ParseError: Document could not be loaded
            EncodeError, WriteError, ConfigError: See import_document
        """
        document = read_document(path)
        logger.info(f"Loaded {len(document.items)} items from {path} (exported from '{document.table_name}')")
        return self.import_document(document)

    def _ask(self, prompt: str) -> bool:
        """Ask the confirmer; a prompt that fails to produce an answer is a "no"."""
        try:
            return bool(self.confirmer.confirm(prompt))
        except Exception as e:
            logger.warning(f"Confirmation prompt failed ({e.__class__.__name__}: {e}), treating as declined")
            return False

    def import_document(self, document: ExportDocument) -> ImportResult:
        """
        Write every item of the document into the table after confirmation.

        Args:
            document: Export document; its TableName is informational only

        Returns:
            ImportResult; confirmed is False and nothing was written when declined

        Raises:
            EncodeError: An item could not be converted to attribute values
            WriteError: PutItem failed; error.item_index is the failing position
        """
        total = len(document.items)
        prompt = CONFIRM_PROMPT.format(table_name=self.table_name)

        if not self._ask(prompt):
            logger.info(f"Import into {self.table_name} declined, no items written")
            return ImportResult(table_name=self.table_name, confirmed=False, items_total=total)

        written = 0
        for index, item in enumerate(document.items):
            self.gateway.put_item(encode_item(item, index), item_index=index)
            written += 1

        logger.info(f"Imported {written} items into {self.table_name}")
        return ImportResult(
            table_name=self.table_name,
            confirmed=True,
            items_written=written,
            items_total=total
        )
