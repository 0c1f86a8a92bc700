"""
Export Document Models

The export document is the only artifact the migrator persists. Its JSON
form uses capitalized keys (TableName, PrimaryKey, RangeKey, Items) so
documents written by older exports keep loading unchanged.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

Item = Dict[str, Any]


class KeySchema(BaseModel):
    """Primary key definition of a DynamoDB table."""

    hash_key: str = Field(..., description="Partition (HASH) key attribute name")
    range_key: str = Field(default="", description="Sort (RANGE) key attribute name, empty if none")

    @classmethod
    def from_key_schema(cls, key_schema: List[Dict[str, str]]) -> 'KeySchema':
        """Build from the KeySchema list returned by DescribeTable.

        Example:
            >>> KeySchema.from_key_schema([
            ...     {'AttributeName': 'pk', 'KeyType': 'HASH'},
            ...     {'AttributeName': 'sk', 'KeyType': 'RANGE'},
            ... ])
            KeySchema(hash_key='pk', range_key='sk')
        """
        hash_key = ""
        range_key = ""
        for element in key_schema:
            if element.get('KeyType') == 'HASH':
                hash_key = element['AttributeName']
            elif element.get('KeyType') == 'RANGE':
                range_key = element['AttributeName']
        return cls(hash_key=hash_key, range_key=range_key)


class TableSchema(BaseModel):
    """Name and primary key of a table as DescribeTable reports them.

    The name is the table's own name even when it was looked up by ARN.
    """

    table_name: str = Field(..., description="Table name from the DescribeTable response")
    key_schema: KeySchema

    @classmethod
    def from_description(cls, table: Dict[str, Any], requested_name: str = "") -> 'TableSchema':
        """Build from the 'Table' section of a DescribeTable response."""
        return cls(
            table_name=table.get('TableName') or requested_name,
            key_schema=KeySchema.from_key_schema(table.get('KeySchema', []))
        )


class ExportDocument(BaseModel):
    """
    Full contents of one table.

    Items keep scan order. Missing top-level fields default to empty
    values, so a hand-written document with only ``Items`` still imports.
    """

    table_name: str = Field(default="", alias="TableName")
    primary_key: str = Field(default="", alias="PrimaryKey")
    range_key: str = Field(default="", alias="RangeKey")
    items: List[Item] = Field(default_factory=list, alias="Items")

    @field_validator('table_name', 'primary_key', 'range_key', mode='before')
    @classmethod
    def null_string_to_empty(cls, v):
        return "" if v is None else v

    @field_validator('items', mode='before')
    @classmethod
    def null_items_to_empty(cls, v):
        return [] if v is None else v

    @classmethod
    def for_table(cls, schema: TableSchema, items: Optional[List[Item]] = None) -> 'ExportDocument':
        return cls(
            table_name=schema.table_name,
            primary_key=schema.key_schema.hash_key,
            range_key=schema.key_schema.range_key,
            items=items or []
        )

    def to_json_dict(self) -> Dict[str, Any]:
        """Return the document keyed by its JSON field names, in document order."""
        return self.model_dump(by_alias=True)

    model_config = ConfigDict(
        populate_by_name=True
    )


class ImportResult(BaseModel):
    """Outcome of an import run."""

    table_name: str
    confirmed: bool = Field(..., description="False when the user declined the prompt")
    items_written: int = Field(default=0, ge=0)
    items_total: int = Field(default=0, ge=0)
