"""
DynamoDB Migrator Utilities

Conversion between DynamoDB attribute values and the plain JSON values
stored in an export document.

Key Features:
- Attribute-value decoding for scanned records (export side)
- Attribute-value encoding for imported items (import side)
- Export document JSON serialization/parsing with exact numbers

Type Mapping:
    S / BOOL / NULL      -> string / boolean / null
    N                    -> integer when integral, float otherwise
    L / M                -> array / object (object keys sorted)
    SS / NS / BS         -> sorted array (imported back as L)
    B                    -> base64 string (imported back as S)

Numbers read from an import file are parsed as Decimal so they reach
DynamoDB without float rounding.
"""

import base64
import decimal
import json
from decimal import Decimal
from typing import Any, Dict, List, Optional

from boto3.dynamodb.types import Binary, TypeDeserializer, TypeSerializer
from pydantic import ValidationError

from .exceptions import DecodeError, EncodeError, ParseError
from .models import ExportDocument, Item


AttributeValueMap = Dict[str, Dict[str, Any]]

_deserializer = TypeDeserializer()
_serializer = TypeSerializer()


# =============================================================================
# Attribute Value Decoding (Export)
# =============================================================================

def to_json_value(value: Any) -> Any:
    """Convert a deserialized DynamoDB value to a JSON-compatible value.

    Args:
        value: Value produced by boto3's TypeDeserializer

    Returns:
        str, int, float, bool, None, list or dict

    Raises:
        TypeError: For values with no JSON representation

    Examples:
        >>> to_json_value(Decimal('3'))
        3
        >>> to_json_value({'b': Decimal('1.5'), 'a': {'x', 'y'}})
        {'a': ['x', 'y'], 'b': 1.5}
    """
    if value is None or isinstance(value, (str, bool)):
        return value
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Non-finite number: {value}")
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    if isinstance(value, Binary):
        return base64.b64encode(value.value).decode('ascii')
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode('ascii')
    if isinstance(value, dict):
        return {k: to_json_value(value[k]) for k in sorted(value)}
    if isinstance(value, list):
        return [to_json_value(v) for v in value]
    if isinstance(value, (set, frozenset)):
        # Set members share one DynamoDB type, so they sort without a key
        return sorted(to_json_value(v) for v in value)
    raise TypeError(f"Unsupported value type: {type(value).__name__}")


def decode_item(raw_item: AttributeValueMap, item_index: Optional[int] = None) -> Item:
    """Decode one scanned record into a plain item.

    Args:
        raw_item: Record in DynamoDB attribute-value form, e.g. {'id': {'S': 'a'}}
        item_index: Position of the record in the scan, for error context

    Returns:
        Plain item with sorted keys, e.g. {'id': 'a'}

    Raises:
        DecodeError: If the record is malformed
    """
    try:
        return {
            name: to_json_value(_deserializer.deserialize(raw_item[name]))
            for name in sorted(raw_item)
        }
    except (TypeError, ValueError, KeyError, AttributeError, decimal.DecimalException) as e:
        raise DecodeError(f"Failed to decode item: {e}", item_index, e) from e


def decode_items(raw_items: List[AttributeValueMap]) -> List[Item]:
    """Decode scanned records, keeping scan order."""
    return [decode_item(raw, index) for index, raw in enumerate(raw_items)]


# =============================================================================
# Attribute Value Encoding (Import)
# =============================================================================

def from_json_value(value: Any) -> Any:
    """Prepare a JSON value for boto3's TypeSerializer.

    Floats become Decimal through their repr so 0.1 stays 0.1.
    """
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, dict):
        return {k: from_json_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [from_json_value(v) for v in value]
    return value


def encode_item(item: Item, item_index: Optional[int] = None) -> AttributeValueMap:
    """Encode a plain item into DynamoDB attribute-value form.

    Args:
        item: Plain item from an export document
        item_index: Position of the item in the document, for error context

    Returns:
        Record ready for PutItem, e.g. {'id': {'S': 'a'}, 'v': {'N': '1'}}

    Raises:
        EncodeError: If the item is not a mapping or holds an unsupported value
    """
    if not isinstance(item, dict):
        raise EncodeError(f"Item must be an object, got {type(item).__name__}", item_index)
    try:
        return {name: _serializer.serialize(from_json_value(value)) for name, value in item.items()}
    except (TypeError, ValueError, decimal.DecimalException) as e:
        raise EncodeError(f"Failed to encode item: {e!r}", item_index, e) from e


# =============================================================================
# Document Serialization
# =============================================================================

class DecimalEncoder(json.JSONEncoder):
    """JSON encoder that writes Decimal values as JSON numbers."""

    def default(self, obj):
        if isinstance(obj, Decimal):
            return to_json_value(obj)
        return super().default(obj)


def dumps_document(document: ExportDocument) -> str:
    """Serialize an export document to compact JSON.

    Raises:
        EncodeError: If the document holds values JSON cannot represent
    """
    try:
        return json.dumps(
            document.to_json_dict(),
            cls=DecimalEncoder,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False
        )
    except (TypeError, ValueError) as e:
        raise EncodeError(f"Failed to serialize export document: {e}", original_error=e) from e


def _reject_constant(name: str):
    raise ValueError(f"Unsupported JSON constant: {name}")


def loads_document(raw: str, path: Optional[str] = None) -> ExportDocument:
    """Parse export document JSON.

    Args:
        raw: Document text
        path: Source file, for error context

    Returns:
        ExportDocument with numbers parsed as int or Decimal

    Raises:
        ParseError: If the text is not valid JSON or not a document object
    """
    try:
        data = json.loads(raw, parse_float=Decimal, parse_constant=_reject_constant)
    except ValueError as e:
        raise ParseError(f"Invalid JSON in export document: {e}", path, e) from e

    if not isinstance(data, dict):
        raise ParseError(f"Export document must be a JSON object, got {type(data).__name__}", path)

    try:
        return ExportDocument.model_validate(data)
    except ValidationError as e:
        raise ParseError(f"Invalid export document: {e}", path, e) from e


__all__ = [
    # Attribute values
    "to_json_value",
    "decode_item",
    "decode_items",
    "from_json_value",
    "encode_item",

    # Documents
    "DecimalEncoder",
    "dumps_document",
    "loads_document",
]
