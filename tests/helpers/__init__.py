"""
Test helpers for the DynamoDB migrator test suite.

Table builders, a scripted confirmer and order-insensitive item comparison.
"""

import json
from typing import List

from dynamodb_migrator.utils import decode_item


class ScriptedConfirmer:
    """Confirmer that returns a fixed answer and records every prompt."""

    def __init__(self, answer: bool):
        self.answer = answer
        self.prompts: List[str] = []

    def confirm(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        return self.answer


def create_hash_table(client, table_name: str, hash_key: str = 'id', hash_type: str = 'S'):
    client.create_table(
        TableName=table_name,
        KeySchema=[{'AttributeName': hash_key, 'KeyType': 'HASH'}],
        AttributeDefinitions=[{'AttributeName': hash_key, 'AttributeType': hash_type}],
        BillingMode='PAY_PER_REQUEST'
    )


def create_composite_table(client, table_name: str, hash_key: str = 'pk', range_key: str = 'sk'):
    client.create_table(
        TableName=table_name,
        KeySchema=[
            {'AttributeName': hash_key, 'KeyType': 'HASH'},
            {'AttributeName': range_key, 'KeyType': 'RANGE'}
        ],
        AttributeDefinitions=[
            {'AttributeName': hash_key, 'AttributeType': 'S'},
            {'AttributeName': range_key, 'AttributeType': 'N'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )


def scan_plain_items(client, table_name: str) -> List[dict]:
    """All items of a table, decoded, for order-insensitive comparisons."""
    items = []
    paginator = client.get_paginator('scan')
    for page in paginator.paginate(TableName=table_name):
        items.extend(decode_item(raw) for raw in page['Items'])
    return items


def as_set(items: List[dict]) -> set:
    return {json.dumps(item, sort_keys=True) for item in items}


__all__ = [
    "ScriptedConfirmer",
    "create_hash_table",
    "create_composite_table",
    "scan_plain_items",
    "as_set",
]
