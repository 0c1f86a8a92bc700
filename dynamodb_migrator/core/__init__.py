"""
Core infrastructure components for DynamoDB operations.

This module contains the foundational components used by the export and import APIs:
- TableGateway: Thin wrapper over boto3 DynamoDB client operations
- Factory functions for creating gateways
"""

from .table_gateway import TableGateway, create_table_gateway, map_dynamodb_error

__all__ = [
    "TableGateway",
    "create_table_gateway",
    "map_dynamodb_error",
]
