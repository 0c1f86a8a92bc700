"""
Thin DynamoDB Table Gateway

This module provides a lightweight wrapper around the three boto3 DynamoDB
calls a table migration needs:

1. DescribeTable - key schema of the source table
2. Scan          - every item, page by page
3. PutItem       - one unconditional write per imported item

The gateway works on the low-level client, so records stay in
attribute-value form ({'id': {'S': 'a'}}) until the export/import APIs
decode or encode them. It is the only module that talks to boto3 and the
only place botocore exceptions are caught.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    NoCredentialsError,
    NoRegionError,
    PartialCredentialsError,
)

from ..config import DynamoDBConfig
from ..exceptions import (
    ConfigError,
    MigratorError,
    ScanError,
    SchemaLookupError,
    TableOperationError,
    WriteError,
)
from ..models import TableSchema

logger = logging.getLogger(__name__)

AttributeValueMap = Dict[str, Dict[str, Any]]

OPERATION_ERRORS = {
    'DescribeTable': SchemaLookupError,
    'Scan': ScanError,
    'PutItem': WriteError,
}

# Codes meaning the client itself is misconfigured, whatever the operation
CONFIG_ERROR_CODES = {
    'UnrecognizedClientException',
    'InvalidClientTokenId',
    'InvalidSignatureException',
    'IncompleteSignatureException',
    'MissingAuthenticationToken',
    'ExpiredTokenException',
    'TokenRefreshRequiredException',
    'InvalidEndpointException',
}

RETRYABLE_ERROR_CODES = {
    'ProvisionedThroughputExceededException',
    'RequestLimitExceeded',
    'ThrottlingException',
    'InternalServerError',
    'ServiceUnavailable',
    'ServiceUnavailableException',
    'RequestTimeoutException',
}

CREDENTIAL_ERRORS = (NoCredentialsError, PartialCredentialsError, NoRegionError)


def map_dynamodb_error(
    error: ClientError,
    operation: str,
    table_name: str,
    item_index: Optional[int] = None
) -> MigratorError:
    """Map DynamoDB ClientError to a migrator exception.

    Args:
        error: The boto3 ClientError
        operation: The operation that failed ("DescribeTable", "Scan", "PutItem")
        table_name: The DynamoDB table name
        item_index: Position of the imported item, for PutItem failures

    Returns:
        ConfigError for credential/endpoint codes, otherwise the error class
        of the failing operation
    """
    error_code = error.response.get('Error', {}).get('Code', 'Unknown')
    error_message = error.response.get('Error', {}).get('Message', str(error))

    full_message = f"{operation} on {table_name}: {error_message}"
    context: Dict[str, Any] = {'error_code': error_code}
    if error_code in RETRYABLE_ERROR_CODES:
        context['retryable'] = True

    if error_code in CONFIG_ERROR_CODES:
        return ConfigError(
            f"Authentication/endpoint failed - {full_message}", error, context,
            table_name=table_name, item_index=item_index
        )

    if error_code == 'ResourceNotFoundException':
        full_message = f"Table not found - {full_message}"

    error_class = OPERATION_ERRORS.get(operation)
    if error_class is None:
        logger.warning(f"No error mapping for operation '{operation}', using TableOperationError")
        error_class = TableOperationError
    return error_class(full_message, table_name=table_name, original_error=error, context=context, item_index=item_index)


def map_botocore_error(
    error: BotoCoreError,
    operation: str,
    table_name: str,
    item_index: Optional[int] = None
) -> MigratorError:
    """Map a client-side botocore failure (no service response) to a migrator exception."""
    if isinstance(error, CREDENTIAL_ERRORS):
        return ConfigError(f"{operation} on {table_name}: {error}", error, table_name=table_name, item_index=item_index)

    full_message = f"{operation} on {table_name}: {error}"
    error_class = OPERATION_ERRORS.get(operation, TableOperationError)
    return error_class(full_message, table_name=table_name, original_error=error, item_index=item_index)


class TableGateway:
    """
    Thin gateway for the DynamoDB calls behind export and import.

    Key principles:
    - One request in flight at a time, no internal retry loop
    - Raw attribute-value records in and out
    - Every botocore failure leaves as a MigratorError
    """

    def __init__(self, config: DynamoDBConfig, table_name: str):
        """Initialize table gateway.

        Args:
            config: DynamoDB configuration
            table_name: Name of the DynamoDB table
        """
        self.config = config
        self.table_name = table_name
        self._client = None

    @property
    def client(self):
        """Lazy initialization of the DynamoDB client."""
        if self._client is None:
            try:
                session = boto3.Session(
                    aws_access_key_id=self.config.aws_access_key_id,
                    aws_secret_access_key=self.config.aws_secret_access_key,
                    aws_session_token=self.config.aws_session_token,
                    profile_name=self.config.profile_name,
                    region_name=self.config.region_name
                )

                # Configure connection parameters
                client_config = {
                    'region_name': self.config.region_name
                }

                if self.config.endpoint_url:
                    client_config['endpoint_url'] = self.config.endpoint_url

                # Add retry and timeout configuration
                boto_config = Config(
                    retries={'max_attempts': self.config.retries},
                    max_pool_connections=self.config.max_pool_connections,
                    read_timeout=self.config.timeout_seconds,
                    connect_timeout=self.config.timeout_seconds
                )
                client_config['config'] = boto_config

                self._client = session.client('dynamodb', **client_config)
            except Exception as e:
                logger.error(f"Failed to create DynamoDB client: {e}")
                raise ConfigError(f"Failed to connect to DynamoDB: {e}", e) from e
        return self._client

    def describe_table(self) -> Dict[str, Any]:
        """
        Execute DynamoDB DescribeTable operation.

        Returns:
            The 'Table' section of the DescribeTable response

        Raises:
            SchemaLookupError: Table missing or inaccessible
            ConfigError: Credentials or endpoint invalid
        """
        try:
            response = self.client.describe_table(TableName=self.table_name)
        except ClientError as e:
            raise map_dynamodb_error(e, "DescribeTable", self.table_name) from e
        except BotoCoreError as e:
            raise map_botocore_error(e, "DescribeTable", self.table_name) from e
        logger.debug(f"Described table {self.table_name}")
        return response['Table']

    def describe_schema(self) -> TableSchema:
        """Return the table's own name and its hash/range key names."""
        return TableSchema.from_description(self.describe_table(), self.table_name)

    def scan_pages(self) -> Iterator[List[AttributeValueMap]]:
        """
        Execute a paginated DynamoDB Scan, yielding the items of each page.

        Follows LastEvaluatedKey until the table is exhausted.

        Yields:
            Raw attribute-value records of one page

        Raises:
            ScanError: A page request failed
        """
        page_number = 0
        try:
            paginator = self.client.get_paginator('scan')
            for page in paginator.paginate(TableName=self.table_name):
                page_number += 1
                items = page.get('Items', [])
                logger.debug(f"Scan page {page_number} of {self.table_name}: {len(items)} items")
                yield items
        except ClientError as e:
            error = map_dynamodb_error(e, "Scan", self.table_name)
            error.context['page'] = page_number + 1
            raise error from e
        except BotoCoreError as e:
            error = map_botocore_error(e, "Scan", self.table_name)
            error.context['page'] = page_number + 1
            raise error from e

    def scan_all(self) -> List[AttributeValueMap]:
        """
        Scan the whole table into one list.

        Nothing is returned if any page fails, so callers never see a
        partial table.
        """
        items: List[AttributeValueMap] = []
        for page_items in self.scan_pages():
            items.extend(page_items)
        return items

    def put_item(self, item: AttributeValueMap, item_index: Optional[int] = None) -> None:
        """
        Put item into DynamoDB table, overwriting any item with the same key.

        Args:
            item: Record in attribute-value form
            item_index: Position of the item in the import, for error context

        Raises:
            WriteError: The write was rejected
        """
        try:
            self.client.put_item(TableName=self.table_name, Item=item)
        except ClientError as e:
            raise map_dynamodb_error(e, "PutItem", self.table_name, item_index) from e
        except BotoCoreError as e:
            raise map_botocore_error(e, "PutItem", self.table_name, item_index) from e
        logger.debug(f"Put item {item_index} in {self.table_name}")


def create_table_gateway(config: DynamoDBConfig, table_name: str) -> TableGateway:
    """
    Factory function to create a TableGateway instance.

    Args:
        config: DynamoDB configuration
        table_name: Table name

    Returns:
        Configured TableGateway instance
    """
    return TableGateway(config, table_name)
