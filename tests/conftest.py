"""
Test configuration and fixtures for the DynamoDB migrator.

Provides moto-backed DynamoDB tables and a scripted confirmer so export and
import can run end to end without AWS or a terminal.
"""

import json
import sys
from pathlib import Path

# Add parent directory to path so we can import dynamodb_migrator
sys.path.insert(0, str(Path(__file__).parent.parent))

import boto3
import pytest
from moto import mock_aws

from dynamodb_migrator import DynamoDBConfig
from tests.helpers import ScriptedConfirmer, create_composite_table, create_hash_table


@pytest.fixture(autouse=True)
def aws_environment(monkeypatch):
    """Fake credentials so nothing can reach a real AWS account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    monkeypatch.delenv("DYNAMODB_ENDPOINT_URL", raising=False)
    monkeypatch.delenv("DYNAMODB_DEBUG_LOGGING", raising=False)


@pytest.fixture
def mock_dynamodb_config():
    """DynamoDB configuration for mocked testing."""
    return DynamoDBConfig(
        aws_access_key_id="test_key",
        aws_secret_access_key="test_secret",
        region_name="us-east-1",
        endpoint_url=None  # Use default AWS endpoint for moto
    )


@pytest.fixture
def mock_dynamodb_client():
    """Mock DynamoDB client."""
    with mock_aws():
        yield boto3.client('dynamodb', region_name='us-east-1')


@pytest.fixture
def foo_table(mock_dynamodb_client):
    """Table 'foo' keyed by id, holding two items."""
    create_hash_table(mock_dynamodb_client, 'foo')
    mock_dynamodb_client.put_item(TableName='foo', Item={'id': {'S': 'a'}, 'v': {'N': '1'}})
    mock_dynamodb_client.put_item(TableName='foo', Item={'id': {'S': 'b'}, 'v': {'N': '2'}})
    return 'foo'


@pytest.fixture
def empty_foo_table(mock_dynamodb_client):
    """Empty table 'foo_copy' with the same schema as foo."""
    create_hash_table(mock_dynamodb_client, 'foo_copy')
    return 'foo_copy'


@pytest.fixture
def events_table(mock_dynamodb_client):
    """Table 'events' with a composite pk/sk key."""
    create_composite_table(mock_dynamodb_client, 'events')
    for pk, sk in [('user-1', 1), ('user-1', 2), ('user-2', 1)]:
        mock_dynamodb_client.put_item(
            TableName='events',
            Item={'pk': {'S': pk}, 'sk': {'N': str(sk)}, 'kind': {'S': 'login'}}
        )
    return 'events'


@pytest.fixture
def accept():
    return ScriptedConfirmer(True)


@pytest.fixture
def decline():
    return ScriptedConfirmer(False)


@pytest.fixture
def write_document(tmp_path):
    """Write an export document (dict or raw text) to a temp file and return its path."""
    def _write(document, name: str = 'export.json') -> Path:
        path = tmp_path / name
        if isinstance(document, str):
            path.write_text(document, encoding='utf-8')
        else:
            path.write_text(json.dumps(document), encoding='utf-8')
        return path
    return _write
