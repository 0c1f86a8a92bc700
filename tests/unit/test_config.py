import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from dynamodb_migrator.config import DynamoDBConfig, MigratorConfig
from dynamodb_migrator.exceptions import ConfigError


class TestDynamoDBConfig:
    """Test cases for DynamoDBConfig."""

    def test_default_config(self):
        """Test default configuration values."""
        with patch.dict(os.environ, {"AWS_REGION": "us-west-2"}):
            config = DynamoDBConfig()

            assert config.region_name == "us-west-2"
            assert config.max_pool_connections == 10
            assert config.retries == 3
            assert config.timeout_seconds == 30.0
            assert config.endpoint_url is None
            assert config.enable_debug_logging is False

    def test_config_from_env_vars(self):
        """Test configuration from environment variables."""
        env_vars = {
            "AWS_ACCESS_KEY_ID": "test_key",
            "AWS_SECRET_ACCESS_KEY": "test_secret",
            "AWS_PROFILE": "migration",
            "AWS_REGION": "eu-west-1",
            "DYNAMODB_ENDPOINT_URL": "http://localhost:8000",
            "DYNAMODB_DEBUG_LOGGING": "TRUE"
        }

        with patch.dict(os.environ, env_vars):
            config = DynamoDBConfig()

            assert config.aws_access_key_id == "test_key"
            assert config.aws_secret_access_key == "test_secret"
            assert config.profile_name == "migration"
            assert config.region_name == "eu-west-1"
            assert config.endpoint_url == "http://localhost:8000"
            assert config.enable_debug_logging is True

    def test_local_development_config(self):
        """Test local development configuration."""
        config = DynamoDBConfig.for_local_development()

        assert config.aws_access_key_id == "local"
        assert config.aws_secret_access_key == "local"
        assert config.endpoint_url == "http://localhost:8000"
        assert config.enable_debug_logging is True

    def test_region_validation(self):
        """Test region validation."""
        with pytest.raises(ValueError, match="AWS region name is required"):
            DynamoDBConfig(region_name="")

    def test_timeout_validation(self):
        with pytest.raises(ValueError, match="Timeout must be positive"):
            DynamoDBConfig(timeout_seconds=0)

    def test_retries_validation(self):
        with pytest.raises(ValueError, match="at least 1"):
            DynamoDBConfig(retries=0)

    def test_validate_assignment(self):
        config = DynamoDBConfig()
        with pytest.raises(ValueError):
            config.region_name = ""


class TestMigratorConfig:
    """Test cases for MigratorConfig."""

    def test_export_config(self):
        config = MigratorConfig.build(table_name="foo")

        assert config.table_name == "foo"
        assert config.import_path is None
        assert config.is_import is False
        assert config.assume_yes is False

    def test_import_config(self):
        config = MigratorConfig.build(table_name="foo", import_path="/tmp/foo.json", assume_yes=True)

        assert config.import_path == Path("/tmp/foo.json")
        assert config.is_import is True
        assert config.assume_yes is True

    def test_overrides_replace_environment(self):
        with patch.dict(os.environ, {"AWS_REGION": "eu-west-1"}):
            config = MigratorConfig.build(
                table_name="foo",
                region_name="ap-south-1",
                endpoint_url="http://localhost:4566"
            )

        assert config.dynamodb.region_name == "ap-south-1"
        assert config.dynamodb.endpoint_url == "http://localhost:4566"

    def test_none_overrides_are_ignored(self):
        with patch.dict(os.environ, {"AWS_REGION": "eu-west-1"}):
            config = MigratorConfig.build(table_name="foo", region_name=None, profile_name=None)

        assert config.dynamodb.region_name == "eu-west-1"

    def test_empty_table_name_is_config_error(self):
        with pytest.raises(ConfigError, match="Invalid configuration"):
            MigratorConfig.build(table_name="  ")

    def test_invalid_override_is_config_error(self):
        with pytest.raises(ConfigError):
            MigratorConfig.build(table_name="foo", region_name="")

    def test_config_is_frozen(self):
        config = MigratorConfig.build(table_name="foo")

        with pytest.raises(ValidationError):
            config.table_name = "bar"
