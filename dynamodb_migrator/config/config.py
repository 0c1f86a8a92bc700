import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import ConfigError

# Load environment variables from .env file if it exists
load_dotenv()


class DynamoDBConfig(BaseModel):
    """Configuration for the DynamoDB connection."""

    aws_access_key_id: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_ACCESS_KEY_ID"),
        description="AWS access key ID"
    )

    aws_secret_access_key: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SECRET_ACCESS_KEY"),
        description="AWS secret access key"
    )

    aws_session_token: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SESSION_TOKEN"),
        description="AWS session token for temporary credentials"
    )

    profile_name: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_PROFILE"),
        description="Named profile from the shared AWS config files"
    )

    region_name: str = Field(
        default_factory=lambda: os.getenv("AWS_REGION", "us-east-1"),
        description="AWS region name"
    )

    # DynamoDB specific settings
    endpoint_url: Optional[str] = Field(
        default_factory=lambda: os.getenv("DYNAMODB_ENDPOINT_URL"),
        description="DynamoDB endpoint URL (for local development)"
    )

    # Connection settings
    max_pool_connections: int = Field(
        default=10,
        description="Maximum number of connections in the connection pool"
    )

    retries: int = Field(
        default=3,
        description="Number of retry attempts botocore makes for failed requests"
    )

    timeout_seconds: float = Field(
        default=30.0,
        description="Request timeout in seconds"
    )

    # Logging settings
    enable_debug_logging: bool = Field(
        default_factory=lambda: os.getenv("DYNAMODB_DEBUG_LOGGING", "false").lower() == "true",
        description="Enable debug logging for DynamoDB operations"
    )

    @field_validator('region_name')
    @classmethod
    def validate_region(cls, v):
        """Validate AWS region name."""
        if not v:
            raise ValueError("AWS region name is required")
        return v

    @field_validator('retries', 'max_pool_connections')
    @classmethod
    def validate_positive_int(cls, v):
        if v < 1:
            raise ValueError("Value must be at least 1")
        return v

    @field_validator('timeout_seconds')
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("Timeout must be positive")
        return v

    @classmethod
    def for_local_development(cls) -> 'DynamoDBConfig':
        """Create configuration for local DynamoDB development.

        Returns:
            DynamoDBConfig instance configured for local development
        """
        return cls(
            aws_access_key_id="local",
            aws_secret_access_key="local",
            region_name="us-east-1",
            endpoint_url="http://localhost:8000",
            enable_debug_logging=True
        )

    model_config = ConfigDict(
        validate_assignment=True
    )


class MigratorConfig(BaseModel):
    """Immutable settings for a single export or import run.

    Built once from the parsed command line and handed to the export/import
    APIs; nothing mutates it afterwards.
    """

    table_name: str = Field(description="Table to export from or import into")

    import_path: Optional[Path] = Field(
        default=None,
        description="Export document to import; the run exports when unset"
    )

    assume_yes: bool = Field(
        default=False,
        description="Skip the interactive confirmation before importing"
    )

    dynamodb: DynamoDBConfig = Field(default_factory=DynamoDBConfig)

    @field_validator('table_name')
    @classmethod
    def validate_table_name(cls, v):
        """Validate table name."""
        if not v or not v.strip():
            raise ValueError("Table name is required")
        return v

    @property
    def is_import(self) -> bool:
        return self.import_path is not None

    @classmethod
    def build(
        cls,
        table_name: str,
        import_path: Optional[str] = None,
        assume_yes: bool = False,
        **dynamodb_overrides
    ) -> 'MigratorConfig':
        """Create run configuration, converting validation failures to ConfigError.

        Args:
            table_name: Target table name
            import_path: Path of the document to import, or None to export
            assume_yes: Answer the import confirmation affirmatively
            **dynamodb_overrides: DynamoDBConfig fields to override; None values are ignored

        Returns:
            MigratorConfig instance

        Raises:
            ConfigError: If any setting is invalid
        """
        overrides = {k: v for k, v in dynamodb_overrides.items() if v is not None}
        try:
            return cls(
                table_name=table_name,
                import_path=Path(import_path) if import_path else None,
                assume_yes=assume_yes,
                dynamodb=DynamoDBConfig(**overrides)
            )
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}", e) from e

    model_config = ConfigDict(
        frozen=True
    )
