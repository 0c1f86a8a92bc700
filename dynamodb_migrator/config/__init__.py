from .config import DynamoDBConfig, MigratorConfig

__all__ = [
    "DynamoDBConfig",
    "MigratorConfig",
]
