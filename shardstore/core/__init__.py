"""Core module - configuration, logging, errors and value types."""
from shardstore.core.config import MAX_SHARD_SIZE, Settings, get_settings
from shardstore.core.exceptions import ErrorCode, ShardNotFoundError, StorageError
from shardstore.core.models import StorageStats

__all__ = [
    "MAX_SHARD_SIZE",
    "Settings",
    "get_settings",
    "ErrorCode",
    "StorageError",
    "ShardNotFoundError",
    "StorageStats",
]
