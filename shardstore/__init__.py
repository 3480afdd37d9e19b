"""shardstore - content-addressed shard storage."""
from shardstore.core.exceptions import (
    ErrorCode,
    InvalidHashError,
    InvalidShardDataError,
    ShardDeleteError,
    ShardNotFoundError,
    ShardTooLargeError,
    StatsError,
    StorageConfigError,
    StorageError,
)
from shardstore.core.models import StorageStats
from shardstore.storage import FileSystemStorage, MemoryStorage, ShardStorage

__version__ = "0.1.0"

__all__ = [
    "ErrorCode",
    "StorageError",
    "StorageConfigError",
    "InvalidHashError",
    "InvalidShardDataError",
    "ShardTooLargeError",
    "ShardNotFoundError",
    "ShardDeleteError",
    "StatsError",
    "StorageStats",
    "ShardStorage",
    "FileSystemStorage",
    "MemoryStorage",
]
