"""Storage module - shard storage contract and backends."""
from shardstore.storage.base import MAX_SHARD_SIZE, ShardStorage, validate_hash, validate_payload
from shardstore.storage.filesystem import FileSystemStorage
from shardstore.storage.memory import MemoryStorage

__all__ = [
    "MAX_SHARD_SIZE",
    "ShardStorage",
    "FileSystemStorage",
    "MemoryStorage",
    "validate_hash",
    "validate_payload",
]
