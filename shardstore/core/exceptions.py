"""Domain exceptions for shardstore."""
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Machine-readable storage error codes."""

    STORAGE_ERROR = "STORAGE_ERROR"
    INVALID_CONFIG = "INVALID_CONFIG"
    INVALID_HASH = "INVALID_HASH"
    INVALID_DATA = "INVALID_DATA"
    SHARD_TOO_LARGE = "SHARD_TOO_LARGE"
    SHARD_NOT_FOUND = "SHARD_NOT_FOUND"
    DELETE_FAILED = "DELETE_FAILED"
    STATS_FAILED = "STATS_FAILED"


class StorageError(Exception):
    """Base exception for all storage errors.

    Callers should branch on ``code`` rather than on the message text.
    """

    code: ErrorCode = ErrorCode.STORAGE_ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        if code is not None:
            self.code = code
        self.details = details or {}
        super().__init__(message)


class StorageConfigError(StorageError):
    """Adapter was constructed with an invalid configuration."""

    code = ErrorCode.INVALID_CONFIG


# Invalid input
class InvalidHashError(StorageError):
    """Shard hash is empty or malformed."""

    code = ErrorCode.INVALID_HASH


class InvalidShardDataError(StorageError):
    """Shard payload is not binary data."""

    code = ErrorCode.INVALID_DATA


class ShardTooLargeError(StorageError):
    """Shard payload exceeds the size limit."""

    code = ErrorCode.SHARD_TOO_LARGE

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(
            message=f"Shard size exceeds the limit: {size} > {limit} bytes",
            details={"size": size, "limit": limit},
        )
        self.size = size
        self.limit = limit


# Expected absence
class ShardNotFoundError(StorageError):
    """Shard not found in storage."""

    code = ErrorCode.SHARD_NOT_FOUND

    def __init__(self, hash: str) -> None:
        super().__init__(
            message=f"Shard not found: {hash}",
            details={"hash": hash},
        )
        self.hash = hash


# System faults
class ShardDeleteError(StorageError):
    """Shard could not be removed."""

    code = ErrorCode.DELETE_FAILED

    def __init__(self, hash: str, reason: str) -> None:
        super().__init__(
            message=f"Failed to delete shard {hash}: {reason}",
            details={"hash": hash},
        )
        self.hash = hash


class StatsError(StorageError):
    """Storage statistics could not be computed."""

    code = ErrorCode.STATS_FAILED
