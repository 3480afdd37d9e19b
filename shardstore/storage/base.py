"""Storage backend contract shared by all shard stores."""
from typing import Protocol, runtime_checkable

from shardstore.core.config import MAX_SHARD_SIZE
from shardstore.core.exceptions import (
    InvalidHashError,
    InvalidShardDataError,
    ShardTooLargeError,
)

# Names starting with this prefix never identify a shard.
RESERVED_PREFIX = "."

_FORBIDDEN_HASH_CHARS = ("/", "\\", "\x00")

BinaryData = bytes | bytearray | memoryview


@runtime_checkable
class ShardStorage(Protocol):
    """Capability set every shard backend must provide.

    Backends satisfy this structurally; there is no shared state. A class
    that subclasses the protocol explicitly and leaves a method out gets
    ``NotImplementedError`` when that method is called.
    """

    async def put(self, hash: str, data: BinaryData) -> str:
        """Store a shard, replacing any shard with the same hash.

        Args:
            hash: Shard identifier
            data: Shard bytes

        Returns:
            The hash the shard was stored under
        """
        raise NotImplementedError("Method not implemented")

    async def get(self, hash: str) -> bytes:
        """Retrieve a shard.

        Raises:
            ShardNotFoundError: No shard is stored under ``hash``
        """
        raise NotImplementedError("Method not implemented")

    async def delete(self, hash: str) -> None:
        """Delete a shard. Deleting an absent shard is a no-op."""
        raise NotImplementedError("Method not implemented")

    async def list(self) -> list[str]:
        """List all stored shard hashes, in no particular order."""
        raise NotImplementedError("Method not implemented")


def validate_hash(hash: object, strict: bool = True) -> str:
    """Check that ``hash`` can identify a shard.

    Args:
        hash: Candidate shard hash
        strict: Also reject path separators, NUL and reserved names

    Returns:
        The validated hash

    Raises:
        InvalidHashError: If the hash is empty, not a string or unsafe
    """
    if not isinstance(hash, str) or len(hash) == 0:
        raise InvalidHashError("Invalid hash", details={"hash": repr(hash)})

    if strict and (
        hash.startswith(RESERVED_PREFIX)
        or any(c in hash for c in _FORBIDDEN_HASH_CHARS)
    ):
        raise InvalidHashError(
            f"Invalid hash: {hash!r} is not a safe shard name",
            details={"hash": hash},
        )

    return hash


def validate_payload(data: object, limit: int = MAX_SHARD_SIZE) -> int:
    """Check that ``data`` is a binary payload within ``limit`` bytes.

    Returns:
        Payload size in bytes
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise InvalidShardDataError(
            "Data must be bytes",
            details={"type": type(data).__name__},
        )

    size = data.nbytes if isinstance(data, memoryview) else len(data)
    if size > limit:
        raise ShardTooLargeError(size, limit)

    return size
