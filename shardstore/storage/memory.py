"""In-memory shard storage backend."""
from typing import Any

from shardstore.core.config import MAX_SHARD_SIZE
from shardstore.core.exceptions import ShardNotFoundError, StorageConfigError
from shardstore.core.logging import create_logger, normalize_level
from shardstore.core.models import StorageStats
from shardstore.storage.base import BinaryData, validate_hash, validate_payload


class MemoryStorage:
    """Dict-backed shard storage.

    Shares validation and error semantics with FileSystemStorage; contents
    live only as long as the instance.
    """

    def __init__(
        self,
        log_level: str = "info",
        *,
        logger: Any | None = None,
        max_shard_size: int = MAX_SHARD_SIZE,
        strict_hashes: bool = True,
    ) -> None:
        if max_shard_size <= 0:
            raise StorageConfigError(
                "Maximum shard size must be positive",
                details={"max_shard_size": max_shard_size},
            )

        self.log_level = normalize_level(log_level)
        self.logger = logger or create_logger(self.log_level, component="memory-storage")
        self.max_shard_size = max_shard_size
        self.strict_hashes = strict_hashes
        self._shards: dict[str, bytes] = {}

    def _validate_hash(self, hash: object) -> str:
        return validate_hash(hash, strict=self.strict_hashes)

    async def put(self, hash: str, data: BinaryData) -> str:
        self._validate_hash(hash)
        size = validate_payload(data, self.max_shard_size)

        self._shards[hash] = bytes(data)
        self.logger.info("Shard stored", hash=hash, size=size)
        return hash

    async def get(self, hash: str) -> bytes:
        self._validate_hash(hash)

        try:
            data = self._shards[hash]
        except KeyError:
            self.logger.warning("Shard not found", hash=hash)
            raise ShardNotFoundError(hash) from None

        self.logger.debug("Shard retrieved", hash=hash, size=len(data))
        return data

    async def delete(self, hash: str) -> None:
        self._validate_hash(hash)

        if self._shards.pop(hash, None) is None:
            self.logger.warning("Shard already absent", hash=hash)
        else:
            self.logger.info("Shard deleted", hash=hash)

    async def exists(self, hash: str) -> bool:
        self._validate_hash(hash)
        return hash in self._shards

    async def list(self) -> list[str]:
        hashes = list(self._shards)
        self.logger.debug("Listed shards", count=len(hashes))
        return hashes

    async def get_stats(self) -> StorageStats:
        """Compute stats from the shards currently held."""
        stats = StorageStats.from_sizes(len(data) for data in self._shards.values())
        self.logger.info(
            "Storage stats",
            total_shards=stats.total_shards,
            total_size=stats.total_size,
            average_size=stats.average_size,
        )
        return stats
