"""Local filesystem shard storage backend."""
import asyncio
import contextlib
import os
from pathlib import Path
from typing import Any
from uuid import uuid4

import aiofiles
import aiofiles.os

from shardstore.core.config import MAX_SHARD_SIZE, Settings
from shardstore.core.exceptions import (
    ShardDeleteError,
    ShardNotFoundError,
    StatsError,
    StorageConfigError,
)
from shardstore.core.logging import create_logger, normalize_level
from shardstore.core.models import StorageStats
from shardstore.storage.base import (
    RESERVED_PREFIX,
    BinaryData,
    validate_hash,
    validate_payload,
)


class FileSystemStorage:
    """Shard storage backed by a flat directory.

    Every shard is a regular file in ``storage_path`` whose name is the
    shard hash and whose contents are exactly the stored bytes. The
    directory is created on the first write or listing.

    Example:
        storage = FileSystemStorage("/var/lib/shards", log_level="warn")

        await storage.put("9f86d081", b"test data")
        data = await storage.get("9f86d081")

        stats = await storage.get_stats()
    """

    def __init__(
        self,
        storage_path: str | Path,
        log_level: str = "info",
        *,
        logger: Any | None = None,
        max_shard_size: int = MAX_SHARD_SIZE,
        stats_concurrency: int = 64,
        strict_hashes: bool = True,
    ) -> None:
        """Initialize filesystem storage.

        Args:
            storage_path: Directory owning all shards of this instance
            log_level: One of debug, info, warn, error
            logger: Logger to use instead of building one from log_level
            max_shard_size: Largest accepted payload in bytes
            stats_concurrency: Parallel size lookups in get_stats
            strict_hashes: Reject hashes that are unsafe as file names
        """
        if not storage_path:
            raise StorageConfigError("Storage path is required")
        if max_shard_size <= 0:
            raise StorageConfigError(
                "Maximum shard size must be positive",
                details={"max_shard_size": max_shard_size},
            )
        if stats_concurrency < 1:
            raise StorageConfigError(
                "Stats concurrency must be at least 1",
                details={"stats_concurrency": stats_concurrency},
            )

        self.storage_path = Path(storage_path)
        self.log_level = normalize_level(log_level)
        self.logger = logger or create_logger(self.log_level)
        self.max_shard_size = max_shard_size
        self.stats_concurrency = stats_concurrency
        self.strict_hashes = strict_hashes

    @classmethod
    def from_settings(cls, settings: Settings, logger: Any | None = None) -> "FileSystemStorage":
        """Build an adapter from application settings."""
        if settings.storage_path is None:
            raise StorageConfigError("Storage path is required")

        return cls(
            settings.storage_path,
            settings.log_level,
            logger=logger,
            max_shard_size=settings.max_shard_size,
            stats_concurrency=settings.stats_concurrency,
            strict_hashes=settings.strict_hashes,
        )

    def _validate_hash(self, hash: object) -> str:
        return validate_hash(hash, strict=self.strict_hashes)

    def _shard_path(self, hash: str) -> Path:
        return self.storage_path / hash

    async def _ensure_directory(self) -> None:
        """Create the storage directory and its parents if missing."""
        try:
            await aiofiles.os.makedirs(self.storage_path, exist_ok=True)
        except OSError as e:
            self.logger.error(
                "Failed to create storage directory",
                path=str(self.storage_path),
                error=str(e),
            )
            raise

    def _scan_root(self) -> list[str]:
        """Names of regular, non-reserved files in the storage root."""
        with os.scandir(self.storage_path) as entries:
            return [
                entry.name
                for entry in entries
                if not entry.name.startswith(RESERVED_PREFIX) and entry.is_file()
            ]

    async def put(self, hash: str, data: BinaryData) -> str:
        """Store a shard on disk.

        The payload is written to a reserved temporary name and renamed
        over the shard file, so readers never observe a partial shard.
        """
        self._validate_hash(hash)
        size = validate_payload(data, self.max_shard_size)

        await self._ensure_directory()
        path = self._shard_path(hash)
        tmp_path = self.storage_path / f"{RESERVED_PREFIX}{uuid4().hex}.tmp"
        if isinstance(data, memoryview) and not data.contiguous:
            data = bytes(data)
        renamed = False

        try:
            async with aiofiles.open(tmp_path, "wb") as f:
                await f.write(data)
            await aiofiles.os.replace(tmp_path, path)
            renamed = True

        except Exception as e:
            self.logger.error("Failed to store shard", hash=hash, error=str(e))
            raise

        finally:
            if not renamed:
                with contextlib.suppress(OSError):
                    await aiofiles.os.remove(tmp_path)

        self.logger.info("Shard stored", hash=hash, size=size)
        return hash

    async def get(self, hash: str) -> bytes:
        """Read a shard from disk."""
        self._validate_hash(hash)
        path = self._shard_path(hash)

        if not await aiofiles.os.path.isfile(path):
            self.logger.warning("Shard not found", hash=hash)
            raise ShardNotFoundError(hash)

        try:
            async with aiofiles.open(path, "rb") as f:
                data = await f.read()

        except FileNotFoundError:
            # Removed between the existence check and the read
            self.logger.warning("Shard not found", hash=hash)
            raise ShardNotFoundError(hash) from None

        except Exception as e:
            self.logger.error("Failed to read shard", hash=hash, error=str(e))
            raise

        self.logger.debug("Shard retrieved", hash=hash, size=len(data))
        return data

    async def delete(self, hash: str) -> None:
        """Remove a shard. Missing shards are ignored."""
        self._validate_hash(hash)
        path = self._shard_path(hash)

        try:
            await aiofiles.os.remove(path)

        except FileNotFoundError:
            self.logger.warning("Shard already absent", hash=hash)
            return

        except OSError as e:
            self.logger.error("Failed to delete shard", hash=hash, error=str(e))
            raise ShardDeleteError(hash, str(e)) from e

        self.logger.info("Shard deleted", hash=hash)

    async def exists(self, hash: str) -> bool:
        """Check if a shard is stored."""
        self._validate_hash(hash)
        return await aiofiles.os.path.isfile(self._shard_path(hash))

    async def list(self) -> list[str]:
        """List stored shard hashes.

        Reserved (dot-prefixed) names such as in-flight temporary files and
        anything that is not a regular file are skipped.
        """
        await self._ensure_directory()

        try:
            hashes = await asyncio.to_thread(self._scan_root)
        except OSError as e:
            self.logger.error(
                "Failed to list shards",
                path=str(self.storage_path),
                error=str(e),
            )
            raise

        self.logger.debug("Listed shards", count=len(hashes))
        return hashes

    async def get_stats(self) -> StorageStats:
        """Compute shard count, total size and average size.

        Sizes are looked up concurrently, at most ``stats_concurrency`` at a
        time. A shard deleted between listing and its lookup is left out of
        the result; any other lookup failure aborts the whole computation.

        Raises:
            StatsError: If a size lookup fails
        """
        hashes = await self.list()
        semaphore = asyncio.Semaphore(self.stats_concurrency)

        async def size_of(hash: str) -> int | None:
            async with semaphore:
                try:
                    stat = await aiofiles.os.stat(self._shard_path(hash))
                except FileNotFoundError:
                    self.logger.warning("Shard vanished during stats scan", hash=hash)
                    return None
                return stat.st_size

        try:
            sizes = await asyncio.gather(*(size_of(h) for h in hashes))

        except OSError as e:
            self.logger.error("Failed to compute storage stats", error=str(e))
            raise StatsError(f"Failed to compute storage stats: {e}") from e

        stats = StorageStats.from_sizes(s for s in sizes if s is not None)

        self.logger.info(
            "Storage stats",
            total_shards=stats.total_shards,
            total_size=stats.total_size,
            average_size=stats.average_size,
        )
        return stats
