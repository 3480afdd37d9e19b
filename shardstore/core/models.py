"""Value types for shardstore."""
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field


class StorageStats(BaseModel):
    """Snapshot of a store's contents, recomputed on every request."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_shards: int = Field(default=0, ge=0, alias="totalShards")
    total_size: int = Field(default=0, ge=0, alias="totalSize")
    average_size: int = Field(default=0, ge=0, alias="averageSize")

    @classmethod
    def from_sizes(cls, sizes: Iterable[int]) -> "StorageStats":
        """Aggregate per-shard byte sizes.

        The average is rounded half-up to an integer and is 0 for an
        empty store.
        """
        sizes = list(sizes)
        count = len(sizes)
        total = sum(sizes)
        average = (total + count // 2) // count if count else 0

        return cls(total_shards=count, total_size=total, average_size=average)
