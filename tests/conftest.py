"""Pytest configuration and fixtures."""
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from shardstore.core.config import Settings
from shardstore.storage import FileSystemStorage, MemoryStorage


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double recording every call."""
    return MagicMock()


@pytest.fixture
def storage_path(tmp_path: Path) -> Path:
    """Storage root that does not exist yet."""
    return tmp_path / "shards"


@pytest.fixture
def storage(storage_path: Path, mock_logger: MagicMock) -> FileSystemStorage:
    """Filesystem storage with a recording logger."""
    return FileSystemStorage(storage_path, logger=mock_logger)


@pytest.fixture
def memory_storage(mock_logger: MagicMock) -> MemoryStorage:
    """In-memory storage with a recording logger."""
    return MemoryStorage(logger=mock_logger)


@pytest.fixture
def test_settings(storage_path: Path) -> Settings:
    """Test settings with safe defaults."""
    return Settings(
        _env_file=None,
        storage_path=storage_path,
        log_level="error",
        max_shard_size=1024,
        stats_concurrency=4,
    )
