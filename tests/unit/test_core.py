"""Unit tests for configuration, logging, errors and value types."""
import pytest

from shardstore.core.config import MAX_SHARD_SIZE, Settings, get_settings
from shardstore.core.exceptions import (
    ErrorCode,
    ShardNotFoundError,
    StorageConfigError,
    StorageError,
)
from shardstore.core.logging import create_logger, normalize_level
from shardstore.core.models import StorageStats


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        """Test default values."""
        settings = Settings(_env_file=None)

        assert settings.storage_path is None
        assert settings.log_level == "info"
        assert settings.max_shard_size == MAX_SHARD_SIZE
        assert settings.stats_concurrency == 64
        assert settings.strict_hashes is True

    def test_environment(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        """Test values are read from SHARDSTORE_ variables."""
        monkeypatch.setenv("SHARDSTORE_STORAGE_PATH", str(tmp_path))
        monkeypatch.setenv("SHARDSTORE_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("SHARDSTORE_MAX_SHARD_SIZE", "2048")

        settings = Settings(_env_file=None)

        assert settings.storage_path == tmp_path
        assert settings.log_level == "warn"
        assert settings.max_shard_size == 2048

    def test_rejects_invalid_values(self) -> None:
        """Test validation of level and limits."""
        with pytest.raises(ValueError):
            Settings(_env_file=None, log_level="trace")
        with pytest.raises(ValueError):
            Settings(_env_file=None, max_shard_size=0)

    def test_get_settings_is_cached(self) -> None:
        """Test get_settings returns one instance."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()


class TestLogging:
    """Tests for logger construction."""

    @pytest.mark.parametrize(
        "level,expected",
        [("debug", "debug"), ("INFO", "info"), ("warn", "warn"), ("warning", "warn"), ("Error", "error")],
    )
    def test_normalize_level(self, level: str, expected: str) -> None:
        """Test accepted spellings."""
        assert normalize_level(level) == expected

    def test_create_logger_rejects_unknown_level(self) -> None:
        """Test unknown levels are configuration errors."""
        with pytest.raises(StorageConfigError):
            create_logger("verbose")

    def test_create_logger_binds_component(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test events carry level, component and context."""
        logger = create_logger("debug", component="unit")
        logger.debug("Listed shards", count=2)

        out = capsys.readouterr().out
        assert "Listed shards" in out
        assert "debug" in out
        assert "component=unit" in out
        assert "count=2" in out


class TestExceptions:
    """Tests for the error taxonomy."""

    def test_base_error(self) -> None:
        """Test default and explicit codes."""
        error = StorageError("boom")
        assert error.code == ErrorCode.STORAGE_ERROR
        assert error.details == {}
        assert str(error) == "boom"

        coded = StorageError("boom", code=ErrorCode.INVALID_HASH, details={"hash": "x"})
        assert coded.code == ErrorCode.INVALID_HASH
        assert coded.details == {"hash": "x"}

    def test_shard_not_found(self) -> None:
        """Test the not-found error is a StorageError with a fixed code."""
        error = ShardNotFoundError("abc")

        assert isinstance(error, StorageError)
        assert error.code == ErrorCode.SHARD_NOT_FOUND
        assert error.code == "SHARD_NOT_FOUND"
        assert error.message == "Shard not found: abc"
        assert error.details == {"hash": "abc"}


class TestStorageStats:
    """Tests for StorageStats."""

    def test_from_sizes(self) -> None:
        """Test aggregation and half-up rounding."""
        assert StorageStats.from_sizes([]) == StorageStats()
        assert StorageStats.from_sizes([5, 5, 5]).average_size == 5
        assert StorageStats.from_sizes([1, 2]).average_size == 2
        assert StorageStats.from_sizes([1, 1, 2]).average_size == 1

    def test_aliases(self) -> None:
        """Test camelCase serialisation and construction."""
        stats = StorageStats(totalShards=1, totalSize=7, averageSize=7)

        assert stats.total_size == 7
        assert stats.model_dump(by_alias=True) == {
            "totalShards": 1,
            "totalSize": 7,
            "averageSize": 7,
        }
