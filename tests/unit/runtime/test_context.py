"""Unit tests for the context-scoped configuration."""

import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest

from src.app.runtime.config.config_data import ConfigData
from src.app.runtime.context import (
    AppContext,
    get_config,
    get_context,
    set_config,
    set_context,
    with_context,
)


class TestContextManager:
    """Test the context manager functionality."""

    def test_default_context_available(self):
        context = get_context()
        config = get_config()

        assert isinstance(context, AppContext)
        assert isinstance(config, ConfigData)
        assert context.config is config

    def test_test_environment_overrides_are_applied(self):
        """TEST_DATABASE_URL from conftest replaces the file default."""
        assert get_config().database.url == "sqlite://"
        assert get_config().database.is_in_memory

    def test_with_context_override_single_level(self):
        original_config = get_config()
        original_host = original_config.app.host

        test_config = ConfigData()
        test_config.app.host = "custom_host"

        with with_context(test_config):
            override_config = get_config()
            assert override_config.app.host == "custom_host"
            assert override_config is not original_config

        assert get_config().app.host == original_host
        assert get_config() is original_config

    def test_override_keeps_unset_values(self):
        original = get_config()

        test_config = ConfigData()
        test_config.database.echo = True

        with with_context(test_config):
            merged = get_config()
            assert merged.database.echo is True
            assert merged.database.url == original.database.url
            assert merged.app.port == original.app.port

    def test_with_context_nested_overrides(self):
        original_config = get_config()

        level1_config = ConfigData()
        level1_config.app.host = "level1_host"
        level1_config.app.port = 8001

        with with_context(level1_config):
            level2_config = ConfigData()
            level2_config.app.host = "level2_host"
            level2_config.logging.level = "DEBUG"

            with with_context(level2_config):
                assert get_config().app.host == "level2_host"
                assert get_config().app.port == 8001
                assert get_config().logging.level == "DEBUG"

            assert get_config().app.host == "level1_host"
            assert get_config().logging.level == original_config.logging.level

        assert get_config() is original_config

    def test_with_context_no_override(self):
        original_config = get_config()

        with with_context():
            assert get_config() is original_config

    def test_with_context_rejects_other_types(self):
        with pytest.raises(ValueError, match="must be ConfigData"):
            with with_context({"app": {"host": "x"}}):
                pass

    def test_exception_restores_context(self):
        original_config = get_config()

        test_config = ConfigData()
        test_config.database.url = "sqlite:///error.db"

        with pytest.raises(RuntimeError):
            with with_context(test_config):
                assert get_config().database.url == "sqlite:///error.db"
                raise RuntimeError("boom")

        assert get_config() is original_config

    def test_set_config_replaces_whole_config(self):
        original_context = get_context()
        replacement = ConfigData()

        try:
            set_config(replacement)
            assert get_config() is replacement
        finally:
            set_context(original_context)

        assert get_config() is original_context.config


class TestContextIsolation:
    """Overrides never leak across tasks or threads."""

    async def test_async_tasks_are_isolated(self):
        original_config = get_config()

        async def worker(worker_id: int) -> str:
            worker_config = ConfigData()
            worker_config.app.host = f"worker_{worker_id}"
            with with_context(worker_config):
                await asyncio.sleep(0.01)
                return get_config().app.host

        results = await asyncio.gather(*(worker(i) for i in range(5)))

        assert results == [f"worker_{i}" for i in range(5)]
        assert get_config() is original_config

    def test_threads_are_isolated(self):
        original_config = get_config()
        results = {}

        def worker(worker_id: int) -> None:
            worker_config = ConfigData()
            worker_config.app.port = 8000 + worker_id
            with with_context(worker_config):
                results[worker_id] = get_config().app.port

        with ThreadPoolExecutor(max_workers=5) as executor:
            for future in [executor.submit(worker, i) for i in range(1, 6)]:
                future.result()

        assert results == {i: 8000 + i for i in range(1, 6)}
        assert get_config() is original_config
