"""Unit tests for config_template module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from src.app.runtime.config.config_template import (
    apply_environment_overrides,
    load_templated_yaml,
    substitute_env_vars,
)

REPOSITORY_CONFIG = Path(__file__).parents[3] / "config.yaml"


class TestSubstituteEnvVars:
    """Test cases for substitute_env_vars function."""

    def test_substitute_env_var_in_text(self):
        with patch.dict(os.environ, {"HOST": "localhost", "PORT": "8080"}):
            result = substitute_env_vars("http://${HOST}:${PORT}/library")
            assert result == "http://localhost:8080/library"

    def test_default_used_when_unset(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-default_value}") == "default_value"

    def test_default_ignored_when_set(self):
        with patch.dict(os.environ, {"PRESENT_VAR": "actual_value"}):
            assert substitute_env_vars("${PRESENT_VAR:-default_value}") == "actual_value"

    def test_empty_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert substitute_env_vars("${MISSING_VAR:-}") == ""

    def test_required_missing(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(
                ValueError, match="Required environment variable MISSING_VAR not set"
            ):
                substitute_env_vars("${MISSING_VAR}")

    def test_required_with_custom_error(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="MISSING_VAR: needed for the catalog"):
                substitute_env_vars("${MISSING_VAR:?needed for the catalog}")

    def test_comment_lines_are_not_substituted(self):
        text = "# required: ${MISSING_VAR}\n  # ${OTHER:?x}\nkey: ${MISSING_VAR:-v}\n"

        with patch.dict(os.environ, {}, clear=True):
            result = substitute_env_vars(text)

        assert result == "# required: ${MISSING_VAR}\n  # ${OTHER:?x}\nkey: v\n"

    def test_text_without_placeholders_is_unchanged(self):
        assert substitute_env_vars("plain: value") == "plain: value"


class TestApplyEnvironmentOverrides:
    def test_prefixed_variables_are_promoted(self):
        with patch.dict(os.environ, {"STAGING_DATABASE_URL": "sqlite:///staging.db"}, clear=True):
            applied = apply_environment_overrides("staging")

            assert applied == ["DATABASE_URL"]
            assert os.environ["DATABASE_URL"] == "sqlite:///staging.db"

    def test_other_prefixes_are_ignored(self):
        with patch.dict(os.environ, {"PRODUCTION_DATABASE_URL": "postgresql://db"}, clear=True):
            assert apply_environment_overrides("test") == []
            assert "DATABASE_URL" not in os.environ


class TestLoadTemplatedYaml:
    """Test cases for load_templated_yaml function."""

    @pytest.fixture
    def write_config(self, tmp_path: Path):
        def _write(content: str) -> Path:
            path = tmp_path / "config.yaml"
            path.write_text(content)
            return path

        return _write

    def test_load_with_substitution(self, write_config):
        path = write_config(
            """
config:
  app:
    title: ${APP_TITLE:-Library}
    port: 9000
  database:
    url: ${DB_URL}
    create_tables: false
  logging:
    level: DEBUG
"""
        )

        with patch.dict(os.environ, {"DB_URL": "sqlite:///books.db", "APP_ENVIRONMENT": "development"}):
            config = load_templated_yaml(path)

        assert config.app.title == "Library"
        assert config.app.port == 9000
        assert config.database.url == "sqlite:///books.db"
        assert config.database.create_tables is False
        assert config.logging.level == "DEBUG"

    def test_environment_prefix_override(self, write_config):
        path = write_config("config:\n  database:\n    url: ${DB_URL:-sqlite:///default.db}\n")

        with patch.dict(
            os.environ,
            {"APP_ENVIRONMENT": "test", "TEST_DB_URL": "sqlite://"},
        ):
            os.environ.pop("DB_URL", None)
            config = load_templated_yaml(path)

        assert config.database.url == "sqlite://"

    def test_missing_sections_use_defaults(self, write_config):
        path = write_config("config:\n  app:\n    port: 8100\n")

        config = load_templated_yaml(path)

        assert config.app.port == 8100
        assert config.database.pool_size == 5
        assert config.logging.format == "plain"

    def test_invalid_yaml(self, write_config):
        path = write_config("config: [unclosed")

        with pytest.raises(ValueError, match="Error parsing YAML"):
            load_templated_yaml(path)

    def test_empty_file(self, write_config):
        path = write_config("")

        with pytest.raises(ValueError, match="Failed to parse YAML"):
            load_templated_yaml(path)

    def test_invalid_values(self, write_config):
        path = write_config("config:\n  app:\n    port: not-a-port\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_templated_yaml(tmp_path / "absent.yaml")

    def test_repository_config_file_loads_without_environment(self):
        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(REPOSITORY_CONFIG)

        assert config.app.environment == "development"
        assert config.app.title == "Library Catalog API"
        assert config.database.url == "sqlite:///./library.db"
        assert config.database.create_tables is True
        assert config.logging.file is None

    def test_repository_config_file_test_environment(self):
        with patch.dict(
            os.environ,
            {"APP_ENVIRONMENT": "test", "TEST_DATABASE_URL": "sqlite://", "TEST_LOG_LEVEL": "WARNING"},
            clear=True,
        ):
            config = load_templated_yaml(REPOSITORY_CONFIG)

        assert config.app.environment == "test"
        assert config.database.url == "sqlite://"
        assert config.logging.level == "WARNING"
