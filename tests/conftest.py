"""Test configuration for the library catalog."""

import os

# Must be set before any src.app module loads config.yaml
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("TEST_DATABASE_URL", "sqlite://")
os.environ.setdefault("TEST_LOG_LEVEL", "WARNING")

from tests.fixtures import *  # noqa: E402,F401,F403
