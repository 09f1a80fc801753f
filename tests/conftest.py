"""Test configuration for the book catalog service."""

import os

# Must be set before any src.catalog module loads config.yaml
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("DATABASE_CREATE_TABLES", "false")

from tests.fixtures import *  # noqa: E402,F401,F403
