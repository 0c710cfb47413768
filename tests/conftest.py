"""Test configuration and fixtures for the Book Manager API."""

import os

# Must be set before the application configuration is first loaded
os.environ.setdefault("APP_ENVIRONMENT", "test")

from tests.fixtures import *  # noqa: E402,F401,F403
