"""Test configuration shared by the unit and integration suites."""

import os

# Pin the environment before the application modules read config.yaml
os.environ["APP_ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_FILE"] = ""
os.environ["GEMINI_API_KEY"] = ""
os.environ["UNSPLASH_ACCESS_KEY"] = ""

from tests.fixtures import *  # noqa: E402,F401,F403
