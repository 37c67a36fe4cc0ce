"""Test settings for pytest.

Uses in-memory SQLite, a zero crawl interval and no eager resolver so tests
never wait on the real rate limit.
"""

import os

os.environ.setdefault("IMAGE_RESOLVER_EAGER", "0")

from .settings import *  # noqa: F401,F403,E402

DEBUG = False

ALLOWED_HOSTS = ["testserver", "localhost", "127.0.0.1"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

IMAGE_CRAWL_INTERVAL_SECONDS = 0.0
IMAGE_FETCH_TIMEOUT = 5.0
