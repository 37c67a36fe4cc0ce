"""Database configuration.

Nothing in the service is persisted, so SQLite is the default; the ``SQL_*``
variables still allow pointing Django at another engine.
"""

import os

from typing import Any, Dict

from .environment import BASE_DIR

engine = os.getenv("SQL_ENGINE", "django.db.backends.sqlite3")

if "sqlite" in engine:
    default_db: Dict[str, Any] = {
        "ENGINE": engine,
        "NAME": os.getenv("SQL_DATABASE", str(BASE_DIR / "db.sqlite3")),
    }
else:
    default_db = {
        "ENGINE": engine,
        "NAME": os.getenv("SQL_DATABASE", "mydb"),
        "USER": os.getenv("SQL_USER", "myuser"),
        "PASSWORD": os.getenv("SQL_PASSWORD", "mypassword"),
        "HOST": os.getenv("SQL_HOST", "127.0.0.1"),
        "PORT": os.getenv("SQL_PORT", "5432"),
    }

DATABASES = {"default": default_db}

__all__ = ["DATABASES"]
