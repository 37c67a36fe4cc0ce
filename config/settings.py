"""Django settings entry point for the medicine image service using the extra_config package."""

import os
from typing import List

from . import extra_config as _extra_config  # noqa: F401
from .extra_config import BASE_DIR, ROOT_DIR  # noqa: F401
from .extra_config import *  # noqa: F401,F403


def _parse_hosts(raw: str) -> List[str]:
    return [host for host in (value.strip() for value in raw.replace(",", " ").split()) if host]


SECRET_KEY = os.getenv("SECRET_KEY", "django-insecure-placeholder")
DEBUG = os.getenv("DJANGO_DEBUG", os.getenv("DEBUG", "0")).lower() in {"1", "true", "yes", "on"}
ALLOWED_HOSTS = _parse_hosts(os.getenv("DJANGO_ALLOWED_HOSTS", "")) or ["localhost", "127.0.0.1"]

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
