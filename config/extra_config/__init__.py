"""Modularized Django settings for the medicine image service."""

from .environment import BASE_DIR, ROOT_DIR  # noqa: F401
from .apps_config import (  # noqa: F401
    INSTALLED_APPS,
    MIDDLEWARE,
    ROOT_URLCONF,
    TEMPLATES,
    WSGI_APPLICATION,
)
from .database_config import DATABASES  # noqa: F401
from .auth_config import AUTH_PASSWORD_VALIDATORS  # noqa: F401
from .internationalization_config import LANGUAGE_CODE, TIME_ZONE, USE_I18N, USE_TZ  # noqa: F401
from .static_config import STATIC_URL, STATIC_ROOT  # noqa: F401
from .rest_framework_config import REST_FRAMEWORK  # noqa: F401
from .swagger_config import SWAGGER_SETTINGS, SWAGGER_USE_SESSION_AUTH  # noqa: F401
from .cors_config import CORS_ALLOWED_ORIGINS, CORS_ALLOW_METHODS  # noqa: F401
from .logging_config import LOGGING, LOGGING_CONFIG, LOG_ENABLED  # noqa: F401
from .image_resolver_config import (  # noqa: F401
    IMAGE_CACHE_TTL_SECONDS,
    IMAGE_CRAWL_INTERVAL_SECONDS,
    IMAGE_FETCH_TIMEOUT,
    IMAGE_SEARCH_QUALIFIER,
    IMAGE_SEARCH_URL,
)

__all__ = [
    "BASE_DIR",
    "ROOT_DIR",
    "INSTALLED_APPS",
    "MIDDLEWARE",
    "ROOT_URLCONF",
    "TEMPLATES",
    "WSGI_APPLICATION",
    "DATABASES",
    "AUTH_PASSWORD_VALIDATORS",
    "LANGUAGE_CODE",
    "TIME_ZONE",
    "USE_I18N",
    "USE_TZ",
    "STATIC_URL",
    "STATIC_ROOT",
    "REST_FRAMEWORK",
    "SWAGGER_SETTINGS",
    "SWAGGER_USE_SESSION_AUTH",
    "CORS_ALLOWED_ORIGINS",
    "CORS_ALLOW_METHODS",
    "LOGGING",
    "LOGGING_CONFIG",
    "LOG_ENABLED",
    "IMAGE_CACHE_TTL_SECONDS",
    "IMAGE_CRAWL_INTERVAL_SECONDS",
    "IMAGE_FETCH_TIMEOUT",
    "IMAGE_SEARCH_QUALIFIER",
    "IMAGE_SEARCH_URL",
]
