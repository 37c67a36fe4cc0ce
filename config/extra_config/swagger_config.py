"""Swagger/OpenAPI configuration for the medicine image service."""

import os


def get_swagger_settings() -> dict:
    """Return Swagger UI configuration."""
    environment = os.getenv("DJANGO_ENV", "development")
    is_production = environment == "production"

    return {
        "SECURITY_DEFINITIONS": {},
        "USE_SESSION_AUTH": False,
        "JSON_EDITOR": True,
        "SUPPORTED_SUBMIT_METHODS": ["get", "post"],
        "DOC_EXPANSION": "none",
        "OPERATIONS_SORTER": "alpha",
        "TAGS_SORTER": "alpha",
        "DEEP_LINKING": True,
        "SHOW_EXTENSIONS": True,
        "DEFAULT_MODEL_RENDERING": "model",
        "DEFAULT_MODEL_DEPTH": 3,
        "VALIDATOR_URL": None if is_production else "https://validator.swagger.io/validator",
        "DISPLAY_OPERATION_ID": False,
        "DEFAULT_API_URL": os.getenv("SWAGGER_DEFAULT_API_URL", "http://localhost"),
        "TAGS": [
            {"name": "Images", "description": "Resolve a representative image for a medicine name"},
            {"name": "Cache", "description": "Inspect, clear or delete image cache entries"},
        ],
    }


SWAGGER_SETTINGS = get_swagger_settings()
SWAGGER_USE_SESSION_AUTH = False
