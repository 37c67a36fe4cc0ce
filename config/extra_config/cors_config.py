"""CORS for the chat frontend that calls the image endpoints from the browser."""

import os

# Local frontend dev server.
DEFAULT_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]

CORS_ALLOWED_ORIGINS = [
    origin.rstrip("/")
    for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").replace(",", " ").split()
] or DEFAULT_ORIGINS
CORS_ALLOW_METHODS = ["GET", "POST", "OPTIONS"]


__all__ = ["CORS_ALLOWED_ORIGINS", "CORS_ALLOW_METHODS"]
