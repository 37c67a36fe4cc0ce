"""Swagger and ReDoc documentation endpoints."""

import os

from django.urls import path, re_path
from drf_yasg import openapi
from drf_yasg.views import get_schema_view
from rest_framework import permissions

schema_view = get_schema_view(
    openapi.Info(
        title="Medicine Image API",
        default_version="v1",
        description="""
        # 💊 Medicine Image API Documentation

        Resolves a representative product image for a medicine name by crawling an
        image-search results page, with a 24h in-memory cache and a global
        one-request-per-second crawl limit.

        ## 📋 API Organization

        ### Images
        - **Images** - Resolve an image URL for a medicine name (cache first)

        ### Cache
        - **Cache** - Inspect the cache, clear it, or delete a single entry
        """,
        license=openapi.License(name="BSD License"),
    ),
    url=os.getenv("SWAGGER_DEFAULT_API_URL", "http://localhost"),
    public=True,
    permission_classes=[permissions.AllowAny],
)

urlpatterns = [
    path("api/doc/", schema_view.with_ui("swagger", cache_timeout=0), name="schema-swagger-ui"),
    path("api/redoc/", schema_view.with_ui("redoc", cache_timeout=0), name="schema-redoc"),
    re_path(r"^api/doc(?P<format>\.json|\.yaml)$", schema_view.without_ui(cache_timeout=0), name="schema-json"),
]
