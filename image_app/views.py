from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.enums import CacheAction
from core.exceptions import MissingParameter
from core.logging import configure_logger

from .serializers import (
    CacheActionSerializer,
    CacheClearedSerializer,
    CacheEntryDeletedSerializer,
    CacheStatusSerializer,
    ImageResolutionSerializer,
    ImageResolveQuerySerializer,
)
from .services.factory import get_resolver

logger = configure_logger(__name__)

_ERROR_RESPONSE = openapi.Response(
    description="Error",
    schema=openapi.Schema(
        type=openapi.TYPE_OBJECT,
        properties={"detail": openapi.Schema(type=openapi.TYPE_STRING)},
    ),
)


class MedicineImageView(APIView):
    """Resolve a representative product image for a medicine name."""

    @swagger_auto_schema(
        query_serializer=ImageResolveQuerySerializer,
        responses={
            200: ImageResolutionSerializer,
            400: _ERROR_RESPONSE,
            500: _ERROR_RESPONSE,
        },
        operation_summary="Resolve medicine image",
        operation_description=(
            "Cache-first lookup. On a miss the name is crawled through the shared "
            "1 request/second queue and the outcome (including 'no image') is cached for 24h."
        ),
        tags=["Images"],
    )
    def get(self, request, *args, **kwargs):
        query = ImageResolveQuerySerializer(data=request.query_params)
        name = request.query_params.get("name")
        try:
            if not query.is_valid():
                raise MissingParameter("Item name is required.")
            name = query.validated_data["name"]
            resolution = get_resolver().resolve(name)
        except MissingParameter as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except Exception:
            logger.exception("[API Error] %s", name)
            return Response(
                {"detail": "Failed to fetch the image."},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        serializer = ImageResolutionSerializer(resolution.to_dict())
        return Response(serializer.data, status=status.HTTP_200_OK)


class MedicineImageCacheView(APIView):
    """Inspect and administer the image cache."""

    @swagger_auto_schema(
        request_body=CacheActionSerializer,
        responses={
            200: openapi.Response(
                description="Cache status, clear result or delete result",
                schema=CacheStatusSerializer,
            ),
            400: _ERROR_RESPONSE,
            500: _ERROR_RESPONSE,
        },
        operation_summary="Administer image cache",
        operation_description=(
            "action=clear drops every entry, action=delete removes one name, "
            "no action returns the diagnostic snapshot."
        ),
        tags=["Cache"],
    )
    def post(self, request, *args, **kwargs):
        serializer = CacheActionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        action = serializer.validated_data["action"]
        name = serializer.validated_data.get("name")

        try:
            if action == CacheAction.CLEAR:
                return self._clear()
            if action == CacheAction.DELETE:
                return self._delete(name)
            return self._status()
        except MissingParameter as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except Exception:
            logger.exception("[Cache API Error]")
            return Response(
                {"detail": "Failed to process cache request."},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    @staticmethod
    def _clear() -> Response:
        deleted_count = get_resolver().clear_cache()
        payload = CacheClearedSerializer(
            {"message": "Cache cleared", "deleted_count": deleted_count}
        ).data
        return Response(payload, status=status.HTTP_200_OK)

    @staticmethod
    def _delete(name) -> Response:
        if not name:
            raise MissingParameter("Item name is required for action=delete.")
        existed = get_resolver().delete_cache_entry(name)
        payload = CacheEntryDeletedSerializer(
            {"message": "Cache entry deleted", "existed": existed}
        ).data
        return Response(payload, status=status.HTTP_200_OK)

    @staticmethod
    def _status() -> Response:
        entries = get_resolver().cache_snapshot()
        payload = CacheStatusSerializer({"size": len(entries), "entries": entries}).data
        return Response(payload, status=status.HTTP_200_OK)
