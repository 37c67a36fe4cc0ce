from rest_framework import serializers

from core.enums import CacheAction, ImageSource


class ImageResolveQuerySerializer(serializers.Serializer):
    """Query parameters for the image lookup endpoint."""

    name = serializers.CharField(
        required=True,
        trim_whitespace=False,
        help_text="Medicine name; matched exactly, no normalisation.",
    )


class ImageResolutionSerializer(serializers.Serializer):
    imageUrl = serializers.CharField(source="image_url", allow_null=True)
    source = serializers.ChoiceField(choices=[choice.value for choice in ImageSource])


class CacheActionSerializer(serializers.Serializer):
    """Request payload for the cache administration endpoint."""

    action = serializers.CharField(
        required=False,
        default=CacheAction.STATUS.value,
        allow_blank=True,
        allow_null=True,
        help_text="clear | delete | status (default), case-insensitive.",
    )
    name = serializers.CharField(
        required=False,
        allow_blank=True,
        help_text="Medicine name for action=delete.",
    )
    medicineName = serializers.CharField(
        required=False,
        allow_blank=True,
        write_only=True,
        help_text="Legacy alias of name.",
    )

    def validate_action(self, value):
        if not value:
            return CacheAction.STATUS
        try:
            return CacheAction.from_string(value)
        except ValueError as exc:
            raise serializers.ValidationError(str(exc)) from exc

    def validate(self, attrs):
        alias = attrs.pop("medicineName", None)
        if not attrs.get("name") and alias:
            attrs["name"] = alias
        attrs.setdefault("action", CacheAction.STATUS)
        return attrs


class CacheEntrySerializer(serializers.Serializer):
    name = serializers.CharField()
    hasImage = serializers.BooleanField(source="has_image")
    urlPreview = serializers.CharField(source="url_preview", allow_null=True)
    ageMinutes = serializers.IntegerField(source="age_minutes")


class CacheStatusSerializer(serializers.Serializer):
    size = serializers.IntegerField()
    entries = CacheEntrySerializer(many=True)


class CacheClearedSerializer(serializers.Serializer):
    message = serializers.CharField()
    deletedCount = serializers.IntegerField(source="deleted_count")


class CacheEntryDeletedSerializer(serializers.Serializer):
    message = serializers.CharField()
    existed = serializers.BooleanField()
