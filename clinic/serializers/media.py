from rest_framework import serializers

from clinic.models import GalleryItem
from clinic.serializers import clean_text


class UploadSerializer(serializers.Serializer):
    image = serializers.CharField(trim_whitespace=False)
    folder = serializers.CharField(required=False, allow_blank=True, max_length=128)


class GalleryCreateSerializer(serializers.Serializer):
    url = serializers.CharField(trim_whitespace=False)
    title = serializers.CharField(max_length=255)
    category = serializers.ChoiceField(choices=GalleryItem.CATEGORY_CHOICES, default='clinic')
    type = serializers.ChoiceField(choices=GalleryItem.TYPE_CHOICES, default=GalleryItem.TYPE_IMAGE)
    featured = serializers.BooleanField(default=False)

    def validate_title(self, v):
        return clean_text(v)


class HeroSlideSerializer(serializers.Serializer):
    image = serializers.CharField(trim_whitespace=False)
    title = serializers.CharField(max_length=255)
    subtitle = serializers.CharField(max_length=512)

    def validate_title(self, v):
        return clean_text(v)

    def validate_subtitle(self, v):
        return clean_text(v)


class HeroSlideUpdateSerializer(HeroSlideSerializer):
    """Every field optional; blank values keep the stored one."""
    image = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    title = serializers.CharField(required=False, allow_blank=True, max_length=255)
    subtitle = serializers.CharField(required=False, allow_blank=True, max_length=512)
