from django.conf import settings
from rest_framework.exceptions import ValidationError

from clinic.models import GalleryItem


def featured_limit(item_type: str) -> tuple[str, int]:
    if item_type in GalleryItem.LINK_TYPES:
        return 'videos', settings.GALLERY_MAX_FEATURED_VIDEOS
    return 'images', settings.GALLERY_MAX_FEATURED_IMAGES


def ensure_can_feature(item_type: str, exclude_id=None) -> None:
    """Raise if featuring one more item of this kind would exceed the home-page cap."""
    label, limit = featured_limit(item_type)
    types = GalleryItem.LINK_TYPES if label == 'videos' else (GalleryItem.TYPE_IMAGE,)
    qs = GalleryItem.objects.filter(featured=True, type__in=types)
    if exclude_id:
        qs = qs.exclude(pk=exclude_id)
    if qs.count() >= limit:
        raise ValidationError({'featured': f'At most {limit} featured {label} are allowed'})
