"""
Gallery endpoints.

Images are pushed to the media host on create; videos and reels are
external links stored as given.  The home page shows featured items,
capped separately for images and for videos.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework import status

from ..mapper import serialize, serialize_many
from ..models import GalleryItem
from ..permissions import IsAdminSession, ReadOnly
from ..serializers.media import GalleryCreateSerializer
from ..services import media
from ..services.gallery import ensure_can_feature
from . import get_or_404


@api_view(['GET', 'POST'])
@permission_classes([ReadOnly | IsAdminSession])
def gallery(request):
    """List gallery items newest first or add a new one.

    ``GET`` accepts optional ``category`` and ``featured`` filters.
    """
    if request.method == 'GET':
        qs = GalleryItem.objects.all()
        category = request.query_params.get('category')
        if category:
            qs = qs.filter(category=category)
        featured = request.query_params.get('featured')
        if featured is not None:
            qs = qs.filter(featured=featured.lower() in ('1', 'true', 'yes'))
        return Response(serialize_many(qs))

    s = GalleryCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    if vd['featured']:
        ensure_can_feature(vd['type'])

    url, public_id = vd['url'], None
    if vd['type'] not in GalleryItem.LINK_TYPES and media.is_data_uri(url):
        uploaded = media.upload(url, media.folder('gallery'))
        url, public_id = uploaded.url, uploaded.reference_id
    try:
        item = GalleryItem.objects.create(
            url=url,
            public_id=public_id,
            title=vd['title'],
            category=vd['category'],
            type=vd['type'],
            featured=vd['featured'],
        )
    except Exception:
        media.discard(public_id)
        raise
    return Response(serialize(item), status=status.HTTP_201_CREATED)


@api_view(['DELETE'])
@permission_classes([IsAdminSession])
def gallery_detail(request, pk: str):
    """Remove a gallery item and then its hosted image, if any."""
    item = get_or_404(GalleryItem, pk, 'Item not found')
    public_id = item.public_id
    item.delete()
    media.discard(public_id)
    return Response({'message': 'Item removed'})


@api_view(['PUT'])
@permission_classes([IsAdminSession])
def gallery_feature(request, pk: str):
    """Flip the ``featured`` flag of a gallery item."""
    item = get_or_404(GalleryItem, pk, 'Item not found')
    if not item.featured:
        ensure_can_feature(item.type, exclude_id=item.pk)
    item.featured = not item.featured
    item.save()
    return Response(serialize(item))
