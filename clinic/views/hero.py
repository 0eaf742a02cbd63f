"""
Home page hero slides.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework import status

from ..mapper import serialize, serialize_many
from ..models import HeroSlide
from ..permissions import IsAdminSession, ReadOnly
from ..serializers.media import HeroSlideSerializer, HeroSlideUpdateSerializer
from ..services import media
from . import get_or_404


@api_view(['GET', 'POST'])
@permission_classes([ReadOnly | IsAdminSession])
def hero(request):
    if request.method == 'GET':
        return Response(serialize_many(HeroSlide.objects.all()))

    s = HeroSlideSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    image, public_id = vd['image'], None
    if media.is_data_uri(image):
        uploaded = media.upload(image, media.folder('hero'))
        image, public_id = uploaded.url, uploaded.reference_id
    try:
        slide = HeroSlide.objects.create(
            image=image, public_id=public_id, title=vd['title'], subtitle=vd['subtitle'],
        )
    except Exception:
        media.discard(public_id)
        raise
    return Response(serialize(slide), status=status.HTTP_201_CREATED)


@api_view(['PUT', 'DELETE'])
@permission_classes([IsAdminSession])
def hero_detail(request, pk: str):
    """Update or delete a slide.

    On update the image is only replaced when a fresh upload (data-URI)
    different from the stored value is sent.  The previous hosted image
    is deleted after the slide has been saved.
    """
    slide = get_or_404(HeroSlide, pk, 'Slide not found')

    if request.method == 'DELETE':
        public_id = slide.public_id
        slide.delete()
        media.discard(public_id)
        return Response({'message': 'Slide removed'})

    s = HeroSlideUpdateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    previous_id = None
    new_id = None
    image = vd.get('image')
    if image and image != slide.image and media.is_data_uri(image):
        uploaded = media.upload(image, media.folder('hero'))
        previous_id, new_id = slide.public_id, uploaded.reference_id
        slide.image, slide.public_id = uploaded.url, uploaded.reference_id
    slide.title = vd.get('title') or slide.title
    slide.subtitle = vd.get('subtitle') or slide.subtitle
    try:
        slide.save()
    except Exception:
        media.discard(new_id)
        raise
    media.discard(previous_id)
    return Response(serialize(slide))
