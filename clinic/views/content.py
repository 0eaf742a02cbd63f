"""
Structured site content: services, FAQs, testimonials and doctors.

All four share one collection and one admin screen; ``type`` selects
the payload shape of ``data``.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework import status

from ..mapper import serialize, serialize_many
from ..models import Content
from ..permissions import IsAdminSession, ReadOnly
from ..serializers.content import ContentCreateSerializer, ContentUpdateSerializer
from ..services import media
from ..services.seed import seed_content
from . import get_or_404


def _upload_doctor_image(content_type, data):
    """Host a doctor's data-URI image; returns the data and the new reference id, if any."""
    if content_type == Content.TYPE_DOCTOR and media.is_data_uri(data.get('image')):
        uploaded = media.upload(data['image'], media.folder('doctors'))
        data['image'] = uploaded.url
        return data, uploaded.reference_id
    return data, None


@api_view(['GET', 'POST'])
@permission_classes([ReadOnly | IsAdminSession])
def content(request):
    """List content (optionally ``?type=``) or add an item.

    The starter dataset is inserted when the collection is empty,
    whatever the requested type.  An unknown type matches nothing.
    """
    if request.method == 'GET':
        seed_content()
        qs = Content.objects.all()
        content_type = request.query_params.get('type')
        if content_type:
            qs = qs.filter(type=content_type)
        return Response(serialize_many(qs, 'content'))

    s = ContentCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    data, new_id = _upload_doctor_image(vd['type'], vd['data'])
    try:
        item = Content.objects.create(type=vd['type'], data=data, order=vd.get('order', 0))
    except Exception:
        media.discard(new_id)
        raise
    return Response(serialize(item, 'content'), status=status.HTTP_201_CREATED)


@api_view(['PUT', 'DELETE'])
@permission_classes([IsAdminSession])
def content_detail(request, pk: str):
    item = get_or_404(Content, pk, 'Content not found')

    if request.method == 'DELETE':
        item.delete()
        return Response({'message': 'Deleted'})

    s = ContentUpdateSerializer(data=request.data, context={'type': item.type})
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    item.data, new_id = _upload_doctor_image(item.type, vd['data'])
    if vd.get('order') is not None:
        item.order = vd['order']
    try:
        item.save()
    except Exception:
        media.discard(new_id)
        raise
    return Response(serialize(item, 'content'))
