"""
Blog post endpoints.

Posts are addressed by id or by slug.  The slug is derived from the
title once, at creation time, and never regenerated.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework import status

from ..mapper import serialize, serialize_many
from ..models import BlogPost
from ..permissions import IsAdminSession, ReadOnly
from ..serializers.blog import BlogCreateSerializer, BlogUpdateSerializer
from ..services import media
from ..services.blog import find_post, unique_slug


@api_view(['GET', 'POST'])
@permission_classes([ReadOnly | IsAdminSession])
def blogs(request):
    if request.method == 'GET':
        return Response(serialize_many(BlogPost.objects.all()))

    s = BlogCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    image, public_id = vd['image'], None
    if media.is_data_uri(image):
        uploaded = media.upload(image, media.folder('blogs'))
        image, public_id = uploaded.url, uploaded.reference_id
    try:
        post = BlogPost.objects.create(
            title=vd['title'],
            slug=unique_slug(vd['title']),
            summary=vd['summary'],
            content=vd['content'],
            image=image,
            public_id=public_id,
            author=vd.get('author') or 'Dr. Sonil',
        )
    except Exception:
        media.discard(public_id)
        raise
    return Response(serialize(post), status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([ReadOnly | IsAdminSession])
def blog_detail(request, key: str):
    """Read, update or delete one post, addressed by id or slug."""
    post = find_post(key)
    if post is None:
        raise NotFound('Blog not found')

    if request.method == 'GET':
        return Response(serialize(post))

    if request.method == 'DELETE':
        public_id = post.public_id
        post.delete()
        media.discard(public_id)
        return Response({'message': 'Blog removed'})

    s = BlogUpdateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    for field in ('title', 'summary', 'content', 'author'):
        if vd.get(field):
            setattr(post, field, vd[field])

    previous_id = None
    new_id = None
    image = vd.get('image')
    if image and image != post.image and media.is_data_uri(image):
        uploaded = media.upload(image, media.folder('blogs'))
        previous_id, new_id = post.public_id, uploaded.reference_id
        post.image, post.public_id = uploaded.url, uploaded.reference_id
    try:
        post.save()
    except Exception:
        media.discard(new_id)
        raise
    media.discard(previous_id)
    return Response(serialize(post))
