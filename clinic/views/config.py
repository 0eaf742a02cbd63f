"""
Site configuration, admin login and password change.

The configuration is a single document created on first read with the
default admin password.  Its password hash never leaves the server.
"""
from __future__ import annotations

import logging

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status

from ..authentication import issue_admin_token
from ..mapper import serialize
from ..permissions import IsAdminSession, ReadOnly
from ..serializers.auth import ChangePasswordSerializer, LoginSerializer
from ..serializers.config import CONFIG_IMAGE_FIELDS, ConfigUpdateSerializer
from ..services import media
from ..services.site_config import check_admin_password, get_or_create_config, set_admin_password

logger = logging.getLogger(__name__)


@api_view(['GET', 'PUT'])
@permission_classes([ReadOnly | IsAdminSession])
def config(request):
    """Return the site configuration or merge an update into it.

    Branding images (logo, favicon, doctor and reasons images) sent as
    data-URIs are uploaded first; a failed upload is logged and leaves
    the stored value untouched rather than failing the whole save.
    """
    site = get_or_create_config()
    if request.method == 'GET':
        return Response(serialize(site, 'config'))

    s = ConfigUpdateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    updates = dict(s.validated_data)

    for field in CONFIG_IMAGE_FIELDS:
        value = updates.get(field)
        if not media.is_data_uri(value):
            continue
        try:
            updates[field] = media.upload(value, media.folder('config')).url
        except media.MediaHostError as exc:
            logger.warning('%s upload failed, keeping previous value: %s', field, exc)
            updates.pop(field)

    socials = updates.pop('socials', None)
    if socials is not None:
        site.socials = {**(site.socials or {}), **socials}
    for field, value in updates.items():
        setattr(site, field, value)
    site.save()
    return Response(serialize(site, 'config'))


@api_view(['POST'])
@permission_classes([AllowAny])
def config_login(request):
    """Exchange the admin password for a signed session token.

    Answers 401 with the same message whether the password is wrong,
    missing, or no configuration exists yet.
    """
    s = LoginSerializer(data=request.data)
    if not s.is_valid() or not check_admin_password(s.validated_data['password']):
        logger.info('admin login failed from %s', request.META.get('REMOTE_ADDR'))
        return Response({'success': False, 'message': 'Invalid password'}, status=status.HTTP_401_UNAUTHORIZED)

    logger.info('admin login from %s', request.META.get('REMOTE_ADDR'))
    return Response({'success': True, 'message': 'Authenticated', 'token': issue_admin_token()})


# DRF ScopedRateThrottle reads throttle_scope from the wrapped view class
config_login.cls.throttle_scope = 'login'


@api_view(['PUT'])
@permission_classes([IsAdminSession])
def config_password(request):
    s = ChangePasswordSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    set_admin_password(s.validated_data['newPassword'])
    return Response({'success': True, 'message': 'Password updated'})
