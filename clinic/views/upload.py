from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from ..permissions import IsAdminSession
from ..serializers.media import UploadSerializer
from ..services import media


@api_view(['POST'])
@permission_classes([IsAdminSession])
def upload(request):
    """Upload a data-URI image to the media host under ``folder``."""
    s = UploadSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    image = s.validated_data['image']
    if not media.is_data_uri(image):
        raise ValidationError({'image': 'Expected a base64 data-URI image'})
    target = media.folder((s.validated_data.get('folder') or 'uploads').strip('/'))
    uploaded = media.upload(image, target)
    return Response({'url': uploaded.url, 'public_id': uploaded.reference_id})
