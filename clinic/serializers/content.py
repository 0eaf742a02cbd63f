"""
Content item validation.

``Content.data`` is a tagged union keyed by ``Content.type``; each tag
has its own payload serializer and the outer serializers pick one.
"""
from rest_framework import serializers

from clinic.models import Content


def _list():
    return serializers.ListField(child=serializers.CharField(allow_blank=True), required=False, default=list)


class ServicePayload(serializers.Serializer):
    id = serializers.CharField(required=False, allow_blank=True)
    title = serializers.CharField(max_length=255)
    description = serializers.CharField()
    icon = serializers.CharField(required=False, allow_blank=True, default='Activity')
    details = _list()


class FaqPayload(serializers.Serializer):
    id = serializers.CharField(required=False, allow_blank=True)
    question = serializers.CharField()
    answer = serializers.CharField()


class TestimonialPayload(serializers.Serializer):
    id = serializers.CharField(required=False, allow_blank=True)
    name = serializers.CharField(max_length=120)
    rating = serializers.IntegerField(min_value=1, max_value=5, default=5)
    text = serializers.CharField(required=False, allow_blank=True, default='')
    type = serializers.ChoiceField(choices=['text', 'video'], default='text')
    videoUrl = serializers.CharField(required=False, allow_blank=True)

    def validate(self, attrs):
        if attrs.get('type') == 'video' and not attrs.get('videoUrl'):
            raise serializers.ValidationError({'videoUrl': 'Video testimonials need a videoUrl'})
        if attrs.get('type') == 'text' and not attrs.get('text'):
            raise serializers.ValidationError({'text': 'Text testimonials need text'})
        return attrs


class DoctorSocials(serializers.Serializer):
    instagram = serializers.CharField(required=False, allow_blank=True, default='')


class DoctorPayload(serializers.Serializer):
    id = serializers.CharField(required=False, allow_blank=True)
    name = serializers.CharField(max_length=255)
    role = serializers.CharField(max_length=255)
    specialties = _list()
    qualifications = _list()
    image = serializers.CharField(required=False, allow_blank=True, default='', trim_whitespace=False)
    socials = DoctorSocials(required=False, default=dict)
    achievements = _list()


PAYLOADS = {
    Content.TYPE_SERVICE: ServicePayload,
    Content.TYPE_FAQ: FaqPayload,
    Content.TYPE_TESTIMONIAL: TestimonialPayload,
    Content.TYPE_DOCTOR: DoctorPayload,
}


def validate_payload(content_type, data):
    if not isinstance(data, dict):
        raise serializers.ValidationError({'data': 'Expected an object'})
    payload = PAYLOADS[content_type](data=data)
    if not payload.is_valid():
        raise serializers.ValidationError({'data': payload.errors})
    return dict(payload.validated_data)


class ContentCreateSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=Content.TYPE_CHOICES)
    data = serializers.JSONField()
    order = serializers.IntegerField(required=False, default=0)

    def validate(self, attrs):
        attrs['data'] = validate_payload(attrs['type'], attrs['data'])
        return attrs


class ContentUpdateSerializer(serializers.Serializer):
    """``type`` is fixed at creation; the stored item's type is passed in context."""
    data = serializers.JSONField()
    order = serializers.IntegerField(required=False)

    def validate(self, attrs):
        attrs['data'] = validate_payload(self.context['type'], attrs['data'])
        return attrs
