from rest_framework import serializers


def _text(source=None, max_length=None):
    kwargs = {'required': False, 'allow_blank': True}
    if source:
        kwargs['source'] = source
    if max_length:
        kwargs['max_length'] = max_length
    return serializers.CharField(**kwargs)


class SocialsSerializer(serializers.Serializer):
    instagram = _text()
    facebook = _text()
    youtube = _text()


class ConfigUpdateSerializer(serializers.Serializer):
    """Editable site configuration fields (camelCase on the wire).

    ``adminPassword`` and ``key`` are deliberately absent so they can
    never be written through a config update; unknown keys are dropped.
    """
    name = _text(max_length=255)
    doctorName = _text('doctor_name', 255)
    designation = _text(max_length=255)
    # image fields may carry a data-URI of any size before upload
    logo = _text()
    favicon = _text()
    doctorImage = _text('doctor_image')
    reasonsImage = _text('reasons_image')
    aboutVideo = _text('about_video', 1024)
    phone = _text(max_length=64)
    email = _text(max_length=255)
    address = _text(max_length=512)
    whatsapp = _text(max_length=64)
    timings = _text(max_length=255)
    googleMapLink = _text('google_map_link', 1024)
    googlePlaceId = _text('google_place_id', 255)
    socials = SocialsSerializer(required=False)
    announcement = _text()


# Model fields that hold images and are uploaded when given as data-URIs.
CONFIG_IMAGE_FIELDS = ('logo', 'favicon', 'doctor_image', 'reasons_image')
