import bleach
from rest_framework import serializers

from clinic.serializers import clean_text

RICH_TEXT_TAGS = {
    'p', 'br', 'hr', 'strong', 'b', 'em', 'i', 'u', 's', 'blockquote', 'code', 'pre',
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'ul', 'ol', 'li', 'a', 'img', 'span', 'div',
    'table', 'thead', 'tbody', 'tr', 'th', 'td',
}
RICH_TEXT_ATTRIBUTES = {
    'a': ['href', 'title', 'target', 'rel'],
    'img': ['src', 'alt', 'title', 'width', 'height'],
    '*': ['class', 'style'],
}


def clean_html(v):
    return bleach.clean(v or '', tags=RICH_TEXT_TAGS, attributes=RICH_TEXT_ATTRIBUTES, strip=True)


class BlogCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    summary = serializers.CharField()
    content = serializers.CharField(trim_whitespace=False)
    image = serializers.CharField(trim_whitespace=False)
    author = serializers.CharField(required=False, allow_blank=True, max_length=120)

    def validate_title(self, v):
        v = clean_text(v)
        if not v:
            raise serializers.ValidationError('Title is required')
        return v

    def validate_summary(self, v):
        return clean_text(v)

    def validate_content(self, v):
        v = clean_html(v)
        if not v.strip():
            raise serializers.ValidationError('Content is required')
        return v

    def validate_author(self, v):
        return clean_text(v)


class BlogUpdateSerializer(BlogCreateSerializer):
    """Partial update: missing or blank fields keep their stored value."""
    title = serializers.CharField(required=False, allow_blank=True, max_length=255)
    summary = serializers.CharField(required=False, allow_blank=True)
    content = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    image = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)

    def validate_title(self, v):
        return clean_text(v)

    def validate_content(self, v):
        return clean_html(v) if v else v
