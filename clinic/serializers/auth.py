from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from rest_framework import serializers


class LoginSerializer(serializers.Serializer):
    password = serializers.CharField(trim_whitespace=False)

    def validate_password(self, v):
        if not v:
            raise serializers.ValidationError('Password is required')
        return v


class ChangePasswordSerializer(serializers.Serializer):
    newPassword = serializers.CharField(trim_whitespace=False)

    def validate_newPassword(self, v):
        try:
            validate_password(v)
        except ValidationError as e:
            raise serializers.ValidationError(e.messages)
        return v
