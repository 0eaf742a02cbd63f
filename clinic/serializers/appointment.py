from rest_framework import serializers

from clinic.models import Appointment
from clinic.serializers import clean_text


class AppointmentCreateSerializer(serializers.Serializer):
    patientName = serializers.CharField(max_length=120)
    phone = serializers.CharField(max_length=32)
    department = serializers.CharField(max_length=120)
    date = serializers.CharField(max_length=64)
    reason = serializers.CharField(required=False, allow_blank=True, default='')

    def validate_patientName(self, v):
        v = clean_text(v)
        if not v:
            raise serializers.ValidationError('Patient name is required')
        return v

    def validate_phone(self, v):
        v = clean_text(v)
        if not v:
            raise serializers.ValidationError('Phone is required')
        return v

    def validate_department(self, v):
        return clean_text(v)

    def validate_reason(self, v):
        return clean_text(v)


class AppointmentStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Appointment.STATUS_CHOICES)
