"""
Appointment request endpoints.

Patients submit booking requests from the public contact page; the
admin portal lists them and moves them between statuses.  Any status
may follow any other: the admin is always allowed a manual override.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.response import Response
from rest_framework import status

from ..mapper import serialize, serialize_many
from ..models import Appointment
from ..permissions import CreateOnly, IsAdminSession
from ..serializers.appointment import AppointmentCreateSerializer, AppointmentStatusSerializer
from ..throttling import WriteScopedRateThrottle
from . import get_or_404


@api_view(['GET', 'POST'])
@permission_classes([CreateOnly | IsAdminSession])
@throttle_classes([WriteScopedRateThrottle])
def appointments(request):
    """List appointments newest first (admin) or submit a new one (public).

    ``GET`` accepts an optional ``status`` query parameter.
    """
    if request.method == 'GET':
        qs = Appointment.objects.all()
        status_filter = request.query_params.get('status')
        if status_filter:
            qs = qs.filter(status=status_filter)
        return Response(serialize_many(qs))

    s = AppointmentCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    appointment = Appointment.objects.create(
        patient_name=vd['patientName'],
        phone=vd['phone'],
        department=vd['department'],
        date=vd['date'],
        reason=vd.get('reason', ''),
    )
    return Response(serialize(appointment), status=status.HTTP_201_CREATED)


appointments.cls.throttle_scope = 'booking'


@api_view(['PUT'])
@permission_classes([IsAdminSession])
def appointment_detail(request, pk: str):
    """Update the status of one appointment; no other field is editable."""
    appointment = get_or_404(Appointment, pk, 'Appointment not found')
    s = AppointmentStatusSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    appointment.status = s.validated_data['status']
    appointment.save()
    return Response(serialize(appointment))
