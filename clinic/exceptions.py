import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from clinic.services.media import MediaHostError

logger = logging.getLogger(__name__)


def _error(message, code, http_status, errors=None):
    body = {'ok': False, 'message': message, 'code': code}
    if errors:
        body['errors'] = errors
    return Response(body, status=http_status)


def _first_message(errors):
    if isinstance(errors, dict):
        for field, value in errors.items():
            msg = _first_message(value)
            return msg if field in ('detail', 'non_field_errors', '__all__') else f"{field}: {msg}"
    if isinstance(errors, (list, tuple)) and errors:
        return _first_message(errors[0])
    return str(errors)


def api_exception_handler(exc, context):
    if isinstance(exc, DjangoValidationError):
        errors = exc.message_dict if hasattr(exc, 'error_dict') else {'detail': exc.messages}
        return _error(_first_message(errors), 'validation_error', status.HTTP_400_BAD_REQUEST, errors)
    if isinstance(exc, IntegrityError):
        logger.info('integrity error: %s', exc)
        return _error('Conflicting or invalid data', 'validation_error', status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, MediaHostError):
        logger.error('media host failure: %s', exc)
        return _error('Image upload failed', 'upstream_error', status.HTTP_502_BAD_GATEWAY)

    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.exception('unhandled error in %s', context.get('view'))
        return _error('Internal server error', 'server_error', status.HTTP_500_INTERNAL_SERVER_ERROR)

    # normalize response
    if isinstance(exc, exceptions.ValidationError):
        return _error(_first_message(resp.data), 'validation_error', resp.status_code, resp.data)
    if isinstance(exc, (exceptions.NotFound, Http404)):
        code = 'not_found'
    elif isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        code = 'not_authenticated'
    else:
        code = getattr(exc, 'default_code', None) or 'api_error'
    detail = resp.data.get('detail') if isinstance(resp.data, dict) else resp.data
    out = _error(str(detail), code, resp.status_code)
    for header in ('WWW-Authenticate', 'Retry-After'):
        if header in resp:
            out[header] = resp[header]
    return out
