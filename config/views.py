import logging

from django.http import JsonResponse
from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes, throttle_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'error': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'error': 'Internal server error',
        'status': 500
    }, status=500)


@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
@throttle_classes([])
def health_check(request):
    """Liveness probe, no credential required."""
    return Response({'status': 'ok'})


def _flatten_detail(detail):
    """Collapse a DRF error detail (str, list or dict) into one message."""
    if isinstance(detail, dict):
        messages = []
        for field, value in detail.items():
            message = _flatten_detail(value)
            if field in ('non_field_errors', 'detail'):
                messages.append(message)
            else:
                messages.append(f'{field}: {message}')
        return '; '.join(messages)
    if isinstance(detail, (list, tuple)):
        return '; '.join(_flatten_detail(item) for item in detail)
    return str(detail)


def api_exception_handler(exc, context):
    """
    Render every API error as ``{"error": "<message>"}``.

    DRF exceptions (authentication, validation, not found, throttling)
    keep their status code; field errors are reported under ``fields`` as
    well. Anything else is logged and answered with a generic 500 so
    database or upstream details never reach the client.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(
            "Unhandled error in %s", view.__class__.__name__ if view else 'unknown view'
        )
        return Response(
            {'error': 'Internal server error'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    data = response.data
    if isinstance(data, dict) and 'detail' in data:
        body = {'error': _flatten_detail(data['detail'])}
    else:
        body = {'error': _flatten_detail(data)}
        if isinstance(data, dict):
            body['fields'] = data
    response.data = body
    return response
