"""
Global DRF exception handler.

Errors the views do not answer themselves end up here. DRF's own exceptions
keep their default rendering, domain errors render their envelope, and
anything else is logged with its traceback and answered with a 500.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from apps.cars.errors import ApplicationError

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is not None:
        return response

    if isinstance(exc, ApplicationError):
        return Response(exc.to_dict(), status=exc.status_code)

    set_rollback()
    request = context.get('request')
    error_id = id(exc)
    logger.error(
        f'Unhandled exception [{error_id}] in '
        f'{getattr(request, "method", "?")} {getattr(request, "path", "?")}: {exc}',
        exc_info=exc,
    )
    return Response(
        {
            'error': {
                'name': 'InternalServerError',
                'message': 'Internal server error',
                'details': {'error_id': error_id},
            }
        },
        status=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
