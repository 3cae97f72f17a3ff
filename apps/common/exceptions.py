"""
Domain exceptions and the DRF exception handler that maps them to consistent API responses
"""
from django.db import IntegrityError
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status
import logging

logger = logging.getLogger(__name__)


class RewardsError(Exception):
    """Base class for errors raised by the rewards domain"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Invalid request'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(RewardsError):
    """A customer or transaction does not exist"""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'Resource not found'


class InvalidRangeError(RewardsError):
    """The start of a date range falls after its end"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Start date cannot be after end date.'


class ExternalServiceUnavailable(RewardsError):
    """
    The multiplier rule service could not answer.

    Raised by the rule service client and always recovered from before it
    reaches a view.
    """
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_message = 'External service unavailable'


def custom_exception_handler(exc, context):
    """
    Custom exception handler that returns consistent error responses
    """
    if isinstance(exc, RewardsError):
        logger.warning(f"Rewards error in {_view_name(context)}: {exc.message}")
        return Response({
            'code': exc.status_code,
            'msg': exc.message,
            'errors': {'detail': exc.message}
        }, status=exc.status_code)

    if isinstance(exc, IntegrityError):
        logger.error(f"Integrity error in {_view_name(context)}: {exc}", exc_info=True)
        return Response({
            'code': status.HTTP_409_CONFLICT,
            'msg': 'Data you submitted violates system rules. Please check and try again.',
            'errors': {'detail': 'Conflict'}
        }, status=status.HTTP_409_CONFLICT)

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is not None:
        logger.error(f"API Exception: {exc}", exc_info=response.status_code >= 500)

        custom_response_data = {
            'code': response.status_code,
            'msg': 'An error occurred',
            'errors': response.data
        }

        # Handle specific error types
        if response.status_code == status.HTTP_400_BAD_REQUEST:
            custom_response_data['msg'] = 'Validation error'
        elif response.status_code == status.HTTP_401_UNAUTHORIZED:
            custom_response_data['msg'] = 'Authentication required'
        elif response.status_code == status.HTTP_403_FORBIDDEN:
            custom_response_data['msg'] = 'Permission denied'
        elif response.status_code == status.HTTP_404_NOT_FOUND:
            custom_response_data['msg'] = 'Resource not found'
        elif response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            custom_response_data['msg'] = 'Method not allowed'
        elif response.status_code == status.HTTP_415_UNSUPPORTED_MEDIA_TYPE:
            custom_response_data['msg'] = 'This content type is not supported. Please use application/json.'
        elif response.status_code >= 500:
            custom_response_data['msg'] = 'Internal server error'
            custom_response_data['errors'] = {'detail': 'Internal server error'}

        response.data = custom_response_data

    return response


def _view_name(context):
    view = context.get('view')
    return type(view).__name__ if view is not None else 'unknown view'
