"""
Middleware for request timing and last-resort error handling
"""

import logging
import time
from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)
performance_logger = logging.getLogger('performance')


class RequestTimingMiddleware:
    """
    Log how long each request takes on the performance logger.
    """

    # Requests slower than this are logged as warnings
    SLOW_REQUEST_MS = 1000

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        start_time = time.perf_counter()
        response = self.get_response(request)
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        log = performance_logger.warning if elapsed_ms > self.SLOW_REQUEST_MS else performance_logger.info
        log(f"{request.method} {request.path} -> {response.status_code} in {elapsed_ms:.2f}ms")
        response['X-Response-Time-Ms'] = f"{elapsed_ms:.2f}"

        return response


class ErrorHandlingMiddleware(MiddlewareMixin):
    """
    Secure error handling middleware that prevents information leakage
    """

    def process_exception(self, request, exception):
        """Handle exceptions securely"""
        # Log the actual exception for debugging
        logger.error(f"Exception in {request.path}: {str(exception)}", exc_info=True)

        # Return generic error response without exposing internal details
        if request.path.startswith('/api/'):
            error_response = {
                'code': 500,
                'msg': 'Oops! Something went wrong. Please try again later.',
                'data': None
            }
            return JsonResponse(error_response, status=500)

        return None  # Let Django handle non-API errors normally
