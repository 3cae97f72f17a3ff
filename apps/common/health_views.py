"""
Health check view for the rewards server.
Reports database connectivity and whether the multiplier rule service is configured.
"""
import logging
import time

from django.conf import settings
from django.db import connection, DatabaseError
from django.http import JsonResponse
from django.utils import timezone
from django.views import View

logger = logging.getLogger(__name__)

VERSION = '1.0.0'


class BasicHealthCheckView(View):
    """
    Unauthenticated health endpoint for monitoring tools.

    Only the database decides the overall status. The rule service is
    optional, so it is reported but never makes the server unhealthy.
    """

    def get(self, request):
        started = time.perf_counter()

        database, db_error = self._database_status()
        healthy = database['status'] == 'healthy'
        if not healthy:
            logger.error(f"Database health check failed: {db_error}")

        body = {
            'status': 'healthy' if healthy else 'unhealthy',
            'timestamp': timezone.now().isoformat(),
            'version': VERSION,
            'database': database,
            'rule_service': self._rule_service_status(),
            'response_time_ms': round((time.perf_counter() - started) * 1000, 2),
        }
        return JsonResponse(body, status=200 if healthy else 503)

    def _database_status(self):
        """
        Run SELECT 1 against the default connection.

        Returns:
            tuple: (status dict, error message or None)
        """
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
                row = cursor.fetchone()
        except DatabaseError as e:
            return {
                'status': 'unhealthy',
                'message': 'Database connection failed',
                'error': 'Database connectivity error'
            }, str(e)

        if not row or row[0] != 1:
            return {
                'status': 'unhealthy',
                'message': 'Database query returned unexpected result'
            }, 'Unexpected query result'

        return {'status': 'healthy', 'message': 'Database connection successful'}, None

    def _rule_service_status(self):
        # Configuration only; the service itself is not called from here
        return {
            'configured': bool(settings.REWARDS_MULTIPLIER_SERVICE_URL),
            'timeout_seconds': settings.REWARDS_MULTIPLIER_TIMEOUT,
        }
