import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def health_check(request):
    status = {"db": False}

    try:
        with connection.cursor() as c:
            c.execute("SELECT 1")
        status["db"] = True
    except DatabaseError:
        logger.exception("health check: database unreachable")

    http_status = 200 if all(status.values()) else 503
    return JsonResponse(status, status=http_status)
