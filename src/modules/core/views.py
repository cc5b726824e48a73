from typing import Any, Dict

import structlog
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

logger = structlog.get_logger()


def health_check(request: HttpRequest) -> JsonResponse:
    """Liveness probe.

    The service keeps all state in process memory, so being able to
    answer is the whole check.
    """
    payload: Dict[str, Any] = {
        "status": "healthy",
        "timestamp": timezone.now().isoformat(),
    }
    logger.info("health_check_completed", status="healthy")
    return JsonResponse(payload)
