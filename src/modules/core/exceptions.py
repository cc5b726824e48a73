"""Standardized API error responses.

Every error rendered by DRF takes the shape::

    {"type": "validation_error", "errors": [{"code": ..., "detail": ..., "attr": ...}]}

``standard_exception_handler`` is wired through
``REST_FRAMEWORK["EXCEPTION_HANDLER"]``; views use
``error_response`` for domain errors they translate themselves.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

_NON_FIELD_KEYS = {"detail", "non_field_errors"}


def _error_type(status_code: int) -> str:
    if status_code == status.HTTP_400_BAD_REQUEST:
        return "validation_error"
    if status_code < 500:
        return "client_error"
    return "server_error"


def _flatten(detail: Any, attr: Optional[str] = None) -> Iterator[Dict[str, Any]]:
    if isinstance(detail, dict):
        for key, value in detail.items():
            if key in _NON_FIELD_KEYS:
                child = attr
            else:
                child = key if attr is None else f"{attr}.{key}"
            yield from _flatten(value, child)
    elif isinstance(detail, list):
        for value in detail:
            yield from _flatten(value, attr)
    else:
        yield {
            "code": getattr(detail, "code", "error"),
            "detail": str(detail),
            "attr": attr,
        }


def format_errors(status_code: int, detail: Any) -> Dict[str, Any]:
    errors: List[Dict[str, Any]] = list(_flatten(detail))
    return {"type": _error_type(status_code), "errors": errors}


def error_response(
    code: str,
    detail: str,
    attr: Optional[str] = None,
    status_code: int = status.HTTP_400_BAD_REQUEST,
) -> Response:
    """Build a standard error response for a single domain error."""
    return Response(
        {
            "type": _error_type(status_code),
            "errors": [{"code": code, "detail": detail, "attr": attr}],
        },
        status=status_code,
    )


def standard_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    response = exception_handler(exc, context)
    if response is None:
        return None
    response.data = format_errors(response.status_code, response.data)
    return response
