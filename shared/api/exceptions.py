"""The DRF exception handler.

Every failure leaves the API as ``{"success": false, "message": ...}``.
Validation failures add ``errors: [{field, message}]``. Anything that is
not an API or domain error is logged and reported as a generic 500.
"""

from __future__ import annotations

from typing import Any

import structlog
from rest_framework import exceptions, status  # type: ignore
from rest_framework.views import exception_handler, set_rollback  # type: ignore

from shared.api.errors import Conflict, InternalError, NotFound, Unauthorized, ValidationFailed
from shared.api.responses import failure
from shared.domain.exceptions import ConflictError, DomainError, EntityNotFound, InvalidInput

logger = structlog.get_logger(__name__)


def _from_domain(exc: DomainError) -> exceptions.APIException:
    if isinstance(exc, InvalidInput):
        return ValidationFailed(exc.message)
    if isinstance(exc, EntityNotFound):
        return NotFound(exc.message)
    if isinstance(exc, ConflictError):
        return Conflict(exc.message)
    return InternalError()


def _flatten_errors(detail: Any, prefix: str = "") -> list[dict[str, str]]:
    if isinstance(detail, dict):
        errors: list[dict[str, str]] = []
        for key, value in detail.items():
            field = f"{prefix}.{key}" if prefix else str(key)
            errors.extend(_flatten_errors(value, field))
        return errors
    if isinstance(detail, list):
        errors = []
        for item in detail:
            errors.extend(_flatten_errors(item, prefix))
        return errors
    return [{"field": prefix or "non_field_errors", "message": str(detail)}]


def _message_from(detail: Any) -> str:
    if isinstance(detail, dict):
        inner = detail.get("detail")
        if inner is not None:
            return str(inner)
        return "Request failed"
    if isinstance(detail, list):
        return str(detail[0]) if detail else "Request failed"
    return str(detail)


def envelope_exception_handler(exc: Exception, context: dict[str, Any]):
    """REST_FRAMEWORK['EXCEPTION_HANDLER'] entry point."""

    if isinstance(exc, DomainError):
        exc = _from_domain(exc)
    elif type(exc) is exceptions.NotAuthenticated:
        translated = Unauthorized()
        translated.status_code = exc.status_code
        translated.auth_header = getattr(exc, "auth_header", None)
        exc = translated

    response = exception_handler(exc, context)
    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else None

    if response is None:
        set_rollback()
        logger.error("request.unhandled_exception", view=view_name, exc_info=exc)
        return failure(InternalError.default_detail, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, exceptions.ValidationError):
        errors = _flatten_errors(exc.detail)
        logger.info("request.validation_failed", view=view_name, fields=[e["field"] for e in errors])
        body = failure("Validation failed", status=response.status_code, errors=errors)
    else:
        detail = getattr(exc, "detail", response.data)
        body = failure(_message_from(detail), status=response.status_code)
        if response.status_code >= 500:
            logger.error("request.server_error", view=view_name, status=response.status_code)

    for header in ("WWW-Authenticate", "Retry-After", "Allow"):
        if header in response:
            body[header] = response[header]
    return body
