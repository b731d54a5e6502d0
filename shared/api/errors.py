"""API error taxonomy.

Only ``rest_framework.exceptions`` is imported here: authentication
classes raise these while DRF itself is still loading its views.
"""

from __future__ import annotations

from rest_framework import exceptions, status  # type: ignore


class ValidationFailed(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Validation failed"
    default_code = "validation_failed"


class NotFound(exceptions.NotFound):
    default_detail = "Resource not found"


class Unauthorized(exceptions.NotAuthenticated):
    default_detail = "Access denied. No token provided."
    default_code = "unauthorized"


class InvalidToken(exceptions.AuthenticationFailed):
    default_detail = "Invalid token"
    default_code = "token_not_valid"


class TokenExpired(exceptions.AuthenticationFailed):
    default_detail = "Token expired"
    default_code = "token_expired"


class Forbidden(exceptions.PermissionDenied):
    default_detail = "Access denied."


class Conflict(exceptions.APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict"
    default_code = "conflict"


class InternalError(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"
    default_code = "internal_error"
