"""Envelope responses.

Every endpoint answers with ``{"success": bool, "data"?, "message"?,
"pagination"?}``.
"""

from __future__ import annotations

from typing import Any

from rest_framework import status as http_status  # type: ignore
from rest_framework.response import Response  # type: ignore


def envelope(
    data: Any = None,
    *,
    message: str | None = None,
    pagination: dict[str, int] | None = None,
    status: int = http_status.HTTP_200_OK,
    success: bool = True,
) -> Response:
    body: dict[str, Any] = {"success": success}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    if pagination is not None:
        body["pagination"] = pagination
    return Response(body, status=status)


def failure(message: str, *, status: int, errors: list[dict[str, str]] | None = None) -> Response:
    body: dict[str, Any] = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    return Response(body, status=status)
