"""
Error responses shared by the API routes.

Not-found errors carry {timestamp, status, message}; request validation
errors carry {timestamp, status, errors} with one message per field.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

_LOCATION_ROOTS = {"body", "query", "path", "header", "cookie"}


def field_key(loc: Sequence[int | str]) -> str:
    """
    Build a field key from a pydantic error location.

    ("body", "name") -> "name"
    ("body", "players", 0, "name") -> "players[0].name"
    """
    parts = list(loc)
    if len(parts) > 1 and parts[0] in _LOCATION_ROOTS:
        parts = parts[1:]

    key = ""
    for part in parts:
        if isinstance(part, int):
            key += f"[{part}]"
        else:
            key = f"{key}.{part}" if key else str(part)
    return key


def not_found_response(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "timestamp": datetime.now().isoformat(),
            "status": status.HTTP_404_NOT_FOUND,
            "message": message,
        },
    )


def collect_field_errors(errors: Sequence[dict[str, Any]]) -> dict[str, str]:
    """Map each failing field to its message, keeping the first per field."""
    field_errors: dict[str, str] = {}
    for error in errors:
        field_errors.setdefault(field_key(error.get("loc", ())), str(error.get("msg", "")))
    return field_errors


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Translate request validation failures into a 400 field-error map."""
    field_errors = collect_field_errors(exc.errors())
    logger.warning("Request validation failed for %s: %s", request.url.path, field_errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "timestamp": datetime.now().isoformat(),
            "status": status.HTTP_400_BAD_REQUEST,
            "errors": field_errors,
        },
    )
