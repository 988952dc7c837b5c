"""
JSON error envelopes shared by every router.

Shapes:
- 4xx/5xx from HTTPException -> {"message": "..."}
- request validation         -> {"message": "...", "errors": {"field": ["..."]}}
- anything unhandled         -> {"message": "Server Error"} with status 500
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# Locations FastAPI prefixes onto field paths.
_REQUEST_PARTS = {"body", "query", "path", "header", "cookie"}

PAYLOAD_FIELD = "payload"


def _field_name(loc: tuple[Any, ...] | list[Any]) -> str:
    parts = list(loc)
    if parts and parts[0] in _REQUEST_PARTS:
        parts = parts[1:]
    # Whole-payload errors (missing body, malformed JSON) carry no field name.
    if not parts or not isinstance(parts[0], str):
        return PAYLOAD_FIELD
    return ".".join(str(p) for p in parts)


def _field_message(field: str, error: dict[str, Any]) -> str:
    kind = str(error.get("type") or "")
    ctx = error.get("ctx") or {}

    if field == PAYLOAD_FIELD:
        if kind == "json_invalid":
            return "The request body must be valid JSON."
        if kind == "missing":
            return "The request body is required."
        return "The request body must be a JSON object."

    label = field.replace("_", " ")
    if kind in {"missing", "string_too_short"} or (kind == "string_type" and error.get("input") is None):
        return f"The {label} field is required."
    if kind == "string_too_long":
        return f"The {label} field must not be greater than {ctx.get('max_length')} characters."
    if kind == "string_nul":
        return f"The {label} field must not contain NUL characters."
    if kind == "string_type":
        return f"The {label} field must be a string."
    if kind.startswith("int"):
        return f"The {label} field must be an integer."
    return str(error.get("msg") or f"The {label} field is invalid.")


def validation_errors(errors: list[dict[str, Any]]) -> dict[str, list[str]]:
    """
    Group pydantic errors by field name, keeping first-seen order.
    """
    grouped: dict[str, list[str]] = {}
    for error in errors:
        field = _field_name(error.get("loc") or ())
        message = _field_message(field, error)
        messages = grouped.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return grouped


def validation_summary(grouped: dict[str, list[str]]) -> str:
    messages = [m for field_messages in grouped.values() for m in field_messages]
    if not messages:
        return "The given data was invalid."
    extra = len(messages) - 1
    if extra == 0:
        return messages[0]
    noun = "error" if extra == 1 else "errors"
    return f"{messages[0]} (and {extra} more {noun})"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    grouped = validation_errors(list(exc.errors()))
    logger.warning(
        "request_validation_failed method=%s path=%s fields=%s",
        request.method,
        request.url.path,
        ",".join(grouped),
    )
    return JSONResponse(
        status_code=422,
        content={"message": validation_summary(grouped), "errors": grouped},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = {"message": str(exc.detail)}
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error method=%s path=%s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Server Error"},
    )


def install(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
