"""
Exception handlers that give every error response the same shape:
``{"error": <message or list of violations>}``.
"""
import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Flatten pydantic error dicts into one entry per violated field."""
    violations = []
    for err in errors:
        loc = list(err.get("loc", ()))
        # Drop the "body"/"query"/"path" prefix FastAPI adds
        if loc and loc[0] in ("body", "query", "path"):
            loc = loc[1:]
        # Malformed JSON reports a character offset, not a field
        if err.get("type") == "json_invalid":
            loc = []
        violations.append(
            {
                "field": ".".join(str(part) for part in loc) or "body",
                "message": err.get("msg", "Invalid value"),
                "type": err.get("type", "value_error"),
            }
        )
    return violations


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    violations = format_validation_errors(exc.errors())
    logger.info(
        f"Validation failed for {request.method} {request.url.path}: "
        f"{[v['field'] for v in violations]}"
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": violations},
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled error during {request.method} {request.url.path}: "
        f"{type(exc).__name__} - {exc}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
