"""
Error normalization: every failure becomes a JSON body with an "error" key.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import FALLBACK_ERROR_MESSAGE, BodyParseError, GatewayError, GatewayErrorKind

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    GatewayErrorKind.ORIGIN_REJECTED: status.HTTP_403_FORBIDDEN,
    GatewayErrorKind.UNHANDLED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_kind(exc: BaseException) -> GatewayErrorKind:
    if isinstance(exc, GatewayError):
        return exc.kind
    return GatewayErrorKind.UNHANDLED


def error_message(exc: BaseException) -> str:
    message = exc.message if isinstance(exc, GatewayError) else str(exc)
    return message or FALLBACK_ERROR_MESSAGE


def normalize_error(exc: BaseException, request: Optional[Request] = None) -> JSONResponse:
    """
    Map any error to 403 (origin rejected) or 500 (everything else).
    Never raises.
    """
    try:
        kind = error_kind(exc)
        message = error_message(exc)
        where = f"{request.method} {request.url.path}" if request is not None else "request"
        if kind == GatewayErrorKind.ORIGIN_REJECTED:
            logger.warning("Rejected %s from origin %s", where, getattr(exc, "origin", None))
        else:
            logger.error("Unhandled error during %s: %s", where, exc, exc_info=exc)
    except Exception:  # pragma: no cover
        kind, message = GatewayErrorKind.UNHANDLED, FALLBACK_ERROR_MESSAGE
    return JSONResponse(status_code=STATUS_BY_KIND[kind], content={"error": message})


def _first_validation_message(exc: RequestValidationError) -> str:
    """One readable line for the first failing field, e.g. "productId: Field required"."""
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        message = err.get("msg") or "Invalid value"
        return f"{'.'.join(loc)}: {message}" if loc else message
    return "Request validation failed."


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Errors raised on purpose by route handlers keep their status code."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    A body that is not JSON at all is a body-parsing failure and goes to the
    normalizer (500). A well-formed body that misses or mistypes a field is a
    client error like the routes' own checks (400).
    """
    errors = exc.errors()
    decode_error = next((err for err in errors if err.get("type") == "json_invalid"), None)
    if decode_error is not None:
        reason = (decode_error.get("ctx") or {}).get("error") or decode_error.get("msg")
        return normalize_error(BodyParseError(f"Malformed JSON body: {reason}"), request)

    logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": _first_validation_message(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
