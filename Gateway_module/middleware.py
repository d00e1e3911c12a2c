"""
Request pipeline stages, outermost first:

    request logging -> error normalizer -> origin gate -> (body parsing, routes)
"""
import logging
import time
from typing import Iterable, List

from fastapi import Request
from starlette import status
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from .error_handlers import normalize_error
from .origin_gate import OriginGate

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log HTTP requests and the final status code of their responses."""

    async def dispatch(self, request: Request, call_next):
        client_ip = request.client.host if request.client else "unknown"
        start_time = time.time()

        logger.info(f"-> {request.method} {request.url.path} | IP: {client_ip}")

        response = await call_next(request)
        duration = time.time() - start_time
        status_code = response.status_code

        if status_code < 400:
            status_category = "SUCCESS" if status_code < 300 else "REDIRECT"
        elif status_code < 500:
            status_category = "CLIENT_ERROR"
        else:
            status_category = "SERVER_ERROR"

        logger.info(
            f"<- {request.method} {request.url.path} | "
            f"Status: {status_code} ({status_category}) | "
            f"Duration: {duration:.3f}s | "
            f"IP: {client_ip}"
        )
        return response


class ErrorNormalizerMiddleware(BaseHTTPMiddleware):
    """
    Terminal error stage: anything raised by the origin gate or a route
    becomes exactly one JSON error response.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            response = normalize_error(exc, request)
            # Allowed cross-origin callers still need CORS headers to read the error
            cors = getattr(request.state, "cors_headers", None)
            if cors:
                response.headers.update(cors)
            return response


class OriginGateMiddleware(BaseHTTPMiddleware):
    """
    Rejects disallowed origins and answers preflight requests without
    reaching the routes.
    """

    def __init__(self, app, allowed_origins: Iterable[str]):
        super().__init__(app)
        self.gate = OriginGate(allowed_origins)

    async def dispatch(self, request: Request, call_next):
        headers = self.gate.check(request.headers.get("origin"))
        request.state.cors_headers = headers

        if request.method == "OPTIONS":
            response = Response(status_code=status.HTTP_204_NO_CONTENT)
        else:
            response = await call_next(request)

        response.headers.update(headers)
        return response


def build_middleware(allowed_origins: Iterable[str]) -> List[Middleware]:
    """The request pipeline in execution order (first entry runs first)."""
    return [
        Middleware(RequestLoggingMiddleware),
        Middleware(ErrorNormalizerMiddleware),
        Middleware(OriginGateMiddleware, allowed_origins=allowed_origins),
    ]
