"""
Cross-origin access decision against a static allow-list.
"""
from typing import Dict, Iterable, Optional

from .errors import OriginRejectedError

ALLOWED_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS")
ALLOWED_HEADERS = ("Content-Type", "Authorization")


class OriginGate:
    """
    Allows requests with no Origin header or with an origin on the allow-list.
    Holds no mutable state, so one instance serves all requests.
    """

    def __init__(self, allowed_origins: Iterable[str]):
        self.allowed_origins = frozenset(allowed_origins)

    def is_allowed(self, origin: Optional[str]) -> bool:
        # No Origin header: same-origin, server-to-server or health checks
        if not origin:
            return True
        return origin in self.allowed_origins

    def check(self, origin: Optional[str]) -> Dict[str, str]:
        """
        Return the CORS headers for an allowed origin, or raise OriginRejectedError.
        """
        if not self.is_allowed(origin):
            raise OriginRejectedError(origin)
        return cors_headers(origin)


def cors_headers(origin: Optional[str]) -> Dict[str, str]:
    # Credentials are never allowed, so no Access-Control-Allow-Credentials
    headers = {
        "Access-Control-Allow-Methods": ", ".join(ALLOWED_METHODS),
        "Access-Control-Allow-Headers": ", ".join(ALLOWED_HEADERS),
        "Vary": "Origin",
    }
    if origin:
        headers["Access-Control-Allow-Origin"] = origin
    return headers
