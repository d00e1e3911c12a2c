"""
Error taxonomy for the gateway and the startup sequence.
"""
import enum

ORIGIN_REJECTED_MESSAGE = "Not allowed by CORS"
FALLBACK_ERROR_MESSAGE = "Something went wrong!"


class GatewayErrorKind(str, enum.Enum):
    ORIGIN_REJECTED = "origin_rejected"
    UNHANDLED = "unhandled"


class GatewayError(Exception):
    """An error that is turned into a JSON error response by the error normalizer."""

    kind = GatewayErrorKind.UNHANDLED

    def __init__(self, message: str = FALLBACK_ERROR_MESSAGE):
        super().__init__(message)
        self.message = message


class OriginRejectedError(GatewayError):
    kind = GatewayErrorKind.ORIGIN_REJECTED

    def __init__(self, origin: str):
        super().__init__(ORIGIN_REJECTED_MESSAGE)
        self.origin = origin


class BodyParseError(GatewayError):
    """The request body could not be decoded as JSON."""


class StartupError(RuntimeError):
    """Schema sync or seeding failed; the server must not start listening."""
