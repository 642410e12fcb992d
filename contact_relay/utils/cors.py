from fastapi import Request

from ..exceptions.contact import OriginNotAllowedError
from ..logger import get_logger
from ..settings import settings


logger = get_logger(__name__)

PREFLIGHT_MAX_AGE = 86400


def check_origin(request: Request) -> None:
    origin = request.headers.get("Origin")
    if origin != settings.allowed_origin:
        logger.debug(f"Rejecting {request.method} request from origin {origin!r}")
        raise OriginNotAllowedError


def cors_headers() -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": settings.allowed_origin,
        "Access-Control-Allow-Credentials": "true",
        "Vary": "Origin",
    }


def preflight_headers() -> dict[str, str]:
    return cors_headers() | {
        "Access-Control-Allow-Methods": "POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type, Authorization",
        "Access-Control-Max-Age": str(PREFLIGHT_MAX_AGE),
    }
