"""Relay for contact form submissions to a transactional email API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from . import __version__
from .endpoints import ROUTERS
from .exceptions.api_exception import APIException
from .logger import get_logger, setup_sentry
from .redis import redis
from .settings import settings
from .utils.cors import cors_headers


logger = get_logger(__name__)

app = FastAPI(
    title="Contact Relay",
    description=__doc__,
    version=__version__,
    root_path=settings.root_path,
    root_path_in_servers=False,
    debug=settings.debug,
    openapi_tags=[{"name": name, "description": doc} for name, (_, doc) in ROUTERS.items()],
)

for router, _ in ROUTERS.values():
    app.include_router(router)


@app.exception_handler(APIException)
async def handle_api_exception(request: Request, exc: APIException) -> JSONResponse:
    headers = dict(exc.headers or {})
    if exc.cors:
        headers |= cors_headers()
    return JSONResponse({"success": False, "message": exc.detail}, status_code=exc.status_code, headers=headers)


@app.on_event("startup")
async def on_startup() -> None:
    if settings.sentry_dsn:
        setup_sentry(settings.sentry_dsn, "contact-relay", __version__)

    logger.info(f"Accepting submissions from {settings.allowed_origin} (daily limit: {settings.daily_limit})")


@app.on_event("shutdown")
async def on_shutdown() -> None:
    if redis is not None:
        await redis.aclose()
