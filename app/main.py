import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.logging_config import configure_logging
from app.models import ErrorResponse, HealthResponse, StatusResponse
from app.settings import Settings, get_settings
from app.version import VersionUnavailableError, current_timestamp, read_version

logger = structlog.get_logger(__name__)


async def version_unavailable_handler(request: Request, exc: VersionUnavailableError):
    logger.error(
        "Version file unreadable",
        path=str(exc.path),
        reason=exc.reason,
        request_path=request.url.path,
    )
    body = ErrorResponse(error="VersionUnavailable", message="Version information is unavailable")
    return JSONResponse(status_code=500, content=body.model_dump())


def health(request: Request):
    logger.debug("Health check", method=request.method)
    settings = request.app.state.settings
    body = HealthResponse(
        version=read_version(settings.version_file),
        timestamp=current_timestamp(),
    )
    return JSONResponse(body.model_dump())


def root(request: Request):
    logger.debug("Status request", method=request.method, path=request.url.path)
    settings = request.app.state.settings
    body = StatusResponse(version=read_version(settings.version_file))
    return JSONResponse(body.model_dump())


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    configure_logging(debug_mode=settings.debug)

    # No docs routes: every path other than /health gets the status payload.
    app = FastAPI(title="Bootstrap API", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.settings = settings
    app.add_exception_handler(VersionUnavailableError, version_unavailable_handler)

    # methods=None accepts every method. /health must be registered before the catch-all.
    app.add_route("/health", health, methods=None)
    app.add_route("/{path:path}", root, methods=None)

    logger.info("FastAPI app created", version_file=str(settings.version_file))
    return app


app = create_app()
