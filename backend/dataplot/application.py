"""FastAPI application factory."""

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request

from dataplot import __version__
from dataplot.api.endpoints.point import router as point_router
from dataplot.api.endpoints.viz import router as viz_router
from dataplot.config import Settings, settings_from_env
from dataplot.expvars import Registry, default_registry
from dataplot.point import PointResource
from dataplot.utils.logging import format_access_line, get_access_logger

logger = logging.getLogger(__name__)


def _install_access_log(app: FastAPI, settings: Settings) -> None:
    access_logger = get_access_logger(settings.custom_log)
    log_format = list(settings.log_format)

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000.0
        values = {
            "remote_addr": request.client.host if request.client else None,
            "method": request.method,
            "path": request.url.path,
            "query": request.url.query,
            "status": response.status_code,
            "duration_ms": f"{duration_ms:.2f}",
            "user_agent": request.headers.get("user-agent"),
            "content_length": response.headers.get("content-length"),
            "time": time.strftime("%d/%b/%Y:%H:%M:%S %z"),
        }
        access_logger.info(format_access_line(log_format, values))
        return response


def create_app(
    settings: Optional[Settings] = None,
    *,
    registry: Optional[Registry] = None,
) -> FastAPI:
    """Build the application.

    ``registry`` receives the ``point`` introspection variable; it defaults to
    the process-wide registry, which accepts each name only once.
    """
    settings = settings or settings_from_env()
    registry = registry if registry is not None else default_registry()

    app = FastAPI(title="dataplot", version=__version__)
    app.state.settings = settings
    app.state.point = PointResource()
    app.state.registry = registry
    registry.publish("point", app.state.point)

    if settings.access_log_enabled:
        _install_access_log(app, settings)
        logger.info("Writing access log to %s", settings.custom_log)

    app.include_router(viz_router)
    app.include_router(point_router)

    @app.get("/")
    async def root():
        return {"message": "dataplot API", "version": __version__}

    @app.get("/debug/vars")
    async def debug_vars(request: Request):
        """Dump every published introspection variable."""
        return request.app.state.registry.snapshot()

    return app
