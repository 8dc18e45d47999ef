import logging
import json
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from statusboard.api import health, pages, v1
from statusboard.config import Settings, require_database_settings, settings as default_settings
from statusboard.db import build_session_factory, create_db_engine
from statusboard.exceptions import (
    DatabaseConnectionError,
    StatusBoardError,
    UnknownStatusCodeError,
)
from statusboard.services.status_board import StatusBoard


class JSONFormatter(logging.Formatter):
    def format(self, record):
        log_entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def configure_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level.upper())


logger = logging.getLogger(__name__)

ERROR_STATUS = {
    DatabaseConnectionError: 503,
    UnknownStatusCodeError: 500,
}


def _status_for(exc: StatusBoardError) -> int:
    for error_type, status_code in ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return status_code
    return 500


async def status_board_error_handler(request: Request, exc: StatusBoardError):
    status_code = _status_for(exc)
    if status_code >= 500 and not isinstance(exc, DatabaseConnectionError):
        logger.error(f"Error serving {request.url.path}: {exc}")
    else:
        logger.warning(f"Error serving {request.url.path}: {exc}")

    if request.url.path.startswith("/api/"):
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})
    return pages.templates.TemplateResponse(
        request,
        "error.html",
        {"message": str(exc), "status_code": status_code},
        status_code=status_code,
    )


def create_app(
    settings: Optional[Settings] = None,
    status_board: Optional[StatusBoard] = None
) -> FastAPI:
    """
    Build the application.

    Without an explicit `status_board` the database settings are validated
    and the engine is created on startup; ConfigurationError aborts startup.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = None
        if app.state.status_board is None:
            require_database_settings(settings)
            engine = create_db_engine(settings)
            app.state.status_board = StatusBoard(build_session_factory(engine), settings)
            logger.info("Status board ready")
        yield
        if engine is not None:
            engine.dispose()
            logger.info("Database engine disposed")

    app = FastAPI(
        title="Service Status Board",
        description="Current state and recent transitions of monitored services",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.status_board = status_board

    app.add_exception_handler(StatusBoardError, status_board_error_handler)

    app.include_router(health.router)
    app.include_router(pages.router)
    app.include_router(v1.router, prefix="/api/v1")
    return app


configure_logging(default_settings.log_level)

app = create_app()
