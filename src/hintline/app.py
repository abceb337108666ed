"""FastAPI application factory for Hintline."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hintline.common.config import get_settings
from hintline.common.exceptions import HintlineError, ValidationError
from hintline.common.logging import setup_logging
from hintline.common.schemas import ErrorResponse, HealthResponse
from hintline.notifications.dispatcher import NotificationDispatcher

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        from hintline.deps import get_db
        db = get_db()
        await db.init()
        await db.create_all()
        logger.info("Hintline %s started", settings.api_version)
        yield
        # Shutdown
        await app.state.dispatcher.close()
        await db.close()
        logger.info("Hintline stopped")

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        lifespan=lifespan,
    )
    app.state.dispatcher = NotificationDispatcher(
        send_timeout=settings.notification_send_timeout,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(HintlineError)
    async def hintline_error_handler(request: Request, exc: HintlineError):
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=exc.message, code=exc.code).model_dump(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        # Parser input is never echoed back, only locations and messages.
        error = ValidationError("Invalid request")
        detail = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
            for err in exc.errors()
        )
        return JSONResponse(
            status_code=error.status_code,
            content=ErrorResponse(
                error=error.message, code=error.code, detail=detail,
            ).model_dump(),
        )

    @app.get("/api/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(version=settings.api_version)

    # Mount routers
    from hintline.progress.router import router as progress_router
    from hintline.hints.router import router as hint_router
    from hintline.notifications.router import router as notification_router

    prefix = settings.api_prefix
    app.include_router(progress_router, prefix=prefix, tags=["progress"])
    app.include_router(hint_router, prefix=prefix, tags=["hints"])
    app.include_router(notification_router, tags=["notifications"])

    return app
