from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from skitrack.api.index import router as index_router
from skitrack.api.runs import router as runs_router
from skitrack.api.turns import router as turns_router
from skitrack.core.config import Settings, settings as default_settings
from skitrack.core.logging import configure_logging
from skitrack.errors import StoreError
from skitrack.init_db import initialize

logger = structlog.get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        # Startup errors propagate and stop the server before it serves
        app.state.engine = initialize(settings)
        logger.info("server_ready")
        try:
            yield
        finally:
            app.state.engine.dispose()

    app = FastAPI(title="Ski telemetry", lifespan=lifespan)
    app.state.settings = settings

    # Allow CORS for the local frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.error(
            "store_error",
            method=request.method,
            path=request.url.path,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": type(exc).__name__, "message": str(exc)},
        )

    app.include_router(index_router)
    app.include_router(runs_router)
    app.include_router(turns_router)

    @app.get("/")
    def root():
        return {"message": "Ski telemetry backend is running"}

    return app


def run() -> None:
    import uvicorn

    uvicorn.run(create_app(default_settings), host=default_settings.host, port=default_settings.port)


app = create_app()
