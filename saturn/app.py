import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from saturn.application import RunService, build_orchestrator
from saturn.core.config import Settings, get_settings
from saturn.core.logging import configure_logging
from saturn.infrastructure import InMemoryRunRepository, TeamsApiClient
from saturn.routes import runs

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_file)

    api = TeamsApiClient(
        settings.api_base_url,
        timeout=settings.http_timeout_seconds,
        http_client=http_client,
    )

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        logger.info("Application started.")
        yield
        await api.aclose()

    app = FastAPI(title="Saturn Team Data API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.run_service = RunService(InMemoryRunRepository(), build_orchestrator(api, settings))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(runs.router, prefix="/api")

    @app.get("/", include_in_schema=False)
    async def root() -> JSONResponse:
        """Provide a lightweight landing page for container checks."""
        return JSONResponse(
            {
                "message": "Saturn Team Data API",
                "docs": "/docs",
                "runs": "/api/runs",
                "upstream": settings.api_base_url,
            }
        )

    return app


app = create_app()
