"""Invoices Dashboard seed API: FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dashboard_api.config import get_settings
from dashboard_api.data.placeholder import get_placeholder_dataset
from dashboard_api.routers.seed import router as seed_router
from dashboard_api.services.seeder import DatabaseSeeder

logger = logging.getLogger(__name__)

__version__ = "0.1.0"


def configure_logging(level: str = "INFO") -> None:
    """Install the root log format used by the API and the CLI."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Wire the seeder onto ``app.state``.

    The seeder opens and closes its own MongoDB client per request, so
    there is nothing to tear down on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    if not settings.MONGODB_URI:
        logger.warning(
            "MONGODB_URI is not set; GET /seed will fail until it is "
            "configured in .env or the environment."
        )

    app.state.seeder = DatabaseSeeder(
        settings=settings,
        dataset=get_placeholder_dataset(),
    )

    yield


app = FastAPI(
    title="Invoices Dashboard Seed API",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(seed_router, prefix="/seed", tags=["seed"])


@app.get("/api/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint for service availability."""
    return {"status": "healthy", "version": __version__}


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.BACKEND_HOST, port=settings.BACKEND_PORT)
