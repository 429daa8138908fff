"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nosso_volei.config import settings
from nosso_volei.api.routes.roster import router as roster_router
from nosso_volei.repositories.roster_repository import RosterRepository
from nosso_volei.services.roster_service import RosterService

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def get_database_path() -> Path:
    """Get the database path from settings, resolving relative paths from the repo root."""
    db_path = Path(settings.database_path)
    if db_path.is_absolute():
        return db_path
    repo_root = Path(__file__).parent.parent.parent.parent
    return repo_root / settings.database_path


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: tests may have installed their own service already
    if not hasattr(app.state, "roster_service"):
        repository = RosterRepository(
            get_database_path(),
            storage_key=settings.storage_key,
            legacy_storage_key=settings.legacy_storage_key,
        )
        app.state.roster_service = RosterService(repository)
    yield


app = FastAPI(
    title="Nosso Vôlei",
    description="Volleyball roster rotation - queue, balanced teams and winner-stays rotation",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "nosso-volei"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Nosso Vôlei API",
        "version": "0.1.0",
        "docs": "/docs",
    }


# Register routers
app.include_router(roster_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
