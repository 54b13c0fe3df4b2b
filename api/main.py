# api/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import Settings, get_settings
from core.logging_config import setup_logging
from core.sa.database import Database
from api.routes import authors, genres

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize database on startup, release connections on shutdown
    database: Database = app.state.database
    database.init_db()
    logger.info("Database ready")
    try:
        yield
    finally:
        database.dispose()
        logger.info("Database connections released")

def create_app(database: Optional[Database] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around an explicit Database handle.

    Args:
        database: Store handle to serve from. Built from settings.database_url if omitted.
        settings: Configuration; read from the environment if omitted.
    """
    settings = settings or get_settings()
    if not logging.getLogger().handlers:
        # Entry points such as the CLI configure logging themselves
        setup_logging(settings.log_level)

    app = FastAPI(title="Local Library", lifespan=lifespan)
    app.state.database = database or Database(settings.database_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root():
        return {"message": "Local Library catalog"}

    app.include_router(genres.router)
    app.include_router(authors.router)
    return app

# Main execution
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["api", "core"]
    )
