"""
Main FastAPI application for the Groceries API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, settings as default_settings
from ..graphql.schema import create_graphql_router, validate_schema
from ..logging import configure_logging, get_logger
from ..middleware import ANY_ORIGIN_HEADERS, LoggingContextMiddleware
from ..repositories import Repositories
from ..seed import seed_from_file
from ..storage import StorageBackend, create_storage

# Configure logging before creating logger
configure_logging(debug=default_settings.debug, log_level=default_settings.log_level)
logger = get_logger(__name__)


def create_app(
    settings: Settings | None = None, storage: StorageBackend | None = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    Storage and repositories are built once here and handed to the GraphQL
    router; they are also exposed as ``app.state.repositories``.
    """
    settings = settings or default_settings
    storage = storage or create_storage(settings)
    repositories = Repositories.from_storage(storage)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting Groceries API...", storage_backend=type(storage).__name__)

        if settings.seed_data_path:
            count = await seed_from_file(storage, settings.seed_data_path)
            logger.info("Seed data loaded", path=settings.seed_data_path, records=count)

        yield

        logger.info("Shutting down Groceries API...")
        await storage.close()

    app = FastAPI(
        title="Groceries API",
        description="GraphQL API for stores, departments, products and grocery lists",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.repositories = repositories

    # CORSMiddleware only answers requests carrying an Origin header
    always_sent = ANY_ORIGIN_HEADERS if "*" in settings.cors_origins else None
    app.add_middleware(LoggingContextMiddleware, response_headers=always_sent)

    # CORS configuration: preflight and cross-origin requests
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router(
            repositories, include_error_stack=settings.expose_error_stack
        )
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "groceries.api.app:app",
        host=default_settings.api_host,
        port=default_settings.api_port,
        reload=default_settings.api_reload,
        log_level=default_settings.log_level.lower(),
    )
