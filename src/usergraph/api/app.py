"""
Main FastAPI application for the usergraph server
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings
from ..graphql.schema import build_schema, create_graphql_router, validate_schema
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting usergraph API...", version=__version__)
    yield
    logger.info("Shutting down usergraph API...")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or Settings()
    configure_logging(debug=settings.debug, level=settings.log_level)

    app = FastAPI(
        title="usergraph API",
        description="Demonstration GraphQL server with a validated EmailAddress scalar",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    schema = build_schema()
    try:
        logger.info("Validating GraphQL schema...")
        validate_schema(schema)
    except Exception as e:
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    app.include_router(create_graphql_router(schema, graphiql=settings.graphiql), prefix="")
    logger.info("GraphQL endpoint initialized", endpoint="/graphql", graphiql=settings.graphiql)

    return app
