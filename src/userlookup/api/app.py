"""
Main FastAPI application for the user lookup service
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import settings
from ..cors import ALLOWED_ORIGINS, OriginPolicyMiddleware
from ..database import Database
from ..errors import UserLookupError
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..users.repository import UserGateway
from .endpoints.users import ErrorResponse

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    database: Database = app.state.database

    # Startup; the CLI connects before building the app, uvicorn-by-import does not
    if not database.connected:
        logger.info("Connecting to database...")
        await database.connect()

    logger.info("User lookup API ready", graphql="/graphql", docs="/api-docs")

    yield

    # Shutdown
    logger.info("Shutting down user lookup API...")
    await database.dispose()


async def user_lookup_error_handler(request: Request, exc: UserLookupError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(),
    )


def create_app(database: Database | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        database: Storage handle, connected or not. Defaults to one built from settings.
    """
    if database is None:
        database = Database(settings.database_url)

    app = FastAPI(
        title="Users API",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
        # The published description is the static document under /api-docs
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.database = database
    app.state.users = UserGateway(database)

    app.add_exception_handler(UserLookupError, user_lookup_error_handler)

    # Starlette runs the most recently added middleware first, so the origin
    # policy sees every request before CORS headers and request logging.
    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(ALLOWED_ORIGINS),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(OriginPolicyMiddleware)

    # REST API endpoints
    from .endpoints import docs, users

    app.include_router(users.router, prefix="/users", tags=["Users"])

    # GraphQL endpoint
    from ..graphql.schema import create_graphql_router, validate_schema

    validate_schema()
    app.include_router(create_graphql_router(), prefix="")
    logger.debug("GraphQL endpoint initialized", endpoint="/graphql")

    # Documentation
    app.include_router(docs.router, prefix="/api-docs", tags=["Docs"])

    return app


# Application instance for `uvicorn userlookup.api.app:app`
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "userlookup.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )
