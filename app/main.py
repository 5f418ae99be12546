"""
FastAPI application entry point.
Main application setup and configuration.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from pydantic import ValidationError as PydanticValidationError
from typing import Optional
import logging

from app.config import Settings, get_settings
from app.data import get_sample_listings
from app.repositories import InMemoryEntityRepository, InMemoryListingRepository
from app.routers import entities_router, listings_router
from app.utils.exceptions import APIException
from app.services.error_handler import ErrorHandlerService
from app.middleware.timing import RequestTimingMiddleware

logger = logging.getLogger(__name__)


def configure_logging(app_settings: Settings) -> None:
    logging.basicConfig(
        level=app_settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )


def init_repositories(app: FastAPI, app_settings: Settings) -> None:
    """
    Create the application's repositories and keep them on ``app.state``.
    Every request shares these instances.
    """
    app.state.entity_repository = InMemoryEntityRepository()
    app.state.listing_repository = InMemoryListingRepository()

    if app_settings.seed_sample_data:
        app.state.listing_repository.load(get_sample_listings())
        logger.info(f"Loaded {app.state.listing_repository.count()} sample listings")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    app_settings: Settings = app.state.settings
    logger.info(f"Starting {app_settings.app_name} v{app_settings.app_version}")
    logger.info(f"Environment: {app_settings.environment}")

    yield

    logger.info(
        f"Shutting down application "
        f"({app.state.entity_repository.count()} entities, "
        f"{app.state.listing_repository.count()} listings held in memory)"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Route every error through ErrorHandlerService."""

    @app.exception_handler(APIException)
    async def api_exception_handler(request: Request, exc: APIException):
        """Handle custom API exceptions with structured error responses."""
        return ErrorHandlerService.handle_api_exception(exc, request)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle FastAPI request validation errors with detailed field information."""
        return ErrorHandlerService.handle_validation_error(exc, request)

    @app.exception_handler(PydanticValidationError)
    async def pydantic_validation_exception_handler(request: Request, exc: PydanticValidationError):
        """Handle Pydantic validation errors with detailed field information."""
        return ErrorHandlerService.handle_validation_error(exc, request)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions such as unknown routes with structured error responses."""
        return ErrorHandlerService.handle_http_exception(exc, request)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions with secure error responses."""
        return ErrorHandlerService.handle_unexpected_error(exc, request)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Build a fully configured application.

    Args:
        app_settings: Settings to use, defaults to the cached environment settings

    Returns:
        FastAPI application with its own repositories
    """
    app_settings = app_settings or get_settings()
    configure_logging(app_settings)

    app = FastAPI(
        title=app_settings.app_name,
        version=app_settings.app_version,
        description="""
    In-memory store for entities and UK property listings.

    ## Features

    * **Entities**: CRUD operations with unique email addresses
    * **Listings**: CRUD operations for property listings
    * **Search**: Filter listings by region, property type, city, price, bedrooms and bathrooms
    * **Featured**: Curated subset of listings
    """,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=[
            {
                "name": "Entities",
                "description": "Entity management"
            },
            {
                "name": "Listings",
                "description": "Property listing management and search operations"
            },
            {
                "name": "Health",
                "description": "Service health endpoints"
            }
        ],
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    init_repositories(app, app_settings)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Processing-Time"],
    )

    app.add_middleware(
        RequestTimingMiddleware,
        slow_request_threshold=app_settings.slow_request_threshold,
    )

    # Include API routers
    app.include_router(entities_router, prefix=app_settings.api_v1_prefix)
    app.include_router(listings_router, prefix=app_settings.api_v1_prefix)

    register_exception_handlers(app)

    @app.get("/", tags=["Health"])
    def root():
        """
        Root endpoint providing basic API information.
        """
        return {
            "message": f"Welcome to {app_settings.app_name}",
            "version": app_settings.app_version,
            "environment": app_settings.environment,
            "status": "healthy",
            "documentation": {
                "swagger_ui": "/docs",
                "redoc": "/redoc",
                "openapi_json": "/openapi.json"
            },
            "api_prefix": app_settings.api_v1_prefix
        }

    @app.get("/health", tags=["Health"])
    def health_check(request: Request):
        """
        Health check endpoint reporting how many records are held.
        """
        return {
            "status": "healthy",
            "service": app_settings.app_name,
            "version": app_settings.app_version,
            "environment": app_settings.environment,
            "storage": {
                "entities": request.app.state.entity_repository.count(),
                "listings": request.app.state.listing_repository.count()
            }
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
