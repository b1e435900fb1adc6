"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from tool_rental.api.middleware import RequestContextMiddleware
from tool_rental.api.v1 import checkout, tools
from tool_rental.infrastructure.catalog import ToolCatalog, load_tool_catalog
from tool_rental.infrastructure.observability.logging import setup_logging
from tool_rental.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app(tool_catalog: ToolCatalog | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    The tool catalog is loaded here, so a broken catalog file stops start-up
    with ToolCatalogInitializationError instead of failing per request.
    """
    app = FastAPI(
        title="Tool Rental Service",
        description="Tool checkout and rental agreement pricing",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.tool_catalog = tool_catalog if tool_catalog is not None else load_tool_catalog(settings.tool_catalog_path)

    app.add_middleware(RequestContextMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(checkout.router, prefix="/v1", tags=["checkout"])
    app.include_router(tools.router, prefix="/v1", tags=["tools"])

    return app


app = create_app()
