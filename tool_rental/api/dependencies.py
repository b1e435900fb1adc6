"""Dependency injection for FastAPI endpoints"""

from fastapi import Request

from tool_rental.domain.checkout import Checkout
from tool_rental.infrastructure.catalog import ToolCatalog


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_tool_catalog(request: Request) -> ToolCatalog:
    """Catalog loaded once at application start-up"""
    return request.app.state.tool_catalog


def get_checkout(request: Request) -> Checkout:
    """Provide a Checkout bound to the application's catalog"""
    return Checkout(get_tool_catalog(request))
