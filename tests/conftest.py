"""Pytest fixtures for testing"""

import pytest
from decimal import Decimal
from fastapi.testclient import TestClient
from tool_rental.api.main import create_app
from tool_rental.domain.checkout import Checkout
from tool_rental.domain.models import Tool, ToolType
from tool_rental.infrastructure.catalog import ToolCatalog, load_tool_catalog


@pytest.fixture
def chainsaw() -> ToolType:
    """Charged weekdays and holidays, free on weekends"""
    return ToolType("Chainsaw", Decimal("1.49"), True, False, True)


@pytest.fixture
def ladder() -> ToolType:
    """Charged weekdays and weekends, free on holidays"""
    return ToolType("Ladder", Decimal("1.99"), True, True, False)


@pytest.fixture
def jackhammer() -> ToolType:
    """Charged weekdays only"""
    return ToolType("Jackhammer", Decimal("2.99"), True, False, False)


@pytest.fixture
def ladder_tool(ladder: ToolType) -> Tool:
    return Tool("LADW", ladder, "Werner")


@pytest.fixture
def catalog() -> ToolCatalog:
    """Catalog loaded from the packaged tool data"""
    return load_tool_catalog()


@pytest.fixture
def checkout(catalog: ToolCatalog) -> Checkout:
    return Checkout(catalog)


@pytest.fixture
def client(catalog: ToolCatalog) -> TestClient:
    """Create FastAPI test client backed by the packaged catalog"""
    app = create_app(tool_catalog=catalog)
    return TestClient(app)
