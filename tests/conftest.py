"""
pytest configuration and fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from product_catalog_api.app.core.config import Settings
from product_catalog_api.app.main import create_app
from product_catalog_api.app.services.product_service import SAMPLE_PRODUCTS, ProductService

API_KEY = "test-api-key"


@pytest.fixture
def settings() -> Settings:
    """Test settings with a known API key and the sample catalog."""
    return Settings(api_key=API_KEY, seed_sample_data=True, log_level="WARNING")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_headers() -> dict:
    return {"Authorization": f"Bearer {API_KEY}"}


@pytest.fixture
def service() -> ProductService:
    """A store seeded with the three sample products."""
    return ProductService(SAMPLE_PRODUCTS)
