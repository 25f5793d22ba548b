"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from link_summarizer.app import app


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app with the lifespan running."""
    with TestClient(app) as test_client:
        yield test_client
