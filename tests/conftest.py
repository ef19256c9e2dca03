"""Shared fixtures for the Hello API tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.hello.services import ArithmeticService, GreetingService
from app.main import app


@pytest.fixture
def client() -> TestClient:
    """HTTP client bound to the FastAPI application."""
    return TestClient(app)


@pytest.fixture
def greeting() -> GreetingService:
    return GreetingService()


@pytest.fixture
def arithmetic() -> ArithmeticService:
    return ArithmeticService()
