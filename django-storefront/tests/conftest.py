"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from factories import FakeBackendStore, InMemorySelectionStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def fake_backend() -> FakeBackendStore:
    return FakeBackendStore()


@pytest.fixture
def selection_store() -> InMemorySelectionStore:
    return InMemorySelectionStore()


@pytest.fixture
def backend(fake_backend, monkeypatch) -> FakeBackendStore:
    """Route every view's backend calls to the in-memory fake."""
    monkeypatch.setattr("storefront.handlers.views.build_backend_store", lambda: fake_backend)
    return fake_backend
