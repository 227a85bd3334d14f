"""Pytest fixtures for the storefront data layer."""

from datetime import datetime, timezone

import httpx
import pytest

from storefront.api.main import create_app
from storefront.bootstrap import build_services
from storefront.config import StorefrontConfig
from storefront.integrations.clients.mocks.local_store import LocalStore

FROZEN_NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
FROZEN_ISO = "2024-03-01T12:00:00.000Z"


@pytest.fixture
def clock():
    """A clock that never advances."""
    return lambda: FROZEN_NOW


@pytest.fixture
def store(clock):
    return LocalStore(clock=clock)


@pytest.fixture
def offline_services(store):
    """Services with the backend flag off: everything is served locally."""
    return build_services(StorefrontConfig(backend_enabled=False), store=store)


@pytest.fixture
def backend():
    """A fresh development backend app (its own store, no shared state)."""
    return create_app()


@pytest.fixture
def online_services(backend, clock):
    """Services whose remote calls are served in-process by the development backend."""
    config = StorefrontConfig(api_base_url="http://testserver", probe_timeout_seconds=1.0)
    return build_services(config, transport=httpx.ASGITransport(app=backend), clock=clock)


@pytest.fixture
def mock_backend_services(clock):
    """Build services against an httpx.MockTransport handler."""

    def _build(handler, **overrides):
        settings = {"api_base_url": "http://backend.test", "probe_timeout_seconds": 0.5, **overrides}
        return build_services(StorefrontConfig(**settings), transport=httpx.MockTransport(handler), clock=clock)

    return _build
