from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from wholesale.adapters.memory_repo import InMemoryDashboardProvider
from wholesale.api.http import app, create_app

FIXED_NOW = datetime(2026, 3, 2, 9, 30, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def client():
    return TestClient(app)


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def pinned_client():
    """App whose dashboard timestamps are derived from FIXED_NOW."""
    pinned = create_app(dashboard=InMemoryDashboardProvider(clock=lambda: FIXED_NOW))
    return TestClient(pinned)
