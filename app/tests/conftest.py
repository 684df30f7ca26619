"""
Pytest Configuration and Fixtures
"""

import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient

from app.models.integration_connection import (
    IntegrationConnection,
    IntegrationConnectionStatus,
    IntegrationProviderKind,
)
from app.models.task import ProjectSummary


@pytest.fixture
def test_client():
    """Create test client"""
    from app.main import app
    return TestClient(app)


@pytest.fixture
def mock_project():
    """Mock task project"""
    return ProjectSummary(source_id="2203306141", name="Inbox triage")


@pytest.fixture
def validated_todoist():
    """Validated task service connection"""
    return IntegrationConnection(
        id="11111111-1111-1111-1111-111111111111",
        provider_kind=IntegrationProviderKind.TODOIST,
        status=IntegrationConnectionStatus.VALIDATED,
        last_sync_started_at=datetime(2024, 3, 1, 9, 15, 42, 123456, tzinfo=timezone.utc),
    )
