"""
Tests for the integration settings API routes
"""

import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def tasks_config_payload():
    return {
        "sync_enabled": True,
        "sync_type": {
            "type": "AsTasks",
            "content": {
                "target_project": {"source_id": "2203306141", "name": "Inbox triage"},
                "default_due_at": "Today",
                "default_priority": 2,
            },
        },
    }


class TestInboxHealth:
    """Tests for POST /api/v1/integrations/health."""

    def test_empty_snapshot(self, client):
        """Test the warning with no connection."""
        response = client.post("/api/v1/integrations/health", json={"connections": []})

        assert response.status_code == 200
        data = response.json()
        assert data["warning"] == "No integration connected"
        assert data["notifications"]["loading"] is True

    def test_footer_summary(self, client):
        """Test grouping, statuses and the notifications badge."""
        response = client.post("/api/v1/integrations/health", json={
            "connections": [
                {"provider_kind": "Github", "status": "Validated"},
                {
                    "provider_kind": "Todoist",
                    "status": "Failing",
                    "failure_message": "token revoked",
                    "last_sync_failure_message": "rate limited",
                },
            ],
            "notifications_count": 7,
        })

        assert response.status_code == 200
        data = response.json()
        assert data["warning"] == "No task management integration connected"
        assert data["notification_services"] == [
            {"provider_kind": "Github", "severity": "success", "tooltip": "Github successfully synced"},
        ]
        assert data["task_services"] == [
            {"provider_kind": "Todoist", "severity": "error", "tooltip": "Connection failed: token revoked"},
        ]
        assert data["notifications"]["tooltip"] == "7 notifications loaded"

    def test_refresh_error(self, client):
        """Test a refresh error message in the badge."""
        response = client.post("/api/v1/integrations/health", json={
            "connections": [{"provider_kind": "Todoist", "status": "Validated"}],
            "notifications_count": "Failed to fetch notifications",
        })

        data = response.json()
        assert data["warning"] is None
        assert data["notifications"]["severity"] == "error"
        assert data["notifications"]["label"] == "0"

    def test_boolean_notifications_count_rejected(self, client):
        """Test a boolean is not read as a notifications count."""
        response = client.post("/api/v1/integrations/health", json={
            "connections": [],
            "notifications_count": True,
        })

        assert response.status_code == 422

    def test_invalid_status(self, client):
        """Test malformed connections are rejected."""
        response = client.post("/api/v1/integrations/health", json={
            "connections": [{"provider_kind": "Todoist", "status": "Unknown"}],
        })

        assert response.status_code == 422


class TestSlackConfigReconcile:
    """Tests for POST /api/v1/integrations/slack/config/reconcile."""

    def test_set_priority(self, client, tasks_config_payload):
        """Test a priority edit keeps the other task defaults."""
        response = client.post("/api/v1/integrations/slack/config/reconcile", json={
            "config": tasks_config_payload,
            "intent": {"intent": "SetDefaultPriority", "priority": 1},
        })

        assert response.status_code == 200
        data = response.json()
        content = data["config"]["sync_type"]["content"]
        assert content["default_priority"] == 1
        assert content["default_due_at"] == "Today"
        assert content["target_project"]["name"] == "Inbox triage"
        assert data["form"]["default_project_name"] == "Inbox triage"

    def test_clear_priority(self, client, tasks_config_payload):
        """Test a null priority becomes the default."""
        response = client.post("/api/v1/integrations/slack/config/reconcile", json={
            "config": tasks_config_payload,
            "intent": {"intent": "SetDefaultPriority", "priority": None},
        })

        assert response.json()["config"]["sync_type"]["content"]["default_priority"] == 4

    def test_select_notifications(self, client, tasks_config_payload):
        """Test switching to notifications mode."""
        response = client.post("/api/v1/integrations/slack/config/reconcile", json={
            "config": tasks_config_payload,
            "intent": {"intent": "SelectNotificationsMode"},
        })

        data = response.json()
        assert data["config"] == {"sync_enabled": True, "sync_type": {"type": "AsNotifications"}}
        assert data["form"]["task_config_enabled"] is False

    def test_disable_sync(self, client, tasks_config_payload):
        """Test the sync toggle."""
        response = client.post("/api/v1/integrations/slack/config/reconcile", json={
            "config": tasks_config_payload,
            "intent": {"intent": "SetEnabled", "enabled": False},
        })

        data = response.json()
        assert data["config"]["sync_enabled"] is False
        assert data["config"]["sync_type"] == tasks_config_payload["sync_type"]
        assert data["form"]["sync_type_controls_enabled"] is False

    def test_unknown_intent(self, client, tasks_config_payload):
        """Test unknown intents are rejected at validation."""
        response = client.post("/api/v1/integrations/slack/config/reconcile", json={
            "config": tasks_config_payload,
            "intent": {"intent": "RenameChannel"},
        })

        assert response.status_code == 422


class TestSlackFormState:
    """Tests for POST /api/v1/integrations/slack/config/form."""

    def test_notifications_config(self, client):
        """Test form state for a notifications config."""
        response = client.post("/api/v1/integrations/slack/config/form", json={
            "sync_enabled": True,
            "sync_type": {"type": "AsNotifications"},
        })

        assert response.status_code == 200
        assert response.json() == {
            "sync_enabled": True,
            "sync_type_controls_enabled": True,
            "task_config_enabled": False,
            "default_project_name": "",
            "default_due_at": None,
            "default_priority": 4,
        }
