"""Integration connection models"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IntegrationProviderKind(str, Enum):
    """External systems an inbox can be connected to"""
    GITHUB = "Github"
    LINEAR = "Linear"
    GOOGLE_MAIL = "GoogleMail"
    GOOGLE_CALENDAR = "GoogleCalendar"
    GOOGLE_DOCS = "GoogleDocs"
    NOTION = "Notion"
    SLACK = "Slack"
    TODOIST = "Todoist"
    TICKTICK = "TickTick"

    def is_notification_service(self) -> bool:
        return self in _NOTIFICATION_SERVICES

    def is_task_service(self) -> bool:
        return self in _TASK_SERVICES

    def __str__(self) -> str:
        return self.value


_NOTIFICATION_SERVICES = frozenset({
    IntegrationProviderKind.GITHUB,
    IntegrationProviderKind.LINEAR,
    IntegrationProviderKind.GOOGLE_MAIL,
    IntegrationProviderKind.GOOGLE_CALENDAR,
    IntegrationProviderKind.GOOGLE_DOCS,
    IntegrationProviderKind.NOTION,
    IntegrationProviderKind.SLACK,
})

_TASK_SERVICES = frozenset({
    IntegrationProviderKind.LINEAR,
    IntegrationProviderKind.TODOIST,
    IntegrationProviderKind.TICKTICK,
})


class IntegrationConnectionStatus(str, Enum):
    """Lifecycle status of a connection"""
    CREATED = "Created"
    VALIDATED = "Validated"
    FAILING = "Failing"


class IntegrationConnection(BaseModel):
    """
    Snapshot of one connection, as refreshed by the sync process.

    `failure_message` describes a connection-level failure and only matters
    while the status is Failing. `last_sync_failure_message` belongs to the
    latest sync attempt and may still be set on a Validated connection.
    """
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = Field(None, description="Connection identifier")
    provider_kind: IntegrationProviderKind
    status: IntegrationConnectionStatus = IntegrationConnectionStatus.CREATED
    last_sync_started_at: Optional[datetime] = None
    last_sync_failure_message: Optional[str] = None
    failure_message: Optional[str] = None

    @field_validator("last_sync_started_at")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        """Timestamps without an offset are stored as UTC"""
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def is_connected(self) -> bool:
        """Connected once the connection has been validated"""
        return self.status == IntegrationConnectionStatus.VALIDATED

    def is_connected_task_service(self) -> bool:
        return self.is_connected() and self.provider_kind.is_task_service()
