"""
Connection Health Service

Derives the health signals shown in the inbox footer from a snapshot of
integration connections:
- Per-connection status (severity + tooltip)
- Inbox-wide warning when nothing, or no task service, is connected
- Notifications badge for the latest refresh result

Everything here is a pure function of its input; connection snapshots are
refreshed by the external sync process and only read here.
"""

from datetime import datetime, tzinfo
from enum import Enum
from typing import List, Optional, Sequence, Union
from zoneinfo import ZoneInfo

from pydantic import BaseModel, Field

from app.core.config import settings
from app.core.logging import logger
from app.models.integration_connection import (
    IntegrationConnection,
    IntegrationConnectionStatus,
    IntegrationProviderKind,
)

NO_INTEGRATION_CONNECTED = "No integration connected"
NO_TASK_SERVICE_CONNECTED = "No task management integration connected"


class Severity(str, Enum):
    """How a health signal should be highlighted"""
    SUCCESS = "success"
    ERROR = "error"


class ConnectionStatusReport(BaseModel):
    """Health of a single connection"""
    provider_kind: IntegrationProviderKind
    severity: Severity
    tooltip: str


class NotificationsBadge(BaseModel):
    """Badge summarizing the latest notifications refresh"""
    loading: bool = False
    severity: Optional[Severity] = None
    label: Optional[str] = None
    tooltip: Optional[str] = None


class InboxStatus(BaseModel):
    """Everything the footer needs to render connection health"""
    warning: Optional[str] = None
    notification_services: List[ConnectionStatusReport] = []
    task_services: List[ConnectionStatusReport] = []
    notifications: NotificationsBadge = Field(default_factory=lambda: NotificationsBadge(loading=True))


def display_timezone() -> Optional[tzinfo]:
    """Configured display time zone, None meaning the host local zone"""
    if settings.DISPLAY_TIMEZONE:
        return ZoneInfo(settings.DISPLAY_TIMEZONE)
    return None


def format_sync_timestamp(started_at: datetime, tz: Optional[tzinfo] = None) -> str:
    """
    Render a sync timestamp as RFC 3339 in the display time zone.

    Seconds precision, with an explicit offset (`Z` when the offset is zero).

    Args:
        started_at: Timezone-aware timestamp
        tz: Target time zone, defaults to the configured display zone

    Returns:
        Formatted timestamp, e.g. "2024-03-01T10:15:00+01:00"
    """
    local = started_at.astimezone(tz if tz is not None else display_timezone())
    rendered = local.replace(microsecond=0).isoformat()
    if rendered.endswith("+00:00"):
        rendered = rendered[:-len("+00:00")] + "Z"
    return rendered


def aggregate_health(connections: Sequence[IntegrationConnection]) -> Optional[str]:
    """
    Inbox-wide connection warning.

    Checks run in a fixed order and the first match wins, so an empty
    snapshot always reports that no integration is connected.

    Returns:
        Warning tooltip, or None when a task service is connected
    """
    if not any(c.is_connected() for c in connections):
        warning = NO_INTEGRATION_CONNECTED
    elif not any(c.is_connected_task_service() for c in connections):
        warning = NO_TASK_SERVICE_CONNECTED
    else:
        return None

    logger.debug(
        f"[CONNECTION_HEALTH] {warning}",
        extra={"connection_count": len(connections)}
    )
    return warning


def connection_status(
    connection: IntegrationConnection,
    tz: Optional[tzinfo] = None
) -> ConnectionStatusReport:
    """
    Classify one connection.

    Ordered checks, first match wins:
    1. Validated without a sync failure -> success
    2. Failing -> connection failure, even if a sync failure is also recorded
    3. Anything else -> sync failure

    Args:
        connection: Connection snapshot
        tz: Time zone used to render the last sync time

    Returns:
        ConnectionStatusReport
    """
    provider = connection.provider_kind

    if (
        connection.status == IntegrationConnectionStatus.VALIDATED
        and connection.last_sync_failure_message is None
    ):
        if connection.last_sync_started_at is not None:
            synced_at = format_sync_timestamp(connection.last_sync_started_at, tz)
            tooltip = f"{provider} successfully synced at {synced_at}"
        else:
            tooltip = f"{provider} successfully synced"
        return ConnectionStatusReport(provider_kind=provider, severity=Severity.SUCCESS, tooltip=tooltip)

    if connection.status == IntegrationConnectionStatus.FAILING:
        if connection.failure_message is not None:
            tooltip = f"Connection failed: {connection.failure_message}"
        else:
            tooltip = "Connection failed"
        return ConnectionStatusReport(provider_kind=provider, severity=Severity.ERROR, tooltip=tooltip)

    if connection.last_sync_failure_message is not None:
        tooltip = f"Failed to sync: {connection.last_sync_failure_message}"
    else:
        tooltip = "Failed to sync"
    return ConnectionStatusReport(provider_kind=provider, severity=Severity.ERROR, tooltip=tooltip)


def notifications_badge(result: Union[int, str, None]) -> NotificationsBadge:
    """
    Badge for the result of the last notifications refresh.

    Args:
        result: None while loading, the loaded count, or an error message
    """
    if result is None:
        return NotificationsBadge(loading=True)

    # bool is an int subclass but never a count
    if isinstance(result, int) and not isinstance(result, bool):
        return NotificationsBadge(
            severity=Severity.SUCCESS,
            label=str(result),
            tooltip=f"{result} notifications loaded"
        )

    return NotificationsBadge(severity=Severity.ERROR, label="0", tooltip=str(result))


def inbox_status(
    connections: Sequence[IntegrationConnection],
    notifications_count: Union[int, str, None] = None,
    tz: Optional[tzinfo] = None
) -> InboxStatus:
    """
    Build the footer health summary.

    Notification services are listed before task services; a provider that is
    both appears in both lists, one that is neither is not listed.
    """
    logger.debug(
        "[CONNECTION_HEALTH] Evaluating connections",
        extra={"connection_count": len(connections)}
    )

    return InboxStatus(
        warning=aggregate_health(connections),
        notification_services=[
            connection_status(c, tz)
            for c in connections
            if c.provider_kind.is_notification_service()
        ],
        task_services=[
            connection_status(c, tz)
            for c in connections
            if c.provider_kind.is_task_service()
        ],
        notifications=notifications_badge(notifications_count),
    )
