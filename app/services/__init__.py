"""Services module - Connection health and provider settings logic"""

from .connection_health_service import (
    Severity,
    ConnectionStatusReport,
    NotificationsBadge,
    InboxStatus,
    aggregate_health,
    connection_status,
    format_sync_timestamp,
    inbox_status,
    notifications_badge,
)
from .sync_config_reconciler import (
    SlackConfigFormState,
    SlackSettingsSession,
    UnsupportedIntentError,
    reconcile,
    select_notifications_mode,
    select_tasks_mode,
    set_default_due_at,
    set_default_priority,
    set_enabled,
    set_target_project,
    slack_form_state,
)

__all__ = [
    # Connection health
    "Severity",
    "ConnectionStatusReport",
    "NotificationsBadge",
    "InboxStatus",
    "aggregate_health",
    "connection_status",
    "format_sync_timestamp",
    "inbox_status",
    "notifications_badge",
    # Slack config
    "SlackConfigFormState",
    "SlackSettingsSession",
    "UnsupportedIntentError",
    "reconcile",
    "select_notifications_mode",
    "select_tasks_mode",
    "set_default_due_at",
    "set_default_priority",
    "set_enabled",
    "set_target_project",
    "slack_form_state",
]
