"""Models module - Pydantic data models"""

from .task import TaskPriority, PresetDueDate, ProjectSummary
from .integration_connection import (
    IntegrationProviderKind,
    IntegrationConnectionStatus,
    IntegrationConnection,
)
from .slack_config import (
    SlackSyncTaskConfig,
    AsNotifications,
    AsTasks,
    SlackSyncType,
    SlackConfig,
    IntegrationConnectionConfig,
)
from .integration import InboxHealthRequest

__all__ = [
    # Task models
    "TaskPriority",
    "PresetDueDate",
    "ProjectSummary",
    # Connection models
    "IntegrationProviderKind",
    "IntegrationConnectionStatus",
    "IntegrationConnection",
    # Slack config models
    "SlackSyncTaskConfig",
    "AsNotifications",
    "AsTasks",
    "SlackSyncType",
    "SlackConfig",
    "IntegrationConnectionConfig",
    # Integration API models
    "InboxHealthRequest",
]
