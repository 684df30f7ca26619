"""
Slack sync configuration models

Slack "saved for later" items are synchronized either as notifications or as
tasks. The two modes form a closed tagged union; only the tasks mode carries a
payload (the defaults applied to created tasks).
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .task import PresetDueDate, ProjectSummary, TaskPriority


class SlackSyncTaskConfig(BaseModel):
    """Defaults applied to tasks created from Slack items"""
    model_config = ConfigDict(frozen=True)

    target_project: Optional[ProjectSummary] = None
    default_due_at: Optional[PresetDueDate] = None
    default_priority: TaskPriority = TaskPriority.P4

    @field_validator("default_priority", mode="before")
    @classmethod
    def default_when_missing(cls, value):
        # The priority is never left unset
        return TaskPriority.default() if value is None else value


class AsNotifications(BaseModel):
    """Sync Slack items as notifications"""
    model_config = ConfigDict(frozen=True)

    type: Literal["AsNotifications"] = "AsNotifications"


class AsTasks(BaseModel):
    """Sync Slack items as tasks"""
    model_config = ConfigDict(frozen=True)

    type: Literal["AsTasks"] = "AsTasks"
    content: SlackSyncTaskConfig = Field(default_factory=SlackSyncTaskConfig)


SlackSyncType = Annotated[Union[AsNotifications, AsTasks], Field(discriminator="type")]


class SlackConfig(BaseModel):
    """Slack provider configuration, as edited in the settings page"""
    model_config = ConfigDict(frozen=True)

    sync_enabled: bool = True
    sync_type: SlackSyncType = Field(default_factory=AsNotifications)

    @classmethod
    def default(cls) -> "SlackConfig":
        return cls(sync_enabled=True, sync_type=AsNotifications())

    @property
    def task_config(self) -> Optional[SlackSyncTaskConfig]:
        """Task payload when syncing as tasks, None otherwise"""
        if isinstance(self.sync_type, AsTasks):
            return self.sync_type.content
        return None

    @property
    def task_config_enabled(self) -> bool:
        return isinstance(self.sync_type, AsTasks)


class IntegrationConnectionConfig(BaseModel):
    """Provider configuration envelope handed to the config-changed callback"""
    model_config = ConfigDict(frozen=True)

    type: Literal["Slack"] = "Slack"
    content: SlackConfig
