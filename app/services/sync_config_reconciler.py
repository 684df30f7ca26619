"""
Slack Sync Config Reconciler

Computes the next Slack configuration for a single user edit in the settings
page. Every transition returns a new SlackConfig that copies all fields the
edit does not target, so a partial update never drops unrelated settings.

Provides:
- One pure function per user intent
- Intent models and `reconcile` dispatch for callers holding an intent value
- Form state derived from a config (what the settings controls display)
- SlackSettingsSession, the host-side holder that commits each result and
  hands it to the config-changed callback
"""

from typing import Annotated, Callable, Dict, Literal, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field

from app.core.logging import logger, log_service_call
from app.models.slack_config import (
    AsNotifications,
    AsTasks,
    IntegrationConnectionConfig,
    SlackConfig,
    SlackSyncTaskConfig,
)
from app.models.task import PresetDueDate, ProjectSummary, TaskPriority


class UnsupportedIntentError(ValueError):
    """Raised when an intent has no matching transition"""


# ============================================================================
# Intents
# ============================================================================

class SetEnabled(BaseModel):
    model_config = ConfigDict(frozen=True)

    intent: Literal["SetEnabled"] = "SetEnabled"
    enabled: bool


class SelectNotificationsMode(BaseModel):
    model_config = ConfigDict(frozen=True)

    intent: Literal["SelectNotificationsMode"] = "SelectNotificationsMode"


class SelectTasksMode(BaseModel):
    model_config = ConfigDict(frozen=True)

    intent: Literal["SelectTasksMode"] = "SelectTasksMode"


class SetTargetProject(BaseModel):
    model_config = ConfigDict(frozen=True)

    intent: Literal["SetTargetProject"] = "SetTargetProject"
    project: ProjectSummary


class SetDefaultDueAt(BaseModel):
    model_config = ConfigDict(frozen=True)

    intent: Literal["SetDefaultDueAt"] = "SetDefaultDueAt"
    due_at: Optional[PresetDueDate] = None


class SetDefaultPriority(BaseModel):
    model_config = ConfigDict(frozen=True)

    intent: Literal["SetDefaultPriority"] = "SetDefaultPriority"
    priority: Optional[TaskPriority] = None


SlackConfigIntent = Annotated[
    Union[
        SetEnabled,
        SelectNotificationsMode,
        SelectTasksMode,
        SetTargetProject,
        SetDefaultDueAt,
        SetDefaultPriority,
    ],
    Field(discriminator="intent"),
]


# ============================================================================
# Transitions
# ============================================================================

def current_task_config(config: SlackConfig) -> SlackSyncTaskConfig:
    """Task payload of the config, or a default one when not in tasks mode"""
    task_config = config.task_config
    return task_config if task_config is not None else SlackSyncTaskConfig()


def _with_task_config(config: SlackConfig, **overrides) -> SlackConfig:
    task_config = current_task_config(config).model_copy(update=overrides)
    return config.model_copy(update={"sync_type": AsTasks(content=task_config)})


def set_enabled(config: SlackConfig, enabled: bool) -> SlackConfig:
    return config.model_copy(update={"sync_enabled": enabled})


def select_notifications_mode(config: SlackConfig) -> SlackConfig:
    """Switch to notifications; any task defaults are dropped"""
    return config.model_copy(update={"sync_type": AsNotifications()})


def select_tasks_mode(config: SlackConfig) -> SlackConfig:
    """Switch to tasks, keeping the task defaults if already in tasks mode"""
    return config.model_copy(update={"sync_type": AsTasks(content=current_task_config(config))})


def set_target_project(config: SlackConfig, project: ProjectSummary) -> SlackConfig:
    return _with_task_config(config, target_project=project)


def set_default_due_at(config: SlackConfig, due_at: Optional[PresetDueDate]) -> SlackConfig:
    return _with_task_config(config, default_due_at=due_at)


def set_default_priority(config: SlackConfig, priority: Optional[TaskPriority]) -> SlackConfig:
    """Set the priority; a missing one falls back to the lowest urgency preset"""
    return _with_task_config(
        config,
        default_priority=priority if priority is not None else TaskPriority.default()
    )


_TRANSITIONS: Dict[Type[BaseModel], Callable[[SlackConfig, BaseModel], SlackConfig]] = {
    SetEnabled: lambda config, intent: set_enabled(config, intent.enabled),
    SelectNotificationsMode: lambda config, intent: select_notifications_mode(config),
    SelectTasksMode: lambda config, intent: select_tasks_mode(config),
    SetTargetProject: lambda config, intent: set_target_project(config, intent.project),
    SetDefaultDueAt: lambda config, intent: set_default_due_at(config, intent.due_at),
    SetDefaultPriority: lambda config, intent: set_default_priority(config, intent.priority),
}


def reconcile(config: SlackConfig, intent: BaseModel) -> SlackConfig:
    """
    Apply a single intent to a config.

    Args:
        config: Current configuration
        intent: One of the SlackConfigIntent models

    Returns:
        The next configuration

    Raises:
        UnsupportedIntentError: If the intent type is unknown
    """
    transition = _TRANSITIONS.get(type(intent))
    if transition is None:
        raise UnsupportedIntentError(f"Unsupported Slack config intent: {type(intent).__name__}")

    log_service_call("SLACK_CONFIG", "reconcile", intent=type(intent).__name__)
    return transition(config, intent)


# ============================================================================
# Form state
# ============================================================================

class SlackConfigFormState(BaseModel):
    """Values displayed by the Slack settings controls"""
    sync_enabled: bool
    sync_type_controls_enabled: bool
    task_config_enabled: bool
    default_project_name: str = ""
    default_due_at: Optional[PresetDueDate] = None
    default_priority: TaskPriority = TaskPriority.P4


def slack_form_state(config: SlackConfig) -> SlackConfigFormState:
    """Derive the form state; task fields show defaults outside tasks mode"""
    task_config = config.task_config
    if task_config is None:
        return SlackConfigFormState(
            sync_enabled=config.sync_enabled,
            sync_type_controls_enabled=config.sync_enabled,
            task_config_enabled=False,
        )

    return SlackConfigFormState(
        sync_enabled=config.sync_enabled,
        sync_type_controls_enabled=config.sync_enabled,
        task_config_enabled=True,
        default_project_name=task_config.target_project.name if task_config.target_project else "",
        default_due_at=task_config.default_due_at,
        default_priority=task_config.default_priority,
    )


# ============================================================================
# Settings session
# ============================================================================

class SlackSettingsSession:
    """
    Holds the authoritative Slack config for one settings page session.

    Each applied intent is reconciled against the current value, committed as
    the new current value, then passed to `on_config_change`.
    """

    def __init__(
        self,
        config: Optional[SlackConfig] = None,
        on_config_change: Optional[Callable[[IntegrationConnectionConfig], None]] = None
    ):
        """
        Initialize a settings session.

        Args:
            config: Persisted config to start from, defaults to SlackConfig.default()
            on_config_change: Receives every new config, typically the persistence layer
        """
        self.config = config if config is not None else SlackConfig.default()
        self.on_config_change = on_config_change

    @property
    def form_state(self) -> SlackConfigFormState:
        return slack_form_state(self.config)

    def apply(self, intent: BaseModel) -> SlackConfig:
        self.config = reconcile(self.config, intent)

        logger.info(
            "[SLACK_CONFIG] Config updated",
            extra={
                "intent": type(intent).__name__,
                "sync_enabled": self.config.sync_enabled,
                "sync_type": self.config.sync_type.type,
            }
        )

        if self.on_config_change is not None:
            self.on_config_change(IntegrationConnectionConfig(content=self.config))

        return self.config
