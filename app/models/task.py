"""Task vocabulary shared by task-service integrations"""

from enum import Enum, IntEnum
from pydantic import BaseModel, ConfigDict, Field


class TaskPriority(IntEnum):
    """Task priority, P1 being the most urgent"""
    P1 = 1
    P2 = 2
    P3 = 3
    P4 = 4

    @classmethod
    def default(cls) -> "TaskPriority":
        """Lowest urgency preset, used whenever no priority is given"""
        return cls.P4

    def __str__(self) -> str:
        return f"Priority {self.value}"


class PresetDueDate(str, Enum):
    """Relative due dates offered when creating tasks"""
    TODAY = "Today"
    TOMORROW = "Tomorrow"
    THIS_WEEKEND = "ThisWeekend"
    NEXT_WEEK = "NextWeek"

    @property
    def label(self) -> str:
        return _DUE_DATE_LABELS[self]

    def __str__(self) -> str:
        return self.label


_DUE_DATE_LABELS = {
    PresetDueDate.TODAY: "Today",
    PresetDueDate.TOMORROW: "Tomorrow",
    PresetDueDate.THIS_WEEKEND: "This weekend",
    PresetDueDate.NEXT_WEEK: "Next week",
}


class ProjectSummary(BaseModel):
    """Project reference returned by the project search collaborator"""
    model_config = ConfigDict(frozen=True)

    source_id: str = Field(..., description="Project identifier in the task service")
    name: str = Field(..., description="Display name")
