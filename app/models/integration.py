"""Integration API request models"""

from pydantic import BaseModel, Field, StrictInt
from typing import List, Optional, Union

from .integration_connection import IntegrationConnection


class InboxHealthRequest(BaseModel):
    """Inbox health request"""
    connections: List[IntegrationConnection] = Field(default_factory=list, description="Current connection snapshot")
    notifications_count: Optional[Union[StrictInt, str]] = Field(
        None,
        description="Result of the last refresh: a count, an error message, or null while loading"
    )
