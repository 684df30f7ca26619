"""
Integration Settings API Routes

Stateless endpoints over the connection health and Slack config logic; the
host UI owns the state and sends it with every call.
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from app.core.logging import log_error
from app.models.integration import InboxHealthRequest
from app.models.integration_connection import IntegrationConnection
from app.models.slack_config import SlackConfig
from app.services.connection_health_service import (
    ConnectionStatusReport,
    InboxStatus,
    connection_status,
    inbox_status,
)
from app.services.sync_config_reconciler import (
    SlackConfigFormState,
    SlackConfigIntent,
    UnsupportedIntentError,
    reconcile,
    slack_form_state,
)

router = APIRouter(prefix="/integrations", tags=["Integrations"])


class SlackConfigReconcileRequest(BaseModel):
    """Slack config reconcile request"""
    config: SlackConfig
    intent: SlackConfigIntent


class SlackConfigReconcileResponse(BaseModel):
    """Slack config reconcile response"""
    config: SlackConfig
    form: SlackConfigFormState


@router.post("/health", response_model=InboxStatus)
async def get_inbox_health(request: InboxHealthRequest):
    """Connection health summary for the inbox footer"""
    try:
        return inbox_status(request.connections, request.notifications_count)
    except Exception as e:
        log_error(e, context="Inbox health")
        raise HTTPException(status_code=500, detail=f"Failed to evaluate connections: {str(e)}")


@router.post("/connections/status", response_model=ConnectionStatusReport)
async def get_connection_status(connection: IntegrationConnection):
    """Health of a single connection"""
    try:
        return connection_status(connection)
    except Exception as e:
        log_error(e, context="Connection status")
        raise HTTPException(status_code=500, detail=f"Failed to evaluate connection: {str(e)}")


@router.post("/slack/config/reconcile", response_model=SlackConfigReconcileResponse)
async def reconcile_slack_config(request: SlackConfigReconcileRequest):
    """
    Apply one settings edit to a Slack config.

    Returns the next config and the form state derived from it.
    """
    try:
        config = reconcile(request.config, request.intent)
        return SlackConfigReconcileResponse(config=config, form=slack_form_state(config))
    except UnsupportedIntentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        log_error(e, context="Slack config reconcile")
        raise HTTPException(status_code=500, detail=f"Failed to update Slack config: {str(e)}")


@router.post("/slack/config/form", response_model=SlackConfigFormState)
async def get_slack_form_state(config: SlackConfig):
    """Form state for a Slack config"""
    return slack_form_state(config)
