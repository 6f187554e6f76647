"""
Automation workflow triggering and tracking.

Starting a workflow calls the n8n webhook, then records a ``running``
process keyed by the returned execution id. When the webhook call fails
nothing is recorded. When the webhook succeeds but the record cannot be
saved, the workflow keeps running without a local row; the caller gets a
result carrying the error instead of an exception.
"""
import logging
import uuid
from typing import Any, Dict, Optional

import requests

from catalog_hub.core.exceptions import PersistenceError, RemoteApiError
from catalog_hub.models.process_models import ProcessStatus
from catalog_hub.repositories.process_repository import ProcessRepository
from catalog_hub.schemas.processes import N8NTriggerResponse, ProcessRead, ProcessTriggerResult

logger = logging.getLogger(__name__)


class AutomationWebhookClient:
    """POSTs JSON payloads to n8n webhooks with the ``x-api-key`` header."""

    def __init__(self, base_url: str, api_key: str, timeout: int = 30,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def start(self, workflow_path: str, payload: Dict[str, Any]) -> N8NTriggerResponse:
        """
        Start a workflow.

        Raises:
            RemoteApiError: Transport failure, non-2xx, or malformed response
        """
        url = f"{self.base_url}/{workflow_path.lstrip('/')}"
        try:
            response = self.session.post(
                url,
                json=payload,
                headers={"x-api-key": self.api_key, "Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise RemoteApiError(f"Automation webhook request failed: {e}") from e

        if not response.ok:
            raise RemoteApiError(
                f"Automation webhook error: {response.status_code} - {response.text}",
                response.status_code,
            )
        try:
            return N8NTriggerResponse(**response.json())
        except Exception as e:
            raise RemoteApiError(f"Invalid automation webhook response: {e}") from e


class ProcessTriggerTracker:
    def __init__(self, webhook_client: AutomationWebhookClient, process_repository: ProcessRepository):
        self.webhook = webhook_client
        self.processes = process_repository

    def trigger(
        self,
        workflow_path: str,
        input_payload: Dict[str, Any],
        process_name: Optional[str] = None,
        triggered_by: Optional[str] = None
    ) -> ProcessTriggerResult:
        """
        Start a workflow and record it as running.

        Args:
            workflow_path: Webhook path of the workflow (e.g. ``generate/product``)
            input_payload: Free-form workflow input
            process_name: Display name; defaults to the name the workflow reports
            triggered_by: Optional actor id

        Returns:
            ProcessTriggerResult with the record, or with ``error`` set when
            the record could not be saved

        Raises:
            RemoteApiError: The workflow could not be started
        """
        process_id = str(uuid.uuid4())
        started = self.webhook.start(workflow_path, {**input_payload, "process_id": process_id})
        logger.info(
            f"Workflow {started.workflow_id} started, execution {started.execution_id}"
        )

        try:
            record = self.processes.create(
                process_id=process_id,
                process_name=process_name or started.name,
                workflow_id=started.workflow_id,
                execution_id=started.execution_id,
                status=ProcessStatus.RUNNING,
                input_payload=input_payload,
                triggered_by=triggered_by,
            )
        except PersistenceError as e:
            logger.error(
                f"Execution {started.execution_id} is running but was not recorded: {e}"
            )
            return ProcessTriggerResult(
                data=None,
                error="Failed to record process",
                message=f"Workflow started (execution {started.execution_id}) but was not recorded",
            )

        return ProcessTriggerResult(
            data=ProcessRead.model_validate(record),
            error=None,
            message="Process started successfully",
        )
