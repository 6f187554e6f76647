"""Automation process endpoints."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from catalog_hub.api.deps import get_automation_client, get_process_repository
from catalog_hub.core.config import settings
from catalog_hub.repositories import ProcessRepository
from catalog_hub.schemas.processes import (
    GenerateProductRequest,
    ProcessCompletion,
    ProcessListResponse,
    ProcessRead,
    ProcessTriggerResult,
)
from catalog_hub.services.process_trigger import ProcessTriggerTracker

_logger = logging.getLogger(__name__)

router = APIRouter(prefix="/processes", tags=["processes"])


@router.post("/generate-product", response_model=ProcessTriggerResult)
def generate_product(
    body: GenerateProductRequest,
    automation_client=Depends(get_automation_client),
    repository: ProcessRepository = Depends(get_process_repository)
):
    """Start the product generation workflow for a chat prompt."""
    tracker = ProcessTriggerTracker(automation_client, repository)
    return tracker.trigger(
        settings.n8n_generate_product_path,
        {"chatInput": body.chatInput},
        triggered_by=body.triggered_by,
    )


@router.get("", response_model=ProcessListResponse)
def list_processes(
    page: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    filter: Optional[str] = Query(None, description="Matches name, workflow or execution id"),
    status: Optional[str] = None,
    process_name: Optional[str] = None,
    repository: ProcessRepository = Depends(get_process_repository)
):
    records, total = repository.fetch_processes(
        page_index=page,
        page_size=limit,
        filter_text=filter,
        status=status,
        process_name=process_name,
    )
    return ProcessListResponse(
        data=[ProcessRead.model_validate(record) for record in records],
        total=total,
    )


@router.post("/{execution_id}/complete", response_model=ProcessRead)
def complete_process(
    execution_id: str,
    body: ProcessCompletion,
    repository: ProcessRepository = Depends(get_process_repository)
):
    """Callback for the workflow to report its outcome."""
    _logger.info(f"Process {execution_id} reported {body.status}")
    return repository.complete(
        execution_id,
        status=body.status,
        output_payload=body.output_payload,
        error_message=body.error_message,
    )
