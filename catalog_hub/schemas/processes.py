"""Schemas for automation workflow executions."""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class N8NTriggerResponse(BaseModel):
    """Response of the automation engine webhook."""
    execution_id: str = Field(..., min_length=1)
    workflow_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)

    class Config:
        extra = "ignore"


class ProcessRead(BaseModel):
    id: str
    process_name: str
    n8n_workflow_id: str
    n8n_execution_id: str
    status: str
    error_message: Optional[str] = None
    input_payload: Optional[Dict[str, Any]] = None
    output_payload: Optional[Dict[str, Any]] = None
    triggered_by: Optional[str] = None
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ProcessTriggerResult(BaseModel):
    """``{data, error, message}`` envelope returned by trigger operations."""
    data: Optional[ProcessRead] = None
    error: Optional[str] = None
    message: str


class GenerateProductRequest(BaseModel):
    chatInput: Optional[str] = None
    triggered_by: Optional[str] = None


class ProcessCompletion(BaseModel):
    status: str
    output_payload: Optional[Dict[str, Any]] = None
    error_message: Optional[str] = None


class ProcessListResponse(BaseModel):
    data: List[ProcessRead]
    total: int
    error: Optional[str] = None
