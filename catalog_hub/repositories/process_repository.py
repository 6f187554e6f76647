"""
Process repository.

Handles automation workflow execution records.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError

from catalog_hub.core.exceptions import NotFoundError, PersistenceError, ValidationError
from catalog_hub.models.process_models import ProcessRecord, ProcessStatus
from catalog_hub.repositories.base_repository import BaseCatalogRepository

logger = logging.getLogger(__name__)


class ProcessRepository(BaseCatalogRepository[ProcessRecord]):
    """Repository for n8n process records."""

    model_class = ProcessRecord
    conflict_key = "n8n_execution_id"

    def _order_by(self):
        return ProcessRecord.updated_at.desc()

    def create(
        self,
        process_id: str,
        process_name: str,
        workflow_id: str,
        execution_id: str,
        status: str = ProcessStatus.PENDING,
        input_payload: Optional[Dict[str, Any]] = None,
        triggered_by: Optional[str] = None
    ) -> ProcessRecord:
        """
        Create a process record at trigger time.

        Raises:
            PersistenceError: The insert failed
        """
        record = ProcessRecord(
            id=process_id,
            process_name=process_name,
            n8n_workflow_id=workflow_id,
            n8n_execution_id=execution_id,
            status=status,
            input_payload=input_payload,
            triggered_by=triggered_by,
            started_at=datetime.now(timezone.utc),
        )
        try:
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"N8N process insert error: {e}")
            raise PersistenceError(f"Failed to create n8n process: {e}") from e
        return record

    def fetch_processes(
        self,
        page_index: int = 0,
        page_size: int = 20,
        filter_text: Optional[str] = None,
        status: Optional[str] = None,
        process_name: Optional[str] = None
    ) -> Tuple[List[ProcessRecord], int]:
        """
        Get a page of process records with the total matching count.

        Args:
            page_index: Zero-based page index
            page_size: Rows per page
            filter_text: Case-insensitive match on name, workflow or execution id
            status: Exact status filter
            process_name: Exact process name filter

        Returns:
            (records, total)
        """
        query = self.db.query(ProcessRecord)
        if filter_text:
            pattern = f"%{filter_text}%"
            query = query.filter(or_(
                ProcessRecord.process_name.ilike(pattern),
                ProcessRecord.n8n_workflow_id.ilike(pattern),
                ProcessRecord.n8n_execution_id.ilike(pattern),
            ))
        if status:
            query = query.filter(ProcessRecord.status == status)
        if process_name:
            query = query.filter(ProcessRecord.process_name == process_name)

        total = query.count()
        records = (
            query.order_by(self._order_by())
            .offset(page_index * page_size)
            .limit(page_size)
            .all()
        )
        return records, total

    def find_by_execution_id(self, execution_id: str) -> Optional[ProcessRecord]:
        return self.db.query(ProcessRecord).filter(
            ProcessRecord.n8n_execution_id == execution_id
        ).first()

    def complete(
        self,
        execution_id: str,
        status: str,
        output_payload: Optional[Dict[str, Any]] = None,
        error_message: Optional[str] = None
    ) -> ProcessRecord:
        """Record the outcome reported by the workflow callback."""
        if status not in ProcessStatus.TERMINAL:
            raise ValidationError(
                f"Status must be one of {', '.join(ProcessStatus.TERMINAL)}"
            )
        record = self.find_by_execution_id(execution_id)
        if record is None:
            raise NotFoundError(f"Process not found. Execution ID: {execution_id}")
        return self.update(
            record.id,
            status=status,
            output_payload=output_payload,
            error_message=error_message,
            finished_at=datetime.now(timezone.utc),
        )
