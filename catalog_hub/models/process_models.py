"""SQLAlchemy model for automation (n8n) workflow executions."""
import uuid

from sqlalchemy import Column, DateTime, JSON, String, Text
from sqlalchemy.sql import func

from catalog_hub.db.base import Base


class ProcessStatus:
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"

    ALL = (PENDING, RUNNING, COMPLETED, FAILED, CANCELLED)
    TERMINAL = (COMPLETED, FAILED, CANCELLED)


class ProcessRecord(Base):
    __tablename__ = "n8n_processes"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    process_name = Column(String(255), nullable=False, default="")
    n8n_workflow_id = Column(String(100), nullable=False, index=True)
    n8n_execution_id = Column(String(100), nullable=False, unique=True, index=True)
    status = Column(String(20), nullable=False, default=ProcessStatus.PENDING, index=True)
    error_message = Column(Text, nullable=True)
    input_payload = Column(JSON, nullable=True)
    output_payload = Column(JSON, nullable=True)
    triggered_by = Column(String(36), nullable=True)
    started_at = Column(DateTime, nullable=True)
    finished_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<ProcessRecord(id={self.id}, execution={self.n8n_execution_id}, status={self.status})>"
