from sqlmodel import SQLModel, Field
from sqlalchemy import Column, DateTime, JSON
from datetime import datetime, timezone
from typing import Any, Optional
from enum import Enum

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

class JobStatus(str, Enum):
    SUCCESSFUL = "successful"

class Job(SQLModel, table=True):
    __tablename__ = "jobs"

    id: Optional[int] = Field(default=None, primary_key=True)
    organization_id: int = Field(foreign_key="organizations.id", index=True)
    playbook_id: int = Field(foreign_key="playbooks.id", index=True)
    inventory_id: Optional[int] = Field(default=None, foreign_key="inventories.id")
    status: str = Field(default=JobStatus.SUCCESSFUL.value)  # only value the simulator produces
    started_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime(timezone=True), nullable=False))
    finished_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime(timezone=True)))
    extra_vars: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    result: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
