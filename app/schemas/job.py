from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel
from app.schemas.common import Document

class RunRequest(BaseModel):
    inventory_id: Optional[int] = None
    organization_id: Optional[int] = None
    extra_vars: Any = None

class JobResult(BaseModel):
    summary: str
    changed: int = 0
    failed: int = 0
    ok: int = 0

class JobRead(BaseModel):
    id: int
    organization_id: int
    playbook_id: int
    inventory_id: Optional[int] = None
    status: str
    started_at: datetime
    finished_at: Optional[datetime] = None
    extra_vars: Document
    result: Document

    class Config:
        from_attributes = True
