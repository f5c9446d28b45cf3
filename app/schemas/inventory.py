from typing import Any, Optional
from pydantic import BaseModel
from app.schemas.common import Document

class InventoryCreate(BaseModel):
    organization_id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    variables: Any = None  # anything but a JSON object falls back to {}

class InventoryUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    variables: Any = None  # anything but a JSON object keeps the stored value

class InventoryRead(BaseModel):
    id: int
    organization_id: int
    name: str
    description: Optional[str] = None
    variables: Document

    class Config:
        from_attributes = True
