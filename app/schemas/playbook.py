from typing import Optional
from pydantic import BaseModel

class PlaybookCreate(BaseModel):
    organization_id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None

class PlaybookUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None

class PlaybookRead(BaseModel):
    id: int
    organization_id: int
    name: str
    description: Optional[str] = None
    content: str

    class Config:
        from_attributes = True
