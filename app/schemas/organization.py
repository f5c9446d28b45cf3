from typing import Optional
from pydantic import BaseModel

class OrganizationCreate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None

class OrganizationUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None

class OrganizationRead(BaseModel):
    id: int
    name: str
    description: Optional[str] = None

    class Config:
        from_attributes = True
