from typing import Any, Optional
from sqlalchemy import Column, JSON
from sqlmodel import Field, SQLModel

class Inventory(SQLModel, table=True):
    __tablename__ = "inventories"

    id: Optional[int] = Field(default=None, primary_key=True)
    organization_id: int = Field(foreign_key="organizations.id", index=True)
    name: str
    description: Optional[str] = Field(default=None)
    variables: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
