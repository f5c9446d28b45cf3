from typing import Optional
from sqlalchemy import Column, Text
from sqlmodel import Field, SQLModel

class Playbook(SQLModel, table=True):
    __tablename__ = "playbooks"

    id: Optional[int] = Field(default=None, primary_key=True)
    organization_id: int = Field(foreign_key="organizations.id", index=True)
    name: str
    description: Optional[str] = Field(default=None)
    content: str = Field(sa_column=Column(Text, nullable=False))  # opaque playbook source
