from sqlmodel import Session
from app.core.database import engine
from typing import Generator
from fastapi import Depends
from app.services import OrganizationService, InventoryService, PlaybookService, HistoryService, RunnerService

def get_db() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session

def get_organization_service(db: Session = Depends(get_db)) -> OrganizationService:
    return OrganizationService(db)

def get_inventory_service(db: Session = Depends(get_db)) -> InventoryService:
    return InventoryService(db)

def get_playbook_service(db: Session = Depends(get_db)) -> PlaybookService:
    return PlaybookService(db)

def get_runner_service(db: Session = Depends(get_db)) -> RunnerService:
    return RunnerService(db)

def get_history_service(db: Session = Depends(get_db)) -> HistoryService:
    return HistoryService(db)
