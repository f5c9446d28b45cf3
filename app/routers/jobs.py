from fastapi import APIRouter, Depends
from typing import List
from app.dependencies import get_history_service
from app.models import Job
from app.schemas import JobRead
from app.services import HistoryService

router = APIRouter(prefix="/jobs", tags=["jobs"])

@router.get("", response_model=List[JobRead])
def list_jobs(service: HistoryService = Depends(get_history_service)) -> List[Job]:
    """Lists recorded jobs, newest first."""
    return service.get_recent_runs()

@router.get("/{job_id}", response_model=JobRead)
def get_job(job_id: int, service: HistoryService = Depends(get_history_service)) -> Job:
    return service.get_run(job_id)
