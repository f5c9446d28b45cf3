from fastapi import APIRouter, Depends, Response, status
from typing import List, Optional
from app.dependencies import get_playbook_service, get_runner_service
from app.models import Job, Playbook
from app.schemas import PlaybookCreate, PlaybookUpdate, PlaybookRead, RunRequest, JobRead
from app.services import PlaybookService, RunnerService

router = APIRouter(prefix="/playbooks", tags=["playbooks"])

@router.get("", response_model=List[PlaybookRead])
def list_playbooks(service: PlaybookService = Depends(get_playbook_service)) -> List[Playbook]:
    return service.list_all()

@router.get("/{playbook_id}", response_model=PlaybookRead)
def get_playbook(playbook_id: int, service: PlaybookService = Depends(get_playbook_service)) -> Playbook:
    return service.get(playbook_id)

@router.post("", response_model=PlaybookRead, status_code=status.HTTP_201_CREATED)
def create_playbook(
    payload: PlaybookCreate,
    service: PlaybookService = Depends(get_playbook_service)
) -> Playbook:
    """Creates a playbook.

    Args:
        payload: Body with required ``organization_id``, ``name`` and
            ``content``, optional ``description``.
        service: Injected PlaybookService.

    Returns:
        The created playbook with its generated id.
    """
    return service.create(payload)

@router.put("/{playbook_id}", response_model=PlaybookRead)
def update_playbook(
    playbook_id: int,
    payload: Optional[PlaybookUpdate] = None,
    service: PlaybookService = Depends(get_playbook_service)
) -> Playbook:
    return service.update(playbook_id, payload)

@router.delete("/{playbook_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_playbook(playbook_id: int, service: PlaybookService = Depends(get_playbook_service)) -> Response:
    service.delete(playbook_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.post("/{playbook_id}/run", response_model=JobRead, status_code=status.HTTP_201_CREATED)
def run_playbook(
    playbook_id: int,
    payload: Optional[RunRequest] = None,
    service: RunnerService = Depends(get_runner_service)
) -> Job:
    """Simulates a playbook run and records the resulting job.

    Why: There is no execution engine behind this endpoint. The job is
    written immediately with a fixed successful result so clients can
    exercise the job-tracking flow end to end.

    Args:
        playbook_id: Playbook to run.
        payload: Optional ``inventory_id``, ``organization_id`` override and
            ``extra_vars`` object. A missing body behaves like ``{}``.
        service: Injected RunnerService.

    Returns:
        The recorded job.
    """
    return service.run_playbook(playbook_id, payload)
