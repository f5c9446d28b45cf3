from typing import Optional
from datetime import datetime, timezone
from sqlmodel import Session
import logging
from app.models import Job, JobStatus
from app.schemas import RunRequest, JobResult
from app.schemas.common import as_document
from app.services.playbook import PlaybookService

logger = logging.getLogger(__name__)

SIMULATED_RESULT = JobResult(
    summary="Simulated run completed successfully",
    changed=1,
    failed=0,
    ok=3,
)

class RunnerService:
    """Simulates playbook executions and records them as jobs.

    Nothing is executed: a run looks up the playbook, stamps a fixed
    successful result and writes one Job row. The run is synchronous, so
    start and finish share the same timestamp.

    Attributes:
        db (Session): SQLModel database session for persistence.
    """
    def __init__(self, db: Session):
        self.db = db
        self.playbooks = PlaybookService(db)

    def run_playbook(self, playbook_id: int, request: Optional[RunRequest] = None) -> Job:
        """Records a simulated run of a playbook.

        Args:
            playbook_id: The playbook to run.
            request: Optional overrides. ``organization_id`` defaults to the
                playbook's organization, ``extra_vars`` to an empty object
                when missing or not a JSON object.

        Returns:
            The created Job, including its generated id.

        Raises:
            NotFoundError: The playbook does not exist. No job is written.
        """
        request = request or RunRequest()
        playbook = self.playbooks.get(playbook_id)

        now = datetime.now(timezone.utc)
        job = Job(
            organization_id=request.organization_id or playbook.organization_id,
            playbook_id=playbook.id,
            inventory_id=request.inventory_id or None,
            status=JobStatus.SUCCESSFUL.value,
            started_at=now,
            finished_at=now,
            extra_vars=as_document(request.extra_vars) or {},
            result=SIMULATED_RESULT.model_dump(),
        )
        self.db.add(job)
        self.db.commit()
        self.db.refresh(job)
        logger.info(f"Recorded job {job.id} for playbook {playbook.id} ({job.status})")
        return job
