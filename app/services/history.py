from sqlmodel import Session, select, desc
from app.core.errors import NotFoundError
from app.models import Job

class HistoryService:
    """Read access to recorded jobs.

    Jobs are an append-only audit trail: this service offers no update or
    delete, and the only writer is ``RunnerService.run_playbook``.
    """
    def __init__(self, db: Session):
        self.db = db

    def get_recent_runs(self) -> list[Job]:
        """Returns every job, newest first.

        Returns:
            Jobs ordered by descending id.
        """
        statement = select(Job).order_by(desc(Job.id))
        return list(self.db.exec(statement).all())

    def get_run(self, job_id: int) -> Job:
        """Fetches a specific job by its primary key.

        Args:
            job_id: The unique ID of the job.

        Raises:
            NotFoundError: No job has this id.
        """
        job = self.db.get(Job, job_id)
        if job is None:
            raise NotFoundError("job")
        return job
