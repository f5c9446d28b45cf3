from typing import Any
from sqlmodel import Session, SQLModel, select
from app.core.errors import NotFoundError
import logging

logger = logging.getLogger(__name__)

class ResourceService:
    """Shared persistence operations for the CRUD resources.

    Subclasses set ``model`` to their SQLModel table and ``resource_name`` to
    the word used in not-found messages. Every method works on the session
    handed in by the request, so a service never outlives its request.

    Attributes:
        db (Session): Request-scoped database session.
    """
    model: type[SQLModel]
    resource_name: str

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> list[Any]:
        """Returns every record, oldest id first."""
        statement = select(self.model).order_by(self.model.id)
        return list(self.db.exec(statement).all())

    def get(self, record_id: int) -> Any:
        """Fetches one record by primary key.

        Raises:
            NotFoundError: No record has this id.
        """
        record = self.db.get(self.model, record_id)
        if record is None:
            raise NotFoundError(self.resource_name)
        return record

    def delete(self, record_id: int) -> None:
        """Permanently deletes one record.

        Raises:
            NotFoundError: No record has this id; nothing is changed.
        """
        record = self.get(record_id)
        self.db.delete(record)
        self.db.commit()
        logger.info(f"Deleted {self.resource_name} {record_id}")

    def _save(self, record: Any) -> Any:
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def _merge(self, record: Any, changes: dict[str, Any]) -> Any:
        """Applies a partial update, skipping absent or empty values.

        A value of None or "" keeps the stored value, so a client cannot
        blank a field through an update.
        """
        for field, value in changes.items():
            if value:
                setattr(record, field, value)
        return self._save(record)
