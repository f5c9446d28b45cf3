from typing import Optional
from app.core.errors import ValidationError
from app.models import Playbook
from app.schemas import PlaybookCreate, PlaybookUpdate
from app.services.base import ResourceService
import logging

logger = logging.getLogger(__name__)

class PlaybookService(ResourceService):
    model = Playbook
    resource_name = "playbook"

    def create(self, payload: PlaybookCreate) -> Playbook:
        if not payload.organization_id or not payload.name or not payload.content:
            raise ValidationError("organization_id, name and content are required")
        playbook = Playbook(
            organization_id=payload.organization_id,
            name=payload.name,
            description=payload.description or None,
            content=payload.content,
        )
        playbook = self._save(playbook)
        logger.info(f"Created playbook {playbook.id} ({playbook.name})")
        return playbook

    def update(self, playbook_id: int, payload: Optional[PlaybookUpdate] = None) -> Playbook:
        payload = payload or PlaybookUpdate()
        playbook = self.get(playbook_id)
        return self._merge(playbook, {
            "name": payload.name,
            "description": payload.description,
            "content": payload.content,
        })
