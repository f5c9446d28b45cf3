from typing import Optional
from app.core.errors import ValidationError
from app.models import Organization
from app.schemas import OrganizationCreate, OrganizationUpdate
from app.services.base import ResourceService
import logging

logger = logging.getLogger(__name__)

class OrganizationService(ResourceService):
    model = Organization
    resource_name = "org"

    def create(self, payload: OrganizationCreate) -> Organization:
        if not payload.name:
            raise ValidationError("name is required")
        org = self._save(Organization(name=payload.name, description=payload.description or None))
        logger.info(f"Created org {org.id} ({org.name})")
        return org

    def update(self, org_id: int, payload: Optional[OrganizationUpdate] = None) -> Organization:
        payload = payload or OrganizationUpdate()
        org = self.get(org_id)
        return self._merge(org, {"name": payload.name, "description": payload.description})
