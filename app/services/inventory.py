from typing import Optional
from app.core.errors import ValidationError
from app.models import Inventory
from app.schemas import InventoryCreate, InventoryUpdate
from app.schemas.common import as_document
from app.services.base import ResourceService
import logging

logger = logging.getLogger(__name__)

class InventoryService(ResourceService):
    """CRUD for inventories.

    ``variables`` is stored as a JSON object. On create anything else is
    replaced by an empty object; on update anything else leaves the stored
    object untouched. A well-formed object always replaces the old one
    wholesale, it is never deep-merged.
    """
    model = Inventory
    resource_name = "inventory"

    def create(self, payload: InventoryCreate) -> Inventory:
        if not payload.organization_id or not payload.name:
            raise ValidationError("organization_id and name are required")
        inventory = Inventory(
            organization_id=payload.organization_id,
            name=payload.name,
            description=payload.description or None,
            variables=as_document(payload.variables) or {},
        )
        inventory = self._save(inventory)
        logger.info(f"Created inventory {inventory.id} in org {inventory.organization_id}")
        return inventory

    def update(self, inventory_id: int, payload: Optional[InventoryUpdate] = None) -> Inventory:
        payload = payload or InventoryUpdate()
        inventory = self.get(inventory_id)
        variables = as_document(payload.variables)
        if variables is not None:
            inventory.variables = variables
        return self._merge(inventory, {"name": payload.name, "description": payload.description})
