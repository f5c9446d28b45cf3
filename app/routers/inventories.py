from fastapi import APIRouter, Depends, Response, status
from typing import List, Optional
from app.dependencies import get_inventory_service
from app.models import Inventory
from app.schemas import InventoryCreate, InventoryUpdate, InventoryRead
from app.services import InventoryService

router = APIRouter(prefix="/inventories", tags=["inventories"])

@router.get("", response_model=List[InventoryRead])
def list_inventories(service: InventoryService = Depends(get_inventory_service)) -> List[Inventory]:
    return service.list_all()

@router.get("/{inventory_id}", response_model=InventoryRead)
def get_inventory(inventory_id: int, service: InventoryService = Depends(get_inventory_service)) -> Inventory:
    return service.get(inventory_id)

@router.post("", response_model=InventoryRead, status_code=status.HTTP_201_CREATED)
def create_inventory(
    payload: InventoryCreate,
    service: InventoryService = Depends(get_inventory_service)
) -> Inventory:
    """Creates an inventory under an organization.

    Args:
        payload: Body with required ``organization_id`` and ``name``, optional
            ``description`` and ``variables`` (JSON object, defaults to {}).
        service: Injected InventoryService.

    Returns:
        The created inventory with its generated id.
    """
    return service.create(payload)

@router.put("/{inventory_id}", response_model=InventoryRead)
def update_inventory(
    inventory_id: int,
    payload: Optional[InventoryUpdate] = None,
    service: InventoryService = Depends(get_inventory_service)
) -> Inventory:
    """Partially updates an inventory.

    Why: ``variables`` is replaced wholesale when a JSON object is sent, so
    callers can drop keys by sending the full desired object.
    """
    return service.update(inventory_id, payload)

@router.delete("/{inventory_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_inventory(inventory_id: int, service: InventoryService = Depends(get_inventory_service)) -> Response:
    service.delete(inventory_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
