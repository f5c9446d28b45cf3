from fastapi import APIRouter, Depends, Response, status
from typing import List, Optional
from app.dependencies import get_organization_service
from app.models import Organization
from app.schemas import OrganizationCreate, OrganizationUpdate, OrganizationRead
from app.services import OrganizationService

router = APIRouter(prefix="/orgs", tags=["organizations"])

@router.get("", response_model=List[OrganizationRead])
def list_orgs(service: OrganizationService = Depends(get_organization_service)) -> List[Organization]:
    """Lists all organizations ordered by id."""
    return service.list_all()

@router.get("/{org_id}", response_model=OrganizationRead)
def get_org(org_id: int, service: OrganizationService = Depends(get_organization_service)) -> Organization:
    return service.get(org_id)

@router.post("", response_model=OrganizationRead, status_code=status.HTTP_201_CREATED)
def create_org(
    payload: OrganizationCreate,
    service: OrganizationService = Depends(get_organization_service)
) -> Organization:
    """Creates an organization.

    Args:
        payload: Body with a required ``name`` and optional ``description``.
        service: Injected OrganizationService.

    Returns:
        The created organization with its generated id.
    """
    return service.create(payload)

@router.put("/{org_id}", response_model=OrganizationRead)
def update_org(
    org_id: int,
    payload: Optional[OrganizationUpdate] = None,
    service: OrganizationService = Depends(get_organization_service)
) -> Organization:
    """Partially updates an organization; empty fields are left as they are."""
    return service.update(org_id, payload)

@router.delete("/{org_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_org(org_id: int, service: OrganizationService = Depends(get_organization_service)) -> Response:
    service.delete(org_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
