from .organization import OrganizationCreate, OrganizationUpdate, OrganizationRead
from .inventory import InventoryCreate, InventoryUpdate, InventoryRead
from .playbook import PlaybookCreate, PlaybookUpdate, PlaybookRead
from .job import RunRequest, JobResult, JobRead
