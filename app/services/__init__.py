from .organization import OrganizationService
from .inventory import InventoryService
from .playbook import PlaybookService
from .history import HistoryService
from .runner import RunnerService
