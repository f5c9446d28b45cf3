from .organization import Organization
from .inventory import Inventory
from .playbook import Playbook
from .job import Job, JobStatus
