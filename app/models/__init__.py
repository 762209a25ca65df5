from .firm import Firm
from .firm_assignment import FirmAssignment
from .owner import Owner
from .property import Property
from .tenant import Tenant
from .user import User
