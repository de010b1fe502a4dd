from ..extensions import db

from .user import User
from .property import Property
from .tenant import Tenant
from .lease import Lease
from .maintenance import MaintenanceRequest

__all__ = ["db", "User", "Property", "Tenant", "Lease", "MaintenanceRequest"]
