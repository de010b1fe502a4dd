from .auth import AuthService
from .lease_store import LeaseStore
from .leases import LeaseService
from .lifecycle import LeaseLifecycle
from .maintenance import MaintenanceService
from .ownership import OwnershipGuard
from .properties import PropertyService
from .revenue import compute_revenue
from .tenants import TenantService

__all__ = [
    "AuthService",
    "LeaseLifecycle",
    "LeaseService",
    "LeaseStore",
    "MaintenanceService",
    "OwnershipGuard",
    "PropertyService",
    "TenantService",
    "compute_revenue",
]
