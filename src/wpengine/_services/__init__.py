from ._base_service import BaseService
from .accounts_service import AccountsService
from .domains_service import DomainsService
from .installs_service import InstallsService
from .sites_service import SitesService
from .status_service import StatusService
from .user_service import UserService

__all__ = [
    "BaseService",
    "AccountsService",
    "DomainsService",
    "InstallsService",
    "SitesService",
    "StatusService",
    "UserService",
]
