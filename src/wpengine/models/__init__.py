from .errors import ApiError, ApiErrorKind
from .params import (
    CreateDomainParams,
    CreateInstallParams,
    CreateSiteParams,
    Environment,
    ListParams,
    UpdateDomainParams,
    UpdateInstallParams,
    UpdateSiteParams,
)

__all__ = [
    "ApiError",
    "ApiErrorKind",
    "CreateDomainParams",
    "CreateInstallParams",
    "CreateSiteParams",
    "Environment",
    "ListParams",
    "UpdateDomainParams",
    "UpdateInstallParams",
    "UpdateSiteParams",
]
