from typing import Any, Optional, Union

from .._utils import RequestSpec, Routes
from ..models import ApiError, CreateDomainParams, ListParams, UpdateDomainParams
from ._base_service import BaseService


class DomainsService(BaseService):
    """Service for the domains attached to an install."""

    def list(
        self,
        install_id: str,
        *,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        **filters: Any,
    ) -> Union[Any, ApiError]:
        """
        Get the domains for an install.

        Args:
            install_id (str): The install ID.
            limit (Optional[int]): Number of records to return.
            offset (Optional[int]): First record of the result set to be returned.
            **filters (Any): Additional query arguments.

        Returns:
            Union[Any, ApiError]: A page of domains.
        """
        return self.execute(
            self._list_spec(install_id, limit=limit, offset=offset, **filters)
        )

    def create(
        self, install_id: str, name: str, primary: bool = False
    ) -> Union[Any, ApiError]:
        """
        Add a new domain to an existing install.

        Args:
            install_id (str): The install ID.
            name (str): The name of the new domain.
            primary (bool): Set the domain as the primary domain on the install.

        Returns:
            Union[Any, ApiError]: The new domain.
        """
        return self.execute(self._create_spec(install_id, name, primary))

    def retrieve(self, install_id: str, domain_id: str) -> Union[Any, ApiError]:
        """Get a specific domain of an install."""
        return self.execute(self._retrieve_spec(install_id, domain_id))

    def update(
        self,
        install_id: str,
        domain_id: str,
        *,
        primary: Optional[bool] = None,
        redirect_to: Optional[str] = None,
    ) -> Union[Any, ApiError]:
        """
        Update an existing domain, e.g. to make it the primary one.

        Args:
            install_id (str): The install ID.
            domain_id (str): The domain ID.
            primary (Optional[bool]): Make this the primary domain of the install.
            redirect_to (Optional[str]): ID of a domain to redirect this one to.

        Returns:
            Union[Any, ApiError]: The updated domain.
        """
        return self.execute(
            self._update_spec(
                install_id, domain_id, primary=primary, redirect_to=redirect_to
            )
        )

    def delete(self, install_id: str, domain_id: str) -> Union[Any, ApiError]:
        """Delete a specific domain of an install."""
        return self.execute(self._delete_spec(install_id, domain_id))

    def _list_spec(
        self,
        install_id: str,
        *,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        **filters: Any,
    ) -> RequestSpec:
        params = ListParams(limit=limit, offset=offset, **filters)
        return self.request(
            Routes.DOMAINS_LIST.endpoint(install_id=install_id),
            params.to_args(),
            Routes.DOMAINS_LIST.method,
        )

    def _create_spec(self, install_id: str, name: str, primary: bool) -> RequestSpec:
        params = CreateDomainParams(name=name, primary=primary)
        return self.request(
            Routes.DOMAINS_CREATE.endpoint(install_id=install_id),
            params.to_args(),
            Routes.DOMAINS_CREATE.method,
        )

    def _retrieve_spec(self, install_id: str, domain_id: str) -> RequestSpec:
        return self.request(
            Routes.DOMAINS_RETRIEVE.endpoint(install_id=install_id, domain_id=domain_id),
            method=Routes.DOMAINS_RETRIEVE.method,
        )

    def _update_spec(
        self,
        install_id: str,
        domain_id: str,
        *,
        primary: Optional[bool] = None,
        redirect_to: Optional[str] = None,
    ) -> RequestSpec:
        params = UpdateDomainParams(primary=primary, redirect_to=redirect_to)
        return self.request(
            Routes.DOMAINS_UPDATE.endpoint(install_id=install_id, domain_id=domain_id),
            params.to_args(),
            Routes.DOMAINS_UPDATE.method,
        )

    def _delete_spec(self, install_id: str, domain_id: str) -> RequestSpec:
        return self.request(
            Routes.DOMAINS_DELETE.endpoint(install_id=install_id, domain_id=domain_id),
            method=Routes.DOMAINS_DELETE.method,
        )
