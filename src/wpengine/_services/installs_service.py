from typing import Any, Optional, Union

from .._utils import RequestSpec, Routes
from ..models import (
    ApiError,
    CreateInstallParams,
    Environment,
    ListParams,
    UpdateInstallParams,
)
from ._base_service import BaseService


class InstallsService(BaseService):
    """
    Service for managing WordPress installations.

    An install is one WordPress environment (production, staging or
    development) that belongs to a site and an account.
    """

    def list(
        self,
        *,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        account_id: Optional[str] = None,
        **filters: Any,
    ) -> Union[Any, ApiError]:
        """
        List your WordPress installations.

        Args:
            limit (Optional[int]): Number of records to return.
            offset (Optional[int]): First record of the result set to be returned.
            account_id (Optional[str]): Only return installs of this account.
            **filters (Any): Additional query arguments.

        Returns:
            Union[Any, ApiError]: A page of installs.
        """
        return self.execute(
            self._list_spec(
                limit=limit, offset=offset, account_id=account_id, **filters
            )
        )

    def create(
        self,
        name: str,
        account_id: str,
        site_id: str,
        environment: Environment,
    ) -> Union[Any, ApiError]:
        """
        Create a new WordPress installation.

        Args:
            name (str): The name of the install.
            account_id (str): The ID of the account that the install will belong to.
            site_id (str): The ID of the site that the install will belong to.
            environment (Environment): The site environment that the install will fill.

        Returns:
            Union[Any, ApiError]: The new install.
        """
        return self.execute(
            self._create_spec(name, account_id, site_id, environment)
        )

    def retrieve(self, id: str) -> Union[Any, ApiError]:
        """
        Get an install by ID.

        Args:
            id (str): The install ID.

        Returns:
            Union[Any, ApiError]: A single install.
        """
        return self.execute(self._retrieve_spec(id))

    def update(
        self,
        id: str,
        *,
        site_id: Optional[str] = None,
        environment: Optional[Environment] = None,
    ) -> Union[Any, ApiError]:
        """
        Update a WordPress installation.

        Only the fields that are passed are sent.

        Args:
            id (str): The install ID.
            site_id (Optional[str]): Move the install to this site.
            environment (Optional[Environment]): The environment the install fills.

        Returns:
            Union[Any, ApiError]: The updated install.
        """
        return self.execute(
            self._update_spec(id, site_id=site_id, environment=environment)
        )

    def delete(self, id: str) -> Union[Any, ApiError]:
        """
        Delete an install by ID.

        Args:
            id (str): The install ID.

        Returns:
            Union[Any, ApiError]: The (usually empty) response body.
        """
        return self.execute(self._delete_spec(id))

    def _list_spec(
        self,
        *,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        account_id: Optional[str] = None,
        **filters: Any,
    ) -> RequestSpec:
        params = ListParams(
            limit=limit, offset=offset, account_id=account_id, **filters
        )
        return self.request(
            Routes.INSTALLS_LIST.endpoint(),
            params.to_args(),
            Routes.INSTALLS_LIST.method,
        )

    def _create_spec(
        self,
        name: str,
        account_id: str,
        site_id: str,
        environment: Environment,
    ) -> RequestSpec:
        params = CreateInstallParams(
            name=name,
            account_id=account_id,
            site_id=site_id,
            environment=environment,
        )
        return self.request(
            Routes.INSTALLS_CREATE.endpoint(),
            params.to_args(),
            Routes.INSTALLS_CREATE.method,
        )

    def _retrieve_spec(self, id: str) -> RequestSpec:
        return self.request(
            Routes.INSTALLS_RETRIEVE.endpoint(id=id),
            method=Routes.INSTALLS_RETRIEVE.method,
        )

    def _update_spec(
        self,
        id: str,
        *,
        site_id: Optional[str] = None,
        environment: Optional[Environment] = None,
    ) -> RequestSpec:
        params = UpdateInstallParams(site_id=site_id, environment=environment)
        return self.request(
            Routes.INSTALLS_UPDATE.endpoint(id=id),
            params.to_args(),
            Routes.INSTALLS_UPDATE.method,
        )

    def _delete_spec(self, id: str) -> RequestSpec:
        return self.request(
            Routes.INSTALLS_DELETE.endpoint(id=id),
            method=Routes.INSTALLS_DELETE.method,
        )
