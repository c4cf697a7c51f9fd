from typing import Any, Optional, Union

from .._utils import RequestSpec, Routes
from ..models import ApiError, CreateSiteParams, ListParams, UpdateSiteParams
from ._base_service import BaseService


class SitesService(BaseService):
    """
    Service for managing WP Engine sites.

    A site groups the installs (production, staging, development) of one
    WordPress project inside an account.
    """

    def list(
        self,
        *,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        **filters: Any,
    ) -> Union[Any, ApiError]:
        """
        List your sites.

        Args:
            limit (Optional[int]): Number of records to return.
            offset (Optional[int]): First record of the result set to be returned.
            **filters (Any): Additional query arguments, e.g. ``account_id``.

        Returns:
            Union[Any, ApiError]: A page of sites.
        """
        return self.execute(self._list_spec(limit=limit, offset=offset, **filters))

    def create(self, name: str, account_id: str) -> Union[Any, ApiError]:
        """
        Create a new site.

        Args:
            name (str): The name of the site.
            account_id (str): The ID of the account that the site will belong to.

        Returns:
            Union[Any, ApiError]: The new site.

        Examples:
            ```python
            from wpengine import WPEngine

            client = WPEngine()

            site = client.sites.create(name="demo", account_id="acct_1")
            ```
        """
        return self.execute(self._create_spec(name, account_id))

    def retrieve(self, id: str) -> Union[Any, ApiError]:
        """
        Get a site by ID.

        Args:
            id (str): The site ID.

        Returns:
            Union[Any, ApiError]: A single site.
        """
        return self.execute(self._retrieve_spec(id))

    def update(self, id: str, name: str) -> Union[Any, ApiError]:
        """
        Change a site's name.

        Args:
            id (str): The ID of the site to rename.
            name (str): The new name for the site.

        Returns:
            Union[Any, ApiError]: The updated site.
        """
        return self.execute(self._update_spec(id, name))

    def delete(self, id: str) -> Union[Any, ApiError]:
        """
        Delete a site and every install associated with it.

        The delete is permanent and there is no confirmation prompt.

        Args:
            id (str): The ID of the site to delete.

        Returns:
            Union[Any, ApiError]: The (usually empty) response body.
        """
        return self.execute(self._delete_spec(id))

    def _list_spec(
        self,
        *,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        **filters: Any,
    ) -> RequestSpec:
        params = ListParams(limit=limit, offset=offset, **filters)
        return self.request(
            Routes.SITES_LIST.endpoint(),
            params.to_args(),
            Routes.SITES_LIST.method,
        )

    def _create_spec(self, name: str, account_id: str) -> RequestSpec:
        params = CreateSiteParams(name=name, account_id=account_id)
        return self.request(
            Routes.SITES_CREATE.endpoint(),
            params.to_args(),
            Routes.SITES_CREATE.method,
        )

    def _retrieve_spec(self, id: str) -> RequestSpec:
        return self.request(
            Routes.SITES_RETRIEVE.endpoint(id=id),
            method=Routes.SITES_RETRIEVE.method,
        )

    def _update_spec(self, id: str, name: str) -> RequestSpec:
        params = UpdateSiteParams(name=name)
        return self.request(
            Routes.SITES_UPDATE.endpoint(id=id),
            params.to_args(),
            Routes.SITES_UPDATE.method,
        )

    def _delete_spec(self, id: str) -> RequestSpec:
        return self.request(
            Routes.SITES_DELETE.endpoint(id=id),
            method=Routes.SITES_DELETE.method,
        )
