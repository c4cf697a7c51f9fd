from typing import Any, Optional, Union

from .._utils import RequestSpec, Routes
from ..models import ApiError, ListParams
from ._base_service import BaseService


class AccountsService(BaseService):
    """
    Service for the WP Engine accounts the authenticated user has access to.

    Accounts own sites and installs; their ids are needed to create either.
    """

    def list(
        self,
        *,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        **filters: Any,
    ) -> Union[Any, ApiError]:
        """
        List your WP Engine accounts.

        Args:
            limit (Optional[int]): Number of records to return.
            offset (Optional[int]): First record of the result set to be returned.
            **filters (Any): Additional query arguments.

        Returns:
            Union[Any, ApiError]: A page of accounts.

        Examples:
            ```python
            from wpengine import WPEngine

            client = WPEngine(username="api-user", password="api-password")

            client.accounts.list(limit=10)
            ```
        """
        return self.execute(self._list_spec(limit=limit, offset=offset, **filters))

    def retrieve(self, id: str) -> Union[Any, ApiError]:
        """
        Get an account by ID.

        Args:
            id (str): The account ID.

        Returns:
            Union[Any, ApiError]: A single account.
        """
        return self.execute(self._retrieve_spec(id))

    def _list_spec(
        self,
        *,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        **filters: Any,
    ) -> RequestSpec:
        params = ListParams(limit=limit, offset=offset, **filters)
        return self.request(
            Routes.ACCOUNTS_LIST.endpoint(),
            params.to_args(),
            Routes.ACCOUNTS_LIST.method,
        )

    def _retrieve_spec(self, id: str) -> RequestSpec:
        return self.request(
            Routes.ACCOUNTS_RETRIEVE.endpoint(id=id),
            method=Routes.ACCOUNTS_RETRIEVE.method,
        )
