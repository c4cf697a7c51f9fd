from typing import Any, Union

from .._utils import RequestSpec, Routes
from ..models import ApiError
from ._base_service import BaseService


class StatusService(BaseService):
    """Service for the API's own health and description endpoints."""

    def retrieve(self) -> Union[Any, ApiError]:
        """Report whether the API is up.

        Returns:
            Union[Any, ApiError]: The status document, e.g. ``{"success": true}``.
        """
        return self.execute(self._retrieve_spec())

    def swagger(self) -> Union[Any, ApiError]:
        """Fetch the OpenAPI (swagger) description of the API.

        Returns:
            Union[Any, ApiError]: The swagger document.
        """
        return self.execute(self._swagger_spec())

    def _retrieve_spec(self) -> RequestSpec:
        return self.request(Routes.STATUS.endpoint(), method=Routes.STATUS.method)

    def _swagger_spec(self) -> RequestSpec:
        return self.request(Routes.SWAGGER.endpoint(), method=Routes.SWAGGER.method)
