from typing import Any, Union

from .._utils import RequestSpec, Routes
from ..models import ApiError
from ._base_service import BaseService


class UserService(BaseService):
    def retrieve(self) -> Union[Any, ApiError]:
        """Get the currently authenticated user."""
        return self.execute(self._retrieve_spec())

    def _retrieve_spec(self) -> RequestSpec:
        return self.request(Routes.USER.endpoint(), method=Routes.USER.method)
