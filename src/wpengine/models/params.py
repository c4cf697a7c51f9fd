from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Environment = Literal["production", "staging", "development"]


class _Params(BaseModel):
    model_config = ConfigDict(extra="forbid")

    def to_args(self) -> Dict[str, Any]:
        """The request arguments, in field order, without unset optional fields."""
        return self.model_dump(exclude_none=True)


class ListParams(_Params):
    """Query arguments accepted by the list endpoints.

    Extra keyword filters (for example ``account_id`` on installs) are passed
    through to the query string unchanged.
    """

    model_config = ConfigDict(extra="allow")

    limit: Optional[int] = Field(default=None, ge=0)
    offset: Optional[int] = Field(default=None, ge=0)


class CreateSiteParams(_Params):
    name: str
    account_id: str


class UpdateSiteParams(_Params):
    name: str


class CreateInstallParams(_Params):
    name: str
    account_id: str
    site_id: str
    environment: Environment


class UpdateInstallParams(_Params):
    site_id: Optional[str] = None
    environment: Optional[Environment] = None


class CreateDomainParams(_Params):
    name: str
    primary: bool = False


class UpdateDomainParams(_Params):
    primary: Optional[bool] = None
    redirect_to: Optional[str] = None
