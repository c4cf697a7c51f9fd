from dataclasses import dataclass
from typing import Any

from ._endpoint import Endpoint, template_fields


@dataclass(frozen=True)
class Route:
    """A route template bound to the HTTP method used to call it."""

    template: str
    method: str = "GET"

    @property
    def path_params(self) -> tuple[str, ...]:
        return template_fields(self.template)

    def endpoint(self, **params: Any) -> Endpoint:
        return Endpoint.from_template(self.template, **params)


class Routes:
    STATUS = Route("status")
    SWAGGER = Route("swagger")

    ACCOUNTS_LIST = Route("accounts")
    ACCOUNTS_RETRIEVE = Route("accounts/{id}")

    SITES_LIST = Route("sites")
    SITES_CREATE = Route("sites", "POST")
    SITES_RETRIEVE = Route("sites/{id}")
    SITES_UPDATE = Route("sites/{id}", "PATCH")
    SITES_DELETE = Route("sites/{id}", "DELETE")

    INSTALLS_LIST = Route("installs")
    INSTALLS_CREATE = Route("installs", "POST")
    INSTALLS_RETRIEVE = Route("installs/{id}")
    INSTALLS_UPDATE = Route("installs/{id}", "PATCH")
    INSTALLS_DELETE = Route("installs/{id}", "DELETE")

    DOMAINS_LIST = Route("installs/{install_id}/domains")
    DOMAINS_CREATE = Route("installs/{install_id}/domains", "POST")
    DOMAINS_RETRIEVE = Route("installs/{install_id}/domains/{domain_id}")
    DOMAINS_UPDATE = Route("installs/{install_id}/domains/{domain_id}", "PATCH")
    DOMAINS_DELETE = Route("installs/{install_id}/domains/{domain_id}", "DELETE")

    USER = Route("user")
