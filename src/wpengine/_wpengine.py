from functools import cached_property
from logging import getLogger
from os import environ as env
from typing import Any, Optional, Union

from dotenv import load_dotenv
from httpx import BaseTransport, Client

from ._config import Config
from ._services import (
    AccountsService,
    DomainsService,
    InstallsService,
    SitesService,
    StatusService,
    UserService,
)
from ._utils import setup_logging
from ._utils.constants import ENV_BASE_URL, ENV_PASSWORD, ENV_USERNAME
from .models import ApiError, Environment

load_dotenv()


class WPEngine:
    """
    Client for the WP Engine hosting API.

    Resources are available as services (``client.sites.create(...)``) and as
    flat methods mirroring the API reference (``client.create_site(...)``).
    Every call returns the decoded JSON response or an `ApiError`.

    Examples:
        ```python
        from wpengine import ApiError, WPEngine

        with WPEngine(username="api-user", password="api-password") as client:
            site = client.create_site(name="demo", account_id="acct_1")
            if isinstance(site, ApiError):
                print(site.status_code, site.raw_body)
        ```
    """

    def __init__(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        strict_decode: bool = False,
        debug: bool = False,
        transport: Optional[BaseTransport] = None,
    ) -> None:
        """
        Initialize the WP Engine client. No request is sent.

        Args:
            username (Optional[str]): API username. Defaults to the
                `WPENGINE_USERNAME` environment variable.
            password (Optional[str]): API password. Defaults to the
                `WPENGINE_PASSWORD` environment variable.
            base_url (Optional[str]): API root. Defaults to the `WPENGINE_URL`
                environment variable, then to ``https://api.wpengineapi.com/v0/``.
            timeout (Optional[int]): Request timeout in seconds, 20 by default.
            strict_decode (bool): Report non-JSON success bodies as a
                `DecodeError` instead of returning None.
            debug (bool): Enable debug logging if set to True. Defaults to False.
            transport (Optional[BaseTransport]): Custom httpx transport.

        Raises:
            pydantic.ValidationError: If credentials are missing or empty, or the
                base URL is invalid.
        """
        settings: dict[str, Any] = {
            # Config rejects missing or empty credentials with a validation error
            "username": username if username is not None else env.get(ENV_USERNAME),
            "password": password if password is not None else env.get(ENV_PASSWORD),
            "strict_decode": strict_decode,
        }
        base_url_value = base_url or env.get(ENV_BASE_URL)
        if base_url_value:
            settings["base_url"] = base_url_value
        if timeout is not None:
            settings["timeout"] = timeout

        self._config = Config(**settings)

        setup_logging(debug)
        getLogger("wpengine").debug(
            f"CONFIG: base_url={self._config.base_url} timeout={self._config.timeout}"
        )

        self._client = Client(
            base_url=self._config.base_url,
            transport=transport,
            follow_redirects=False,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "WPEngine":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    @cached_property
    def status(self) -> StatusService:
        """API health and swagger description."""
        return StatusService(self._config, self._client)

    @cached_property
    def accounts(self) -> AccountsService:
        """
        Accounts group the sites and installs billed together.
        """
        return AccountsService(self._config, self._client)

    @cached_property
    def sites(self) -> SitesService:
        """
        Sites group the production, staging and development installs of one
        WordPress project.
        """
        return SitesService(self._config, self._client)

    @cached_property
    def installs(self) -> InstallsService:
        """
        Installs are individual WordPress environments.
        """
        return InstallsService(self._config, self._client)

    @cached_property
    def domains(self) -> DomainsService:
        """
        Domains attached to an install.
        """
        return DomainsService(self._config, self._client)

    @cached_property
    def user(self) -> UserService:
        """The authenticated API user."""
        return UserService(self._config, self._client)

    # Status

    def get_api_status(self) -> Union[Any, ApiError]:
        return self.status.retrieve()

    # Swagger

    def get_swagger_spec(self) -> Union[Any, ApiError]:
        return self.status.swagger()

    # Accounts

    def get_accounts(self, **args: Any) -> Union[Any, ApiError]:
        return self.accounts.list(**args)

    def get_account_by_id(self, id: str) -> Union[Any, ApiError]:
        return self.accounts.retrieve(id)

    # Sites

    def get_sites(self, **args: Any) -> Union[Any, ApiError]:
        return self.sites.list(**args)

    def create_site(self, name: str, account_id: str) -> Union[Any, ApiError]:
        return self.sites.create(name, account_id)

    def get_site_by_id(self, id: str) -> Union[Any, ApiError]:
        return self.sites.retrieve(id)

    def update_site(self, id: str, name: str) -> Union[Any, ApiError]:
        return self.sites.update(id, name)

    def delete_site(self, id: str) -> Union[Any, ApiError]:
        return self.sites.delete(id)

    # Installs

    def get_installs(self, **args: Any) -> Union[Any, ApiError]:
        return self.installs.list(**args)

    def create_install(
        self,
        name: str,
        account_id: str,
        site_id: str,
        environment: Environment,
    ) -> Union[Any, ApiError]:
        return self.installs.create(name, account_id, site_id, environment)

    def get_install_by_id(self, id: str) -> Union[Any, ApiError]:
        return self.installs.retrieve(id)

    def update_install(
        self,
        id: str,
        *,
        site_id: Optional[str] = None,
        environment: Optional[Environment] = None,
    ) -> Union[Any, ApiError]:
        return self.installs.update(id, site_id=site_id, environment=environment)

    def delete_install(self, id: str) -> Union[Any, ApiError]:
        return self.installs.delete(id)

    # Domains

    def get_domains(self, install_id: str, **args: Any) -> Union[Any, ApiError]:
        return self.domains.list(install_id, **args)

    def create_domain(
        self, install_id: str, name: str, primary: bool = False
    ) -> Union[Any, ApiError]:
        return self.domains.create(install_id, name, primary)

    def get_domain_by_id(self, install_id: str, domain_id: str) -> Union[Any, ApiError]:
        return self.domains.retrieve(install_id, domain_id)

    def update_domain(
        self,
        install_id: str,
        domain_id: str,
        *,
        primary: Optional[bool] = None,
        redirect_to: Optional[str] = None,
    ) -> Union[Any, ApiError]:
        return self.domains.update(
            install_id, domain_id, primary=primary, redirect_to=redirect_to
        )

    def delete_domain(self, install_id: str, domain_id: str) -> Union[Any, ApiError]:
        return self.domains.delete(install_id, domain_id)

    # User

    def get_user(self) -> Union[Any, ApiError]:
        return self.user.retrieve()
