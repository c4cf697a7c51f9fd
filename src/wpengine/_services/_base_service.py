import base64
import json
from logging import getLogger
from typing import Any, Mapping, Optional, Union

from httpx import Client, RequestError, Response

from .._config import Config
from .._utils import Endpoint, RequestSpec
from .._utils.constants import (
    CONTENT_TYPE_JSON,
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
)
from ..models.errors import ApiError, ApiErrorKind

SUPPORTED_METHODS = ("GET", "POST", "PATCH", "DELETE")


def is_status_ok(status_code: int) -> bool:
    return 200 <= status_code < 300


def is_blank(value: Any) -> bool:
    """Check whether a query argument should be left out of the query string.

    None, False, empty strings and empty collections are blank. Zero is not.
    """
    if value is None or value is False:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set)):
        return len(value) == 0
    return False


def encode_body(args: Any) -> bytes:
    return json.dumps(args, separators=(",", ":")).encode("utf-8")


class BaseService:
    """
    Base class for all WP Engine API services.

    This class turns a route, an argument mapping and an HTTP method into a
    `RequestSpec` and executes it against the shared HTTP client. Services never
    keep request state between calls: every call builds its own spec.

    `execute` returns either the decoded JSON body or an `ApiError`; it does not
    raise for HTTP or transport failures.
    """

    def __init__(self, config: Config, client: Client) -> None:
        """
        Initialize a new service instance.

        Args:
            config (Config): Credentials, base URL and timeout settings.
            client (Client): The HTTP client used to send requests. Its base URL
                must point at the versioned API root.
        """
        self._logger = getLogger("wpengine")
        self._config = config
        self._client = client

    def request(
        self,
        route: Union[Endpoint, str],
        args: Optional[Mapping[str, Any]] = None,
        method: str = "GET",
    ) -> RequestSpec:
        """
        Build the request for a route without sending it.

        For GET requests the arguments become query parameters, dropping blank
        values. For every other method the arguments are JSON encoded as the
        request body; ``args=None`` sends no body at all.

        Args:
            route (Union[Endpoint, str]): Route relative to the API base URL.
            args (Optional[Mapping[str, Any]]): Query or body arguments.
            method (str): One of GET, POST, PATCH or DELETE.

        Returns:
            RequestSpec: The request, ready for `execute`.

        Raises:
            ValueError: If the method is not supported.
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(
                f"Unsupported HTTP method '{method}', expected one of {', '.join(SUPPORTED_METHODS)}"
            )

        params: dict[str, Any] = {}
        content: Optional[bytes] = None

        if method == "GET":
            params = {
                key: value for key, value in (args or {}).items() if not is_blank(value)
            }
        elif args is not None:
            content = encode_body(dict(args))

        return RequestSpec(
            method=method,
            endpoint=Endpoint(route),
            params=params,
            headers=self.default_headers,
            content=content,
            timeout=self._config.timeout,
        )

    def execute(self, spec: RequestSpec) -> Union[Any, ApiError]:
        """
        Send a request and normalize the outcome.

        Args:
            spec (RequestSpec): The request to send.

        Returns:
            Union[Any, ApiError]: The decoded JSON body for 2xx responses (None
                when the body is empty or not JSON), otherwise an `ApiError`
                describing the HTTP status or transport failure.
        """
        self._logger.debug(f"Request: {spec.method} {spec.endpoint}")
        self._logger.debug(f"HEADERS: {self._masked(spec.headers)}")

        try:
            response = self._client.request(
                spec.method,
                spec.endpoint,
                params=spec.params or None,
                headers=spec.headers,
                content=spec.content,
                timeout=spec.timeout,
            )
        except RequestError as e:
            return ApiError(ApiErrorKind.TRANSPORT, str(e) or type(e).__name__)

        self._logger.debug(f"Response: {response.status_code}")

        if not is_status_ok(response.status_code):
            return ApiError.from_status(
                response.status_code, self._decode_error_body(response)
            )

        return self._decode_body(response)

    def _decode_body(self, response: Response) -> Union[Any, ApiError]:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            if self._config.strict_decode:
                return ApiError(
                    ApiErrorKind.DECODE,
                    f"Invalid JSON response body: {e}",
                    status_code=response.status_code,
                    raw_body=response.text,
                )
            return None

    def _decode_error_body(self, response: Response) -> Optional[Any]:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def _masked(self, headers: Mapping[str, str]) -> dict[str, str]:
        return {
            key: "***" if key.lower() == HEADER_AUTHORIZATION.lower() else value
            for key, value in headers.items()
        }

    @property
    def default_headers(self) -> dict[str, str]:
        """
        Get the headers sent with every API request.

        Returns:
            dict[str, str]: JSON content negotiation plus the Basic auth header.
        """
        return {
            HEADER_ACCEPT: CONTENT_TYPE_JSON,
            HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON,
            **self.auth_headers,
        }

    @property
    def auth_headers(self) -> dict[str, str]:
        """
        Get the authentication headers for API requests.

        Returns:
            dict[str, str]: A dictionary containing the Basic authorization header.
        """
        credentials = f"{self._config.username}:{self._config.password}"
        token = base64.b64encode(credentials.encode("utf-8")).decode("ascii")
        return {HEADER_AUTHORIZATION: f"Basic {token}"}
