from enum import Enum
from typing import Any, Optional


class ApiErrorKind(str, Enum):
    HTTP_STATUS = "HttpStatusError"
    TRANSPORT = "TransportError"
    DECODE = "DecodeError"


class ApiError(Exception):
    """An unsuccessful API call.

    Endpoint methods return an `ApiError` instead of raising it, so every call
    site checks the result before using it:

        ```python
        result = client.get_site_by_id("abc")
        if isinstance(result, ApiError):
            ...
        ```

    Being an exception, it can still be re-raised by callers that prefer that
    style.

    Attributes:
        kind (ApiErrorKind): What went wrong.
        status_code (Optional[int]): The HTTP status, when a response was received.
        message (str): Human readable description, ``Status: 404`` for HTTP errors.
        raw_body (Optional[Any]): The decoded response body, kept for inspection.
    """

    def __init__(
        self,
        kind: ApiErrorKind,
        message: str,
        status_code: Optional[int] = None,
        raw_body: Optional[Any] = None,
    ):
        self.kind = kind
        self.message = message
        self.status_code = status_code
        self.raw_body = raw_body
        super().__init__(self.message)

    @classmethod
    def from_status(cls, status_code: int, raw_body: Optional[Any] = None) -> "ApiError":
        return cls(
            ApiErrorKind.HTTP_STATUS,
            f"Status: {status_code}",
            status_code=status_code,
            raw_body=raw_body,
        )

    def __repr__(self) -> str:
        return (
            f"ApiError(kind={self.kind.value!r}, status_code={self.status_code!r}, "
            f"message={self.message!r})"
        )