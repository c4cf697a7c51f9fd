from ._endpoint import Endpoint
from ._logs import setup_logging
from ._request_spec import RequestSpec
from ._routes import Route, Routes

__all__ = [
    "Endpoint",
    "setup_logging",
    "RequestSpec",
    "Route",
    "Routes",
]
