from ._config import Config
from ._utils import Endpoint, RequestSpec, Route, Routes
from ._wpengine import WPEngine
from .models import ApiError, ApiErrorKind

__all__ = [
    "WPEngine",
    "Config",
    "ApiError",
    "ApiErrorKind",
    "Endpoint",
    "RequestSpec",
    "Route",
    "Routes",
]
