import logging
import sys
from pathlib import Path

import pytest
from httpx import Client

# Ensure local source package (src/wpengine) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from wpengine._config import Config  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("WPENGINE_URL", raising=False)
    monkeypatch.delenv("WPENGINE_USERNAME", raising=False)
    monkeypatch.delenv("WPENGINE_PASSWORD", raising=False)


@pytest.fixture(autouse=True)
def restore_logger():
    """Undo debug logging set up by a client created during the test."""
    logger = logging.getLogger("wpengine")
    level, propagate, handlers = logger.level, logger.propagate, list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.propagate = propagate
    logger.handlers[:] = handlers


@pytest.fixture
def base_url() -> str:
    return "https://test.wpengineapi.com/v0/"


@pytest.fixture
def username() -> str:
    return "api-user"


@pytest.fixture
def password() -> str:
    return "api-password"


@pytest.fixture
def basic_auth() -> str:
    # base64("api-user:api-password")
    return "Basic YXBpLXVzZXI6YXBpLXBhc3N3b3Jk"


@pytest.fixture
def config(base_url: str, username: str, password: str) -> Config:
    return Config(base_url=base_url, username=username, password=password)


@pytest.fixture
def client(config: Config):
    with Client(base_url=config.base_url) as http_client:
        yield http_client
