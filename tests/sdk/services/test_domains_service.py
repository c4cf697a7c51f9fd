import json

import pytest
from httpx import Client
from pytest_httpx import HTTPXMock

from wpengine._config import Config
from wpengine._services.domains_service import DomainsService
from wpengine.models import ApiError, ApiErrorKind


@pytest.fixture
def service(config: Config, client: Client) -> DomainsService:
    return DomainsService(config=config, client=client)


class TestDomainsService:
    class TestList:
        def test_list_domains(
            self, httpx_mock: HTTPXMock, service: DomainsService, base_url: str
        ):
            httpx_mock.add_response(
                url=f"{base_url}installs/i1/domains?limit=2",
                method="GET",
                json={"results": [{"id": "d1", "name": "example.com"}]},
            )

            domains = service.list("i1", limit=2)

            assert domains == {"results": [{"id": "d1", "name": "example.com"}]}

        def test_list_requires_install_id(self, service: DomainsService):
            with pytest.raises(ValueError, match="install_id"):
                service.list(None)  # type: ignore[arg-type]

    class TestCreate:
        def test_create_domain_defaults_to_non_primary(
            self, httpx_mock: HTTPXMock, service: DomainsService, base_url: str
        ):
            httpx_mock.add_response(
                url=f"{base_url}installs/i1/domains",
                method="POST",
                status_code=201,
                json={"id": "d1", "name": "example.com", "primary": False},
            )

            domain = service.create("i1", name="example.com")

            assert domain["id"] == "d1"

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert sent_request.content == b'{"name":"example.com","primary":false}'

        def test_create_primary_domain(self, service: DomainsService):
            spec = service._create_spec("i1", "example.com", True)

            assert json.loads(spec.content) == {"name": "example.com", "primary": True}

    class TestRetrieve:
        def test_retrieve_domain(
            self, httpx_mock: HTTPXMock, service: DomainsService, base_url: str
        ):
            httpx_mock.add_response(
                url=f"{base_url}installs/i1/domains/d1",
                method="GET",
                json={"id": "d1"},
            )

            assert service.retrieve("i1", "d1") == {"id": "d1"}

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert sent_request.url.query == b""

        def test_retrieve_missing_domain(
            self, httpx_mock: HTTPXMock, service: DomainsService, base_url: str
        ):
            httpx_mock.add_response(
                url=f"{base_url}installs/i1/domains/d404",
                method="GET",
                status_code=404,
                json={"error": "not found"},
            )

            result = service.retrieve("i1", "d404")

            assert isinstance(result, ApiError)
            assert result.kind == ApiErrorKind.HTTP_STATUS
            assert result.status_code == 404
            assert result.raw_body == {"error": "not found"}

    class TestUpdate:
        def test_set_primary(
            self, httpx_mock: HTTPXMock, service: DomainsService, base_url: str
        ):
            httpx_mock.add_response(
                url=f"{base_url}installs/i1/domains/d1",
                method="PATCH",
                json={"id": "d1", "primary": True},
            )

            domain = service.update("i1", "d1", primary=True)

            assert domain == {"id": "d1", "primary": True}

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert sent_request.content == b'{"primary":true}'

        def test_update_keeps_false_primary(self, service: DomainsService):
            spec = service._update_spec("i1", "d1", primary=False, redirect_to="d2")

            assert spec.content == b'{"primary":false,"redirect_to":"d2"}'

    class TestDelete:
        def test_delete_domain(
            self, httpx_mock: HTTPXMock, service: DomainsService, base_url: str
        ):
            httpx_mock.add_response(
                url=f"{base_url}installs/i1/domains/d1",
                method="DELETE",
                status_code=204,
            )

            assert service.delete("i1", "d1") is None
