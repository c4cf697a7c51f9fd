import pytest

from wpengine import Endpoint, Route, Routes


class TestEndpoint:
    def test_strips_slashes(self):
        assert Endpoint("/installs/") == "installs"

    def test_from_template(self):
        endpoint = Endpoint.from_template(
            "installs/{install_id}/domains/{domain_id}", install_id="i1", domain_id="d1"
        )

        assert endpoint == "installs/i1/domains/d1"
        assert isinstance(endpoint, Endpoint)

    def test_values_are_single_segments(self):
        endpoint = Endpoint.from_template("sites/{id}", id="../accounts?x=1")

        assert endpoint == "sites/..%2Faccounts%3Fx%3D1"

    def test_non_string_values(self):
        assert Endpoint.from_template("sites/{id}", id=42) == "sites/42"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_value(self, value):
        with pytest.raises(ValueError, match="Missing required path parameter 'id'"):
            Endpoint.from_template("sites/{id}", id=value)

    @pytest.mark.parametrize("value", [".", "..", " .. "])
    def test_dot_segment_value(self, value):
        with pytest.raises(ValueError, match="Invalid path parameter 'domain_id'"):
            Endpoint.from_template(
                "installs/{install_id}/domains/{domain_id}",
                install_id="i1",
                domain_id=value,
            )

    def test_dots_inside_value_are_kept(self):
        assert Endpoint.from_template("sites/{id}", id="my.site") == "sites/my.site"
        assert Endpoint.from_template("sites/{id}", id="...") == "sites/..."

    def test_unknown_parameter(self):
        with pytest.raises(ValueError, match="Unknown path parameter"):
            Endpoint.from_template("sites", id="s1")


class TestRoutes:
    def test_path_params(self):
        assert Routes.DOMAINS_UPDATE.path_params == ("install_id", "domain_id")
        assert Routes.SITES_LIST.path_params == ()

    def test_route_table(self):
        table = {
            name: (route.template, route.method)
            for name, route in vars(Routes).items()
            if isinstance(route, Route)
        }

        assert table == {
            "STATUS": ("status", "GET"),
            "SWAGGER": ("swagger", "GET"),
            "ACCOUNTS_LIST": ("accounts", "GET"),
            "ACCOUNTS_RETRIEVE": ("accounts/{id}", "GET"),
            "SITES_LIST": ("sites", "GET"),
            "SITES_CREATE": ("sites", "POST"),
            "SITES_RETRIEVE": ("sites/{id}", "GET"),
            "SITES_UPDATE": ("sites/{id}", "PATCH"),
            "SITES_DELETE": ("sites/{id}", "DELETE"),
            "INSTALLS_LIST": ("installs", "GET"),
            "INSTALLS_CREATE": ("installs", "POST"),
            "INSTALLS_RETRIEVE": ("installs/{id}", "GET"),
            "INSTALLS_UPDATE": ("installs/{id}", "PATCH"),
            "INSTALLS_DELETE": ("installs/{id}", "DELETE"),
            "DOMAINS_LIST": ("installs/{install_id}/domains", "GET"),
            "DOMAINS_CREATE": ("installs/{install_id}/domains", "POST"),
            "DOMAINS_RETRIEVE": ("installs/{install_id}/domains/{domain_id}", "GET"),
            "DOMAINS_UPDATE": ("installs/{install_id}/domains/{domain_id}", "PATCH"),
            "DOMAINS_DELETE": ("installs/{install_id}/domains/{domain_id}", "DELETE"),
            "USER": ("user", "GET"),
        }
