from string import Formatter
from typing import Any
from urllib.parse import quote

DOT_SEGMENTS = (".", "..")


class Endpoint(str):
    """A route relative to the API base URL, e.g. ``installs/123/domains``.

    Leading and trailing slashes are stripped so the route always joins cleanly
    onto the versioned base URL.
    """

    def __new__(cls, route: str) -> "Endpoint":
        return super().__new__(cls, route.strip("/"))

    @classmethod
    def from_template(cls, template: str, **params: Any) -> "Endpoint":
        """Build an endpoint by substituting path parameters into a route template.

        Every placeholder in the template is required. Values are converted to
        strings and percent-encoded as a single path segment, so an id can never
        add segments or a query string to the route.

        Args:
            template (str): Route template, e.g. ``installs/{install_id}/domains``.
            **params (Any): Values for the template placeholders.

        Returns:
            Endpoint: The resolved route.

        Raises:
            ValueError: If a placeholder has no value, the value is empty or a
                dot segment, or an unknown parameter is supplied.

        Examples:
            >>> Endpoint.from_template("sites/{id}", id="abc")
            'sites/abc'
        """
        required = template_fields(template)

        unknown = set(params) - set(required)
        if unknown:
            raise ValueError(
                f"Unknown path parameter(s) for '{template}': {', '.join(sorted(unknown))}"
            )

        values = {}
        for name in required:
            value = params.get(name)
            if value is None or str(value).strip() == "":
                raise ValueError(f"Missing required path parameter '{name}' for '{template}'")
            if str(value).strip() in DOT_SEGMENTS:
                # URL normalization collapses these onto the parent route
                raise ValueError(
                    f"Invalid path parameter '{name}' for '{template}': {value!r}"
                )
            values[name] = quote(str(value), safe="")

        return cls(template.format(**values))


def template_fields(template: str) -> tuple[str, ...]:
    """Names of the placeholders in a route template, in order of appearance."""
    return tuple(
        field_name
        for _, field_name, _, _ in Formatter().parse(template)
        if field_name
    )
