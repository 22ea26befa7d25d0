"""Outgoing API request model."""

from string import Formatter
from urllib.parse import quote

from pydantic import BaseModel, Field

from callsdk.http.methods import HttpMethod


class Request(BaseModel):
    """A single API request before it is handed to a client.

    The path is kept as a template so the owning account and the resource
    sid are substituted (and quoted) in one place.
    """

    method: HttpMethod
    path_template: str
    path_params: dict[str, str] = Field(default_factory=dict)
    post_params: dict[str, str] = Field(default_factory=dict)

    def add_post_param(self, name: str, value: str) -> None:
        """Set a form parameter, replacing any previous value."""
        self.post_params[name] = value

    @property
    def path(self) -> str:
        """Path with every placeholder substituted.

        Raises:
            ValueError: If a placeholder has no matching path parameter
        """
        names = [
            field for _, field, _, _ in Formatter().parse(self.path_template) if field
        ]
        missing = [name for name in names if name not in self.path_params]
        if missing:
            raise ValueError(f"Missing path parameters: {', '.join(missing)}")

        quoted = {name: quote(self.path_params[name], safe="") for name in names}
        return self.path_template.format(**quoted)
