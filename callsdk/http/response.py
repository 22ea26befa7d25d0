"""API response model."""

from pydantic import BaseModel, Field


class Response(BaseModel):
    """Status and raw body of an API response."""

    status_code: int
    content: bytes = b""
    headers: dict[str, str] = Field(default_factory=dict)

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")
