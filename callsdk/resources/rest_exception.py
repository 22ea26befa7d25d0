"""Error body returned by the API on non-success responses."""

from pydantic import BaseModel, ConfigDict


class RestException(BaseModel):
    """Parsed API error payload."""

    model_config = ConfigDict(extra="ignore")

    message: str
    """Human-readable error description."""

    code: int | None = None
    """Numeric API error code."""

    more_info: str | None = None
    """Link to documentation for the error code."""

    status: int | None = None
    """HTTP status reported by the API; may be absent from the body."""

    @classmethod
    def from_json(cls, content: bytes | str) -> "RestException":
        return cls.model_validate_json(content)
