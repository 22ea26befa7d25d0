"""REST client configuration model."""

from pydantic import BaseModel, Field, SecretStr


class ClientConfig(BaseModel):
    """Credentials and transport settings for the REST client."""

    account_sid: str | None = Field(
        default=None,
        description="Account SID used for authentication and request paths",
    )
    auth_token: SecretStr | None = Field(
        default=None,
        description="Auth token paired with the account SID",
    )
    base_url: str = Field(
        default="https://api.twilio.com",
        description="API base URL",
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Request timeout in seconds",
    )
