"""SDK settings: client credentials and observability options."""

from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from callsdk.config.loader import load_config
from callsdk.config.models.client import ClientConfig
from callsdk.config.models.observability import ObservabilityConfig


class TomlFilesSource(PydanticBaseSettingsSource):
    """Settings source backed by the layered TOML files.

    Files are read when the source is called, so every Settings instance
    sees the files as they are at construction time.
    """

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_dir: Path | None = None,
        environment: str | None = None,
    ) -> None:
        super().__init__(settings_cls)
        self._config_dir = config_dir
        self._environment = environment

    def get_field_value(
        self, field: Any, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        # Unused: __call__ returns the whole mapping at once
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        return load_config(self._config_dir, self._environment)


class Settings(BaseSettings):
    """Configuration for clients built with RestClient.from_settings.

    Sources, highest priority first: constructor arguments, CALLSDK_*
    environment variables (``__`` separates nested keys, e.g.
    CALLSDK_CLIENT__AUTH_TOKEN), the TOML files, then the defaults below.
    """

    model_config = SettingsConfigDict(
        env_prefix="CALLSDK_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="callsdk", description="Name bound to log events")
    debug: bool = Field(default=False, description="Enable debug mode")

    client: ClientConfig = Field(
        default_factory=ClientConfig,
        description="REST client credentials and transport",
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Logging options",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlFilesSource(settings_cls),
        )
