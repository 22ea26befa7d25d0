"""Shared test fixtures for the callsdk test suite."""

import json
import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest

from callsdk.clients import RestClient
from callsdk.http import Response

ACCOUNT_SID = "AC" + "a" * 32
CALL_SID = "CA" + "b" * 32


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "debug = true",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            toml_file = test_config_dir / filename
            toml_file.write_text(content)

    return _create_toml_files


class EnvOverrideContext:
    """Context manager for temporarily setting environment variables."""

    def __init__(self, overrides: dict[str, str]) -> None:
        self.overrides = overrides
        self.original_env: dict[str, str | None] = {}

    def __enter__(self) -> None:
        for key, value in self.overrides.items():
            self.original_env[key] = os.environ.get(key)
            os.environ[key] = value

    def __exit__(self, *args: Any) -> None:
        for key in self.overrides:
            if self.original_env[key] is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = self.original_env[key]


@pytest.fixture
def env_override() -> Generator[Callable[[dict[str, str]], EnvOverrideContext], None, None]:
    """Context manager for temporarily setting environment variables.

    Usage:
        def test_something(env_override):
            with env_override({"CALLSDK_DEBUG": "true"}):
                # test code here
    """

    def _env_override(overrides: dict[str, str]) -> EnvOverrideContext:
        return EnvOverrideContext(overrides)

    yield _env_override


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test."""
    from callsdk.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def isolated_config(test_config_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point config loading at an empty directory and drop CALLSDK_* variables.

    Keeps the repository's config/*.toml and the developer's shell out of
    every Settings built during a test.
    """
    for key in list(os.environ):
        if key.upper().startswith("CALLSDK_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("CALLSDK_CONFIG_DIR", str(test_config_dir))


@pytest.fixture
def call_payload() -> dict[str, Any]:
    """Call document as returned by the API."""
    return {
        "sid": CALL_SID,
        "date_created": "Tue, 31 Aug 2010 20:36:28 +0000",
        "date_updated": "Tue, 31 Aug 2010 20:36:44 +0000",
        "parent_call_sid": None,
        "account_sid": ACCOUNT_SID,
        "to": "+14155551212",
        "to_formatted": "(415) 555-1212",
        "from": "+14158675309",
        "from_formatted": "(415) 867-5309",
        "phone_number_sid": "PN" + "c" * 32,
        "status": "completed",
        "start_time": "Tue, 31 Aug 2010 20:36:29 +0000",
        "end_time": "Tue, 31 Aug 2010 20:36:44 +0000",
        "duration": "15",
        "price": "-0.03000",
        "price_unit": "USD",
        "direction": "outbound-api",
        "answered_by": None,
        "annotation": None,
        "api_version": "2010-04-01",
        "forwarded_from": None,
        "group_sid": None,
        "caller_name": None,
        "uri": f"/2010-04-01/Accounts/{ACCOUNT_SID}/Calls/{CALL_SID}.json",
        "subresource_uris": {
            "notifications": f"/2010-04-01/Accounts/{ACCOUNT_SID}/Calls/{CALL_SID}/Notifications.json",
            "recordings": f"/2010-04-01/Accounts/{ACCOUNT_SID}/Calls/{CALL_SID}/Recordings.json",
        },
    }


@pytest.fixture
def mock_client() -> Mock:
    """RestClient double whose request() returns nothing until configured."""
    client = Mock(spec=RestClient)
    client.account_sid = ACCOUNT_SID
    client.request.return_value = None
    return client


@pytest.fixture
def json_response() -> Callable[[int, dict[str, Any]], Response]:
    """Factory fixture building a Response that carries a JSON body."""

    def _json_response(status_code: int, body: dict[str, Any]) -> Response:
        return Response(
            status_code=status_code,
            content=json.dumps(body).encode(),
            headers={"content-type": "application/json"},
        )

    return _json_response
