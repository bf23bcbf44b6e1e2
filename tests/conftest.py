"""Shared test fixtures."""

import json
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from iss_passes.config import Settings
from iss_passes.passes.service import PassService


@pytest.fixture
def settings() -> Settings:
    """Create test settings pointing at fake upstream hosts."""
    return Settings(
        ip_lookup_url="https://ip.test",
        geoip_base_url="https://geo.test",
        pass_service_url="http://passes.test/iss-pass.json",
        request_timeout=5.0,
    )


@pytest.fixture
def session() -> MagicMock:
    """Create a mock requests session."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def pass_service(settings: Settings, session: MagicMock) -> PassService:
    """Create a PassService that sends requests through the mock session."""
    return PassService(settings, session=session)


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Factory for fake HTTP responses."""

    def _make(status_code: int = 200, body: Any = None, *, text: str | None = None) -> MagicMock:
        response = MagicMock(spec=requests.Response)
        response.status_code = status_code
        response.text = text if text is not None else json.dumps(body)
        return response

    return _make
