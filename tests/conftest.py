import httpx
import pytest
from fastapi.testclient import TestClient

import service1
import service2
from tests.helpers import mock_service2


@pytest.fixture
def service1_client() -> TestClient:
    return TestClient(service1.app)


@pytest.fixture
def service2_client() -> TestClient:
    return TestClient(service2.app)


@pytest.fixture
def service2_up(monkeypatch):
    """Route service1's outbound call into service2's app in-process."""
    downstream = TestClient(service2.app, base_url="http://localhost:8081")
    monkeypatch.setattr(service1, "client", downstream)
    return downstream


@pytest.fixture
def service2_down(monkeypatch):
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("[Errno 111] Connection refused", request=request)

    monkeypatch.setattr(service1, "client", mock_service2(refuse))


@pytest.fixture
def service2_status(monkeypatch):
    """Make service2 answer with the given status code."""
    def set_status(status_code: int, text: str = "nope"):
        monkeypatch.setattr(
            service1, "client",
            mock_service2(lambda request: httpx.Response(status_code, text=text)),
        )
    return set_status
