import httpx
import pytest
from fastapi.testclient import TestClient

from dashboard.main import create_app
from dashboard.pages.deps import get_backend_client


UPSTREAM = [
    {
        "RegistrationNumber": 1,
        "Name": "A",
        "PhoneNumber": 1000,
        "Email": "a@x.com",
        "Year": 1,
        "Strikes": 0,
    },
    {
        "RegistrationNumber": 2,
        "Name": "B",
        "Title": "Ms",
        "PhoneNumber": 2000,
        "Email": "b@x.com",
        "Designation": "Coordinator",
        "Department": "Physics",
        "Year": 2,
        "Remarks": "late fee",
        "Strikes": 1,
    },
]


class FakeBackend:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self.body = UPSTREAM if body is None else body
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)


@pytest.fixture
def app():
    return create_app()


def _install(app, backend):
    async def _client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(backend.handler)) as client:
            yield client

    app.dependency_overrides[get_backend_client] = _client


def test_users_page_returns_camel_case_page_data(app):
    backend = FakeBackend()
    _install(app, backend)
    client = TestClient(app, cookies={"token": "abc"})

    resp = client.get("/users")
    assert resp.status_code == 200, resp.text
    users = resp.json()["users"]
    assert [u["registrationNumber"] for u in users] == [1, 2]
    assert users[0] == {
        "registrationNumber": 1,
        "name": "A",
        "title": None,
        "phoneNumber": 1000,
        "email": "a@x.com",
        "designation": None,
        "department": None,
        "year": 1,
        "remarks": None,
        "strikes": 0,
    }
    assert users[1]["department"] == "Physics"
    assert backend.requests[0].headers["Authorization"] == "Bearer abc"


def test_users_page_without_cookie_forwards_undefined(app):
    backend = FakeBackend(body=[])
    _install(app, backend)
    client = TestClient(app)

    resp = client.get("/users")
    assert resp.status_code == 200
    assert resp.json() == {"users": []}
    assert backend.requests[0].headers["Authorization"] == "Bearer undefined"


def test_users_page_backend_rejection_is_server_error(app):
    backend = FakeBackend(status_code=401, body={"error": "unauthorized"})
    _install(app, backend)
    client = TestClient(app, raise_server_exceptions=False)

    resp = client.get("/users")
    assert resp.status_code == 500
    assert app.state.metrics.registry.get_sample_value(
        "dashboard_user_list_loads_total", {"outcome": "payload_error"}
    ) == 1.0


def test_users_page_uses_configured_backend(monkeypatch):
    monkeypatch.setenv("DASHBOARD_BACKEND_URL", "http://api.example:8080/")
    app = create_app()
    backend = FakeBackend(body=[])
    _install(app, backend)

    resp = TestClient(app, cookies={"token": "abc"}).get("/users")
    assert resp.status_code == 200
    assert str(backend.requests[0].url) == "http://api.example:8080/api/v1/dashboard/users"
