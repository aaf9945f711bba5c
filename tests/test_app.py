"""
API tests for the FastAPI application
"""
import pytest
from fastapi.testclient import TestClient

from conftest import ROOT_REDIRECT, contact_form_body, project_brief_body
from formhandler.config import get_settings
from formhandler.dependencies import get_dispatcher
from formhandler.main import app
from formhandler.services.notifier import NotificationDispatcher


@pytest.fixture
def client(settings):
    """Create test client"""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_dispatcher] = lambda: NotificationDispatcher(settings)
    yield TestClient(app, follow_redirects=False)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "form-handler", "forms": 3}


def test_root_redirects(client):
    response = client.get("/")

    assert response.status_code == 302
    assert response.headers["location"] == ROOT_REDIRECT


def test_json_submission(client):
    body = contact_form_body()
    del body["redirect"]

    response = client.post("/", json=body)

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {"success": True}


def test_form_post_redirects(client):
    response = client.post("/", data=project_brief_body())

    assert response.status_code == 302
    assert response.headers["location"] == "https://yahoo.com"
    assert response.headers["content-type"] == "text/html"


def test_form_post_errors_render_html(client):
    body = project_brief_body()
    del body["email"]

    response = client.post("/", data=body)

    assert response.status_code == 400
    assert "Email is required." in response.text


def test_path_form_id(client):
    body = contact_form_body()
    del body["form"]
    del body["redirect"]

    response = client.post("/form/contact", json=body)

    assert response.status_code == 200


def test_unknown_path_form_id(client):
    body = contact_form_body()
    del body["form"]

    response = client.post("/form/nope", json=body)

    assert response.status_code == 400
    assert response.json()["reason"] == ["Failed to send.", "Invalid form ID."]


def test_unhandled_errors_return_failure(client):
    class BrokenDispatcher:
        async def notify(self, form, fields):
            raise RuntimeError("boom")

    app.dependency_overrides[get_dispatcher] = lambda: BrokenDispatcher()
    body = contact_form_body()

    response = client.post("/", json=body)

    assert response.status_code == 400
    assert response.json() == {"success": False}
