"""
Pytest configuration and fixtures
"""
import asyncio
import json
from urllib.parse import urlencode

import httpx
import pytest

from formhandler.config import Settings
from formhandler.handler import handle_event
from formhandler.registry import load_form_registry
from formhandler.services.notifier import NotificationDispatcher

ROOT_REDIRECT = "https://wrkcpt.dev"

LOREM = (
    "Lorem ipsum dolor sit amet, consectetur adipisicing elit, sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua."
)


@pytest.fixture
def settings() -> Settings:
    """Test-mode settings with no providers configured"""
    return Settings(_env_file=None, test=True, root_redirect=ROOT_REDIRECT)


@pytest.fixture
def registry():
    return load_form_registry(True)


class ProviderRecorder:
    """Stands in for Mailgun and Slack, recording every request"""

    def __init__(self, status_code: int = 200):
        self.status_code = status_code
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json={"id": "<test@mailgun>", "message": "Queued"})

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    def requests_to(self, host: str):
        return [request for request in self.requests if request.url.host == host]


@pytest.fixture
def provider() -> ProviderRecorder:
    return ProviderRecorder()


@pytest.fixture
def provider_settings() -> Settings:
    """Test-mode settings with Mailgun and Slack configured"""
    return Settings(
        _env_file=None,
        test=True,
        root_redirect=ROOT_REDIRECT,
        mailgun_domain="mg.foo.dev",
        mailgun_api_key="key-123",
        slack_channel="#forms",
        slack_endpoint="https://hooks.slack.com/services/T000/B000/XXX",
    )


@pytest.fixture
def invoke(settings, registry):
    """Run the event handler synchronously"""
    def _invoke(event, settings=settings, dispatcher=None):
        dispatcher = dispatcher or NotificationDispatcher(settings)
        return asyncio.run(handle_event(event, settings, registry, dispatcher))

    return _invoke


def json_event(body, **extra):
    return {"headers": {"Content-Type": "application/json"}, "body": json.dumps(body), **extra}


def form_event(body, **extra):
    return {
        "headers": {"Content-Type": "application/x-www-form-urlencoded"},
        "body": urlencode(body),
        **extra
    }


def project_brief_body():
    return {
        "form": "intake",
        "name": "Tobias Fünke",
        "email": "tobias@actorpull.me",
        "company": "Tobias Fünke Productions",
        "phone": "(555) 555-5555",
        "website": "https://hotmail.com/",
        "budget": "$4,000-$9,999",
        "start": "open/flexible",
        "description": LOREM,
        "redirect": "https://yahoo.com",
    }


def contact_form_body():
    return {
        "form": "contact",
        "name": "Tobias Fünke",
        "email": "tobias@actorpull.me",
        "message": LOREM,
        "redirect": "https://google.com",
        "fax": "",
    }


def support_form_body():
    return {
        "form": "support",
        "name": "Tobias Fünke",
        "email": "tobias@actorpull.me",
        "project": "Actor Pull Website",
        "priority": "Meh",
        "description": LOREM,
    }
