import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import app as fastapi_app
from app.sentiment.service import SentimentService, get_sentiment_service


def make_service(handler) -> SentimentService:
    """Real proxy wired to an in-process fake of the downstream API."""
    return SentimentService(base_url="http://sentiment.test", transport=httpx.MockTransport(handler))


def respond(status=200, body=None):
    def handler(request: httpx.Request):
        return httpx.Response(status, json=body)
    return handler


def fail_with(exc):
    def handler(request: httpx.Request):
        raise exc
    return handler


@pytest.fixture
def client():
    c = TestClient(fastapi_app)
    yield c
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def use_downstream():
    """Point the app's proxy at a MockTransport handler for one test."""
    def _install(handler):
        svc = make_service(handler)
        fastapi_app.dependency_overrides[get_sentiment_service] = lambda: svc
        return svc
    yield _install
    fastapi_app.dependency_overrides.clear()
