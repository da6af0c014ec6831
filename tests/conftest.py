"""
Pytest configuration and fixtures
"""
import json

import httpx
import pytest

from config import TranslatorSettings
from translator import TranslatorClient

TRANSLATOR_SETTINGS = TranslatorSettings(
    subscription_key="test-key",
    endpoint="https://translator.example.test",
    location="australiaeast",
    timeout_seconds=2.0,
)


@pytest.fixture(autouse=True)
def translator_env(monkeypatch):
    """Keep configuration deterministic regardless of the developer's shell."""
    monkeypatch.setenv("TRANSLATOR_KEY", TRANSLATOR_SETTINGS.subscription_key)
    monkeypatch.setenv("TRANSLATOR_ENDPOINT", TRANSLATOR_SETTINGS.endpoint)
    monkeypatch.setenv("TRANSLATOR_LOCATION", TRANSLATOR_SETTINGS.location)
    monkeypatch.delenv("TRANSLATOR_TIMEOUT_SECONDS", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


class RecordingTranslator:
    """httpx handler that records requests and answers like the real service."""

    def __init__(self, status_code=200, payload=None, error=None, translate=None):
        self.requests = []
        self.status_code = status_code
        self.payload = payload
        self.error = error
        self.translate = translate or (lambda text, lang: f"[{lang}] {text}")

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.payload is not None:
            return httpx.Response(self.status_code, json=self.payload)
        body = json.loads(request.content)
        lang = request.url.params["to"]
        translations = [{"translations": [{"text": self.translate(item["Text"], lang), "to": lang}]} for item in body]
        return httpx.Response(self.status_code, json=translations)

    @property
    def calls(self):
        return len(self.requests)


@pytest.fixture
def recording_translator():
    return RecordingTranslator()


def make_client(handler) -> TranslatorClient:
    return TranslatorClient(TRANSLATOR_SETTINGS, transport=httpx.MockTransport(handler))


@pytest.fixture
def valid_application():
    """Application body as a caller would post it; approved when nothing is changed."""
    return {
        "firstName": "Jane",
        "lastName": "Citizen",
        "dateOfBirth": "1990-05-01T00:00:00",
        "interests": ["swimming"],
        "currentOccupations": ["nurse"],
        "homeAddresses": [
            {
                "line1": "1 High Street",
                "postcode": "SW1A 1AA",
                "region": "London",
                "country": "United Kingdom",
                "livedFrom": "2015-01-01",
            }
        ],
        "preferredLanguage": "en",
    }
