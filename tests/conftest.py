import httpx
import openai
import pytest
from fastapi.testclient import TestClient

from uigen.app import create_app
from uigen.catalog import load_catalog
from uigen.generate import ComponentGenerator, ModelParams

COMPLETE_COMPONENT = 'export default function X(){return <div/>}'
TRUNCATED_COMPONENT = 'export default function X(){return <div/>'


class StubClient:
    """Model client double: returns canned text or raises, and counts calls."""

    def __init__(self, text: str = COMPLETE_COMPONENT, exc: Exception = None):
        self.text = text
        self.exc = exc
        self.calls = []

    def generate(self, prompt, model, params):
        self.calls.append((prompt, model, params))
        if self.exc is not None:
            raise self.exc
        return self.text, {"engine": "stub", "model": model}


def _openai_request():
    return httpx.Request("POST", "https://llm.example.test/v1/chat/completions")


def openai_timeout():
    return openai.APITimeoutError(request=_openai_request())


def openai_status_error(cls, status: int, message: str):
    response = httpx.Response(status, request=_openai_request())
    return cls(message, response=response, body=None)


@pytest.fixture(scope="session")
def catalog():
    return load_catalog()


@pytest.fixture
def make_generator(catalog):
    def _make(client):
        return ComponentGenerator(
            model_client=client,
            catalog=catalog,
            params=ModelParams(temperature=0.9, max_tokens=6000, timeout=5.0),
        )

    return _make


@pytest.fixture
def make_http(make_generator):
    """Build a TestClient around a stub model client."""

    def _make(client, api_token: str = ""):
        app = create_app(generator=make_generator(client), api_token=api_token)
        return TestClient(app)

    return _make
