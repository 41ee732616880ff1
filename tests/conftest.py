"""Shared fixtures: config and a recording mock transport."""

import httpx
import pytest

from votes_client import ClientConfig, FunctionsClient

BASE = "https://x.test/fn"


class Recorder:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, status: int = 200, json=None, text: str | None = None):
        self.status = status
        self.json = json
        self.text = text
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status, text=self.text)
        return httpx.Response(self.status, json=self.json)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(base_url=BASE, access_code="abc")


@pytest.fixture
def make_client(config):
    def _make(recorder: Recorder, cfg: ClientConfig | None = None) -> FunctionsClient:
        return FunctionsClient(cfg or config, transport=httpx.MockTransport(recorder))

    return _make
