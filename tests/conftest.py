"""Shared fixtures: a recording stand-in for the Manifold API."""

import asyncio

import httpx
import pytest

from manifoldmcp.remote.client import ManifoldClient
from manifoldmcp.tools.dispatcher import Dispatcher

API_BASE = "https://api.manifold.test"


class RemoteStub:
    """httpx.MockTransport handler that records requests and returns a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload: object = {"id": "x1"}
        self.text: str | None = None
        self.unreachable = False

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.unreachable:
            raise httpx.ConnectError("connection refused", request=request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)


@pytest.fixture
def remote():
    return RemoteStub()


def make_dispatcher(remote: RemoteStub, api_key: str | None = "secret-key") -> Dispatcher:
    client = ManifoldClient(API_BASE, api_key, transport=httpx.MockTransport(remote))
    return Dispatcher(client)


@pytest.fixture
def dispatcher(remote):
    return make_dispatcher(remote)


@pytest.fixture
def call(dispatcher):
    """Run one tool call synchronously."""

    def _call(name, arguments=None):
        return asyncio.run(dispatcher.call(name, arguments))

    return _call
