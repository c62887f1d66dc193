import uuid
from unittest import mock

import azure.functions as func
import pytest
import requests

from shared import cosmos_client, ipify


class FakeContext:
    def __init__(self, invocation_id=None, function_name="ProcessRequest"):
        self.invocation_id = invocation_id or str(uuid.uuid4())
        self.function_name = function_name
        self.function_directory = "/home/site/wwwroot/ProcessRequest"


class FakeGet:
    """Stands in for requests.get; returns `response` or raises `error`."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


def make_response(status_code=200, text=""):
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = text.encode("utf-8")
    resp.encoding = "utf-8"
    resp.url = ipify.IPIFY_URL
    return resp


def make_request(params=None, headers=None):
    return func.HttpRequest(
        method="GET",
        url="/api/ProcessRequest",
        headers=headers or {},
        params=params or {},
        body=b"",
    )


@pytest.fixture(autouse=True)
def cosmos_settings(monkeypatch, tmp_path):
    # run from an empty dir so a developer's config.json is not picked up
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CosmosDBConnection", "AccountEndpoint=https://localhost:8081/;AccountKey=a2V5;")
    monkeypatch.setenv("CosmosDbName", "RequestDb")
    monkeypatch.setenv("CosmosDbCollectionName", "Requests")
    cosmos_client.reset_container()
    yield
    cosmos_client.reset_container()


@pytest.fixture
def container(monkeypatch):
    fake = mock.MagicMock()
    monkeypatch.setattr(cosmos_client, "_container", fake)
    return fake


@pytest.fixture
def ipify_get(monkeypatch):
    fake = FakeGet(response=make_response(200, "203.0.113.5"))
    monkeypatch.setattr(ipify.requests, "get", fake.get)
    return fake
